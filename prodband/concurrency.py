"""Helpers for running work in the background and handling streams of items."""

from __future__ import annotations

import threading
from typing import Any, Callable, Iterable, List, TypeVar

T = TypeVar("T")


def run(task: Callable[[], Any]) -> None:
    """Execute a long-running task that offers no way to cancel it."""
    task()


def consume_channel(channel: Iterable[T], handle: Callable[[T], Any]) -> None:
    """Handle every item of ``channel`` in order until it is exhausted."""
    for item in channel:
        handle(item)


def handle_concurrently(
    channel: Iterable[T], handle: Callable[[T], Any]
) -> List[threading.Thread]:
    """Start a daemon thread handling each item; return the started threads."""
    threads = []
    for item in channel:
        thread = threading.Thread(target=handle, args=(item,), daemon=True)
        thread.start()
        threads.append(thread)
    return threads


def serve(listener: Any, handler: Callable[[Any], Any]) -> None:
    """Accept connections until ``listener.accept()`` fails.

    Each connection is handled on its own thread. When accepting fails, all
    running handlers are waited for and the accept error is raised.
    """
    threads: List[threading.Thread] = []
    try:
        while True:
            conn, _ = listener.accept()
            thread = threading.Thread(target=handler, args=(conn,))
            thread.start()
            threads.append(thread)
    finally:
        for thread in threads:
            thread.join()