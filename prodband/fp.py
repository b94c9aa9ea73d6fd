"""Lazy computations: tasks, accumulators, fmap, ap and pipe."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Task:
    """A deferred sequence of side effects."""

    fn: Optional[Callable[[], Any]] = None

    def then(self, fn: Callable[[], Any]) -> "Task":
        """Return a task that runs this task and then ``fn``."""

        def chained() -> None:
            self.execute()
            fn()

        return Task(chained)

    def execute(self) -> None:
        """Run the task."""
        if self.fn is not None:
            self.fn()


@dataclass(frozen=True)
class LazyValue:
    """A value computed only when called."""

    thunk: Callable[[], Any]

    def __call__(self) -> Any:
        return self.thunk()

    def compute(self) -> Any:
        """Evaluate and return the value."""
        return self.thunk()

    def to_applicative(self) -> Callable[[], Any]:
        """Return a plain zero-argument callable producing the value."""
        return lambda: self()

    def accumulate(self, y: Any) -> "LazyValue":
        """Lazily add a plain value."""
        return LazyValue(lambda: self() + y)

    def accumulate_lazy(self, other: "LazyValue") -> "LazyValue":
        """Lazily add the result of another lazy value."""
        return LazyValue(lambda: self() + other())

    def accumulate_computer(self, other: Any) -> "LazyValue":
        """Lazily add the result of ``other.compute()``."""
        return LazyValue(lambda: self() + other.compute())

    def accumulate_other(self, other: Callable[[], Any]) -> "LazyValue":
        """Lazily add the result of calling ``other``."""
        return LazyValue(lambda: self() + other())


def new_accumulator(x: Any) -> LazyValue:
    """Return a lazy value that logs when it is computed."""

    def compute() -> Any:
        logger.info("computing")
        return x

    return LazyValue(compute)


def ap(fa: Callable[[], Callable[[Any], Any]], a: Callable[[], Any]) -> Callable[[], Any]:
    """Lazily apply a wrapped function to a wrapped value."""
    return lambda: fa()(a())


def pipe(f: Callable[[], Any], g: Callable[[Any], Any]) -> Callable[[], Any]:
    """Lazily feed the result of ``f`` into ``g``."""
    return lambda: g(f())


def fmap(fa: Callable[[], Any], f: Callable[[Any], Any]) -> Callable[[], Any]:
    """Lazily map ``f`` over the value produced by ``fa``."""
    return lambda: f(fa())


def main(argv: Sequence[str] | None = None) -> int:
    """Demonstrate the lazy combinators."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    greeting = (
        Task()
        .then(lambda: print("Hello ", end=""))
        .then(lambda: print("World", end=""))
        .then(lambda: print("!"))
    )
    greeting.execute()

    def multiply(a: int) -> Callable[[int], int]:
        return lambda b: a * b

    total = new_accumulator(0)
    total = total.accumulate(3)
    total = total.accumulate_lazy(new_accumulator(2).accumulate(4))
    total = total.accumulate_computer(new_accumulator(1).accumulate(4))
    other = new_accumulator(-1).accumulate(4)
    total = total.accumulate_other(other)

    logger.info("starting to compute stuff - everything so far was lazy")
    print(total())
    print(total.accumulate(5).compute())

    acc = new_accumulator(2).accumulate(3)
    times_five = fmap(acc, multiply)

    # Never evaluated, so the division never happens.
    fmap(new_accumulator(3), lambda i: i // 0)

    two = new_accumulator(2)
    value = ap(times_five, two.to_applicative())
    print(value())

    def farewell(s: str) -> dict:
        print(s, "bye!")
        return {}

    p = pipe(lambda: "hi", farewell)
    print(p())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())