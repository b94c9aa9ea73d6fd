"""A line-oriented terminal front end for the game."""

from __future__ import annotations

import queue
import random
import sys
import threading
from typing import Any, Callable, List, Optional, Sequence, TextIO

from .leaderboard import ScoreEntry
from .players import Action, Outcome
from .production import ProductionState

NOISE_WIDTH = 64
DEFAULT_BAND_NAME = "Vibe Coders"

GRAVESTONE = "  _____\n /     \\\n | RIP |\n |     |\n_|_____|_"
GAME_OVER = "*** GAME OVER ***\nPRODUCTION has defeated the band."
GAME_STARTED = "=== Platforms & Programmers ==="
PIZZA = "  ___\n /o o\\\n/ o o \\\n-------\nPizza is here!"
TROPHY = " ___\n(   )\n \\_/\n _|_\nThe band has tamed PRODUCTION!"


def _custom_str(player: Any) -> Optional[str]:
    if type(player).__str__ is object.__str__:
        return None
    return str(player)


def _method_result(player: Any, name: str) -> Optional[str]:
    method = getattr(player, name, None)
    if callable(method):
        return method()
    return None


def _default_name(index: int) -> str:
    return f"Player#{index + 1}"


def _is_alive(player: Any) -> bool:
    alive = getattr(player, "alive", None)
    return bool(alive()) if callable(alive) else True


def player_label(player: Any, index: int) -> str:
    """Return the text shown for ``player`` at 0-based position ``index``.

    Prefers ASCII art, then the player's own string form, then its name.
    """
    for candidate in (
        _method_result(player, "ascii_art"),
        _custom_str(player),
        _method_result(player, "name"),
    ):
        if candidate is not None:
            return candidate
    return _default_name(index)


def player_title(player: Any, index: int) -> str:
    """Return the turn announcement for ``player`` at 0-based ``index``."""
    who = _custom_str(player)
    if who is None:
        who = _method_result(player, "name")
    if who is None:
        who = _default_name(index)
    return f"It's {who}'s turn"


class ConsoleEngine:
    """Shows the game as text and reads the player's choices line by line."""

    def __init__(
        self,
        input_fn: Optional[Callable[[], str]] = None,
        output: Optional[TextIO] = None,
    ) -> None:
        self._input = input_fn if input_fn is not None else input
        self.output = output if output is not None else sys.stdout
        self.on_exit: Optional[Callable[[], None]] = None
        self.prod_state = ProductionState.CALM
        self.rng = random.Random()
        self.stopped = False
        self._noise = "A" * NOISE_WIDTH
        self._deliveries: "queue.SimpleQueue[Callable[[], None]]" = queue.SimpleQueue()
        self._lock = threading.Lock()

    def with_on_exit(self, cb: Callable[[], None]) -> "ConsoleEngine":
        self.on_exit = cb
        return self

    def stop(self) -> None:
        """Stop the engine, running the exit callback once."""
        if self.stopped:
            return
        self.stopped = True
        if self.on_exit is not None:
            self.on_exit()

    def _write(self, text: str, end: str = "\n") -> None:
        with self._lock:
            self.output.write(text + end)
            flush = getattr(self.output, "flush", None)
            if callable(flush):
                flush()

    def _serve_deliveries(self) -> None:
        while True:
            try:
                cb = self._deliveries.get_nowait()
            except queue.Empty:
                return
            self._write("Thanks, Boss!")
            cb()

    def _ask(self, prompt: str) -> Optional[str]:
        """Read one answer; on end of input stop the engine and return None."""
        self._serve_deliveries()
        self._write(prompt, end="")
        try:
            line = self._input()
        except EOFError:
            self._write("")
            self.stop()
            return None
        self._serve_deliveries()
        return line.rstrip("\r\n")

    def welcome(
        self, leaderboard: Sequence[ScoreEntry], fn: Callable[[str], None]
    ) -> None:
        self._write(GAME_STARTED)
        self._write("Leaderboard")
        for rank, entry in enumerate(leaderboard, start=1):
            self._write(f"{rank}. {entry.band_name} - {entry.score}")
        self._write("A band of developers will attempt to survive against PRODUCTION!")
        answer = self._ask(f"What is the name of your band?  [{DEFAULT_BAND_NAME}] ")
        if answer is None:
            return
        band_name = answer or DEFAULT_BAND_NAME
        self._write(f"Hello, {band_name}! Are you ready?")
        if self._ask("[Let's do this!] ") is None:
            return
        fn(band_name)

    def _finish(self, art: str, button: str) -> None:
        if self.stopped:
            return
        self._write(art)
        self._ask(f"[{button}] ")
        self.stop()

    def game_over(self) -> None:
        self._finish(GAME_OVER, "Oh well...")

    def game_won(self) -> None:
        self._finish(TROPHY, "Yay!")

    def render_players(self, band_name: str, players: Sequence[Any], current: int) -> str:
        """Return the players panel as text."""
        lines: List[str] = [f"[ {band_name} ]"]
        for index, player in enumerate(players):
            if index == current:
                lines.append(f"> {player_title(player, index)}")
            text = player_label(player, index) if _is_alive(player) else GRAVESTONE
            lines.extend(f"  {line}" for line in text.splitlines())
            lines.append("")
        return "\n".join(lines)

    def render_prod(self) -> str:
        """Scramble the PRODUCTION panel a little and return it as text."""
        noise = self._noise
        for _ in range(10):
            char = chr(self.rng.randrange(128 - 48) + 48)
            pos = self.rng.randrange(len(noise))
            noise = noise[:pos] + char + noise[pos + 1:]
        self._noise = noise
        return f"PRODUCTION is `{self.prod_state}`\n{noise}"

    def render_game(self, game: Any) -> None:
        if self.stopped:
            return
        self._serve_deliveries()
        prod = game.prod
        self.prod_state = getattr(prod, "state", prod)
        self._write(self.render_players(game.band_name, game.players, game.current_player))
        self._write("Inventory")
        self._write(f"Score: {game.score}\nCoins: {game.coins}\nPizza's: {game.pizzas}")
        self._write(self.render_prod())

    def select_action(
        self, game: Any, player: Any, cb: Callable[[Action], None]
    ) -> None:
        if self.stopped:
            return
        actions = list(player.possible_actions(game))
        if not actions:
            self._write("No actions available")
            if self._ask("[Enter] ") is None:
                return
            cb(
                Action(
                    description="What are we even doing?",
                    on_select=lambda g: "So sad to have no actions against PRODUCTION.",
                )
            )
            return
        self._write("Select move...")
        for number, action in enumerate(actions, start=1):
            self._write(f"  {number}. {action}")
        while True:
            answer = self._ask("> ")
            if answer is None:
                return
            answer = answer.strip()
            if not answer:
                choice = 0
            elif answer.isdigit() and 1 <= int(answer) <= len(actions):
                choice = int(answer) - 1
            else:
                self._write(f"Please choose a move between 1 and {len(actions)}")
                continue
            break
        cb(actions[choice])

    def render_outcome(self, outcome: Outcome, cb: Callable[[], None]) -> None:
        if self.stopped:
            return
        self._write(str(outcome))
        if self._ask("[ok] ") is None:
            return
        cb()

    def pizza_delivery(self, cb: Callable[[], None]) -> None:
        """Announce a delivery; ``cb`` runs at the next prompt on the game's thread."""
        self._write(PIZZA)
        self._deliveries.put(cb)