"""The game loop: a band of players takes turns against PRODUCTION."""

from __future__ import annotations

import random
import threading
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, List, Optional, Protocol, Sequence

from .leaderboard import DEFAULT_SCORES_PATH, ScoreEntry, get_top, persist
from .players import (
    Action,
    Dwarf,
    Minion,
    NamelessPlayer,
    Outcome,
    VibeCoder,
    is_minion,
)
from .production import Production, new_production


class Engine(Protocol):
    """The user interface that shows the game and collects choices."""

    def welcome(
        self, leaderboard: List[ScoreEntry], fn: Callable[[str], None]
    ) -> None:
        """Show the leaderboard, ask for the band name and pass it to ``fn``."""

    def game_over(self) -> None:
        """Announce that every player is dead."""

    def game_won(self) -> None:
        """Announce that the band has won."""

    def render_game(self, game: "Game") -> None:
        """Show the current state of ``game``."""

    def select_action(
        self, game: "Game", player: Any, cb: Callable[[Action], None]
    ) -> None:
        """Let ``player`` choose a move and pass it to ``cb``."""

    def render_outcome(self, outcome: Outcome, cb: Callable[[], None]) -> None:
        """Show ``outcome`` and call ``cb`` once acknowledged."""

    def pizza_delivery(self, cb: Callable[[], None]) -> None:
        """Announce a pizza delivery and call ``cb`` once accepted."""

    def with_on_exit(self, cb: Callable[[], None]) -> "Engine":
        """Return an engine that calls ``cb`` when it exits."""


def _random_pizza_delay() -> float:
    return random.randrange(20)


@dataclass
class Game:
    """A band of players attempting to take on PRODUCTION."""

    score: int = 0
    players: List[Any] = field(default_factory=list)
    prod: Production = field(default_factory=new_production)
    band_name: str = ""
    coins: int = 0
    current_player: int = 0
    product_manager: str = ""
    pizzas: int = 0
    scores_path: Path = DEFAULT_SCORES_PATH
    pizza_delay: Callable[[], float] = field(
        default=_random_pizza_delay, repr=False, compare=False
    )
    deliveries: List[threading.Thread] = field(
        default_factory=list, repr=False, compare=False
    )
    _running: bool = field(default=False, init=False, repr=False, compare=False)
    _pending: Optional[Engine] = field(default=None, init=False, repr=False, compare=False)

    def run(self, engine: Engine) -> None:
        """Welcome the band, then play until the engine stops."""
        try:
            leaderboard = get_top(10, self.scores_path)
        except (OSError, ValueError):
            leaderboard = []

        def start(band_name: str) -> None:
            self.band_name = band_name
            playing = engine.with_on_exit(
                lambda: persist(ScoreEntry(self.band_name, self.score), self.scores_path)
            )
            self.main_loop(playing)

        engine.welcome(leaderboard, start)

    def main_loop(self, engine: Engine) -> None:
        """Play the current player's turn, then the next, while the engine answers."""
        if self._running:
            # Called back synchronously from within a turn: queue the next one.
            self._pending = engine
            return
        self._running = True
        try:
            next_engine: Optional[Engine] = engine
            while next_engine is not None:
                self._pending = None
                self._turn(next_engine)
                next_engine = self._pending
        finally:
            self._running = False

    def number_of_players_alive(self) -> int:
        return sum(1 for player in self.players if player.alive())

    def _turn(self, engine: Engine) -> None:
        engine.render_game(self)
        if all_players_dead(self.players):
            engine.game_over()
        if self.coins > 100:
            engine.game_won()

        def on_selected(action: Action) -> None:
            outcome = action.selected(self)
            engine.render_outcome(outcome, lambda: self._next_turn(engine))

        engine.select_action(self, self.players[self.current_player], on_selected)

    def _next_turn(self, engine: Engine) -> None:
        count = len(self.players)
        self.current_player = (self.current_player + 1) % count
        while not self.players[self.current_player].alive() and not all_players_dead(
            self.players
        ):
            self.current_player = (self.current_player + 1) % count

        player = self.players[self.current_player]
        requested = getattr(player, "pizza_requested", None)
        delivered = getattr(player, "pizza_delivered", None)
        if callable(requested) and callable(delivered) and requested():
            thread = threading.Thread(
                target=self._deliver_pizza, args=(engine, delivered), daemon=True
            )
            self.deliveries.append(thread)
            thread.start()

        self.main_loop(engine)

    def _deliver_pizza(self, engine: Engine, delivered: Callable[[], None]) -> None:
        time.sleep(self.pizza_delay())
        engine.pizza_delivery(self._feed_band)
        delivered()

    def _feed_band(self) -> None:
        self.pizzas += self.number_of_players_alive()
        for player in self.players:
            heal = getattr(player, "heal", None)
            if callable(heal):
                heal()


def new_game(*players: Any) -> Game:
    """Return a new game with ``players`` joined by the default band."""
    return Game(
        players=[
            *players,
            Dwarf("Gimli"),
            NamelessPlayer(),
            Minion("Jurgen"),
            VibeCoder("R. Stallman"),
        ],
        prod=new_production(),
        coins=15,
    )


def all_players_dead(players: Sequence[Any]) -> bool:
    """Return whether every player that is not a minion is dead."""
    return not any(not is_minion(p) and p.alive() for p in players)