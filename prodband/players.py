"""The members of the band and the moves each of them can make."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, List, Optional

from .maybe import this, when

if TYPE_CHECKING:
    from .game import Game

Outcome = str


@dataclass
class Action:
    """A move a player may choose, with what happens when it is chosen."""

    description: str
    on_select: Callable[["Game"], Outcome]

    def selected(self, game: "Game") -> Outcome:
        """Carry out the move against ``game`` and return its outcome."""
        return self.on_select(game)

    def __str__(self) -> str:
        return self.description


def _rng_field() -> Any:
    return field(default_factory=random.Random, kw_only=True, repr=False, compare=False)


@dataclass
class ImmortalPlayer:
    """A player that never dies, optionally wrapping another player's moves."""

    player: Optional[Any] = field(default=None, kw_only=True, repr=False)

    def possible_actions(self, game: "Game") -> List[Action]:
        if self.player is None:
            return []
        return self.player.possible_actions(game)

    def alive(self) -> bool:
        return True


@dataclass
class Dwarf:
    """Digs tunnels and mines gold until the pickaxe breaks."""

    name: str
    gold_probability: int = 30
    pickaxe_durability: Optional[int] = None
    rng: Any = _rng_field()

    def __post_init__(self) -> None:
        if self.pickaxe_durability is None:
            self.pickaxe_durability = 2 + self.rng.randrange(8)

    def possible_actions(self, game: "Game") -> List[Action]:
        def dig(g: "Game") -> Outcome:
            self.pickaxe_durability -= 1
            if g.coins < 2:
                return "Not enough coins to dig a tunnel"
            g.coins -= 2
            increase = self.rng.randrange(10)
            self.gold_probability += increase
            return (
                "You dug a tunnel => probability of finding gold increased "
                f"+{increase}%"
            )

        def mine(g: "Game") -> Outcome:
            self.pickaxe_durability -= 1
            if self.rng.randrange(100) < self.gold_probability:
                g.coins += 5
                return "You found 5 gold coins!"
            return "No gold found this time"

        return [
            Action(description="Dig a tunnel", on_select=dig),
            Action(description="Mine for gold", on_select=mine),
        ]

    def alive(self) -> bool:
        return self.pickaxe_durability > 0

    def heal(self) -> None:
        """Repair the pickaxe."""
        self.pickaxe_durability = self.rng.randrange(10)

    def __str__(self) -> str:
        return (
            f"Dwarf ({self.pickaxe_durability} 󰢷, {self.gold_probability} 󰴯): "
            f"{self.name}"
        )


@dataclass
class Minion(ImmortalPlayer):
    """An immortal coder whose features may add value or bugs."""

    name: str = ""
    skill: int = 150
    rng: Any = _rng_field()

    def possible_actions(self, game: "Game") -> List[Action]:
        def eat_banana(g: "Game") -> Outcome:
            g.coins -= 1
            gain = self.rng.randrange(50)
            self.skill += gain
            return f"You ate a banana => +{gain} skill"

        def add_feature(g: "Game") -> Outcome:
            # Skill is always positive, so floor division matches truncation.
            add_score = -(self.skill // 3) + self.rng.randrange(self.skill)
            g.score += add_score

            added_value = ""
            if add_score > 50:
                add_coins = self.rng.randrange(20)
                g.coins += add_coins
                added_value = f"=> feature added a lot of value => +{add_coins} coins "
            if add_score < 0:
                cost = 1 + self.rng.randrange(5)
                g.coins -= cost
                added_value = f"=> feature was actually a bug => -{cost} coins "

            score_str = when(add_score > -1).then(f"+{add_score}").or_else(f"{add_score}")
            reaction = (
                this(g.prod.upset)
                .only_if(add_score < 0)
                .or_(this(g.prod.no_impact).only_if(add_score == 0))
                .or_else(g.prod.calm_down)
            )
            return f"Feature added! Score {score_str} {added_value}=> {reaction()}"

        actions = []
        if game.coins > 0:
            actions.append(
                Action(
                    description="Buy a banana and eat it (costs 1 gold coin)",
                    on_select=eat_banana,
                )
            )
        actions.append(Action(description="Add a feature to the code", on_select=add_feature))
        return actions

    def is_minion(self) -> bool:
        return True

    def __str__(self) -> str:
        return f"Minion ({self.skill} skill): {self.name}"


def is_minion(player: Any) -> bool:
    """Return whether ``player`` declares itself a minion."""
    check = getattr(player, "is_minion", None)
    return bool(check()) if callable(check) else False


@dataclass
class NamelessPlayer:
    """A player who only ever does nothing, and may die doing it."""

    is_dead: bool = False
    rng: Any = _rng_field()

    def possible_actions(self, game: "Game") -> List[Action]:
        def do_nothing(g: "Game") -> Outcome:
            if not self.is_dead:
                self.is_dead = self.rng.randrange(10) < 3
            return "You did nothing"

        return [Action(description="Do nothing", on_select=do_nothing)]

    def alive(self) -> bool:
        return not self.is_dead

    def heal(self) -> None:
        self.is_dead = False


@dataclass
class ProductManager:
    """Pays wages and orders pizza; fired when the band goes bankrupt."""

    fired: bool = False
    _pizza_requested: bool = field(default=False, init=False, repr=False)

    def possible_actions(self, game: "Game") -> List[Action]:
        bankrupt = "Not enough coins to pay wages. Band is bankrupt. PM is fired!"

        def pay_wages(g: "Game") -> Outcome:
            wages = g.number_of_players_alive()
            if g.coins < wages:
                self.fired = True
                return bankrupt
            g.coins -= wages
            return "Wages paid"

        def order_pizza(g: "Game") -> Outcome:
            wages = g.number_of_players_alive()
            if g.coins < wages:
                self.fired = True
                return bankrupt
            if g.coins < wages * 2:
                g.coins -= wages
                return "Not enough coins to buy pizza , can only afford the wages"
            g.coins -= wages * 2
            self._pizza_requested = True
            return "Pizza's ordered, please wait for delivery"

        alive = game.number_of_players_alive()
        return [
            Action(description=f"Pay wages (cost {alive})", on_select=pay_wages),
            Action(description=f"Order Pizza (cost {alive * 2})", on_select=order_pizza),
        ]

    def pizza_requested(self) -> bool:
        return self._pizza_requested

    def pizza_delivered(self) -> None:
        self._pizza_requested = False

    def ascii_art(self) -> str:
        return "\n O\n/|\\\n/ \\"

    def alive(self) -> bool:
        return not self.fired

    def heal(self) -> None:
        self.fired = False

    def __str__(self) -> str:
        return "Sir Tan Lee Knot"


class VibeCoder:
    """Lets an AI do the work; fired when contributing too little."""

    def __init__(self, name: str, rng: Any = None) -> None:
        self._name = name
        self.fired = False
        self.contribution = 0
        self.rng = rng if rng is not None else random.Random()

    def possible_actions(self, game: "Game") -> List[Action]:
        too_low = "Your contribution is too low, you are fired!"

        def do_nothing(g: "Game") -> Outcome:
            self.contribution -= 1
            g.score += 5
            if self.contribution <= -10:
                self.fired = True
                return too_low
            return "You did nothing => +5 Score"

        def ask_chatgpt(g: "Game") -> Outcome:
            contribution = -10 + self.rng.randrange(25)
            cost = -1 * self.rng.randrange(5)
            self.contribution += contribution
            if g.coins + cost < 0:
                self.fired = True
                return "You're costing to much, you are fired!"
            if self.contribution <= -20:
                self.fired = True
                return too_low
            g.coins += cost
            g.score += contribution

            reaction = (
                when(contribution > 9)
                .then(g.prod.calm_down)
                .or_(this(g.prod.no_impact).only_if(contribution > -1))
                .or_else(g.prod.upset)
            )
            coins_str = when(contribution > -1).then(f"+{contribution}").or_else(f"{contribution}")
            return f"AI did something => cost {cost} coins => {coins_str} score => {reaction()}"

        return [
            Action(description="Do nothing", on_select=do_nothing),
            Action(description="Ask ChatGPT", on_select=ask_chatgpt),
        ]

    def name(self) -> str:
        return self._name

    def alive(self) -> bool:
        return not self.fired

    def heal(self) -> None:
        self.fired = False