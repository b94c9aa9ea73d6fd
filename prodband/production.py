"""The mood of PRODUCTION, which the band's moves calm down or upset."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class ProductionState(IntEnum):
    """The four moods PRODUCTION can be in, from best to worst."""

    CALM = 0
    ANNOYED = 1
    ENRAGED = 2
    LEGACY = 3

    def react(self, well: bool) -> "ProductionState":
        """Return the state after a move that went well or badly."""
        if well:
            if self is ProductionState.CALM:
                return self
            return ProductionState(self - 1)
        if self is ProductionState.LEGACY:
            return self
        return ProductionState(self + 1)

    def __str__(self) -> str:
        return self.name.capitalize()


@dataclass
class Production:
    """Mutable holder of PRODUCTION's current state."""

    state: ProductionState = ProductionState.CALM

    def upset(self) -> str:
        """Make PRODUCTION one step angrier and describe the result."""
        self.state = self.state.react(False)
        return f"PRODUCTION didn't like this move. PRODUCTION is now '{self.state}'"

    def calm_down(self) -> str:
        """Make PRODUCTION one step calmer and describe the result."""
        self.state = self.state.react(True)
        return f"PRODUCTION is happy with this move. PRODUCTION is now '{self.state}'"

    def no_impact(self) -> str:
        """Describe PRODUCTION without changing it."""
        return f"PRODUCTION is indifferent to this move. PRODUCTION is now '{self.state}'"

    def __str__(self) -> str:
        return str(self.state)


def new_production() -> Production:
    """Return PRODUCTION in its initial, calm state."""
    return Production(ProductionState.CALM)