"""Command that starts a game in the terminal."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

from .console import ConsoleEngine
from .game import new_game
from .leaderboard import DEFAULT_SCORES_PATH
from .players import ProductManager


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play one game against PRODUCTION with a product manager leading the band."""
    parser = argparse.ArgumentParser(
        prog="prodband",
        description="A band of developers attempts to survive against PRODUCTION.",
    )
    parser.add_argument(
        "--scores",
        type=Path,
        default=DEFAULT_SCORES_PATH,
        help="CSV file holding the leaderboard",
    )
    args = parser.parse_args(argv)

    game = new_game(ProductManager())
    game.scores_path = args.scores
    engine = ConsoleEngine()
    try:
        game.run(engine)
    except KeyboardInterrupt:
        engine.stop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())