"""
Dice Notation - Command Line Entry Point

Usage:
    dice-roll [NOTATION]

Rolls NOTATION (default ``20d10r1``, configurable via DICE_DEFAULT_NOTATION)
and prints one line of annotated results.
"""

import argparse
import logging
import random
import sys
from typing import Sequence

from src.config import configure_logging, get_settings
from src.engine.errors import NotationError
from src.engine.roll import Roll
from src.notation import parse_roll
from src.ui.terminal import render_roll

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dice-roll",
        description="Roll dice written in tabletop notation, e.g. 4d6k3 or 20d10r1.",
    )
    parser.add_argument(
        "notation",
        nargs="?",
        default=None,
        help="dice notation to roll (defaults to DICE_DEFAULT_NOTATION, 20d10r1)",
    )
    return parser


def roll_notation(notation: str, rng: random.Random, color: bool = True) -> str:
    """
    Parse, roll and render one notation.

    Raises:
        NotationError: If the notation is malformed (nothing is rolled)
    """
    die, behaviours = parse_roll(notation)
    roll = Roll.from_roll(die, rng).apply(behaviours, rng)
    return render_roll(roll, color=color)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI. Returns the process exit status."""
    settings = get_settings()
    configure_logging(settings.log_level)

    args = build_parser().parse_args(argv)
    notation = args.notation if args.notation is not None else settings.default_notation

    rng = random.Random(settings.seed)
    logger.info("Rolling %s (seed=%s)", notation, settings.seed)

    try:
        line = roll_notation(notation, rng, color=settings.color)
    except NotationError as e:
        logger.error("Invalid notation %r: %s", notation, e)
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
