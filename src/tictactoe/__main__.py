"""Entry point for running the game via ``python -m tictactoe``."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from .config import LOG_LEVELS, Settings
from .console import Console, play

logger = logging.getLogger("tictactoe")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="tictactoe", description="Play Tic-Tac-Toe against the computer"
    )
    p.add_argument(
        "--first",
        choices=["human", "computer"],
        default=None,
        help="who moves first (asked interactively when omitted)",
    )
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="diagnostic log level written to stderr",
    )
    p.add_argument(
        "--no-instructions",
        dest="show_instructions",
        action="store_false",
        default=None,
        help="skip the welcome text",
    )
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Play one game on the terminal and return the process exit code."""

    args = parse_args(argv)
    try:
        settings = Settings.from_env().merged(
            human_first=None if args.first is None else args.first == "human",
            log_level=args.log_level,
            show_instructions=args.show_instructions,
        )
    except ValidationError as exc:
        print(f"Invalid configuration:\n{exc}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        play(
            Console(),
            human_first=settings.human_first,
            show_instructions=settings.show_instructions,
        )
    except (EOFError, KeyboardInterrupt):
        logger.info("Input closed before the game finished")
        print("\nThe battle is abandoned, human.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
