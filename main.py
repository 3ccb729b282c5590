"""
Main script for t4 - a tiny tic tac toe program.

Modes:
- self:        one human plays both X and O
- random-ai:   play against random moves
- simple-ai:   play against an AI that wins and blocks
- perfect-ai:  like simple-ai plus a book opening (still beatable!)

Usage:
    python main.py simple-ai
    python main.py perfect-ai --human O --seed 42
"""

import argparse
import random
import sys
from typing import List, Optional

from logic.board import Player
from logic.config import GameConfig
from logic.ai_player import GameMode, create_selector
from ui import ConsoleUI


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="t4",
        description=GameConfig.TITLE
    )
    parser.add_argument(
        "mode",
        nargs="?",
        help="Game mode: " + ", ".join(GameConfig.GAME_MODES)
    )
    parser.add_argument(
        "--human",
        default=GameConfig.HUMAN_PLAYER,
        help="Side the human plays against an AI: X (moves first) or O"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=GameConfig.RANDOM_SEED,
        help="Seed for the AI's random choices"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print why the AI picks its moves"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        Exit code - always 0, bad arguments just print the usage.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.mode not in GameConfig.GAME_MODES:
        if args.mode is not None:
            print(f"Unknown mode: {args.mode}")
        parser.print_usage()
        return 0

    human = args.human.upper()
    if human not in ("X", "O"):
        print(f"Unknown player: {args.human}")
        parser.print_usage()
        return 0

    if args.debug:
        GameConfig.DEBUG_MODE = True

    mode = GameMode(args.mode)
    selector = create_selector(mode, rng=random.Random(args.seed))

    ui = ConsoleUI(mode=mode, human_player=Player(human), selector=selector)

    try:
        ui.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
