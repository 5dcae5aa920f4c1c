#!/usr/bin/env python3
"""
N-dimensional Minesweeper - Main entry point.

Usage:
    python main.py play [--seed N]
    python main.py show [--shape 3 3 4 4] [--mines N] [--seed N]
"""
import argparse
import random
import sys
from pathlib import Path

# Allow running from a checkout without installing
sys.path.insert(0, str(Path(__file__).parent / "src"))

from game import FieldConfig, GameState, MineField, render
from game.console import play as play_game


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    rng = random.Random(args.seed)
    try:
        state = play_game(rng=rng)
    except (EOFError, KeyboardInterrupt):
        print("\nGoodbye!")
        return
    if state == GameState.PLAYING:
        print("Game abandoned.")


def show(args: argparse.Namespace) -> None:
    """Print a fully uncovered random field."""
    try:
        config = FieldConfig(tuple(args.shape), args.mines)
    except ValueError as error:
        print(f"Invalid field: {error}")
        return

    mine_field = MineField(config, random.Random(args.seed))
    mine_field.place_mines()
    mine_field.cells.for_each(lambda cell: cell.reveal())

    print(f"Field {config.shape} with {config.num_mines} mines:")
    for line in render(mine_field):
        print(line)


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="N-dimensional Minesweeper - play and render"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )

    # Show command
    show_parser = subparsers.add_parser(
        "show", help="Render a fully uncovered random field"
    )
    show_parser.add_argument(
        "--shape", type=int, nargs="*", default=[3, 3, 4, 4],
        help="Size of each axis",
    )
    show_parser.add_argument(
        "--mines", type=int, default=10, help="Number of mines"
    )
    show_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )

    args = parser.parse_args()

    if args.command == "play":
        play(args)
    elif args.command == "show":
        show(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
