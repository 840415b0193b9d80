#!/usr/bin/env python3
"""
Minesweeper - terminal front end.

Usage:
    python main.py play [--width W] [--height H] [--mines N] [--seed S]

Commands during play:
    o ROW COL   open a cell (chords when the cell is already open)
    f ROW COL   toggle a flag
    c ROW COL   chord around an open number
    r           restart
    q           quit
"""
import argparse
import logging
import sys
from typing import Optional

import numpy as np

from minesweeper import (
    BoardConfig,
    GameEngine,
    GameOutcome,
    InvalidBoardConfiguration,
)


STATUS = {
    GameOutcome.PLAYING: "Playing",
    GameOutcome.WON: "You win!",
    GameOutcome.LOST: "Boom - you lose.",
}


def build_config(args: argparse.Namespace) -> Optional[BoardConfig]:
    """Build board configuration from arguments, reporting errors."""
    try:
        return BoardConfig(
            width=args.width, height=args.height, num_mines=args.mines
        )
    except InvalidBoardConfiguration as exc:
        print(f"Invalid board: {exc}", file=sys.stderr)
        return None


def print_board(engine: GameEngine) -> None:
    """Print the board with row/column headers and a status line."""
    snapshot = engine.snapshot()
    header = "   " + " ".join(str(col % 10) for col in range(snapshot.width))
    print(header)
    for row, line in enumerate(snapshot.render_ansi().split("\n")):
        print(f"{row:>2} {line}")
    print(f"{STATUS[snapshot.outcome]} | Mines left: {snapshot.mines_remaining}")


def handle_command(engine: GameEngine, command: str) -> bool:
    """
    Apply one input line to the engine.

    Returns:
        False when the player asked to quit.
    """
    parts = command.split()
    if not parts:
        return True

    verb = parts[0].lower()
    if verb == "q":
        return False
    if verb == "r":
        engine.restart()
        return True

    actions = {"o": engine.click, "f": engine.toggle_flag, "c": engine.chord}
    if verb not in actions or len(parts) != 3:
        print("Commands: o ROW COL | f ROW COL | c ROW COL | r | q")
        return True

    try:
        row, col = int(parts[1]), int(parts[2])
    except ValueError:
        print("Row and column must be integers")
        return True

    actions[verb](row, col)
    return True


def play(args: argparse.Namespace) -> int:
    """Run an interactive game in the terminal."""
    config = build_config(args)
    if config is None:
        return 2

    engine = GameEngine(config, rng=np.random.default_rng(args.seed))
    print_board(engine)
    while True:
        try:
            command = input("> ")
        except EOFError:
            break
        if not handle_command(engine, command):
            break
        print_board(engine)
    return 0


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    """Add board configuration flags to a parser."""
    parser.add_argument("--width", type=int, default=10, help="Board columns")
    parser.add_argument("--height", type=int, default=10, help="Board rows")
    parser.add_argument("--mines", type=int, default=13, help="Number of mines")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper in the terminal")
    parser.add_argument(
        "--verbose", action="store_true", help="Log engine events"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play interactively")
    add_board_arguments(play_parser)

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "play":
        sys.exit(play(args))
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
