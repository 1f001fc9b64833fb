"""Main entry point for the ball-sort puzzle."""

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from ballsort.config import load_config
from ballsort.game.engine import Puzzle
from ballsort.logging import MoveLogConfig, MoveLogger
from ballsort.utils.logger import BoardDisplay, setup_logging

logger = logging.getLogger(__name__)

QUIT_COMMANDS = {"q", "quit", "exit"}
RESET_COMMANDS = {"r", "reset"}

PROMPT_SELECT = "Select glass (q to quit): "
PROMPT_TARGET = "Pour into glass (r to reselect): "


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Ball-sort puzzle")
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "--capacity",
        type=int,
        help="Balls per glass (overrides config)",
    )
    parser.add_argument(
        "--glasses",
        type=int,
        help="Number of glasses including the two empty ones (overrides config)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for a reproducible deal (overrides config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--move-log",
        type=Path,
        help="Write a JSONL move log to this file",
    )
    return parser.parse_args(argv)


def run_loop(
    puzzle: Puzzle,
    display: BoardDisplay,
    move_logger: MoveLogger,
    stdin: TextIO,
) -> bool:
    """Run the interactive loop until the puzzle is sorted or input ends.

    The first index selects a glass, the next one pours into a target.
    The selection is cleared after every attempted move.

    Returns:
        True if the puzzle was sorted.
    """
    display.print_board(puzzle)

    while not puzzle.is_sorted():
        prompt = PROMPT_SELECT if puzzle.selected is None else PROMPT_TARGET
        print(prompt, end="", file=display.out, flush=True)

        line = stdin.readline()
        if not line:
            break
        command = line.strip().lower()
        if not command:
            continue
        if command in QUIT_COMMANDS:
            break
        if command in RESET_COMMANDS:
            puzzle.clear_selection()
            display.print_board(puzzle)
            continue

        try:
            index = int(command)
        except ValueError:
            print(f"  -> Not a glass number: {command}", file=display.out)
            continue

        if puzzle.selected is None:
            puzzle.select(index)
            display.print_board(puzzle)
            continue

        if puzzle.selected == index:
            # Picking the selected glass again deselects it
            puzzle.select(index)
            display.print_board(puzzle)
            continue

        source = puzzle.selected
        result = puzzle.swap(index)
        move_logger.log_move(
            puzzle.moves,
            source,
            index,
            result.error.name,
            puzzle.last_moved,
            puzzle.glasses,
        )
        if not result.is_valid:
            display.print_error(result)
        puzzle.clear_selection()
        display.print_board(puzzle)

    solved = puzzle.is_sorted()
    move_logger.log_puzzle_end(puzzle.moves, solved)
    if solved:
        logger.info(f"Puzzle sorted after {puzzle.moves} moves")
        display.print_sorted(puzzle.moves)
    return solved


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    args = parse_args(argv)

    # Load config
    config = load_config(args.config)

    # Apply command-line overrides
    if args.capacity is not None:
        config.puzzle.capacity = args.capacity
    if args.glasses is not None:
        config.puzzle.glass_count = args.glasses
    if args.seed is not None:
        config.puzzle.seed = args.seed
    if args.verbose:
        config.logging.level = "DEBUG"

    move_log_config = config.move_log
    if args.move_log:
        move_log_config = MoveLogConfig(enabled=True, output_path=str(args.move_log))

    # Setup logging
    setup_logging(config.logging.level)

    display = BoardDisplay(
        show_indices=config.display.show_indices,
        column_gap=config.display.column_gap,
    )

    try:
        puzzle = Puzzle.from_config(config.puzzle)
        with MoveLogger(move_log_config) as move_logger:
            move_logger.log_puzzle_start(puzzle.glasses)
            run_loop(puzzle, display, move_logger, sys.stdin)
        return 0

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"Puzzle error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
