"""Logging utilities and board display."""

import logging
import sys
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from ballsort.game.engine import Puzzle
    from ballsort.game.validator import ValidationResult

GLASS_WIDTH = 3  # Width of "|R|"


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging for the application.

    Log records go to stderr so they never interleave with the board.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


class BoardDisplay:
    """Render the puzzle as side-by-side glass columns."""

    def __init__(
        self,
        show_indices: bool = True,
        column_gap: int = 2,
        out: TextIO | None = None,
    ):
        """Initialize display.

        Args:
            show_indices: Whether to print glass indices under the board
            column_gap: Spaces between glass columns
            out: Output stream (stdout if not provided)
        """
        self.show_indices = show_indices
        self.column_gap = column_gap
        self.out = out if out is not None else sys.stdout

    def render(self, puzzle: "Puzzle") -> str:
        """Compose every glass block into one board string."""
        blocks = [str(glass).split("\n") for glass in puzzle.glasses]
        if not blocks:
            return ""

        # Glasses of different capacity are aligned on their base
        height = max(len(block) for block in blocks)
        blank = " " * GLASS_WIDTH
        blocks = [[blank] * (height - len(block)) + block for block in blocks]

        gap = " " * self.column_gap
        rows = [gap.join(block[row] for block in blocks) for row in range(height)]

        if self.show_indices:
            rows.append(gap.join(f"{i:^{GLASS_WIDTH}}" for i in range(len(blocks))))

        selected = puzzle.selected
        if selected is not None and 0 <= selected < len(blocks):
            markers = [
                f"{'^':^{GLASS_WIDTH}}" if i == selected else blank
                for i in range(len(blocks))
            ]
            rows.append(gap.join(markers).rstrip())

        return "\n".join(rows)

    def print_board(self, puzzle: "Puzzle") -> None:
        """Print the board."""
        print(self.render(puzzle), file=self.out)
        print(file=self.out)

    def print_error(self, result: "ValidationResult") -> None:
        """Print why a move was rejected."""
        print(f"  -> {result.error_message}", file=self.out)

    def print_sorted(self, moves: int) -> None:
        """Print the end-of-puzzle message."""
        print("=" * 40, file=self.out)
        print(f"Sorted in {moves} moves!", file=self.out)
        print("=" * 40, file=self.out)
