"""Puzzle rules engine."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from ballsort.models.ball import ball_from_glyph
from ballsort.models.glass import Glass

from .generator import create_glasses
from .validator import MoveValidator, ValidationResult

if TYPE_CHECKING:
    from ballsort.config import PuzzleConfig

logger = logging.getLogger(__name__)


class Puzzle:
    """A ball-sort puzzle: an ordered set of glasses plus a selection cursor.

    Glasses are addressed by index; indices stay stable for the puzzle's
    lifetime. The puzzle owns its glasses and mutates them only through
    swap().
    """

    def __init__(
        self,
        glasses: list[Glass],
        validator: MoveValidator | None = None,
    ):
        """Initialize puzzle.

        Args:
            glasses: Glasses in display order
            validator: MoveValidator instance (creates one if not provided)
        """
        self._glasses = glasses
        self.validator = validator or MoveValidator()

        self.selected: int | None = None
        self.moves = 0
        self.last_moved = 0

    @classmethod
    def create(
        cls,
        capacity: int,
        glass_count: int,
        seed: int | None = None,
    ) -> Puzzle:
        """Create a freshly shuffled puzzle.

        Args:
            capacity: Glass capacity (minimum 4)
            glass_count: Requested number of glasses, two of them empty
            seed: Seed for reproducible deals

        Returns:
            Puzzle with no selection.
        """
        glasses = create_glasses(capacity, glass_count, random.Random(seed))
        logger.info(
            f"Created puzzle with {len(glasses)} glasses of capacity "
            f"{glasses[0].capacity}"
        )
        return cls(glasses)

    @classmethod
    def from_config(cls, config: PuzzleConfig) -> Puzzle:
        """Build a puzzle from configuration.

        An explicit layout wins over random generation.
        """
        if config.layout is None:
            return cls.create(config.capacity, config.glass_count, config.seed)

        glasses = [
            Glass(
                capacity=config.capacity,
                balls=[ball_from_glyph(g) for g in row],
            )
            for row in config.layout
        ]
        logger.info(f"Loaded puzzle layout with {len(glasses)} glasses")
        return cls(glasses)

    @property
    def glasses(self) -> tuple[Glass, ...]:
        """Get glasses in index order."""
        return tuple(self._glasses)

    def glass(self, index: int) -> Glass:
        """Get a glass by index."""
        return self._glasses[index]

    def select(self, index: int) -> None:
        """Toggle selection of a glass.

        Selecting the current selection clears it. Any other index is
        stored as-is; bounds are checked when a move is validated.
        """
        if self.selected == index:
            self.selected = None
            return
        self.selected = index

    def clear_selection(self) -> None:
        """Clear the selection."""
        self.selected = None

    def is_move_possible(self, target: int) -> ValidationResult:
        """Check whether the selected glass can pour into target."""
        return self.validator.validate(self._glasses, self.selected, target)

    def swap(self, target: int) -> ValidationResult:
        """Move the top run of the selected glass onto target.

        A rejected move changes nothing. If the target fills up before the
        whole run is moved, the remaining balls are dropped from play.
        The selection is left unchanged.

        Args:
            target: Index of the destination glass

        Returns:
            ValidationResult of the move.
        """
        source = self.selected
        result = self.is_move_possible(target)
        if source is None or not result.is_valid:
            self.last_moved = 0
            logger.debug(f"Move {source} -> {target} rejected: {result.error.name}")
            return result

        source_glass = self._glasses[source]
        target_glass = self._glasses[target]

        run = source_glass.top_run_length()
        balls = [source_glass.pop() for _ in range(run)]

        moved = 0
        for ball in balls:
            if target_glass.is_full():
                break
            target_glass.push(ball)
            moved += 1

        lost = run - moved
        if lost:
            logger.warning(
                f"Target glass {target} filled up, {lost} ball(s) dropped from play"
            )

        self.moves += 1
        self.last_moved = moved
        logger.info(f"Moved {moved} ball(s) from glass {source} to {target}")
        return result

    def is_completed(self) -> bool:
        """Check if every glass is solved."""
        return all(glass.is_solved() for glass in self._glasses)

    def is_sorted(self) -> bool:
        """Check if every glass is either empty or solved."""
        return all(glass.is_empty() or glass.is_solved() for glass in self._glasses)

    def ball_count(self) -> int:
        """Get number of balls still in play."""
        return sum(len(glass) for glass in self._glasses)

    def __len__(self) -> int:
        return len(self._glasses)

    def __str__(self) -> str:
        selected = "none" if self.selected is None else str(self.selected)
        return f"Puzzle({len(self._glasses)} glasses, selected={selected}, moves={self.moves})"
