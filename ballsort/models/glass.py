"""Glass model: a bounded stack of balls."""

import logging

from pydantic import BaseModel, Field, model_validator

from .ball import BALL_GLYPHS, Ball

logger = logging.getLogger(__name__)

# Rendering markers
EMPTY_SLOT = "| |"
GLASS_BASE = "\\_/"


class GlassFullError(ValueError):
    """Raised when pushing onto a full glass."""


class GlassEmptyError(IndexError):
    """Raised when popping from an empty glass."""


class Glass(BaseModel):
    """A glass holding balls from bottom (index 0) to top (last)."""

    capacity: int = Field(ge=0)
    balls: list[Ball] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_fill(self) -> "Glass":
        if len(self.balls) > self.capacity:
            raise ValueError(
                f"Glass holds {len(self.balls)} balls but capacity is {self.capacity}"
            )
        return self

    def is_full(self) -> bool:
        """Check if no slot is left."""
        return len(self.balls) == self.capacity

    def is_empty(self) -> bool:
        """Check if the glass holds no balls."""
        return len(self.balls) == 0

    def top(self) -> Ball | None:
        """Get the top ball, or None if empty."""
        return self.balls[-1] if self.balls else None

    def push(self, ball: Ball) -> None:
        """Put a ball on top.

        Args:
            ball: Ball to add.

        Raises:
            GlassFullError: If the glass is already full.
        """
        if self.is_full():
            raise GlassFullError("Glass is full")
        self.balls.append(ball)
        logger.debug(f"Pushed {ball.name}, glass now {len(self.balls)}/{self.capacity}")

    def pop(self) -> Ball:
        """Take the top ball off.

        Returns:
            The removed ball.

        Raises:
            GlassEmptyError: If the glass is empty.
        """
        if self.is_empty():
            raise GlassEmptyError("Glass is empty")
        ball = self.balls.pop()
        logger.debug(f"Popped {ball.name}, glass now {len(self.balls)}/{self.capacity}")
        return ball

    def available_space(self) -> int:
        """Get number of free slots."""
        return max(self.capacity - len(self.balls), 0)

    def is_solved(self) -> bool:
        """Check if the glass is full of a single color.

        An empty glass is never solved.
        """
        if not self.is_full() or self.is_empty():
            return False
        top = self.balls[-1]
        return all(ball == top for ball in self.balls)

    def top_run_length(self) -> int:
        """Count balls matching the top color, from the top downward."""
        top = self.top()
        if top is None:
            return 0
        count = 0
        for ball in reversed(self.balls):
            if ball != top:
                break
            count += 1
        return count

    def __len__(self) -> int:
        return len(self.balls)

    def __str__(self) -> str:
        # Top slot first, then the base
        lines = []
        for slot in range(self.capacity - 1, -1, -1):
            if slot < len(self.balls):
                lines.append(f"|{BALL_GLYPHS[self.balls[slot]]}|")
            else:
                lines.append(EMPTY_SLOT)
        lines.append(GLASS_BASE)
        return "\n".join(lines)

    def __repr__(self) -> str:
        glyphs = "".join(BALL_GLYPHS[b] for b in self.balls)
        return f"Glass(capacity={self.capacity}, balls={glyphs!r})"
