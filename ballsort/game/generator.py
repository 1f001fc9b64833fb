"""Puzzle generation: shuffle a palette of balls into glasses."""

import logging
import random
from collections.abc import Sequence

from ballsort.models.ball import PALETTE, Ball
from ballsort.models.glass import Glass

logger = logging.getLogger(__name__)

MIN_CAPACITY = 4
EMPTY_GLASSES = 2  # Spare glasses appended after the dealt ones


def color_count(glass_count: int, palette_size: int = len(PALETTE)) -> int:
    """Get number of colors dealt for a given glass count.

    Args:
        glass_count: Total glasses requested (including the spare ones)
        palette_size: Number of colors available

    Returns:
        Colors to deal, never negative.
    """
    return max(0, min(glass_count - EMPTY_GLASSES, palette_size))


def create_glasses(
    capacity: int,
    glass_count: int,
    rng: random.Random | None = None,
    palette: Sequence[Ball] = PALETTE,
) -> list[Glass]:
    """Deal a shuffled puzzle.

    Each chosen color gets exactly ``capacity`` balls. The shuffled balls
    fill glasses in consecutive chunks, then two empty glasses are added.

    Args:
        capacity: Glass capacity (raised to MIN_CAPACITY if smaller)
        glass_count: Requested number of glasses
        rng: Random source (a fresh unseeded one if not provided)
        palette: Ordered colors to draw from

    Returns:
        List of glasses, dealt glasses first.
    """
    rng = rng or random.Random()
    capacity = max(capacity, MIN_CAPACITY)
    colors = color_count(glass_count, len(palette))

    balls: list[Ball] = [color for color in palette[:colors] for _ in range(capacity)]
    rng.shuffle(balls)

    # A short final chunk is kept as a partially filled glass
    glasses = [
        Glass(capacity=capacity, balls=balls[i : i + capacity])
        for i in range(0, len(balls), capacity)
    ]
    glasses.extend(Glass(capacity=capacity) for _ in range(EMPTY_GLASSES))

    logger.debug(
        f"Dealt {len(balls)} balls of {colors} colors into {len(glasses)} glasses"
    )
    return glasses
