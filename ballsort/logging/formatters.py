"""Formatters for move log output."""

from collections.abc import Sequence

from ballsort.models.ball import BALL_GLYPHS, Ball
from ballsort.models.glass import Glass


def format_ball(ball: Ball) -> str:
    """Format a single ball to its glyph (e.g., "R" for red)."""
    return BALL_GLYPHS[ball]


def format_glass(glass: Glass) -> str:
    """Format a glass to a glyph string.

    Args:
        glass: Glass to format.

    Returns:
        Glyphs from bottom to top (e.g., "RRG").
        Empty string if the glass is empty.
    """
    return "".join(format_ball(b) for b in glass.balls)


def format_glasses(glasses: Sequence[Glass]) -> dict[str, str]:
    """Format all glasses to dict.

    Args:
        glasses: Glasses in index order.

    Returns:
        Dict mapping glass index (as string) to formatted glass string.
    """
    return {str(i): format_glass(g) for i, g in enumerate(glasses)}
