"""Puzzle models."""

from .ball import BALL_GLYPHS, PALETTE, Ball, ball_from_glyph
from .glass import Glass, GlassEmptyError, GlassFullError

__all__ = [
    "Ball",
    "BALL_GLYPHS",
    "PALETTE",
    "ball_from_glyph",
    "Glass",
    "GlassEmptyError",
    "GlassFullError",
]
