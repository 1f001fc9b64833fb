"""Move logging module."""

from .formatters import format_ball, format_glass, format_glasses
from .game_logger import MoveLogConfig, MoveLogger

__all__ = [
    "MoveLogConfig",
    "MoveLogger",
    "format_ball",
    "format_glass",
    "format_glasses",
]
