"""Game logic."""

from .engine import Puzzle
from .generator import create_glasses
from .validator import MoveError, MoveValidator, ValidationResult

__all__ = [
    "MoveError",
    "MoveValidator",
    "Puzzle",
    "ValidationResult",
    "create_glasses",
]
