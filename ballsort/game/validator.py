"""Move validation for glass-to-glass swaps."""

from dataclasses import dataclass
from enum import IntEnum

from ballsort.models.glass import Glass


class MoveError(IntEnum):
    """Reasons a move is rejected."""

    NONE = 0
    NO_SELECTION = 1
    SAME_CONTAINER = 2
    INVALID_TARGET = 3
    INVALID_SELECTION = 4
    SOURCE_EMPTY = 5
    TARGET_FULL = 6
    COLOR_MISMATCH = 7


MOVE_ERROR_MESSAGES: dict[MoveError, str] = {
    MoveError.NONE: "",
    MoveError.NO_SELECTION: "No glass selected",
    MoveError.SAME_CONTAINER: "Cannot swap into the same glass",
    MoveError.INVALID_TARGET: "Target glass does not exist",
    MoveError.INVALID_SELECTION: "Selected glass does not exist",
    MoveError.SOURCE_EMPTY: "Selected glass is empty",
    MoveError.TARGET_FULL: "Target glass is full",
    MoveError.COLOR_MISMATCH: "Mismatched balls in glasses",
}


@dataclass
class ValidationResult:
    """Result of move validation."""

    is_valid: bool
    error: MoveError = MoveError.NONE
    error_message: str = ""

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def fail(cls, error: MoveError) -> "ValidationResult":
        return cls(
            is_valid=False,
            error=error,
            error_message=MOVE_ERROR_MESSAGES[error],
        )

    def __bool__(self) -> bool:
        return self.is_valid


class MoveValidator:
    """Validates a move from the selected glass to a target glass."""

    def validate(
        self,
        glasses: list[Glass],
        selected: int | None,
        target: int,
    ) -> ValidationResult:
        """Validate a move.

        Checks run in a fixed order and the first failure wins.

        Args:
            glasses: All glasses in the puzzle
            selected: Index of the source glass, or None
            target: Index of the destination glass

        Returns:
            ValidationResult
        """
        if selected is None:
            return ValidationResult.fail(MoveError.NO_SELECTION)

        if selected == target:
            return ValidationResult.fail(MoveError.SAME_CONTAINER)

        if not self._in_range(glasses, target):
            return ValidationResult.fail(MoveError.INVALID_TARGET)

        # Selection is stored unchecked, so it is bounds-checked here
        if not self._in_range(glasses, selected):
            return ValidationResult.fail(MoveError.INVALID_SELECTION)

        source_glass = glasses[selected]
        target_glass = glasses[target]

        if source_glass.is_empty():
            return ValidationResult.fail(MoveError.SOURCE_EMPTY)

        if target_glass.is_full():
            return ValidationResult.fail(MoveError.TARGET_FULL)

        # An empty target accepts any color
        if not target_glass.is_empty() and target_glass.top() != source_glass.top():
            return ValidationResult.fail(MoveError.COLOR_MISMATCH)

        return ValidationResult.ok()

    @staticmethod
    def _in_range(glasses: list[Glass], index: int) -> bool:
        return 0 <= index < len(glasses)
