"""Tests for move validation order."""

import pytest

from ballsort.game.validator import (
    MOVE_ERROR_MESSAGES,
    MoveError,
    MoveValidator,
    ValidationResult,
)
from ballsort.models.ball import Ball
from ballsort.models.glass import Glass

R, G = Ball.RED, Ball.GREEN


@pytest.fixture
def validator():
    return MoveValidator()


class TestValidationOrder:
    """Tests that the first failing check wins."""

    def test_no_selection_first(self, validator):
        """Test no selection beats an empty puzzle."""
        result = validator.validate([], None, 3)
        assert result.error == MoveError.NO_SELECTION

    def test_same_container_before_range(self, validator):
        """Test same index is reported even when out of range."""
        result = validator.validate([], 4, 4)
        assert result.error == MoveError.SAME_CONTAINER

    def test_target_before_selection_range(self, validator):
        """Test both indices out of range reports the target."""
        result = validator.validate([Glass(capacity=4)], 5, 6)
        assert result.error == MoveError.INVALID_TARGET

    def test_source_empty_before_target_full(self, validator):
        """Test empty source beats full target."""
        glasses = [Glass(capacity=4), Glass(capacity=4, balls=[G, G, G, G])]
        assert validator.validate(glasses, 0, 1).error == MoveError.SOURCE_EMPTY

    def test_target_full_before_mismatch(self, validator):
        """Test full target beats color mismatch."""
        glasses = [Glass(capacity=4, balls=[R]), Glass(capacity=4, balls=[G, G, G, G])]
        assert validator.validate(glasses, 0, 1).error == MoveError.TARGET_FULL


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_ok(self):
        result = ValidationResult.ok()
        assert result.is_valid
        assert result
        assert result.error == MoveError.NONE
        assert result.error_message == ""

    def test_fail(self):
        result = ValidationResult.fail(MoveError.SOURCE_EMPTY)
        assert not result.is_valid
        assert not result
        assert result.error_message == "Selected glass is empty"

    def test_every_error_has_message(self):
        """Test that each error kind maps to a message."""
        assert set(MOVE_ERROR_MESSAGES) == set(MoveError)
        assert all(MOVE_ERROR_MESSAGES[e] for e in MoveError if e != MoveError.NONE)
