"""Tests for puzzle generation."""

import random
from collections import Counter

import pytest

from ballsort.game.generator import (
    EMPTY_GLASSES,
    MIN_CAPACITY,
    color_count,
    create_glasses,
)
from ballsort.models.ball import PALETTE, Ball


def ball_counts(glasses):
    return Counter(ball for glass in glasses for ball in glass.balls)


class TestColorCount:
    """Tests for color_count()."""

    def test_leaves_two_glasses_empty(self):
        """Test that two glasses are reserved for empty ones."""
        assert color_count(6) == 4

    def test_capped_by_palette(self):
        """Test that colors never exceed the palette."""
        assert color_count(100) == len(PALETTE)

    @pytest.mark.parametrize("glass_count", [2, 1, 0, -3])
    def test_never_negative(self, glass_count):
        """Test clamping for very small glass counts."""
        assert color_count(glass_count) == 0


class TestCreateGlasses:
    """Tests for create_glasses()."""

    def test_each_color_fills_one_glass(self):
        """Test that each dealt color appears exactly capacity times."""
        glasses = create_glasses(4, 6, random.Random(0))
        counts = ball_counts(glasses)

        assert set(counts) == set(PALETTE[:4])
        assert all(n == 4 for n in counts.values())

    def test_layout(self):
        """Test dealt glasses are full and followed by two empty ones."""
        glasses = create_glasses(4, 6, random.Random(0))

        assert len(glasses) == 6
        assert all(glass.is_full() for glass in glasses[:-EMPTY_GLASSES])
        assert all(glass.is_empty() for glass in glasses[-EMPTY_GLASSES:])
        assert all(glass.capacity == 4 for glass in glasses)

    def test_capacity_clamped(self):
        """Test that small capacities are raised to the minimum."""
        glasses = create_glasses(2, 4, random.Random(0))

        assert all(glass.capacity == MIN_CAPACITY for glass in glasses)
        assert all(n == MIN_CAPACITY for n in ball_counts(glasses).values())

    def test_larger_capacity(self):
        """Test generation with deeper glasses."""
        glasses = create_glasses(6, 5, random.Random(0))

        assert len(glasses) == 5
        assert all(glass.capacity == 6 for glass in glasses)
        assert sum(len(glass) for glass in glasses) == 18

    def test_full_palette(self):
        """Test that a large glass count uses every color once."""
        glasses = create_glasses(4, 50, random.Random(0))

        assert len(glasses) == len(PALETTE) + EMPTY_GLASSES
        assert set(ball_counts(glasses)) == set(Ball)

    @pytest.mark.parametrize("glass_count", [2, 1, 0, -5])
    def test_too_few_glasses(self, glass_count):
        """Test that two or fewer glasses give only the empty pair."""
        glasses = create_glasses(4, glass_count, random.Random(0))

        assert len(glasses) == EMPTY_GLASSES
        assert all(glass.is_empty() for glass in glasses)

    def test_seeded_deal_is_reproducible(self):
        """Test that the same seed gives the same deal."""
        first = create_glasses(4, 11, random.Random(42))
        second = create_glasses(4, 11, random.Random(42))

        assert [g.balls for g in first] == [g.balls for g in second]

    def test_custom_palette(self):
        """Test dealing from a restricted palette."""
        palette = (Ball.CYAN, Ball.PINK)
        glasses = create_glasses(4, 10, random.Random(0), palette=palette)

        assert len(glasses) == 4
        assert set(ball_counts(glasses)) == set(palette)

    def test_default_rng(self):
        """Test generation without an explicit random source."""
        glasses = create_glasses(4, 5)
        assert len(glasses) == 5
