"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from ballsort.config import Config, load_config


class TestLoadConfig:
    """Tests for load_config()."""

    def test_defaults(self):
        """Test that no path gives the default config."""
        config = load_config()
        assert config.puzzle.capacity == 4
        assert config.puzzle.glass_count == 11
        assert config.puzzle.seed is None
        assert config.puzzle.layout is None
        assert config.logging.level == "WARNING"
        assert not config.move_log.enabled

    def test_missing_file(self, tmp_path):
        """Test that a missing file falls back to defaults."""
        config = load_config(tmp_path / "nope.yaml")
        assert config == Config()

    def test_empty_file(self, tmp_path):
        """Test that an empty file falls back to defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == Config()

    def test_yaml_values(self, tmp_path):
        """Test reading values from YAML."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "puzzle:\n"
            "  capacity: 5\n"
            "  seed: 7\n"
            "  layout: [RRGG, GGRR, '']\n"
            "display:\n"
            "  column_gap: 1\n"
            "move_log:\n"
            "  enabled: true\n"
            "  output_path: out/moves.jsonl\n"
        )
        config = load_config(str(path))

        assert config.puzzle.capacity == 5
        assert config.puzzle.glass_count == 11
        assert config.puzzle.seed == 7
        assert config.puzzle.layout == ["RRGG", "GGRR", ""]
        assert config.display.column_gap == 1
        assert config.display.show_indices
        assert config.move_log.enabled
        assert config.move_log.output_path == "out/moves.jsonl"

    def test_invalid_value(self, tmp_path):
        """Test that bad values are rejected."""
        path = tmp_path / "bad.yaml"
        path.write_text("puzzle:\n  capacity: lots\n")
        with pytest.raises(ValidationError):
            load_config(path)
