"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel

from ballsort.logging import MoveLogConfig


class PuzzleConfig(BaseModel):
    """Puzzle configuration."""

    capacity: int = 4
    glass_count: int = 11  # 9 colors + 2 empty glasses
    seed: int | None = None

    # Fixed layout instead of a random deal: one glyph string per glass,
    # bottom to top (e.g. ["RRGG", "GGRR", ""])
    layout: list[str] | None = None


class DisplayConfig(BaseModel):
    """Board display configuration."""

    show_indices: bool = True
    column_gap: int = 2


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"


class Config(BaseModel):
    """Root configuration."""

    puzzle: PuzzleConfig = PuzzleConfig()
    display: DisplayConfig = DisplayConfig()
    logging: LoggingConfig = LoggingConfig()
    move_log: MoveLogConfig = MoveLogConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
