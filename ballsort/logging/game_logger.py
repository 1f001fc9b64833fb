"""Move logger for puzzle replay."""

import json
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from pydantic import BaseModel

from ballsort.models.glass import Glass

from .formatters import format_glasses


class MoveLogConfig(BaseModel):
    """Configuration for move logging."""

    enabled: bool = False
    output_path: str = "moves.jsonl"


class MoveLogger:
    """Logger for puzzle events in JSONL format.

    Each line in the output file is a JSON object representing one event,
    so a session can be replayed move by move.
    """

    def __init__(self, config: MoveLogConfig | None = None):
        """Initialize move logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or MoveLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "MoveLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_puzzle_start(self, glasses: Sequence[Glass]) -> None:
        """Log the initial deal.

        Args:
            glasses: Glasses as dealt.
        """
        self._write({
            "type": "puzzle_start",
            "timestamp": datetime.now().isoformat(),
            "capacity": glasses[0].capacity if glasses else 0,
            "glasses": format_glasses(glasses),
        })

    def log_move(
        self,
        move_num: int,
        source: int | None,
        target: int,
        result: str,
        moved: int,
        glasses: Sequence[Glass],
    ) -> None:
        """Log an attempted move.

        Args:
            move_num: Number of successful moves so far.
            source: Selected glass index (None if nothing was selected).
            target: Target glass index.
            result: MoveError name ("NONE" for an accepted move).
            moved: Balls that landed on the target.
            glasses: All glasses after the move.
        """
        self._write({
            "type": "move",
            "move": move_num,
            "source": source,
            "target": target,
            "result": result,
            "moved": moved,
            "glasses": format_glasses(glasses),
        })

    def log_puzzle_end(self, moves: int, sorted_: bool) -> None:
        """Log the end of a session.

        Args:
            moves: Total successful moves.
            sorted_: Whether the puzzle reached its goal state.
        """
        self._write({
            "type": "puzzle_end",
            "timestamp": datetime.now().isoformat(),
            "moves": moves,
            "sorted": sorted_,
        })
