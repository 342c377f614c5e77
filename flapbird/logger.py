"""Timestamped console logging."""

from __future__ import annotations

import enum
import sys
from datetime import datetime

_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class Level(enum.Enum):
    """Severity of a log message."""

    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


def _timestamp() -> str:
    return datetime.now().strftime(_TIMESTAMP_FORMAT)


def log(message: str, level: Level = Level.INFO) -> None:
    """Write ``message`` to standard output with a timestamp and level tag."""
    sys.stdout.write(f"[{_timestamp()}] [{level.value}] {message}\n")
    sys.stdout.flush()