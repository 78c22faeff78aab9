"""Append timestamped messages to a plain-text log file."""

from __future__ import annotations

import os
from datetime import datetime

DEFAULT_LOG_PATH = "log.txt"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def timestamp(now: datetime | None = None) -> str:
    """Return *now* (default: the current local time) as ``YYYY-MM-DD HH:MM:SS``."""
    return (now or datetime.now()).strftime(TIMESTAMP_FORMAT)


def log_message(message: str, path: str | os.PathLike[str] = DEFAULT_LOG_PATH) -> None:
    """Append ``[timestamp] message`` to the log; a log that cannot be opened is skipped."""
    try:
        with open(path, "a", encoding="utf-8") as handle:
            handle.write(f"[{timestamp()}] {message}\n")
    except OSError:
        return