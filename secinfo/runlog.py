# secinfo/runlog.py
# Console status lines, optionally mirrored to a run log file.
from __future__ import annotations

from pathlib import Path
from typing import Optional

LOG_FILE: Optional[Path] = None


def set_log_file(path: Optional[Path]) -> None:
    global LOG_FILE
    LOG_FILE = Path(path) if path else None


def log(message: str) -> None:
    """Print message to console and append to the log file (if any)."""
    print(message, flush=True)
    if LOG_FILE is not None:
        with open(LOG_FILE, "a", encoding="utf-8") as f:
            f.write(message + "\n")
