# secinfo/fileio.py
from __future__ import annotations

import os
from pathlib import Path


def write_text_atomic(path: Path, content: str) -> None:
    """Write via a sibling temp file + os.replace so readers never see half a file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_name(path.name + ".tmp")
    with open(tmp, "w", encoding="utf-8", newline="") as f:
        f.write(content)
    os.replace(tmp, path)


def read_text_or_empty(path: Path) -> str:
    path = Path(path)
    if not path.exists(): return ""
    return path.read_text(encoding="utf-8", errors="ignore")
