"""
Module: roster.py

Purpose:
    The Streamer record and its two persisted views:
      - CSV roster files (``name,yt_url`` per line, human-edited, name-sorted)
      - JSON snapshots (machine cache of the last computed stats)

CSV format:
    - one streamer per line, split on the FIRST comma only
    - the YouTube url may be empty (``name,``)
    - blank lines are ignored on read
    - written sorted by name (case-insensitive), no header, no trailing newline
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Iterable, List

from secinfo.errors import MalformedCSVError
from secinfo.fileio import write_text_atomic
from secinfo.ranking import sort_by_name

# JSON keys written by earlier releases of the tracker
LEGACY_KEYS = {
    "Name": "name",
    "YTURL": "yt_url",
    "SullyGnomeID": "sullygnome_id",
    "ThirtyDayStats": "thirty_day_stats",
}


@dataclass
class Streamer:
    name: str
    yt_url: str = ""
    sullygnome_id: str = ""
    thirty_day_stats: float = 0.0
    # Only set when the streamer is currently live; never persisted
    lang: str = field(default="", compare=False)
    # True for records carried over from inactive_streamers.csv
    was_inactive: bool = field(default=False, compare=False)

    @property
    def key(self) -> str:
        return self.name.lower()

    @property
    def is_active(self) -> bool:
        return self.thirty_day_stats > 0

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "yt_url": self.yt_url,
            "sullygnome_id": self.sullygnome_id,
            "thirty_day_stats": float(self.thirty_day_stats),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Streamer":
        norm = {LEGACY_KEYS.get(k, k): v for k, v in data.items()}
        stats = norm.get("thirty_day_stats") or 0
        return cls(
            name=str(norm.get("name") or ""),
            yt_url=str(norm.get("yt_url") or ""),
            sullygnome_id=str(norm.get("sullygnome_id") or ""),
            thirty_day_stats=float(stats),
        )


Roster = List[Streamer]


# =============================================================================
# MEMBERSHIP
# =============================================================================
def contains_streamer(roster: Iterable[Streamer], streamer: Streamer) -> bool:
    return any(s.key == streamer.key for s in roster)


def remove_streamer(roster: Iterable[Streamer], streamer: Streamer) -> Roster:
    return [s for s in roster if s.key != streamer.key]


# =============================================================================
# CSV
# =============================================================================
def parse_csv(text: str) -> Roster:
    """
    Parse roster text into Streamers (name + yt_url only).

    Raises:
        MalformedCSVError: a non-blank line has no comma. The error carries the
        whole offending text and nothing is returned.
    """
    out: Roster = []
    for line in text.split("\n"):
        line = line.strip()
        if not line: continue
        name, sep, url = line.partition(",")
        if not sep:
            raise MalformedCSVError(text)
        out.append(Streamer(name=name, yt_url=url))
    return out


def build_csv_content(roster: Iterable[Streamer]) -> str:
    lines = []
    for s in sort_by_name(roster):
        name = s.name.strip()
        if not name: continue
        lines.append(f"{name},{s.yt_url.strip()}")
    return "\n".join(lines)


def open_csv(path: Path) -> IO[str]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"CSV not found: {path}")
    return open(path, encoding="utf-8-sig")


def parse_streamers(f: IO[str]) -> Roster:
    return parse_csv(f.read())


def read_roster(path: Path, required: bool = True) -> Roster:
    """
    Load a roster file.

    A missing file is an error only when ``required``; an empty or
    whitespace-only file is always an empty roster.
    """
    try:
        f = open_csv(path)
    except FileNotFoundError:
        if required:
            raise
        return []
    with f:
        return parse_streamers(f)


def read_csv_file(path: Path) -> Roster:
    """Roster for in-place edits: an absent or empty file is an empty roster."""
    path = Path(path)
    if not path.exists(): return []
    text = path.read_text(encoding="utf-8-sig")
    if not text: return []
    return parse_csv(text)


def write_csv(roster: Iterable[Streamer], path: Path) -> None:
    write_text_atomic(Path(path), build_csv_content(roster))


def append_to_csv(path: Path, streamer: Streamer) -> bool:
    """Add ``streamer`` unless already listed. Returns True if the file changed."""
    roster = read_csv_file(path)
    if contains_streamer(roster, streamer):
        return False
    roster.append(streamer)
    write_csv(roster, path)
    return True


def remove_from_csv(path: Path, streamer: Streamer) -> bool:
    roster = read_csv_file(path)
    kept = remove_streamer(roster, streamer)
    write_csv(kept, path)
    return len(kept) != len(roster)


# =============================================================================
# JSON SNAPSHOTS
# =============================================================================
def save_snapshot(roster: Iterable[Streamer], path: Path) -> None:
    payload = [s.to_dict() for s in roster]
    write_text_atomic(Path(path), json.dumps(payload, indent=2, ensure_ascii=False))


def load_snapshot(path: Path) -> Roster:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    # Older snapshots wrapped the list as {"Streamers": [...]}
    if isinstance(data, dict):
        data = data.get("Streamers") or data.get("streamers") or []
    if not isinstance(data, list):
        raise ValueError(f"snapshot is not a list of streamers: {path}")
    return [Streamer.from_dict(d) for d in data if isinstance(d, dict)]
