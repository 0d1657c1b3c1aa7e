"""
Per-streamer enrichment from SullyGnome.

Workflow (one streamer at a time, in roster order):
    1) resolve the SullyGnome channel id from the Twitch name
       - unknown name → id stays empty, stop (stats stay 0)
    2) fetch the 30-day hours-streamed series and score it with weighted_hours()

Lookup failures are logged and swallowed here so one bad channel never
aborts the batch; the streamer simply ends up on the inactive list.
"""

from __future__ import annotations

from typing import Iterable, NamedTuple, Optional, Protocol, Sequence

from tqdm import tqdm

from secinfo.errors import LookupFailed
from secinfo.roster import Streamer
from secinfo.runlog import log


class Resolved(NamedTuple):
    sullygnome_id: str
    display_name: str = ""


class ChannelLookup(Protocol):
    def resolve_id(self, name: str) -> Optional[Resolved]: ...

    def fetch_series(self, sullygnome_id: str, name: str) -> Sequence[float]: ...


def weighted_hours(series: Iterable[Optional[float]]) -> float:
    """
    Sum of bucket * position (1-indexed), so recent days weigh more.

    >>> weighted_hours([0, 1, 2, 3, 0, 0, 0, 0, 0])
    20.0
    """
    return float(sum(float(v or 0) * i for i, v in enumerate(series, start=1)))


def enrich_streamer(streamer: Streamer, lookup: ChannelLookup) -> bool:
    """Fill sullygnome_id / thirty_day_stats in place. Returns True if an id is known."""
    name = streamer.name
    try:
        resolved = lookup.resolve_id(name)
    except LookupFailed as e:
        log(f"[warn] Error fetching UID for {name}: {e}")
        return bool(streamer.sullygnome_id)

    if resolved is None or not resolved.sullygnome_id:
        log(f"[info] streamer hasn't streamed in a while! username not found, check spelling: {name}, "
            f"check twitch: https://www.twitch.tv/{name}/schedule")
        return False

    streamer.sullygnome_id = resolved.sullygnome_id
    if resolved.display_name:
        streamer.name = resolved.display_name

    try:
        series = lookup.fetch_series(streamer.sullygnome_id, streamer.name)
    except LookupFailed as e:
        log(f"[warn] Error fetching stats for {streamer.name}: {e}")
        return True

    streamer.thirty_day_stats = weighted_hours(series)
    return True


def enrich_roster(roster: Iterable[Streamer], lookup: ChannelLookup, progress: bool = True) -> None:
    items = list(roster)
    for s in tqdm(items, desc="SullyGnome", unit="streamer", disable=not progress):
        # blank names are dropped on the next CSV write; never look them up
        if not s.name.strip(): continue
        if not enrich_streamer(s, lookup):
            log(f"[info] streamer has no SullyGnomeID: {s.name}")
