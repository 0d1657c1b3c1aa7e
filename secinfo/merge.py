# secinfo/merge.py
from __future__ import annotations

from typing import Iterable, Tuple

from secinfo.roster import Roster, Streamer


def route(streamer: Streamer) -> str:
    """'active' or 'inactive' for a freshly enriched streamer."""
    if not streamer.sullygnome_id:
        return "inactive"
    return "active" if streamer.is_active else "inactive"


def merge_rosters(fresh: Iterable[Streamer], carried_inactive: Iterable[Streamer]) -> Tuple[Roster, Roster]:
    """
    Split enriched streamers into (active, inactive) and append the carried
    inactive roster unchanged.

    Carried streamers are not re-scored; they stay inactive until someone moves
    them back into streamers.csv by hand. Names are NOT de-duplicated across
    the two sources: a streamer listed in both files shows up twice.
    """
    active: Roster = []
    inactive: Roster = []
    for s in fresh:
        (active if route(s) == "active" else inactive).append(s)
    for s in carried_inactive:
        s.was_inactive = True
        inactive.append(s)
    return active, inactive
