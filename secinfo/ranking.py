# secinfo/ranking.py
# Two stable orderings over a roster:
#   - by 30-day stats, descending (active table + JSON snapshots)
#   - by name, case-insensitive (CSV files + inactive table)
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List

import pandas as pd

if TYPE_CHECKING:
    from secinfo.roster import Streamer


def _reorder(items: list, frame: pd.DataFrame) -> list:
    return [items[i] for i in frame["_pos"].tolist()]


def sort_by_stats(roster: Iterable["Streamer"]) -> List["Streamer"]:
    items = list(roster)
    if not items: return []
    df = pd.DataFrame({
        "_pos": range(len(items)),
        "stats": [float(s.thirty_day_stats) for s in items],
    })
    # mergesort keeps equal stats in their incoming order
    df = df.sort_values(by="stats", ascending=False, kind="mergesort")
    return _reorder(items, df)


def sort_by_name(roster: Iterable["Streamer"]) -> List["Streamer"]:
    items = list(roster)
    if not items: return []
    df = pd.DataFrame({
        "_pos": range(len(items)),
        "_key": [s.name.lower() for s in items],
    })
    df = df.sort_values(by="_key", ascending=True, kind="mergesort")
    return _reorder(items, df)


def roster_frame(roster: Iterable["Streamer"]) -> pd.DataFrame:
    """Tabular view used for run summaries."""
    rows = [{"Streamer": s.name, "Hours (weighted)": round(float(s.thirty_day_stats), 1),
             "SullyGnome ID": s.sullygnome_id} for s in roster]
    return pd.DataFrame(rows, columns=["Streamer", "Hours (weighted)", "SullyGnome ID"])
