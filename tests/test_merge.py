from __future__ import annotations

from secinfo.merge import merge_rosters, route
from secinfo.roster import Streamer


def test_route_by_id_and_stats() -> None:
    assert route(Streamer("a", sullygnome_id="1", thirty_day_stats=3)) == "active"
    assert route(Streamer("b", sullygnome_id="1", thirty_day_stats=0)) == "inactive"
    assert route(Streamer("c", sullygnome_id="1", thirty_day_stats=-1)) == "inactive"


def test_missing_id_is_inactive_even_with_stats() -> None:
    assert route(Streamer("stale", sullygnome_id="", thirty_day_stats=50)) == "inactive"


def test_merge_appends_carried_inactive_unchanged() -> None:
    fresh = [
        Streamer("live", sullygnome_id="1", thirty_day_stats=4),
        Streamer("quiet", sullygnome_id="2", thirty_day_stats=0),
        Streamer("unknown"),
    ]
    carried = [Streamer("old", sullygnome_id="", thirty_day_stats=99)]

    active, inactive = merge_rosters(fresh, carried)

    assert [s.name for s in active] == ["live"]
    assert [s.name for s in inactive] == ["quiet", "unknown", "old"]
    assert inactive[-1].was_inactive is True
    assert inactive[-1].thirty_day_stats == 99
    assert not any(s.was_inactive for s in inactive[:2])


def test_merge_keeps_duplicates_across_sources() -> None:
    # Known limitation: a name in both CSVs is listed twice.
    fresh = [Streamer("Dup")]
    carried = [Streamer("dup")]
    _, inactive = merge_rosters(fresh, carried)
    assert [s.name for s in inactive] == ["Dup", "dup"]
