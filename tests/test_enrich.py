from __future__ import annotations

from fakes import FakeLookup

from secinfo.enrich import enrich_roster, enrich_streamer, weighted_hours
from secinfo.roster import Streamer


def test_weighted_hours_weights_recent_days() -> None:
    assert weighted_hours([0, 1, 2, 3, 0, 0, 0, 0, 0]) == 20.0
    assert weighted_hours([]) == 0.0
    assert weighted_hours([1.5, None, 2]) == 1.5 + 0 + 6


def test_enrich_sets_id_stats_and_display_name() -> None:
    lookup = FakeLookup({"security_live": ("12345", "Security_Live", [0, 1, 2, 3])})
    s = Streamer("security_live")
    assert enrich_streamer(s, lookup)
    assert (s.name, s.sullygnome_id, s.thirty_day_stats) == ("Security_Live", "12345", 20.0)
    assert lookup.fetched == [("12345", "Security_Live")]


def test_enrich_unknown_name_stops_after_resolve() -> None:
    lookup = FakeLookup({})
    s = Streamer("fakeus3r")
    assert not enrich_streamer(s, lookup)
    assert s.sullygnome_id == "" and s.thirty_day_stats == 0
    assert lookup.fetched == []


def test_enrich_resolve_failure_is_absorbed(capsys) -> None:
    lookup = FakeLookup({}, unreachable=["down"])
    s = Streamer("down")
    assert not enrich_streamer(s, lookup)
    assert s.sullygnome_id == ""
    assert "Error fetching UID for down" in capsys.readouterr().out


def test_enrich_stats_failure_keeps_id_and_zero_stats() -> None:
    lookup = FakeLookup({"flaky": ("7", "Flaky", [9])}, bad_stats=["flaky"])
    s = Streamer("flaky")
    assert enrich_streamer(s, lookup)
    assert s.sullygnome_id == "7"
    assert s.thirty_day_stats == 0


def test_enrich_roster_is_sequential_in_roster_order() -> None:
    lookup = FakeLookup({"b": ("2", "", [1]), "a": ("1", "", [2])}, unreachable=["c"])
    roster = [Streamer("b"), Streamer("c"), Streamer("a")]
    enrich_roster(roster, lookup, progress=False)
    assert lookup.resolved == ["b", "c", "a"]
    assert [s.thirty_day_stats for s in roster] == [1.0, 0.0, 2.0]


def test_enrich_roster_skips_blank_names() -> None:
    lookup = FakeLookup({"b": ("2", "", [1])})
    roster = [Streamer("", "https://yt/x"), Streamer("  "), Streamer("b")]
    enrich_roster(roster, lookup, progress=False)
    assert lookup.resolved == ["b"]
    assert roster[0].sullygnome_id == "" and roster[0].thirty_day_stats == 0
