# secinfo/leaderboards/build_tables.py
"""
Rebuild index.md (active streamers) and inactive.md from the roster CSVs.

Workflow (build):
    1) Read streamers.csv (required) and inactive_streamers.csv (optional)
    2) For each active streamer: SullyGnome id + weighted 30-day hours
    3) Split into active (hours > 0) / inactive; carried inactive streamers
       are appended as-is, without a lookup
    4) Sort both by hours → active.json / inactive.json
    5) Rewrite both CSVs sorted by name
    6) Render the two tables into templates/*.tmpl.md

Replay mode (--replay or SECINFO_TEST=1) skips 1-5 and renders straight
from active.json / inactive.json.

Usage:
  secinfo [--root DIR] [--replay] [--log-file run.log]
  secinfo add <name> [--yt-url URL] [--inactive]
  secinfo remove <name> [--inactive]
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional

from secinfo import config
from secinfo.enrich import ChannelLookup, enrich_roster
from secinfo.errors import MalformedCSVError, TemplateAnchorError
from secinfo.fileio import read_text_or_empty, write_text_atomic
from secinfo.leaderboards.markdown import online_from_index, render, render_rows
from secinfo.merge import merge_rosters
from secinfo.ranking import roster_frame, sort_by_name, sort_by_stats
from secinfo.roster import (Roster, Streamer, append_to_csv, load_snapshot, read_roster,
                            remove_from_csv, save_snapshot, write_csv)
from secinfo.runlog import log, set_log_file


@dataclass(frozen=True)
class Paths:
    active_csv: Path
    inactive_csv: Path
    active_json: Path
    inactive_json: Path
    index_md: Path
    inactive_md: Path
    index_template: Path
    inactive_template: Path

    @classmethod
    def from_root(cls, root: Path) -> "Paths":
        root = Path(root)
        return cls(
            active_csv=root / config.ACTIVE_CSV,
            inactive_csv=root / config.INACTIVE_CSV,
            active_json=root / config.ACTIVE_JSON,
            inactive_json=root / config.INACTIVE_JSON,
            index_md=root / config.INDEX_MD,
            inactive_md=root / config.INACTIVE_MD,
            index_template=root / config.INDEX_TEMPLATE,
            inactive_template=root / config.INACTIVE_TEMPLATE,
        )


# =============================================================================
# HELPERS
# =============================================================================
def load_snapshot_or_empty(path: Path) -> Roster:
    try:
        return load_snapshot(path)
    except FileNotFoundError:
        log(f"[info] No snapshot at {path}; using an empty list.")
    except ValueError as e:
        log(f"[warn] Unreadable snapshot {path}: {e}")
    return []


def write_table(template_path: Path, anchor: str, rows: Iterable[str], out_path: Path) -> bool:
    """Render rows into the template and write out_path. Returns False (nothing written) on error."""
    if not template_path.exists():
        log(f"[error] Template not found: {template_path}")
        return False
    template = template_path.read_text(encoding="utf-8")
    try:
        content = render(template, anchor, rows, template_name=template_path.name)
    except TemplateAnchorError as e:
        log(f"[error] {e}; {out_path.name} left unchanged.")
        return False
    write_text_atomic(out_path, content)
    log(f"Wrote {out_path}")
    return True


def refresh_rosters(paths: Paths, lookup: Optional[ChannelLookup], progress: bool):
    fresh = read_roster(paths.active_csv, required=True)
    carried = read_roster(paths.inactive_csv, required=False)

    if lookup is None:
        from secinfo.scraping.sullygnome import SullyGnomeClient
        lookup = SullyGnomeClient()

    log(f"Checking {len(fresh)} streamers ({len(carried)} inactive carried over)...")
    enrich_roster(fresh, lookup, progress=progress)
    return merge_rosters(fresh, carried)


# =============================================================================
# COMMANDS
# =============================================================================
def run_build(root: Path, lookup: Optional[ChannelLookup] = None,
              replay: bool = False, progress: bool = True) -> int:
    paths = Paths.from_root(root)

    if replay:
        log("[info] Replay mode: rendering from JSON snapshots only.")
        active = load_snapshot_or_empty(paths.active_json)
        inactive = load_snapshot_or_empty(paths.inactive_json)
    else:
        try:
            active, inactive = refresh_rosters(paths, lookup, progress)
        except MalformedCSVError as e:
            log(f"Error parsing csv: {e}")
            return 1
        except (OSError, UnicodeDecodeError) as e:
            log(f"Error reading csv: {e}")
            return 1

    active = sort_by_stats(active)
    inactive = sort_by_stats(inactive)

    if not replay:
        save_snapshot(active, paths.active_json)
        save_snapshot(inactive, paths.inactive_json)
        write_csv(active, paths.active_csv)
        write_csv(inactive, paths.inactive_csv)

    # Live status comes from the index.md written by the previous run
    previous_index = read_text_or_empty(paths.index_md)
    active_rows = render_rows(active, online_from_index(previous_index))
    inactive_rows = render_rows(sort_by_name(inactive))

    ok = write_table(paths.index_template, config.INDEX_ANCHOR, active_rows, paths.index_md)
    ok = write_table(paths.inactive_template, config.INACTIVE_ANCHOR, inactive_rows, paths.inactive_md) and ok

    print_summary(active, inactive)
    return 0 if ok else 1


def print_summary(active: List[Streamer], inactive: List[Streamer]) -> None:
    log("\n================ SUMMARY ================")
    log(f"Active streamers:   {len(active)}")
    log(f"Inactive streamers: {len(inactive)}")
    if active:
        log(roster_frame(active).head(10).to_string(index=False))
    log("========================================")


def run_edit(root: Path, command: str, name: str, yt_url: str = "", inactive: bool = False) -> int:
    paths = Paths.from_root(root)
    target = paths.inactive_csv if inactive else paths.active_csv
    streamer = Streamer(name=name.strip(), yt_url=yt_url.strip())
    if not streamer.name:
        log("Streamer name is empty.")
        return 1
    try:
        if command == "add":
            changed = append_to_csv(target, streamer)
            log(f"Added {streamer.name} to {target.name}" if changed else f"{streamer.name} already in {target.name}")
        else:
            changed = remove_from_csv(target, streamer)
            log(f"Removed {streamer.name} from {target.name}" if changed else f"{streamer.name} not in {target.name}")
    except MalformedCSVError as e:
        log(f"Error parsing csv: {e}")
        return 1
    return 0


# =============================================================================
# MAIN
# =============================================================================
def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Build the infosec streamer tables.")
    ap.add_argument("--root", type=Path, default=Path("."), help="Directory holding the CSVs, JSON and markdown.")
    ap.add_argument("--replay", action="store_true",
                    help=f"Render from active.json/inactive.json only (also via {config.TEST_ENV_VAR}).")
    ap.add_argument("--no-progress", action="store_true", help="Hide the progress bar.")
    ap.add_argument("--log-file", type=Path, help="Also append status lines to this file.")

    sub = ap.add_subparsers(dest="command")
    sub.add_parser("build", help="Refresh stats and rewrite CSV/JSON/markdown (default).")
    add = sub.add_parser("add", help="Add a streamer to a roster CSV.")
    add.add_argument("name")
    add.add_argument("--yt-url", default="")
    add.add_argument("--inactive", action="store_true", help="Edit inactive_streamers.csv instead.")
    rm = sub.add_parser("remove", help="Remove a streamer from a roster CSV.")
    rm.add_argument("name")
    rm.add_argument("--inactive", action="store_true", help="Edit inactive_streamers.csv instead.")
    return ap.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    root = args.root.expanduser().resolve()
    if args.log_file:
        set_log_file(args.log_file.expanduser().resolve())
        log(f"===== Run started at {datetime.now()} =====")

    if args.command in ("add", "remove"):
        return run_edit(root, args.command, args.name, getattr(args, "yt_url", ""), args.inactive)

    replay = args.replay or config.replay_requested()
    return run_build(root, replay=replay, progress=not args.no_progress)


if __name__ == "__main__":
    sys.exit(main())
