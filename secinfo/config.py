# secinfo/config.py
from __future__ import annotations

import os

# =============================================================================
# CONFIG DEFAULTS
# =============================================================================
ACTIVE_CSV        = "streamers.csv"
INACTIVE_CSV      = "inactive_streamers.csv"
ACTIVE_JSON       = "active.json"
INACTIVE_JSON     = "inactive.json"
INDEX_MD          = "index.md"
INACTIVE_MD       = "inactive.md"
INDEX_TEMPLATE    = "templates/index.tmpl.md"
INACTIVE_TEMPLATE = "templates/inactive.tmpl.md"

# Table separators the generated rows are inserted after
INDEX_ANCHOR    = "---: | --- | :--- | :---\n"
INACTIVE_ANCHOR = "--: | ---\n"

ONLINE_GLYPH = "🟢"

# Replay mode: render markdown from active.json/inactive.json only
TEST_ENV_VAR = "SECINFO_TEST"

# SullyGnome
SULLYGNOME_BASE  = "https://sullygnome.com"
CHANNEL_URL      = SULLYGNOME_BASE + "/channel/{name}/30/activitystats"
STATS_URL        = (SULLYGNOME_BASE + "/api/charts/barcharts/getconfig/channelhourstreams/30/"
                    "{uid}/{name}/%20/%20/0/0/%20/0/0/")
USER_AGENT       = "Mozilla/5.0 (X11; Ubuntu; Linux x86_64; rv:99.0) Gecko/20100101 Firefox/99.0"
REQUEST_TIMEOUT  = 30  # seconds


def replay_requested(environ=None) -> bool:
    env = os.environ if environ is None else environ
    return bool(env.get(TEST_ENV_VAR, ""))
