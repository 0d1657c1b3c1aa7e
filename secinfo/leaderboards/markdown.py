# secinfo/leaderboards/markdown.py
# Markdown rows for index.md (active) and inactive.md, inserted into a template
# right after the table separator line ("anchor").
#
# Row shapes:
#   active, live:     🟢 | `name` | links | lang
#   active, offline:  &nbsp; | `name` | links |
#   inactive:         `name` | links
from __future__ import annotations

from typing import Callable, Iterable, List, Optional

from secinfo import config
from secinfo.errors import TemplateAnchorError
from secinfo.roster import Streamer

TWITCH_LINK  = '[<i class="fab fa-twitch" style="color:#9146FF"></i>](https://www.twitch.tv/{name})'
YOUTUBE_LINK = '[<i class="fab fa-youtube" style="color:#C00"></i>]({url})'

OnlinePredicate = Callable[[Streamer], bool]


def platform_links(s: Streamer) -> str:
    links = TWITCH_LINK.format(name=s.name) + " &nbsp;"
    if s.yt_url:
        links += " " + YOUTUBE_LINK.format(url=s.yt_url)
    return links


def markdown_line(s: Streamer, online: bool) -> str:
    links = platform_links(s)
    if s.is_active:
        if online:
            return f"{config.ONLINE_GLYPH} | `{s.name}` | {links} | {s.lang}\n"
        return f"&nbsp; | `{s.name}` | {links} |\n"
    return f"`{s.name}` | {links}\n"


def online_now(s: Streamer, index_text: str) -> bool:
    """
    True if some line of the previously rendered index.md mentions the
    streamer AND carries the live glyph. The last two characters of that line
    are kept as the streamer's language tag.

    Plain substring match per line: a name that is contained in another
    streamer's name (or in static page text next to a glyph) can false-positive.
    """
    for line in index_text.split("\n"):
        if s.name in line and config.ONLINE_GLYPH in line:
            s.lang = line[-2:]
            return True
    return False


def online_from_index(index_text: str) -> OnlinePredicate:
    return lambda s: online_now(s, index_text)


def never_online(_: Streamer) -> bool:
    return False


def render_rows(roster: Iterable[Streamer], online: Optional[OnlinePredicate] = None) -> List[str]:
    is_online = online or never_online
    return [markdown_line(s, is_online(s)) for s in roster if s.name.strip()]


def render(template: str, anchor: str, rows: Iterable[str], template_name: str = "template") -> str:
    """Insert rows right after the first occurrence of ``anchor``."""
    i = template.find(anchor)
    if i < 0:
        raise TemplateAnchorError(anchor, template_name)
    cut = i + len(anchor)
    return template[:cut] + "".join(rows) + template[cut:]
