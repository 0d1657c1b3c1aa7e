"""
Script: sullygnome.py

Purpose:
    Look up Twitch channels on SullyGnome and pull their 30-day hours-streamed
    chart (sorry for lightly gathering a small amount of info every 24 hours).

Workflow:
    1) GET /channel/<name>/30/activitystats
         - page must mention the name, otherwise the channel is unknown or
           hasn't streamed recently
         - display name from <span class="PageHeaderMiddleWithImageHeaderP1">
         - channel id from the inline ``var PageInfo = {...};`` script
    2) GET the channelhourstreams bar-chart config for that id
         - data.datasets[0].data is one bucket per day, oldest first

Dependencies:
    - requests, BeautifulSoup4
"""

from __future__ import annotations

import json
import re
from typing import List, Optional

import requests
from bs4 import BeautifulSoup

from secinfo import config
from secinfo.enrich import Resolved
from secinfo.errors import DecodeFailure, RemoteUnavailable

PAGE_INFO_RE   = re.compile(r"var PageInfo = ([^;]*);")
HEADER_CLASS   = "PageHeaderMiddleWithImageHeaderP1"


class SullyGnomeClient:
    def __init__(self, session: Optional[requests.Session] = None, timeout: float = config.REQUEST_TIMEOUT):
        self.session = session or requests.Session()
        self.timeout = timeout
        self.headers = {"user-agent": config.USER_AGENT}

    def _get(self, url: str) -> requests.Response:
        try:
            r = self.session.get(url, headers=self.headers, timeout=self.timeout)
            r.raise_for_status()
        except requests.RequestException as e:
            raise RemoteUnavailable(f"{url}: {e}") from e
        return r

    def resolve_id(self, name: str) -> Optional[Resolved]:
        url = config.CHANNEL_URL.format(name=name)
        html = self._get(url).text
        if name not in html:
            return None

        soup = BeautifulSoup(html, "html.parser")
        span = soup.find("span", class_=HEADER_CLASS)
        display = span.get_text(strip=True) if span else ""

        m = PAGE_INFO_RE.search(html)
        if not m:
            raise DecodeFailure(f"no PageInfo on {url}")
        try:
            info = json.loads(m.group(1))
            uid = "%.0f" % float(info["id"])
        except (ValueError, KeyError, TypeError) as e:
            raise DecodeFailure(f"bad PageInfo on {url}: {e}") from e
        return Resolved(sullygnome_id=uid, display_name=display)

    def fetch_series(self, sullygnome_id: str, name: str) -> List[float]:
        url = config.STATS_URL.format(uid=sullygnome_id, name=name)
        r = self._get(url)
        try:
            data = r.json()["data"]["datasets"][0]["data"]
            return [float(v or 0) for v in data]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise DecodeFailure(f"bad stats payload for {name}: {e}") from e
