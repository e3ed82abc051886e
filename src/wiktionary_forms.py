#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Attested Turkish forms from English Wiktionary.

Used as an external oracle by scripts/wiktionary_qc.py: fetch a lemma's
page (e.g. "yapmak"), read its conjugation/declension tables and return
every word form listed there.
"""

import json
import re
import time
import unicodedata
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, Set

import requests
from bs4 import BeautifulSoup
from requests.adapters import HTTPAdapter
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from urllib3.util.retry import Retry

# ------------------------------------------------------------
# Config (polite crawling)
# ------------------------------------------------------------
WIKI_API_EN = "https://en.wiktionary.org/w/api.php"
UA = (
    "TurkishInflectionQC/1.0 "
    "(+academic research on Turkish agglutinative morphology)"
)
THROTTLE_DELAY = 0.20
TIMEOUT = 30
MAXLAG = "5"
MAX_RETRY_AFTER = 10.0

CACHE_PATH = (
    Path(__file__).resolve().parent.parent / "data" / "wiktionary_cache.json"
)

TABLE_SELECTOR = "table.inflection-table, div.NavContent table"

# A form is a run of Turkish letters; table cells also carry
# labels, slashes and footnote markers
FORM_RE = re.compile(r"[a-zçğıöşüâîû]+")


# ------------------------------------------------------------
# Session + cache
# ------------------------------------------------------------
def _build_session() -> requests.Session:
    """
    Session for the MediaWiki API.

    urllib3 only retries dropped connections and read timeouts here;
    throttling responses are handled by get().
    """
    session = requests.Session()
    transport_retries = Retry(total=3, backoff_factor=0.5)
    session.mount("https://", HTTPAdapter(max_retries=transport_retries))
    session.headers["User-Agent"] = UA
    return session


class Throttled(requests.RequestException):
    """The API asked the client to slow down (429/503 or maxlag)."""


_SESSION = _build_session()
HTML_CACHE: Dict[str, str] = {}
cache_dirty = False


def load_disk_cache(path: Path = CACHE_PATH) -> None:
    """Load the persistent page cache."""
    global HTML_CACHE  # pylint: disable=global-statement
    if not path.exists():
        return
    try:
        with open(path, "r", encoding="utf-8") as f:
            HTML_CACHE = json.load(f)
        print(
            f"[wiktionary_forms] Loaded {len(HTML_CACHE)} cached pages "
            "from disk"
        )
    except (json.JSONDecodeError, OSError) as e:
        print(f"[wiktionary_forms] Warning: Could not load cache: {e}")
        HTML_CACHE = {}


def save_disk_cache(path: Path = CACHE_PATH) -> None:
    """Write the page cache back if anything was fetched."""
    global cache_dirty  # pylint: disable=global-statement
    if not cache_dirty:
        return
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(HTML_CACHE, f, ensure_ascii=False, indent=2)
        cache_dirty = False
        print(f"[wiktionary_forms] Saved {len(HTML_CACHE)} pages to disk cache")
    except OSError as exc:
        print(f"[wiktionary_forms] Warning: Could not save cache: {exc}")


def retry_after(headers: Mapping[str, str]) -> float:
    """Seconds to wait from a Retry-After header, capped; 2s if absent."""
    try:
        return min(MAX_RETRY_AFTER, float(headers.get("Retry-After", "2")))
    except ValueError:
        return 2.0


@retry(
    reraise=True,
    stop=stop_after_attempt(4),
    wait=wait_exponential(multiplier=1, min=1, max=10),
    retry=retry_if_exception_type(requests.RequestException),
)
def get(url: str, params: Mapping[str, Any]) -> dict[str, Any]:
    """
    GET a MediaWiki API endpoint and decode its JSON body.

    Raises:
        Throttled: rate limited or server lagging; retried with backoff
        requests.RequestException: any other transport or HTTP error
    """
    r = _SESSION.get(url, params={"maxlag": MAXLAG, **params}, timeout=TIMEOUT)
    if r.status_code in (429, 503):
        time.sleep(retry_after(r.headers))
        raise Throttled(f"HTTP {r.status_code} from {url}")
    r.raise_for_status()
    data = r.json()
    if data.get("error", {}).get("code") == "maxlag":
        raise Throttled(data["error"].get("info", "maxlag"))
    return data


# ------------------------------------------------------------
# Pages and forms
# ------------------------------------------------------------
def normalize_form(s: str) -> str:
    """NFC, lowercase, trimmed."""
    return unicodedata.normalize("NFC", s or "").strip().lower()


def fetch_page_html(title: str) -> str:
    """
    Rendered HTML of a Wiktionary page, "" if the page does not exist.
    """
    global cache_dirty  # pylint: disable=global-statement
    title = normalize_form(title)
    if title in HTML_CACHE:
        return HTML_CACHE[title]
    data = get(
        WIKI_API_EN,
        {
            "action": "parse",
            "page": title,
            "prop": "text",
            "format": "json",
            "formatversion": "2",
            "redirects": "1",
        },
    )
    time.sleep(THROTTLE_DELAY)
    if "error" in data:
        # missingtitle and friends: remember the miss
        html = ""
    else:
        html = data.get("parse", {}).get("text", "") or ""
    HTML_CACHE[title] = html
    cache_dirty = True
    return html


def extract_forms_from_html(html: str) -> Set[str]:
    """
    Collect word forms from every inflection table in a page.

    Cells like "yapıyorum / yapıyom" or "yapardım¹" yield each form
    separately; header cells and footnote markers are ignored.
    """
    if not html:
        return set()
    soup = BeautifulSoup(html, "html.parser")
    forms: Set[str] = set()
    for table in soup.select(TABLE_SELECTOR):
        for cell in table.find_all("td"):
            text = normalize_form(cell.get_text(" ", strip=True))
            forms.update(FORM_RE.findall(text))
    return forms


def attested_forms(title: str) -> Set[str]:
    """All table forms listed on the page for a lemma."""
    return extract_forms_from_html(fetch_page_html(title))
