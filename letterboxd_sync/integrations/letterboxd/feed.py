from __future__ import annotations

import io
import logging
from typing import Any, Mapping
from xml.sax import SAXException

import feedparser
import requests

from letterboxd_sync.models.diary import FeedItem

logger = logging.getLogger(__name__)

_DEFAULT_HEADERS = {
    "accept": "application/rss+xml, application/xml;q=0.9, */*;q=0.8",
    "user-agent": "Mozilla/5.0 (compatible; letterboxd-sync)",
}

# feedparser flattens namespaced elements to `<prefix>_<localname>` (lowercased).
WATCHED_DATE_KEY = "letterboxd_watcheddate"


class FeedError(RuntimeError):
    pass


class FeedFetchError(FeedError):
    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class FeedParseError(FeedError):
    pass


def fetch_feed_xml(
    url: str,
    *,
    session: requests.Session | None = None,
    timeout_seconds: float = 20.0,
) -> bytes:
    """
    Download the raw feed document.

    Returns bytes rather than text so feedparser can honour the XML encoding
    declaration (star glyphs get mangled if requests guesses latin-1).
    """

    session = session or requests.Session()
    try:
        resp = session.get(url, headers=_DEFAULT_HEADERS, timeout=timeout_seconds)
    except requests.RequestException as exc:
        raise FeedFetchError(f"Fetch failed for {url}: {exc}") from exc

    if not 200 <= resp.status_code < 300:
        raise FeedFetchError(f"Fetch failed {resp.status_code} for {url}", status_code=resp.status_code)
    return resp.content


def _entry_text(entry: Mapping[str, Any], key: str) -> str:
    value = entry.get(key)
    return value.strip() if isinstance(value, str) else ""


def _entry_link(entry: Mapping[str, Any]) -> str:
    # Only a real <link> element; feedparser also copies a permalink <guid> into `link`.
    for link in entry.get("links") or []:
        if not isinstance(link, Mapping) or link.get("rel", "alternate") != "alternate":
            continue
        href = link.get("href")
        if isinstance(href, str) and href.strip():
            return href.strip()
    return ""


def _entry_description(entry: Mapping[str, Any]) -> str:
    for key in ("summary", "description"):
        value = entry.get(key)
        if isinstance(value, str) and value:
            return value
    return ""


def parse_feed_items(xml: str | bytes) -> list[FeedItem]:
    """
    Parse an RSS document into `FeedItem`s, preserving feed order.

    Items without a `<link>` are dropped: they can neither be deduplicated nor
    written. Malformed XML is rejected even when feedparser recovered some
    entries from it.
    """

    if isinstance(xml, str):
        xml = xml.encode("utf-8")
    # A stream is never mistaken for a URL or filename by feedparser.
    parsed = feedparser.parse(io.BytesIO(xml))
    entries = list(parsed.get("entries") or [])

    bozo_exception = parsed.get("bozo_exception")
    if parsed.get("bozo") and isinstance(bozo_exception, SAXException):
        raise FeedParseError(f"Feed is not well-formed XML: {bozo_exception}")
    if not parsed.get("version") and not entries:
        raise FeedParseError("Document is not an RSS/Atom feed.")

    items: list[FeedItem] = []
    for entry in entries:
        link = _entry_link(entry)
        if not link:
            continue
        items.append(
            FeedItem(
                title=_entry_text(entry, "title"),
                link=link,
                watched_date=_entry_text(entry, WATCHED_DATE_KEY) or None,
                description_html=_entry_description(entry),
            )
        )

    dropped = len(entries) - len(items)
    if dropped:
        logger.debug(f"Dropped {dropped} feed item(s) without a link")
    return items


def read_feed(url: str, *, session: requests.Session | None = None) -> list[FeedItem]:
    xml = fetch_feed_xml(url, session=session)
    items = parse_feed_items(xml)
    logger.info(f"Fetched {len(items)} item(s) from feed")
    return items
