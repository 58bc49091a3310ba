from __future__ import annotations

import re
from dataclasses import dataclass

from bs4 import BeautifulSoup

from letterboxd_sync.models.diary import FeedItem, NormalizedEntry

TITLE_SEPARATOR = " - "
FULL_STAR = "★"
HALF_STAR = "½"

# Letterboxd titles look like: "Stand by Me, 1986 - ★★★★"
_TITLE_YEAR_RE = re.compile(r"^(.*),\s([0-9]{4})$")


@dataclass(frozen=True)
class ParsedTitle:
    title: str
    year: str | None
    stars: str | None


def parse_rss_title(raw_title: str | None) -> ParsedTitle:
    s = (raw_title or "").strip()
    parts = [part.strip() for part in s.split(TITLE_SEPARATOR)]
    left = parts[0]
    stars = parts[1] if len(parts) > 1 else ""

    match = _TITLE_YEAR_RE.match(left)
    title = match.group(1) if match else left
    return ParsedTitle(
        title=title or s,
        year=match.group(2) if match else None,
        stars=stars or None,
    )


def stars_to_rating(stars: str | None) -> float | None:
    """
    Sum star glyphs into a 0-5 rating.

    Unrated entries return None rather than 0 so the destination keeps its
    own default instead of showing a zero rating.
    """

    if not stars:
        return None
    value = 0.0
    for ch in stars:
        if ch == FULL_STAR:
            value += 1.0
        elif ch == HALF_STAR:
            value += 0.5
    return value or None


def poster_from_description(html: str | None) -> str | None:
    if not html:
        return None
    soup = BeautifulSoup(html, "html.parser")
    img = soup.find("img")
    if img is None:
        return None
    src = img.get("src")
    if isinstance(src, str) and src.strip():
        return src.strip()
    return None


def normalize_item(item: FeedItem) -> NormalizedEntry:
    parsed = parse_rss_title(item.title)
    return NormalizedEntry(
        title=parsed.title,
        year=parsed.year,
        rating=stars_to_rating(parsed.stars),
        fallback_poster_url=poster_from_description(item.description_html),
    )
