from __future__ import annotations

from dataclasses import dataclass

DEFAULT_STATUS = "watched"
DEFAULT_MEDIA_TYPE = "movie"
DEFAULT_FORMAT = "movie"
DEFAULT_GOALS = "certified cinephile"


@dataclass(frozen=True)
class FeedItem:
    """
    One `<item>` from the Letterboxd diary RSS feed.

    `link` is the canonical Letterboxd URL and doubles as the dedup key.
    """

    title: str
    link: str
    watched_date: str | None = None  # YYYY-MM-DD
    description_html: str = ""


@dataclass(frozen=True)
class NormalizedEntry:
    title: str
    year: str | None = None
    rating: float | None = None  # 0-5 in 0.5 steps; None means unrated
    fallback_poster_url: str | None = None


@dataclass(frozen=True)
class EnrichedEntry:
    normalized: NormalizedEntry
    director: str | None = None
    tmdb_poster_url: str | None = None
    tmdb_id: int | None = None

    @property
    def poster_url(self) -> str | None:
        return self.tmdb_poster_url or self.normalized.fallback_poster_url

    @property
    def is_enriched(self) -> bool:
        return self.tmdb_id is not None


@dataclass(frozen=True)
class DestinationRecord:
    """
    A diary page to be created in the Notion database.

    `None` on an optional field means "leave the property out of the write"
    (see `letterboxd_sync.repositories.diary_pages.build_page_properties`).
    """

    title: str
    letterboxd_url: str
    director: str | None = None
    watched_date: str | None = None
    rating: float | None = None
    poster_url: str | None = None
    status: str = DEFAULT_STATUS
    media_type: str = DEFAULT_MEDIA_TYPE
    format: str = DEFAULT_FORMAT
    goals: str = DEFAULT_GOALS

    @classmethod
    def from_entry(cls, item: FeedItem, entry: EnrichedEntry) -> DestinationRecord:
        return cls(
            title=entry.normalized.title,
            letterboxd_url=item.link,
            director=entry.director,
            watched_date=item.watched_date,
            rating=entry.normalized.rating,
            poster_url=entry.poster_url,
        )
