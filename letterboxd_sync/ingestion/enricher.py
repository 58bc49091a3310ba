from __future__ import annotations

import logging

import requests

from letterboxd_sync.integrations.tmdb.client import (
    TmdbClientError,
    build_poster_url,
    fetch_movie_director,
    search_movie,
)
from letterboxd_sync.models.diary import EnrichedEntry, NormalizedEntry

logger = logging.getLogger(__name__)


def _coerce_tmdb_id(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def enrich_entry(
    entry: NormalizedEntry,
    *,
    api_key: str | None,
    session: requests.Session | None = None,
) -> EnrichedEntry:
    """
    Look up director and poster on TMDb.

    A missing key, no search hit, or any TMDb failure leaves the entry
    unenriched; a credits failure after a successful search keeps the poster.
    """

    if not api_key:
        return EnrichedEntry(normalized=entry)

    try:
        hit = search_movie(entry.title, entry.year, api_key=api_key, session=session)
    except TmdbClientError as exc:
        logger.warning(f"TMDb search failed for {entry.title!r} ({entry.year or 'no year'}): {exc}")
        return EnrichedEntry(normalized=entry)

    tmdb_id = _coerce_tmdb_id((hit or {}).get("id"))
    if tmdb_id is None:
        logger.debug(f"No TMDb match for {entry.title!r} ({entry.year or 'no year'})")
        return EnrichedEntry(normalized=entry)

    director: str | None = None
    try:
        director = fetch_movie_director(tmdb_id, api_key=api_key, session=session)
    except TmdbClientError as exc:
        logger.warning(f"TMDb credits lookup failed for tmdb_id={tmdb_id}: {exc}")

    return EnrichedEntry(
        normalized=entry,
        director=director,
        tmdb_poster_url=build_poster_url(hit.get("poster_path")),
        tmdb_id=tmdb_id,
    )
