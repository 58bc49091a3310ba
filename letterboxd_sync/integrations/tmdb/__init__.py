"""
TMDb integration clients.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from letterboxd_sync.integrations.tmdb.client import (
        TmdbClientError,
        build_poster_url,
        fetch_movie_credits,
        fetch_movie_director,
        search_movie,
    )

__all__ = [
    "TmdbClientError",
    "build_poster_url",
    "fetch_movie_credits",
    "fetch_movie_director",
    "search_movie",
]


def __getattr__(name: str):
    if name in __all__:
        from letterboxd_sync.integrations.tmdb import client

        return getattr(client, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
