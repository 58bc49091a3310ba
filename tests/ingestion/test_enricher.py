from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from letterboxd_sync.integrations.tmdb.client import TmdbClientError
from letterboxd_sync.models.diary import NormalizedEntry

ENTRY = NormalizedEntry(
    title="Stand by Me",
    year="1986",
    rating=4.0,
    fallback_poster_url="https://a.ltrbxd.com/x.jpg",
)


def test_enrichment_is_noop_without_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    from letterboxd_sync.ingestion import enricher as mod

    search_mock = MagicMock()
    monkeypatch.setattr(mod, "search_movie", search_mock)

    enriched = mod.enrich_entry(ENTRY, api_key=None)

    search_mock.assert_not_called()
    assert enriched.director is None
    assert enriched.poster_url == "https://a.ltrbxd.com/x.jpg"
    assert not enriched.is_enriched


def test_enrichment_uses_tmdb_director_and_poster(monkeypatch: pytest.MonkeyPatch) -> None:
    from letterboxd_sync.ingestion import enricher as mod

    search_mock = MagicMock(return_value={"id": 235, "poster_path": "/poster.jpg"})
    director_mock = MagicMock(return_value="Rob Reiner")
    monkeypatch.setattr(mod, "search_movie", search_mock)
    monkeypatch.setattr(mod, "fetch_movie_director", director_mock)

    enriched = mod.enrich_entry(ENTRY, api_key="fake")

    search_mock.assert_called_once_with("Stand by Me", "1986", api_key="fake", session=None)
    director_mock.assert_called_once_with(235, api_key="fake", session=None)
    assert enriched.director == "Rob Reiner"
    assert enriched.poster_url == "https://image.tmdb.org/t/p/w500/poster.jpg"
    assert enriched.tmdb_id == 235


def test_match_without_poster_keeps_fallback(monkeypatch: pytest.MonkeyPatch) -> None:
    from letterboxd_sync.ingestion import enricher as mod

    monkeypatch.setattr(mod, "search_movie", lambda *args, **kwargs: {"id": 235, "poster_path": None})
    monkeypatch.setattr(mod, "fetch_movie_director", lambda *args, **kwargs: None)

    enriched = mod.enrich_entry(ENTRY, api_key="fake")

    assert enriched.director is None
    assert enriched.poster_url == "https://a.ltrbxd.com/x.jpg"


def test_no_match_leaves_entry_unenriched(monkeypatch: pytest.MonkeyPatch) -> None:
    from letterboxd_sync.ingestion import enricher as mod

    director_mock = MagicMock()
    monkeypatch.setattr(mod, "search_movie", lambda *args, **kwargs: None)
    monkeypatch.setattr(mod, "fetch_movie_director", director_mock)

    enriched = mod.enrich_entry(ENTRY, api_key="fake")

    director_mock.assert_not_called()
    assert enriched.director is None
    assert enriched.poster_url == "https://a.ltrbxd.com/x.jpg"


def test_search_failure_degrades_gracefully(monkeypatch: pytest.MonkeyPatch) -> None:
    from letterboxd_sync.ingestion import enricher as mod

    monkeypatch.setattr(mod, "search_movie", MagicMock(side_effect=TmdbClientError("boom", status_code=503)))

    enriched = mod.enrich_entry(ENTRY, api_key="fake")

    assert enriched.director is None
    assert enriched.poster_url == "https://a.ltrbxd.com/x.jpg"


def test_credits_failure_keeps_tmdb_poster(monkeypatch: pytest.MonkeyPatch) -> None:
    from letterboxd_sync.ingestion import enricher as mod

    monkeypatch.setattr(mod, "search_movie", lambda *args, **kwargs: {"id": 235, "poster_path": "/poster.jpg"})
    monkeypatch.setattr(mod, "fetch_movie_director", MagicMock(side_effect=TmdbClientError("timeout")))

    enriched = mod.enrich_entry(ENTRY, api_key="fake")

    assert enriched.director is None
    assert enriched.poster_url == "https://image.tmdb.org/t/p/w500/poster.jpg"
