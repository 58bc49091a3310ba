from __future__ import annotations

import os
from typing import Any, Mapping

import requests

TMDB_API_BASE_URL = "https://api.themoviedb.org/3"
TMDB_POSTER_BASE_URL = "https://image.tmdb.org/t/p/w500"


class TmdbClientError(RuntimeError):
    def __init__(self, message: str, *, status_code: int | None = None, body_snippet: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body_snippet = body_snippet


def _require_api_key(api_key: str | None) -> str:
    resolved = (api_key or os.getenv("TMDB_API_KEY") or "").strip()
    if not resolved:
        raise RuntimeError("TMDB_API_KEY is not set.")
    return resolved


def _request_json(
    session: requests.Session,
    url: str,
    *,
    params: Mapping[str, Any] | None = None,
    timeout_seconds: float = 20.0,
) -> dict[str, Any]:
    # Single attempt: the sync job has no retry policy.
    headers = {"accept": "application/json"}
    try:
        resp = session.get(url, params=params, headers=headers, timeout=timeout_seconds)
    except requests.RequestException as exc:
        raise TmdbClientError(f"TMDb request failed: {exc}") from exc

    if resp.status_code != 200:
        raise TmdbClientError(
            f"TMDb request failed with HTTP {resp.status_code}.",
            status_code=resp.status_code,
            body_snippet=(resp.text or "")[:400],
        )

    try:
        payload = resp.json()
    except ValueError as exc:
        raise TmdbClientError(
            "TMDb returned non-JSON response.",
            status_code=resp.status_code,
            body_snippet=(resp.text or "")[:400],
        ) from exc

    if not isinstance(payload, dict):
        raise TmdbClientError("TMDb returned unexpected JSON shape (not an object).")
    return payload


def search_movie(
    title: str,
    year: str | None = None,
    *,
    api_key: str | None = None,
    session: requests.Session | None = None,
) -> dict[str, Any] | None:
    """
    Search `/3/search/movie` and return the first result, or None when nothing matched.
    """

    api_key = _require_api_key(api_key)
    session = session or requests.Session()
    params: dict[str, Any] = {"api_key": api_key, "query": title}
    if year:
        params["year"] = year
    payload = _request_json(session, f"{TMDB_API_BASE_URL}/search/movie", params=params)

    results = payload.get("results")
    if not isinstance(results, list) or not results:
        return None
    first = results[0]
    return first if isinstance(first, dict) else None


def fetch_movie_credits(
    movie_id: int,
    *,
    api_key: str | None = None,
    session: requests.Session | None = None,
) -> dict[str, Any]:
    api_key = _require_api_key(api_key)
    session = session or requests.Session()
    url = f"{TMDB_API_BASE_URL}/movie/{int(movie_id)}/credits"
    return _request_json(session, url, params={"api_key": api_key})


def pick_director_name(credits: Mapping[str, Any]) -> str | None:
    crew = credits.get("crew")
    if not isinstance(crew, list):
        return None
    for member in crew:
        if not isinstance(member, Mapping) or member.get("job") != "Director":
            continue
        name = member.get("name")
        if isinstance(name, str) and name.strip():
            return name.strip()
        return None
    return None


def fetch_movie_director(
    movie_id: int,
    *,
    api_key: str | None = None,
    session: requests.Session | None = None,
) -> str | None:
    credits = fetch_movie_credits(movie_id, api_key=api_key, session=session)
    return pick_director_name(credits)


def build_poster_url(poster_path: str | None) -> str | None:
    if not isinstance(poster_path, str) or not poster_path.strip():
        return None
    return f"{TMDB_POSTER_BASE_URL}{poster_path.strip()}"
