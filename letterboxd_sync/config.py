from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_PACING_SECONDS = 0.35

_REQUIRED_ENV = (
    "NOTION_TOKEN",
    "NOTION_DATABASE_ID",
    "LETTERBOXD_RSS_URL",
)


class ConfigError(RuntimeError):
    pass


def load_env(*, override: bool = False) -> Path | None:
    repo_root = Path(__file__).resolve().parents[1]
    candidates = [
        repo_root / ".env",
        Path.cwd() / ".env",
    ]
    for path in candidates:
        if path.is_file():
            load_dotenv(dotenv_path=path, override=override)
            return path
    return None


def _env(name: str) -> str | None:
    value = (os.getenv(name) or "").strip()
    return value or None


def _env_float(name: str, default: float) -> float:
    raw = _env(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be a number of seconds, got {raw!r}") from exc
    if value < 0:
        raise ConfigError(f"{name} must not be negative, got {raw!r}")
    return value


@dataclass(frozen=True)
class SyncConfig:
    notion_token: str
    notion_database_id: str
    rss_url: str
    tmdb_api_key: str | None = None
    pacing_seconds: float = DEFAULT_PACING_SECONDS

    @property
    def tmdb_enabled(self) -> bool:
        return bool(self.tmdb_api_key)


def load_sync_config() -> SyncConfig:
    """
    Build a `SyncConfig` from the process environment.

    Call `load_env()` first to pick up a local `.env` file. Missing required
    variables are reported together so a fresh setup fails once, not three times.
    """

    missing = [name for name in _REQUIRED_ENV if _env(name) is None]
    if missing:
        raise ConfigError(f"Missing required environment variable(s): {', '.join(missing)}")

    return SyncConfig(
        notion_token=_env("NOTION_TOKEN") or "",
        notion_database_id=_env("NOTION_DATABASE_ID") or "",
        rss_url=_env("LETTERBOXD_RSS_URL") or "",
        tmdb_api_key=_env("TMDB_API_KEY"),
        pacing_seconds=_env_float("SYNC_PACING_SECONDS", DEFAULT_PACING_SECONDS),
    )
