from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Iterable

import requests

from letterboxd_sync.config import DEFAULT_PACING_SECONDS, SyncConfig
from letterboxd_sync.ingestion.enricher import enrich_entry
from letterboxd_sync.ingestion.normalizer import normalize_item
from letterboxd_sync.integrations.letterboxd.feed import read_feed
from letterboxd_sync.integrations.notion.client import NotionClient
from letterboxd_sync.models.diary import DestinationRecord, FeedItem
from letterboxd_sync.repositories.diary_pages import (
    assert_diary_database_ready,
    find_page_by_letterboxd_url,
    insert_diary_page,
)

logger = logging.getLogger(__name__)


@dataclass
class SyncSummary:
    seen: int = 0
    created: int = 0
    skipped_existing: int = 0
    would_create: int = 0
    enriched: int = 0
    created_titles: list[str] = field(default_factory=list)


def _sleep(seconds: float) -> None:
    time.sleep(seconds)


def sync_items(
    items: Iterable[FeedItem],
    *,
    notion: NotionClient,
    database_id: str,
    tmdb_api_key: str | None = None,
    tmdb_session: requests.Session | None = None,
    pacing_seconds: float = DEFAULT_PACING_SECONDS,
    dry_run: bool = False,
    limit: int | None = None,
) -> SyncSummary:
    """
    Write every feed item that is not yet in Notion, one at a time, in feed order.

    Notion errors propagate and abort the run; TMDb errors only cost the
    enrichment for that item.
    """

    summary = SyncSummary()
    for item in items:
        if limit is not None and summary.seen >= limit:
            break
        summary.seen += 1

        if find_page_by_letterboxd_url(notion, database_id, item.link) is not None:
            summary.skipped_existing += 1
            logger.debug(f"Already in Notion, skipping: {item.link}")
            continue

        entry = enrich_entry(normalize_item(item), api_key=tmdb_api_key, session=tmdb_session)
        if entry.is_enriched:
            summary.enriched += 1
        record = DestinationRecord.from_entry(item, entry)

        if dry_run:
            summary.would_create += 1
            logger.info(f"Would add: {record.title} ({record.watched_date or 'no date'})")
            continue

        logger.info(f"Adding: {record.title} ({record.watched_date or 'no date'})")
        insert_diary_page(notion, database_id, record)
        summary.created += 1
        summary.created_titles.append(record.title)
        if pacing_seconds > 0:
            _sleep(pacing_seconds)

    return summary


def sync_feed_to_notion(
    config: SyncConfig,
    *,
    dry_run: bool = False,
    limit: int | None = None,
    use_tmdb: bool = True,
    preflight: bool = True,
    notion: NotionClient | None = None,
    session: requests.Session | None = None,
) -> SyncSummary:
    session = session or requests.Session()
    notion = notion or NotionClient(config.notion_token)

    if preflight:
        assert_diary_database_ready(notion, config.notion_database_id)

    items = read_feed(config.rss_url, session=session)
    tmdb_api_key = config.tmdb_api_key if use_tmdb else None
    if not tmdb_api_key:
        logger.info("TMDb enrichment disabled")

    summary = sync_items(
        items,
        notion=notion,
        database_id=config.notion_database_id,
        tmdb_api_key=tmdb_api_key,
        tmdb_session=session,
        pacing_seconds=config.pacing_seconds,
        dry_run=dry_run,
        limit=limit,
    )
    logger.info("Sync complete.")
    return summary
