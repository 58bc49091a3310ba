#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import sys

from letterboxd_sync.config import ConfigError, load_env, load_sync_config
from letterboxd_sync.ingestion.sync import sync_feed_to_notion
from letterboxd_sync.integrations.letterboxd.feed import FeedError
from letterboxd_sync.integrations.notion.client import NotionClientError
from letterboxd_sync.repositories.diary_pages import DiaryRepositoryError

logger = logging.getLogger("sync_letterboxd_to_notion")


def _positive_int(value: str) -> int:
    parsed = int(value)
    if parsed < 1:
        raise argparse.ArgumentTypeError("must be >= 1")
    return parsed


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="sync_letterboxd_to_notion",
        description="Add new Letterboxd diary entries to a Notion database.",
    )
    parser.add_argument("--dry-run", action="store_true", help="Run without writing to Notion.")
    parser.add_argument("--limit", type=_positive_int, default=None, help="Optional cap on feed items to process.")
    parser.add_argument("--no-tmdb", action="store_true", help="Skip TMDb enrichment even if TMDB_API_KEY is set.")
    parser.add_argument(
        "--skip-preflight",
        action="store_true",
        help="Do not check the Notion database schema before syncing.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    load_env()
    try:
        config = load_sync_config()
        summary = sync_feed_to_notion(
            config,
            dry_run=args.dry_run,
            limit=args.limit,
            use_tmdb=not args.no_tmdb,
            preflight=not args.skip_preflight,
        )
    except (ConfigError, FeedError, NotionClientError, DiaryRepositoryError) as exc:
        logger.error(f"Sync failed: {exc}")
        return 1

    print(
        "SYNC summary "
        f"seen={summary.seen} "
        f"created={summary.created} "
        f"skipped_existing={summary.skipped_existing} "
        f"enriched={summary.enriched} "
        f"would_create={summary.would_create}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
