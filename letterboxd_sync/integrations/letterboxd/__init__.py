"""
Letterboxd RSS feed reader.
"""

from letterboxd_sync.integrations.letterboxd.feed import (
    FeedError,
    FeedFetchError,
    FeedParseError,
    fetch_feed_xml,
    parse_feed_items,
    read_feed,
)

__all__ = [
    "FeedError",
    "FeedFetchError",
    "FeedParseError",
    "fetch_feed_xml",
    "parse_feed_items",
    "read_feed",
]
