"""
Domain models shared across the pipeline and scripts.
"""

from letterboxd_sync.models.diary import DestinationRecord, EnrichedEntry, FeedItem, NormalizedEntry

__all__ = [
    "DestinationRecord",
    "EnrichedEntry",
    "FeedItem",
    "NormalizedEntry",
]
