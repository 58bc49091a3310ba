"""
Notion REST API client.
"""

from letterboxd_sync.integrations.notion.client import NotionClient, NotionClientError

__all__ = [
    "NotionClient",
    "NotionClientError",
]
