"""
Repository layer for Notion access patterns.
"""

from letterboxd_sync.repositories.diary_pages import (
    DiaryRepositoryError,
    assert_diary_database_ready,
    build_page_properties,
    find_page_by_letterboxd_url,
    insert_diary_page,
)

__all__ = [
    "DiaryRepositoryError",
    "assert_diary_database_ready",
    "build_page_properties",
    "find_page_by_letterboxd_url",
    "insert_diary_page",
]
