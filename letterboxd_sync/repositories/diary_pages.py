from __future__ import annotations

from typing import Any, Mapping

from letterboxd_sync.integrations.notion.client import NotionClient, NotionClientError
from letterboxd_sync.models.diary import DestinationRecord

PROP_NAME = "Name"
PROP_AUTHOR = "Author"
PROP_WATCHED_DATE = "Date Read/Watched"
PROP_RATING = "My Rating"
PROP_GOALS = "Goals"
PROP_STATUS = "Status"
PROP_MEDIA_TYPE = "media type"
PROP_FORMAT = "Format"
PROP_LETTERBOXD_URL = "Letterboxd URL"
PROP_IMAGE = "Image"


class DiaryRepositoryError(RuntimeError):
    pass


def assert_diary_database_ready(client: NotionClient, database_id: str) -> None:
    """
    Fail fast with a clear error if the dedup property is missing from the Notion database.

    Without it every query would fail (or, worse, every item would look new).
    """

    try:
        database = client.retrieve_database(database_id)
    except NotionClientError as exc:
        if exc.status_code == 404 or exc.code == "object_not_found":
            raise DiaryRepositoryError(
                f"Notion database {database_id} was not found. "
                "Check NOTION_DATABASE_ID and share the database with the integration."
            ) from exc
        raise DiaryRepositoryError(f"Notion error during database preflight: {exc}") from exc

    properties = database.get("properties")
    prop = properties.get(PROP_LETTERBOXD_URL) if isinstance(properties, Mapping) else None
    if not isinstance(prop, Mapping):
        raise DiaryRepositoryError(
            f"Notion database is missing the `{PROP_LETTERBOXD_URL}` property. "
            "Add a URL property with that exact name, then re-run the sync."
        )
    if prop.get("type") != "url":
        raise DiaryRepositoryError(
            f"Notion property `{PROP_LETTERBOXD_URL}` must be of type url, found {prop.get('type')!r}."
        )


def find_page_by_letterboxd_url(client: NotionClient, database_id: str, letterboxd_url: str) -> dict[str, Any] | None:
    response = client.query_database(
        database_id,
        filter={"property": PROP_LETTERBOXD_URL, "url": {"equals": letterboxd_url}},
        page_size=1,
    )
    results = response.get("results") or []
    if isinstance(results, list) and results:
        return results[0]
    return None


def _rich_text(content: str | None) -> dict[str, Any]:
    if not content:
        return {"rich_text": []}
    return {"rich_text": [{"text": {"content": content}}]}


def build_page_properties(record: DestinationRecord) -> dict[str, Any]:
    """
    Map a `DestinationRecord` onto Notion page properties.

    Date, rating and image are left out entirely when unset so Notion keeps the
    column defaults; Author is always sent, as an empty rich text when there is
    no director.
    """

    props: dict[str, Any] = {
        PROP_NAME: {"title": [{"text": {"content": record.title}}]},
        PROP_AUTHOR: _rich_text(record.director),
        PROP_GOALS: _rich_text(record.goals),
        PROP_STATUS: {"select": {"name": record.status}},
        PROP_MEDIA_TYPE: {"select": {"name": record.media_type}},
        PROP_FORMAT: {"select": {"name": record.format}},
        PROP_LETTERBOXD_URL: {"url": record.letterboxd_url},
    }
    if record.watched_date:
        props[PROP_WATCHED_DATE] = {"date": {"start": record.watched_date}}
    if record.rating is not None:
        props[PROP_RATING] = {"number": record.rating}
    if record.poster_url:
        props[PROP_IMAGE] = {
            "files": [{"type": "external", "name": "poster", "external": {"url": record.poster_url}}]
        }
    return props


def insert_diary_page(client: NotionClient, database_id: str, record: DestinationRecord) -> dict[str, Any]:
    return client.create_page(database_id, build_page_properties(record))
