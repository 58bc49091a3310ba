from __future__ import annotations

from typing import Any, Mapping

import requests

NOTION_API_BASE_URL = "https://api.notion.com/v1"
NOTION_API_VERSION = "2022-06-28"


class NotionClientError(RuntimeError):
    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        code: str | None = None,
        body_snippet: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.body_snippet = body_snippet


class NotionClient:
    """
    Minimal Notion REST client covering the endpoints the diary sync needs.

    Every call is a single attempt; HTTP or transport failures raise
    `NotionClientError` with Notion's error `code` when the body carries one.
    """

    def __init__(
        self,
        token: str,
        *,
        session: requests.Session | None = None,
        timeout_seconds: float = 30.0,
    ) -> None:
        if not (token or "").strip():
            raise ValueError("Notion token is empty.")
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {token.strip()}",
                "Notion-Version": NOTION_API_VERSION,
                "accept": "application/json",
                "content-type": "application/json",
            }
        )
        self.timeout_seconds = timeout_seconds

    def _request(self, method: str, path: str, *, json: Mapping[str, Any] | None = None) -> dict[str, Any]:
        url = f"{NOTION_API_BASE_URL}{path}"
        try:
            resp = self.session.request(method, url, json=json, timeout=self.timeout_seconds)
        except requests.RequestException as exc:
            raise NotionClientError(f"Notion request failed: {exc}") from exc

        try:
            payload = resp.json()
        except ValueError:
            payload = None

        if not 200 <= resp.status_code < 300:
            code = payload.get("code") if isinstance(payload, dict) else None
            message = payload.get("message") if isinstance(payload, dict) else None
            raise NotionClientError(
                f"Notion {method} {path} failed with HTTP {resp.status_code}: {message or code or 'no details'}",
                status_code=resp.status_code,
                code=code if isinstance(code, str) else None,
                body_snippet=(resp.text or "")[:400],
            )

        if not isinstance(payload, dict):
            raise NotionClientError(
                "Notion returned unexpected JSON shape (not an object).",
                status_code=resp.status_code,
                body_snippet=(resp.text or "")[:400],
            )
        return payload

    def retrieve_database(self, database_id: str) -> dict[str, Any]:
        return self._request("GET", f"/databases/{database_id}")

    def query_database(
        self,
        database_id: str,
        *,
        filter: Mapping[str, Any] | None = None,
        page_size: int | None = None,
    ) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if filter is not None:
            body["filter"] = dict(filter)
        if page_size is not None:
            body["page_size"] = int(page_size)
        return self._request("POST", f"/databases/{database_id}/query", json=body)

    def create_page(self, database_id: str, properties: Mapping[str, Any]) -> dict[str, Any]:
        body = {
            "parent": {"database_id": database_id},
            "properties": dict(properties),
        }
        return self._request("POST", "/pages", json=body)
