"""Dropbox folder listing."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from dropx.auth.constants import API_URL
from dropx.utils.helpers import new_http_client

logger = logging.getLogger(__name__)


@dataclass
class FolderEntry:
    """One entry of a remote folder."""

    tag: str
    name: str
    path_display: str
    size: int | None = None

    @property
    def is_folder(self) -> bool:
        return self.tag == "folder"


def _normalize_path(path: str) -> str:
    # The API addresses the root folder as "".
    path = path.strip()
    if path in ("", "/"):
        return ""
    if not path.startswith("/"):
        path = "/" + path
    return path.rstrip("/")


def _parse_entry(raw: dict[str, Any]) -> FolderEntry:
    size = raw.get("size")
    return FolderEntry(
        tag=str(raw.get(".tag", "file")),
        name=str(raw.get("name", "")),
        path_display=str(raw.get("path_display", "")),
        size=size if isinstance(size, int) else None,
    )


def _post(client: httpx.Client, endpoint: str, access_token: str, body: dict[str, Any]) -> dict[str, Any]:
    try:
        response = client.post(
            f"{API_URL}/{endpoint}",
            json=body,
            headers={"Authorization": f"Bearer {access_token}"},
        )
        response.raise_for_status()
    except httpx.HTTPError as exc:
        raise RuntimeError(f"Could not get the response: {exc}") from exc

    try:
        payload = response.json()
    except ValueError as exc:
        raise RuntimeError(f"Could not parse json: {exc}") from exc
    if not isinstance(payload, dict) or not isinstance(payload.get("entries"), list):
        raise RuntimeError("Could not get entries from the request")
    return payload


def list_folder(access_token: str, path: str = "") -> list[FolderEntry]:
    """List every entry of a remote folder, following pagination cursors."""
    entries: list[FolderEntry] = []
    with new_http_client() as client:
        payload = _post(client, "files/list_folder", access_token, {"path": _normalize_path(path)})
        while True:
            entries.extend(_parse_entry(item) for item in payload["entries"] if isinstance(item, dict))
            cursor = payload.get("cursor")
            if not payload.get("has_more") or not cursor:
                break
            logger.debug("Fetching next page of %s", path or "/")
            payload = _post(client, "files/list_folder/continue", access_token, {"cursor": cursor})
    return entries
