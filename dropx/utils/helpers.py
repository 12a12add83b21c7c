"""Shared helpers."""

import httpx

HTTP_TIMEOUT_SEC = 30.0


def new_http_client() -> httpx.Client:
    """Create the HTTP client used for every Dropbox request."""
    return httpx.Client(timeout=HTTP_TIMEOUT_SEC)
