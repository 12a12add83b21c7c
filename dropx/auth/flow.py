"""Dropbox OAuth login and token management."""

from __future__ import annotations

import logging
import urllib.parse
from typing import Any, Callable

import httpx

from dropx.auth.constants import AUTHORIZE_URL, TOKEN_URL
from dropx.auth.models import TokenPair
from dropx.auth.storage import _load_refresh_token, _save_refresh_token
from dropx.config.schema import Config
from dropx.utils.helpers import new_http_client

logger = logging.getLogger(__name__)


def _build_authorize_url(client_id: str) -> str:
    params = {
        "client_id": client_id,
        "token_access_type": "offline",
        "response_type": "code",
    }
    return f"{AUTHORIZE_URL}?{urllib.parse.urlencode(params)}"


def _parse_token_payload(payload: Any) -> TokenPair:
    if not isinstance(payload, dict):
        raise RuntimeError("Could not get tokens from the request")
    access = payload.get("access_token")
    refresh = payload.get("refresh_token")
    if not isinstance(access, str):
        raise RuntimeError("Could not get tokens from the request")
    return TokenPair(access=access, refresh=refresh if isinstance(refresh, str) else None)


def _tokens_from_params(data: dict[str, str]) -> TokenPair:
    logger.debug("Requesting tokens with grant_type=%s", data.get("grant_type"))
    try:
        with new_http_client() as client:
            response = client.post(
                TOKEN_URL,
                data=data,
                headers={"Content-Type": "application/x-www-form-urlencoded"},
            )
            response.raise_for_status()
    except httpx.HTTPError as exc:
        raise RuntimeError(f"Could not get the response: {exc}") from exc

    try:
        payload = response.json()
    except ValueError as exc:
        raise RuntimeError(f"Could not parse json: {exc}") from exc

    return _parse_token_payload(payload)


def authorize_by_code(
    config: Config,
    on_auth: Callable[[str], None] | None = None,
    on_prompt: Callable[[str], str] | None = None,
) -> TokenPair:
    """Show the authorization URL, read the code and exchange it."""
    url = _build_authorize_url(config.client_id)
    if on_auth:
        on_auth(url)
    else:
        print(url)

    prompt = "Authorization code"
    raw = on_prompt(prompt) if on_prompt else input(f"{prompt}: ")
    data = {
        "code": raw.strip(),
        "client_id": config.client_id,
        "client_secret": config.client_secret,
        "grant_type": "authorization_code",
    }
    return _tokens_from_params(data)


def authorize_by_refresh_token(
    refresh_token: str,
    config: Config,
    on_status: Callable[[str], None] | None = None,
) -> TokenPair:
    """Exchange a cached refresh token for a new access token."""
    message = "Using the refresh token to authenticate..."
    if on_status:
        on_status(message)
    else:
        print(message)

    data = {
        "refresh_token": refresh_token,
        "grant_type": "refresh_token",
        "client_id": config.client_id,
        "client_secret": config.client_secret,
    }
    return _tokens_from_params(data)


def get_access_token(
    config: Config,
    on_auth: Callable[[str], None] | None = None,
    on_prompt: Callable[[str], str] | None = None,
    on_status: Callable[[str], None] | None = None,
) -> str:
    """
    Get an access token, refreshing from the cache or logging in interactively.

    A refresh token in the response replaces the cached one. If saving it
    fails the error propagates and no access token is returned.
    """
    cached = _load_refresh_token()
    if cached is not None:
        tokens = authorize_by_refresh_token(cached, config, on_status=on_status)
    else:
        tokens = authorize_by_code(config, on_auth=on_auth, on_prompt=on_prompt)

    if tokens.refresh is not None:
        _save_refresh_token(tokens.refresh)
    return tokens.access
