"""Dropbox OAuth module."""

from dropx.auth.flow import (
    authorize_by_code,
    authorize_by_refresh_token,
    get_access_token,
)
from dropx.auth.models import TokenPair
from dropx.auth.storage import clear_refresh_token, get_cache_file

__all__ = [
    "TokenPair",
    "authorize_by_code",
    "authorize_by_refresh_token",
    "clear_refresh_token",
    "get_access_token",
    "get_cache_file",
]
