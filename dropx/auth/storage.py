"""Refresh token cache helpers."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dropx.auth.constants import CACHE_NAME

logger = logging.getLogger(__name__)


def _get_cache_dir() -> Path:
    home = os.environ.get("HOME")
    if home is None:
        raise RuntimeError("HOME is not set")
    return Path(home) / ".cache" / CACHE_NAME


def get_cache_file() -> Path:
    """Location of the cached refresh token. Does not touch the filesystem."""
    return _get_cache_dir() / CACHE_NAME


def _get_cache_path() -> Path:
    _get_cache_dir().mkdir(parents=True, exist_ok=True)
    return get_cache_file()


def _load_refresh_token() -> str | None:
    """Return the cached refresh token, or None when there is none to read."""
    try:
        path = _get_cache_path()
        return path.read_bytes().decode("utf-8")
    except (OSError, RuntimeError, UnicodeDecodeError) as exc:
        logger.debug("No cached refresh token: %s", exc)
        return None


def _save_refresh_token(refresh_token: str) -> Path:
    """Overwrite the cache file with the given refresh token."""
    path = _get_cache_path()
    path.write_bytes(refresh_token.encode("utf-8"))
    try:
        os.chmod(path, 0o600)
    except OSError:
        # Ignore permission setting failures.
        pass
    logger.debug("Saved refresh token to %s", path)
    return path


def clear_refresh_token() -> bool:
    """Delete the cache file. Returns True if a file was removed."""
    path = get_cache_file()
    if not path.exists():
        return False
    path.unlink()
    return True
