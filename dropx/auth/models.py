"""Dropbox OAuth data models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TokenPair:
    """Tokens returned by one exchange against the token endpoint."""

    access: str
    refresh: str | None = None
