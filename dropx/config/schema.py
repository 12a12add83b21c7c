"""Configuration schema."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """Dropbox app credentials."""

    client_id: str
    client_secret: str
