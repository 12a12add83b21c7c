"""Configuration loading utilities."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

from dropx.config.schema import Config

logger = logging.getLogger(__name__)

CONFIG_LOCATION = "config.json"
CONFIG_ERROR = "Could not parse the configuration file"


def get_config_path(path: str | Path | None = None) -> Path:
    """Get the configuration file path, relative to the working directory by default."""
    return Path(path) if path else Path(CONFIG_LOCATION)


def load_config(path: str | Path | None = None) -> Config:
    """
    Load the app credentials from a JSON file.

    Raises RuntimeError when the file is missing, is not JSON, or lacks
    either credential.
    """
    config_path = get_config_path(path)
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.debug("Failed to read config %s: %s", config_path, exc)
        raise RuntimeError(CONFIG_ERROR) from exc

    if not isinstance(data, dict):
        raise RuntimeError(CONFIG_ERROR)

    data = convert_keys(data)
    client_id = data.get("client_id")
    client_secret = data.get("client_secret")
    if not isinstance(client_id, str) or not isinstance(client_secret, str):
        raise RuntimeError(CONFIG_ERROR)

    return Config(client_id=client_id, client_secret=client_secret)


def convert_keys(data: Any) -> Any:
    """Convert camelCase keys to snake_case."""
    if isinstance(data, dict):
        return {camel_to_snake(k): convert_keys(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_keys(item) for item in data]
    return data


def camel_to_snake(name: str) -> str:
    """Convert camelCase to snake_case."""
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()
