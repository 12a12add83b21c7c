"""Configuration module for dropx."""

from dropx.config.loader import get_config_path, load_config
from dropx.config.schema import Config

__all__ = ["Config", "get_config_path", "load_config"]
