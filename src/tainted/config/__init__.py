"""Configuration module: load run settings from YAML and CLI overrides."""

from .manager import load_config, load_settings
from .models import CatalogKind, Settings
from .paths import get_project_config_path, get_user_config_path

__all__ = [
    "load_config",
    "load_settings",
    "CatalogKind",
    "Settings",
    "get_project_config_path",
    "get_user_config_path",
]
