"""Config path resolution for two-tier config system."""

from pathlib import Path
from typing import Optional

CONFIG_DIR = ".tainted"
CONFIG_FILE = "config.yaml"


def get_user_config_path() -> Path:
    """Get user config path: ~/.tainted/config.yaml"""
    return Path.home() / CONFIG_DIR / CONFIG_FILE


def get_project_config_path(base: Optional[Path] = None) -> Optional[Path]:
    """Get project config path: .tainted/config.yaml (from current working directory)"""
    base = base or Path.cwd()
    project_config = base / CONFIG_DIR / CONFIG_FILE
    if project_config.exists():
        return project_config
    return None
