"""Two-tier configuration manager (user + project override)."""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from pydantic import ValidationError
from .models import Settings
from .paths import get_project_config_path, get_user_config_path
from ..utils.errors import ConfigError
from ..utils.logging import get_logger

logger = get_logger("config.manager")


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load full config tree with overrides.
    
    User config is overridden by project config, which is overridden by an
    explicit config file.
    
    Args:
        config_path: Optional explicit config file (must exist)
        
    Returns:
        Merged configuration dictionary
        
    Raises:
        ConfigError: If the explicit config file is missing or invalid
    """
    config: Dict[str, Any] = {}
    
    user_config_path = get_user_config_path()
    if user_config_path.exists():
        try:
            _deep_merge(config, _read_yaml(user_config_path))
        except ConfigError as e:
            logger.warning(f"Could not load user config from {user_config_path}: {e}")
    
    project_config_path = get_project_config_path()
    if project_config_path:
        _deep_merge(config, _read_yaml(project_config_path))
        logger.info(f"Loaded project config from {project_config_path}")
    
    if config_path:
        path = Path(config_path)
        if not path.is_file():
            raise ConfigError(f"Config file not found: {config_path}")
        _deep_merge(config, _read_yaml(path))
        logger.info(f"Loaded config from {path}")
    
    return config


def load_settings(config_path: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None) -> Settings:
    """
    Build validated Settings from config files plus CLI overrides.
    
    Overrides whose value is None are ignored so unset CLI options fall
    through to the config files.
    """
    config = load_config(config_path)
    for key, value in (overrides or {}).items():
        if value is not None:
            config[key] = value
    
    try:
        return Settings(**config)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}")


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {path}: {e}")
    except OSError as e:
        raise ConfigError(f"Error reading config file {path}: {e}")
    
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a dictionary")
    return data


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    """Deep merge override into base (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
