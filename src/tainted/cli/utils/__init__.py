"""CLI utilities package."""

import json
from typing import Any, Dict, IO, List, Optional
import click
from ...config import Settings, load_settings
from ...utils.logging import get_logger

logger = get_logger("cli.utils")


def format_error(message: str, suggestion: Optional[str] = None) -> str:
    """
    Format error message with optional suggestion.
    
    Args:
        message: Error message
        suggestion: Optional suggestion or help text
        
    Returns:
        Formatted error string
    """
    error = f"Error: {message}"
    if suggestion:
        error += f" (tip: {suggestion})"
    return error


def read_candidates(stream: IO[str]) -> List[str]:
    """Read newline-delimited import paths, skipping blank lines."""
    return [line.strip() for line in stream if line.strip()]


def settings_from_options(config_path: Optional[str], **overrides: Any) -> Settings:
    """Merge config files with CLI options; None means 'not given'."""
    return load_settings(config_path, overrides)


def echo_lines(lines: List[str]) -> None:
    """Write lines to stdout; write nothing at all for an empty list."""
    if lines:
        click.echo("\n".join(lines))


def dump_json(data: Dict[str, Any]) -> str:
    return json.dumps(data, indent=2)


def run_options(func):
    """Options shared by commands that read a repository."""
    func = click.option('--config', 'config_path', type=click.Path(dir_okay=False), help='Config YAML file')(func)
    func = click.option('--manifest', type=click.Path(dir_okay=False), help='Package manifest YAML (manifest catalog)')(func)
    func = click.option('--catalog', type=click.Choice(['go', 'manifest']), default=None, help='Package catalog backend')(func)
    func = click.option('--dir', 'root', default='.', show_default=True, type=click.Path(file_okay=False), help='Repository root')(func)
    return func


__all__ = ["format_error", "read_candidates", "settings_from_options", "echo_lines", "dump_json", "run_options"]
