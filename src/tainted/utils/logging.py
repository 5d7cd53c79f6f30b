"""Structured logging setup for tainted."""

import logging
import sys
from typing import Optional


def setup_logging(level: int = logging.WARNING, format_string: Optional[str] = None) -> logging.Logger:
    """
    Set up structured logging for tainted.
    
    Output goes to stderr so stdout stays reserved for selected packages.
    
    Args:
        level: Logging level (default: WARNING)
        format_string: Custom format string (optional)
    
    Returns:
        Configured logger instance
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    
    logging.basicConfig(
        level=level,
        format=format_string,
        stream=sys.stderr,
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    
    logger = logging.getLogger("tainted")
    logger.setLevel(level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a specific module."""
    return logging.getLogger(f"tainted.{name}")


def verbosity_to_level(verbose: int) -> int:
    """Map -v count to a logging level."""
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING
