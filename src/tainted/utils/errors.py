"""Custom exception classes for tainted."""

from typing import Optional


class TaintedError(Exception):
    """Base exception for all tainted errors."""
    pass


class ChangeSetError(TaintedError):
    """Raised when changed files cannot be derived from the revision range."""
    pass


class CatalogError(TaintedError):
    """Raised when package enumeration or metadata retrieval fails."""
    pass


class ResolutionError(TaintedError):
    """Raised when an import cannot be resolved while building a closure."""

    def __init__(self, message: str, import_path: Optional[str] = None, root_package: Optional[str] = None):
        super().__init__(message)
        self.import_path = import_path
        self.root_package = root_package


class ConfigError(TaintedError):
    """Raised when configuration is invalid or missing."""
    pass
