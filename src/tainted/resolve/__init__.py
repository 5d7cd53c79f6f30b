"""Import resolution: dependency closures and the metadata cache."""

from .cache import MetadataCache
from .resolver import ImportResolver

__all__ = ["MetadataCache", "ImportResolver"]
