"""Impact selection over candidate packages."""

from .paths import PathNormalizer, SubtreeFilter, normalize_dir
from .pool import WorkerPool, default_worker_count
from .selector import ImpactSelector

__all__ = [
    "ImpactSelector",
    "PathNormalizer",
    "SubtreeFilter",
    "WorkerPool",
    "default_worker_count",
    "normalize_dir",
]
