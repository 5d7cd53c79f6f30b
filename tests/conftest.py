"""Shared fixtures: in-memory package graphs."""

import random
import threading
import time
from collections import Counter
import pytest
from tainted.catalog.manifest import ManifestCatalog
from tainted.catalog.models import ManifestPackage


class CountingCatalog(ManifestCatalog):
    """ManifestCatalog that counts metadata fetches and can add jitter."""
    
    def __init__(self, packages, module="", jitter=0.0, seed=None):
        super().__init__(packages, module=module)
        self.calls = Counter()
        self.jitter = jitter
        self._random = random.Random(seed)
        self._calls_lock = threading.Lock()
    
    def direct_imports(self, import_path, dir):
        with self._calls_lock:
            self.calls[import_path] += 1
            delay = self._random.uniform(0, self.jitter) if self.jitter else 0
        if delay:
            time.sleep(delay)
        return super().direct_imports(import_path, dir)


def graph_catalog(edges, standard=(), module="", missing=(), **kwargs):
    """
    Build a CountingCatalog from {import_path: [imports]}.
    
    Imports that are not keys become leaves, except those in `missing`,
    which are left out of the catalog entirely.
    """
    names = set(edges)
    for imports in edges.values():
        names.update(imports)
    names.update(standard)
    packages = []
    for name in sorted(names - set(missing)):
        packages.append(ManifestPackage(
            import_path=name,
            standard=name in standard,
            imports=list(edges.get(name, [])),
        ))
    return CountingCatalog(packages, module=module, **kwargs)


@pytest.fixture
def make_catalog():
    """Factory fixture for graph catalogs."""
    return graph_catalog


@pytest.fixture
def entrypoint_catalog():
    """cmd/app -> lib/a -> lib/b, plus an unrelated cmd/tool."""
    return graph_catalog(
        {
            "cmd/app": ["lib/a", "fmt"],
            "cmd/tool": ["lib/c", "os"],
            "lib/a": ["lib/b", "strings"],
            "lib/b": ["fmt"],
            "lib/c": [],
        },
        standard=("fmt", "os", "strings"),
    )
