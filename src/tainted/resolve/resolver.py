"""Compute transitive dependency closures over the import graph."""

from typing import List, Optional, Set, Tuple
from ..catalog.base import PackageCatalog
from ..catalog.models import FOREIGN_IMPORT, PackageMetadata
from ..utils.errors import CatalogError, ResolutionError
from ..utils.logging import get_logger
from .cache import MetadataCache

logger = get_logger("resolve.resolver")


class ImportResolver:
    """Depth-first closure resolver sharing one metadata cache per run."""
    
    def __init__(self, catalog: PackageCatalog, cache: Optional[MetadataCache] = None):
        self.catalog = catalog
        self.cache = cache if cache is not None else MetadataCache()
    
    def resolve(self, name: str, dir: str = ".") -> Set[str]:
        """
        Compute every local package reachable from name.
        
        Standard-library packages are visited (so they are fetched once and
        never descended into) but are left out of the result, as is name
        itself. Import cycles terminate through the visited set.
        
        Args:
            name: Import path of the package to resolve
            dir: Directory used as lookup context for name
            
        Returns:
            Set of import paths in the closure
            
        Raises:
            ResolutionError: If metadata for a reachable package cannot be fetched
        """
        visited: Set[str] = set()
        closure: Set[str] = set()
        stack: List[Tuple[str, str]] = [(name, dir)]
        
        while stack:
            import_path, lookup_dir = stack.pop()
            if import_path in visited:
                continue
            visited.add(import_path)
            
            if import_path == FOREIGN_IMPORT:
                continue
            
            metadata = self._metadata(import_path, lookup_dir, name)
            if metadata.standard:
                continue
            
            if import_path != name:
                closure.add(import_path)
            
            child_dir = metadata.dir or lookup_dir
            for imported in reversed(metadata.imports):
                if imported not in visited:
                    stack.append((imported, child_dir))
        
        logger.debug(f"Resolved {name}: {len(closure)} local dependencies ({len(visited)} visited)")
        return closure
    
    def _metadata(self, import_path: str, dir: str, root_package: str) -> PackageMetadata:
        def fetch() -> PackageMetadata:
            logger.debug(f"Cache miss for {import_path}")
            return self.catalog.direct_imports(import_path, dir)
        
        try:
            return self.cache.get_or_fetch(import_path, fetch)
        except CatalogError as e:
            raise ResolutionError(
                f"Cannot resolve {import_path} (required by {root_package}): {e}",
                import_path=import_path,
                root_package=root_package,
            ) from e
