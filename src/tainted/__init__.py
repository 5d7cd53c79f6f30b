"""tainted - Select packages affected by changes between two revisions."""

from pathlib import Path
from typing import Iterable, Optional, Set
from .catalog import GoListCatalog, PackageCatalog, load_manifest_catalog
from .changes import changed_directories
from .config import CatalogKind, Settings
from .contracts.selection import SelectionResult
from .resolve import ImportResolver, MetadataCache
from .selection import ImpactSelector, PathNormalizer, SubtreeFilter
from .utils.errors import ChangeSetError, ConfigError, TaintedError
from .utils.logging import setup_logging, get_logger

__version__ = "0.1.0"

__all__ = ["select_affected", "build_catalog"]

setup_logging()
logger = get_logger("tainted")


def build_catalog(settings: Settings, root: str) -> PackageCatalog:
    """Instantiate the catalog backend named in settings."""
    if settings.catalog == CatalogKind.MANIFEST:
        if not settings.manifest:
            raise ConfigError("The manifest catalog requires a manifest path")
        manifest = Path(settings.manifest)
        if not manifest.is_absolute():
            manifest = Path(root) / manifest
        return load_manifest_catalog(str(manifest))
    return GoListCatalog(root)


def select_affected(
    root: str,
    settings: Optional[Settings] = None,
    candidates: Optional[Iterable[str]] = None,
    changed: Optional[Set[str]] = None,
    catalog: Optional[PackageCatalog] = None
) -> SelectionResult:
    """
    Select the packages affected by changes between two revisions.
    
    Args:
        root: Repository root
        settings: Run settings (defaults when None)
        candidates: Candidate import paths; enumerated from the catalog when None
        changed: Changed directories; derived from git when None
        catalog: Catalog to use instead of the one named in settings
        
    Returns:
        SelectionResult
        
    Raises:
        TaintedError: ChangeSetError, CatalogError, ResolutionError or ConfigError
    """
    settings = settings or Settings()
    root_path = Path(root)
    if not root_path.is_dir():
        raise ChangeSetError(f"{root} is not a directory")
    
    try:
        if changed is None:
            changed = changed_directories(
                str(root_path),
                settings.from_rev,
                settings.to_rev,
                include_tests=settings.include_tests,
                test_patterns=settings.test_patterns,
            )
        
        catalog = catalog or build_catalog(settings, str(root_path))
        if candidates is None:
            candidates = catalog.list_packages(str(root_path))
        
        resolver = ImportResolver(catalog, MetadataCache())
        selector = ImpactSelector(
            resolver,
            normalizer=PathNormalizer(str(root_path), catalog.module_prefix(str(root_path))),
            subtree=SubtreeFilter(settings.entrypoints),
            workers=settings.workers,
            failure_policy=settings.on_error,
            include_self=settings.include_self,
        )
        return selector.select(candidates, changed, str(root_path))
    
    except TaintedError:
        raise
    except Exception as e:
        logger.error(f"Unexpected error during selection: {e}", exc_info=True)
        raise TaintedError(f"Selection failed: {e}") from e

