"""Package catalog loaded from a YAML manifest."""

import posixpath
from pathlib import Path
from typing import Dict, Iterable, List
import yaml
from pydantic import ValidationError
from .base import PackageCatalog
from .models import Manifest, ManifestPackage, PackageMetadata
from ..utils.errors import CatalogError
from ..utils.logging import get_logger

logger = get_logger("catalog.manifest")


class ManifestCatalog(PackageCatalog):
    """In-memory catalog for language-agnostic package graphs."""
    
    def __init__(self, packages: Iterable[ManifestPackage], module: str = ""):
        self.module = module.strip("/")
        self._packages: Dict[str, ManifestPackage] = {}
        for package in packages:
            if package.import_path in self._packages:
                raise CatalogError(f"Duplicate package in manifest: {package.import_path}")
            self._packages[package.import_path] = package
    
    def list_packages(self, root: str) -> List[str]:
        return sorted(
            path for path, package in self._packages.items()
            if not package.standard
        )
    
    def direct_imports(self, import_path: str, dir: str) -> PackageMetadata:
        package = self._packages.get(import_path)
        if package is None:
            raise CatalogError(f"Package not found in manifest: {import_path}")
        return PackageMetadata(
            import_path=package.import_path,
            dir=package.dir or self._default_dir(package.import_path),
            standard=package.standard,
            imports=[] if package.standard else list(package.imports),
        )
    
    def module_prefix(self, root: str) -> str:
        return self.module
    
    def _default_dir(self, import_path: str) -> str:
        if self.module and import_path.startswith(self.module + "/"):
            return import_path[len(self.module) + 1:]
        return posixpath.normpath(import_path)


def load_manifest_catalog(manifest_path: str) -> ManifestCatalog:
    """
    Load a ManifestCatalog from a YAML file.
    
    Expected layout:
    
        module: example.com/shop
        packages:
          - import_path: example.com/shop/cmd/api
            imports: [example.com/shop/lib/db, fmt]
          - import_path: fmt
            standard: true
    
    Args:
        manifest_path: Path to manifest YAML file
        
    Returns:
        ManifestCatalog
        
    Raises:
        CatalogError: If manifest is missing or invalid
    """
    path = Path(manifest_path)
    
    if not path.is_file():
        raise CatalogError(f"Manifest file not found: {manifest_path}")
    
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise CatalogError(f"Invalid YAML in manifest: {e}")
    except OSError as e:
        raise CatalogError(f"Error reading manifest: {e}")
    
    if not isinstance(data, dict):
        raise CatalogError("Manifest must contain a dictionary")
    
    try:
        manifest = Manifest(**data)
    except ValidationError as e:
        raise CatalogError(f"Invalid manifest {manifest_path}: {e}")
    
    logger.info(f"Loaded {len(manifest.packages)} packages from {manifest_path}")
    return ManifestCatalog(manifest.packages, module=manifest.module)
