"""Package catalogs: enumerate packages and their direct imports."""

from .base import PackageCatalog
from .go_list import GoListCatalog
from .manifest import ManifestCatalog, load_manifest_catalog
from .models import FOREIGN_IMPORT, Manifest, ManifestPackage, PackageMetadata

__all__ = [
    "PackageCatalog",
    "GoListCatalog",
    "ManifestCatalog",
    "load_manifest_catalog",
    "FOREIGN_IMPORT",
    "Manifest",
    "ManifestPackage",
    "PackageMetadata",
]
