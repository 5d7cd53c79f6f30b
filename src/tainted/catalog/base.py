"""Abstract base class for package catalogs."""

from abc import ABC, abstractmethod
from typing import List
from .models import PackageMetadata


class PackageCatalog(ABC):
    """
    Abstract interface for package catalogs.
    
    A catalog knows which packages exist under a root and what each package
    imports directly. It never computes closures; that is the resolver's job.
    """
    
    @abstractmethod
    def list_packages(self, root: str) -> List[str]:
        """
        Enumerate all packages under root.
        
        Args:
            root: Repository root directory
            
        Returns:
            Sorted list of import paths
            
        Raises:
            CatalogError: If enumeration fails
        """
        pass
    
    @abstractmethod
    def direct_imports(self, import_path: str, dir: str) -> PackageMetadata:
        """
        Fetch metadata for one package.
        
        Args:
            import_path: Import path to look up
            dir: Directory of the importing package (lookup context)
            
        Returns:
            PackageMetadata with standard flag and direct imports
            
        Raises:
            CatalogError: If metadata is missing or unparseable
        """
        pass
    
    def module_prefix(self, root: str) -> str:
        """Import-path prefix that maps onto the repository root."""
        return ""
