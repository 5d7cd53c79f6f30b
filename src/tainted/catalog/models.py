"""Pydantic models for catalog packages."""

from typing import List, Optional
from pydantic import BaseModel, Field

# Pseudo-import for foreign-function (cgo) code: a leaf with no metadata.
FOREIGN_IMPORT = "C"


class PackageMetadata(BaseModel):
    """Resolved metadata for a single package."""
    import_path: str = Field(..., description="Globally unique import path")
    dir: Optional[str] = Field(None, description="Directory holding the package sources")
    standard: bool = Field(default=False, description="Package belongs to the standard library")
    imports: List[str] = Field(default_factory=list, description="Direct imports in declaration order")

    class Config:
        """Pydantic config."""
        frozen = True


class ManifestPackage(BaseModel):
    """Package entry as declared in a YAML manifest."""
    import_path: str = Field(..., min_length=1, description="Globally unique import path")
    dir: Optional[str] = Field(None, description="Root-relative directory (defaults to the import path)")
    standard: bool = Field(default=False, description="Treat as opaque standard-library leaf")
    imports: List[str] = Field(default_factory=list, description="Direct imports")


class Manifest(BaseModel):
    """YAML manifest describing a package graph."""
    module: str = Field(default="", description="Import-path prefix of the repository root")
    packages: List[ManifestPackage] = Field(default_factory=list, description="Declared packages")
