"""Pydantic model for run settings."""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field
from ..contracts.selection import FailurePolicy


class CatalogKind(str, Enum):
    """Where package metadata comes from."""
    GO = "go"
    MANIFEST = "manifest"


class Settings(BaseModel):
    """Effective settings for one run (defaults < user < project < file < CLI)."""
    from_rev: str = Field(default="HEAD~1", alias="from", description="Revision to take changes from")
    to_rev: str = Field(default="HEAD", alias="to", description="Revision to take changes to")
    include_tests: bool = Field(default=False, description="Count changes to test files")
    test_patterns: List[str] = Field(default_factory=lambda: ["*_test.go"], description="Basename globs of test files")
    entrypoints: Optional[str] = Field(default=None, description="Subtree whose packages may be reported")
    catalog: CatalogKind = Field(default=CatalogKind.GO, description="Package catalog backend")
    manifest: Optional[str] = Field(default=None, description="Manifest YAML for the manifest catalog")
    workers: Optional[int] = Field(default=None, ge=1, description="Worker threads (default: CPU count)")
    include_self: bool = Field(default=False, description="A change in a candidate's own directory selects it")
    on_error: FailurePolicy = Field(default=FailurePolicy.FAIL, description="Policy for unresolvable candidates")
    
    class Config:
        """Pydantic config."""
        populate_by_name = True
        extra = "forbid"
