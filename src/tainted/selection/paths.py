"""Normalize import paths and directories to one root-relative form."""

import os
import posixpath
from pathlib import Path
from typing import Optional
from ..catalog.models import PackageMetadata


def normalize_dir(path: str) -> str:
    """
    Normalize a root-relative path: POSIX separators, no leading './',
    no trailing '/'. The root itself normalizes to ''.
    """
    path = path.replace("\\", "/").strip()
    if not path:
        return ""
    normalized = posixpath.normpath(path)
    if normalized in (".", "/"):
        return ""
    return normalized.lstrip("/")


class PathNormalizer:
    """Map import paths onto root-relative directories."""
    
    def __init__(self, root: str = ".", module_prefix: str = ""):
        self.root = Path(root).resolve()
        self.module_prefix = module_prefix.strip("/")
    
    def import_path_dir(self, import_path: str, metadata: Optional[PackageMetadata] = None) -> str:
        """
        Root-relative directory of a package.
        
        Prefers the directory reported by the catalog (handles vendored
        packages), then falls back to stripping the module prefix on a path
        component boundary.
        """
        if metadata is not None and metadata.dir:
            relative = self._relative_dir(metadata.dir)
            if relative is not None:
                return relative
        return self.strip_prefix(import_path)
    
    def strip_prefix(self, import_path: str) -> str:
        prefix = self.module_prefix
        if prefix:
            if import_path == prefix:
                return ""
            if import_path.startswith(prefix + "/"):
                return normalize_dir(import_path[len(prefix) + 1:])
        return normalize_dir(import_path)
    
    def _relative_dir(self, dir: str) -> Optional[str]:
        if not os.path.isabs(dir):
            return normalize_dir(dir)
        try:
            relative = Path(dir).resolve().relative_to(self.root)
        except ValueError:
            return None
        return normalize_dir(relative.as_posix())


class SubtreeFilter:
    """Restrict reportable candidates to a root-relative subtree."""
    
    def __init__(self, prefix: Optional[str] = None):
        self.prefix = self._clean(prefix) if prefix else None
    
    @staticmethod
    def _clean(prefix: str) -> str:
        prefix = prefix.replace("\\", "/").strip()
        for suffix in ("/...", "/*", "/**"):
            if prefix.endswith(suffix):
                prefix = prefix[:-len(suffix)]
                break
        return normalize_dir(prefix)
    
    def matches(self, relative_dir: str) -> bool:
        if self.prefix is None or self.prefix == "":
            return True
        return relative_dir == self.prefix or relative_dir.startswith(self.prefix + "/")
    
    def __repr__(self) -> str:
        return f"SubtreeFilter(prefix={self.prefix!r})"
