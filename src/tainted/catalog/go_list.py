"""Package catalog backed by the `go list` tool."""

import json
import subprocess
from pathlib import Path
from typing import List, Optional
from .base import PackageCatalog
from .models import PackageMetadata
from ..utils.errors import CatalogError
from ..utils.logging import get_logger

logger = get_logger("catalog.go_list")

GO_COMMAND = "go"


class GoListCatalog(PackageCatalog):
    """Catalog that shells out to `go list` for enumeration and metadata."""
    
    def __init__(self, root: str, go_binary: str = GO_COMMAND, timeout: int = 120):
        self.root = str(Path(root).resolve())
        self.go_binary = go_binary
        self.timeout = timeout
    
    def list_packages(self, root: str) -> List[str]:
        """List every package under root with `go list ./...`."""
        stdout = self._run(["list", "./..."], cwd=root)
        packages = sorted({line.strip() for line in stdout.splitlines() if line.strip()})
        logger.info(f"Enumerated {len(packages)} packages under {root}")
        return packages
    
    def direct_imports(self, import_path: str, dir: str) -> PackageMetadata:
        """Describe one package with `go list -e -json`."""
        stdout = self._run(["list", "-e", "-json", import_path], cwd=self._lookup_dir(dir))
        try:
            data = json.loads(stdout)
        except json.JSONDecodeError as e:
            raise CatalogError(f"Unparseable metadata for {import_path}: {e}")
        
        error = data.get("Error")
        if error:
            message = error.get("Err") if isinstance(error, dict) else str(error)
            raise CatalogError(f"Cannot load package {import_path}: {message}")
        
        standard = bool(data.get("Standard", False))
        return PackageMetadata(
            import_path=data.get("ImportPath") or import_path,
            dir=data.get("Dir"),
            standard=standard,
            imports=[] if standard else list(data.get("Imports") or []),
        )
    
    def module_prefix(self, root: str) -> str:
        """Return the main module path, or empty outside module mode."""
        try:
            stdout = self._run(["list", "-m"], cwd=root)
        except CatalogError as e:
            logger.debug(f"No module path for {root}: {e}")
            return ""
        lines = [line.strip() for line in stdout.splitlines() if line.strip()]
        return lines[0] if lines else ""
    
    def _lookup_dir(self, dir: Optional[str]) -> str:
        if dir and Path(dir).is_dir():
            return dir
        return self.root
    
    def _run(self, args: List[str], cwd: str) -> str:
        cmd = [self.go_binary] + args
        logger.debug(f"Running {' '.join(cmd)} in {cwd}")
        try:
            result = subprocess.run(
                cmd,
                cwd=cwd,
                capture_output=True,
                text=True,
                timeout=self.timeout
            )
        except FileNotFoundError:
            raise CatalogError(f"{self.go_binary} is missing")
        except subprocess.TimeoutExpired:
            raise CatalogError(f"{' '.join(cmd)} timed out after {self.timeout}s")
        
        if result.returncode != 0:
            raise CatalogError(f"{' '.join(cmd)} failed: {result.stderr.strip()}")
        return result.stdout
