"""Run-scoped package metadata cache."""

import threading
from typing import Callable, Dict, Optional
from ..catalog.models import PackageMetadata


class MetadataCache:
    """
    Monotonic import path -> PackageMetadata mapping for one run.
    
    Entries are never evicted or replaced. Concurrent callers asking for the
    same missing import path serialize on a per-key lock, so the catalog is
    queried at most once per import path. Failed fetches are not cached.
    """
    
    def __init__(self):
        self._entries: Dict[str, PackageMetadata] = {}
        self._key_locks: Dict[str, threading.Lock] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0
    
    def get(self, import_path: str) -> Optional[PackageMetadata]:
        with self._lock:
            return self._entries.get(import_path)
    
    def get_or_fetch(self, import_path: str, fetch: Callable[[], PackageMetadata]) -> PackageMetadata:
        """Return cached metadata, calling fetch() only on the first miss."""
        with self._lock:
            entry = self._entries.get(import_path)
            if entry is not None:
                self.hits += 1
                return entry
            key_lock = self._key_locks.setdefault(import_path, threading.Lock())
        
        with key_lock:
            with self._lock:
                entry = self._entries.get(import_path)
                if entry is not None:
                    self.hits += 1
                    return entry
            
            metadata = fetch()
            
            with self._lock:
                self.misses += 1
                self._entries[import_path] = metadata
                self._key_locks.pop(import_path, None)
            return metadata
    
    def snapshot(self) -> Dict[str, PackageMetadata]:
        """Copy of all cached entries."""
        with self._lock:
            return dict(self._entries)
    
    def __contains__(self, import_path: str) -> bool:
        with self._lock:
            return import_path in self._entries
    
    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
