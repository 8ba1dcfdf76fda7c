"""Simple memory-backed storage backend

This backend keeps text values in a plain dict. A process-wide instance is
available through `MemoryBackend.get_instance()` so that data outlives any
single adapter, the same way a platform preferences store would.
"""
from __future__ import annotations
from threading import RLock
from typing import Dict, Mapping, Optional, Set

from .base import StorageBackend

_shared_lock = RLock()
_shared_instance: Optional["MemoryBackend"] = None


class MemoryBackend(StorageBackend):
    def __init__(self, initial: Optional[Mapping[str, str]] = None):
        self._lock = RLock()
        self._store: Dict[str, str] = dict(initial or {})

    @classmethod
    def get_instance(cls) -> "MemoryBackend":
        """Return the process-wide backend, creating it on first use."""
        global _shared_instance
        with _shared_lock:
            if _shared_instance is None:
                _shared_instance = cls()
            return _shared_instance

    @classmethod
    def set_initial_values(cls, values: Mapping[str, str]) -> "MemoryBackend":
        """Replace the process-wide backend with one seeded from `values`.

        Intended for tests: adapters created before the call keep the old
        backend, later acquisitions get the new one.
        """
        global _shared_instance
        with _shared_lock:
            _shared_instance = cls(values)
            return _shared_instance

    def get_text(self, key: str) -> Optional[str]:
        with self._lock:
            return self._store.get(key)

    async def set_text(self, key: str, text: str) -> None:
        with self._lock:
            self._store[key] = text

    async def remove(self, key: str) -> None:
        with self._lock:
            self._store.pop(key, None)

    async def clear_all(self) -> None:
        with self._lock:
            self._store.clear()

    def keys(self) -> Set[str]:
        with self._lock:
            return set(self._store)
