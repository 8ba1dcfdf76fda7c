"""Storage backend that keeps every key in a single JSON file.

The file holds one JSON object mapping keys to text values. The whole map
is cached in memory when the backend is opened; reads are served from the
cache and every mutation rewrites the file atomically (write to a temporary
file, fsync, then rename over the original).
"""
from __future__ import annotations
import asyncio
import json
import logging
import os
from pathlib import Path
from threading import RLock
from typing import Dict, Optional, Set

from .base import StorageBackend
from .errors import BackendOperationFailure, BackendUnavailable

logger = logging.getLogger(__name__)


def _read_file(path: Path) -> Dict[str, str]:
    if not path.exists():
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise BackendUnavailable(f"cannot read preferences file {path}: {e}") from e
    except ValueError as e:
        # also covers bad UTF-8 and over-long number literals
        raise BackendUnavailable(f"preferences file {path} is not valid JSON") from e
    except RecursionError as e:
        raise BackendUnavailable(f"preferences file {path} is nested too deeply") from e
    if not isinstance(data, dict):
        raise BackendUnavailable(f"preferences file {path} must hold a JSON object")
    for key, value in data.items():
        if not isinstance(value, str):
            raise BackendUnavailable(f"preferences file {path} holds a non-text value for {key!r}")
    return data


class FileBackend(StorageBackend):
    """Backend persisting to a single JSON file.

    Use `FileBackend.open(path)` from async code; it loads the file without
    blocking the event loop. The constructor accepts an already loaded map.
    Concurrent mutations are not serialized here; the adapter lock does that.
    """

    def __init__(self, file_path: str | Path, values: Optional[Dict[str, str]] = None) -> None:
        self.file_path = Path(file_path)
        self._lock = RLock()
        self._cache: Dict[str, str] = dict(values or {})

    @classmethod
    async def open(cls, file_path: str | Path) -> "FileBackend":
        path = Path(file_path)
        values = await asyncio.to_thread(_read_file, path)
        logger.debug("FileBackend loaded %d keys from %s", len(values), path)
        return cls(path, values)

    def _persist(self, values: Dict[str, str]) -> None:
        path = self.file_path
        tmp = path.with_suffix(path.suffix + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(values, f)
                f.flush()
                os.fsync(f.fileno())
            tmp.replace(path)
        except OSError as e:
            raise BackendOperationFailure(f"cannot write preferences file {path}: {e}") from e

    async def _commit(self, values: Dict[str, str]) -> None:
        # Only swap the cache once the file is safely on disk.
        await asyncio.to_thread(self._persist, values)
        with self._lock:
            self._cache = values

    def _snapshot(self) -> Dict[str, str]:
        with self._lock:
            return dict(self._cache)

    def get_text(self, key: str) -> Optional[str]:
        with self._lock:
            return self._cache.get(key)

    async def set_text(self, key: str, text: str) -> None:
        values = self._snapshot()
        values[key] = text
        await self._commit(values)

    async def remove(self, key: str) -> None:
        values = self._snapshot()
        if key not in values:
            return
        del values[key]
        await self._commit(values)

    async def clear_all(self) -> None:
        await self._commit({})

    def keys(self) -> Set[str]:
        with self._lock:
            return set(self._cache)
