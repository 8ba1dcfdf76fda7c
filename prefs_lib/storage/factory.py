"""Backend acquisition.

`acquire_backend` is the single place that turns `StorageSettings` into a
live backend. The file backend is imported lazily so the in-memory path
does not pay for it.
"""
from __future__ import annotations
import logging
from typing import Optional

from prefs_lib.config.settings import StorageSettings, load_settings
from .base import StorageBackend
from .errors import BackendUnavailable
from .memory_backend import MemoryBackend

logger = logging.getLogger(__name__)

BACKENDS = ("memory", "file")


async def acquire_backend(settings: Optional[StorageSettings] = None) -> StorageBackend:
    """Return the backend selected by `settings.backend`.

    Raises `BackendUnavailable` for unknown backend names and when the
    selected backend cannot be opened.
    """
    settings = settings or load_settings()
    if settings.backend == "memory":
        return MemoryBackend.get_instance()
    if settings.backend == "file":
        from .file_backend import FileBackend
        backend = await FileBackend.open(settings.file_path)
        logger.info("Using preferences file %s", settings.file_path)
        return backend
    raise BackendUnavailable(
        f"unknown storage backend {settings.backend!r}; expected one of {', '.join(BACKENDS)}"
    )
