"""Preferences-backed implementation of the storage contract.

`PreferencesStorage` persists JSON-encoded values in a `StorageBackend`
and is normally obtained through the lazy singleton accessor:

    storage = await PreferencesStorage.build()
    await storage.write("counter", {"value": 1})
    storage.read("counter")  # -> {"value": 1}

Persistence is best effort. A value that cannot be encoded, a write the
backend rejects, and stored text that cannot be decoded all behave as if
the operation had no effect; they are logged, never raised. After `close()`
every operation is a no-op and `read` returns None.
"""
from __future__ import annotations
import logging
from typing import Any, Optional

from prefs_lib.config.settings import StorageSettings
from .base import StorageBackend
from .errors import BackendOperationFailure, DecodeFailure, EncodeFailure
from .factory import acquire_backend
from .registry import StorageRegistry, get_registry
from .serializer import Codec, JSONCodec

logger = logging.getLogger(__name__)


class PreferencesStorage:
    """Storage adapter over a string-keyed text backend.

    Construct directly with a backend for tests or custom wiring; use
    `build()` everywhere else. All adapters bound to the same registry share
    its lock, so backend mutations never interleave.
    """

    def __init__(
        self,
        backend: StorageBackend,
        *,
        codec: Optional[Codec] = None,
        registry: Optional[StorageRegistry] = None,
    ) -> None:
        self._backend = backend
        self._codec: Codec = codec or JSONCodec()
        self._registry = registry or get_registry()
        self._closed = False

    @classmethod
    async def build(
        cls,
        registry: Optional[StorageRegistry] = None,
        settings: Optional[StorageSettings] = None,
    ) -> "PreferencesStorage":
        """Return the registry's current instance, creating it if needed.

        Backend acquisition errors (`BackendUnavailable`) propagate and leave
        the registry empty, so a later call may retry.
        """
        registry = registry or get_registry()

        async def create() -> "PreferencesStorage":
            backend = await acquire_backend(settings or registry.settings)
            logger.info("Created preferences storage on %s", type(backend).__name__)
            return cls(backend, registry=registry)

        return await registry.get_or_create(create)

    @property
    def closed(self) -> bool:
        return self._closed

    def read(self, key: str) -> Optional[Any]:
        if self._closed:
            return None
        try:
            text = self._backend.get_text(key)
        except BackendOperationFailure:
            logger.warning("Error reading key %r from preferences", key, exc_info=True)
            return None
        if text is None:
            return None
        logger.debug("Reading key %r from preferences: %s", key, text)
        try:
            return self._codec.decode(text)
        except DecodeFailure:
            logger.warning("Error decoding key %r from preferences", key, exc_info=True)
            return None

    async def write(self, key: str, value: Any) -> None:
        if self._closed:
            return
        async with self._registry.loop_lock():
            # close() may have run while we waited for the lock
            if self._closed:
                return
            logger.debug("Writing key %r to preferences: %r", key, value)
            try:
                text = self._codec.encode(value)
            except EncodeFailure:
                logger.warning("Error encoding key %r for preferences", key, exc_info=True)
                return
            try:
                await self._backend.set_text(key, text)
            except BackendOperationFailure:
                logger.warning("Error writing key %r to preferences", key, exc_info=True)

    async def delete(self, key: str) -> None:
        if self._closed:
            return
        async with self._registry.loop_lock():
            if self._closed:
                return
            try:
                await self._backend.remove(key)
            except BackendOperationFailure:
                logger.exception("Error deleting key %r from preferences", key)
                raise

    async def clear(self) -> None:
        if self._closed:
            return
        self._registry.evict()
        async with self._registry.loop_lock():
            if self._closed:
                return
            try:
                await self._backend.clear_all()
            except BackendOperationFailure:
                logger.exception("Error clearing preferences")
                raise
        logger.info("Cleared preferences")

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._registry.evict(self)
        await self._backend.close()
