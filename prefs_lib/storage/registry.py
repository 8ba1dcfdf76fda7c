from __future__ import annotations
import asyncio
from typing import TYPE_CHECKING, Awaitable, Callable, Optional

from prefs_lib.config.settings import StorageSettings, load_settings

if TYPE_CHECKING:
    from .adapter import PreferencesStorage


class StorageRegistry:
    """Holds the current storage singleton and the lock shared by its adapters.

    `get_or_create` runs the factory at most once per empty slot even when
    called concurrently; `evict` empties the slot so the next call builds a
    fresh instance. Every adapter bound to a registry serializes its
    mutations on `registry.loop_lock()`. The lock is replaced whenever it is
    used from a different event loop than the previous one, so the registry
    survives successive `asyncio.run` calls.
    """

    def __init__(self, settings: Optional[StorageSettings] = None) -> None:
        self._instance: Optional[PreferencesStorage] = None
        self._settings = settings
        self.lock = asyncio.Lock()
        self._lock_loop: Optional[asyncio.AbstractEventLoop] = None

    @property
    def settings(self) -> StorageSettings:
        if self._settings is None:
            self._settings = load_settings()
        return self._settings

    @settings.setter
    def settings(self, value: StorageSettings) -> None:
        self._settings = value

    def loop_lock(self) -> asyncio.Lock:
        """Return the lock for the running event loop."""
        loop = asyncio.get_running_loop()
        if self._lock_loop is not loop:
            if self._lock_loop is not None:
                self.lock = asyncio.Lock()
            self._lock_loop = loop
        return self.lock

    def current_or_none(self) -> Optional[PreferencesStorage]:
        return self._instance

    async def get_or_create(
        self, factory: Callable[[], Awaitable[PreferencesStorage]]
    ) -> PreferencesStorage:
        async with self.loop_lock():
            if self._instance is None:
                self._instance = await factory()
            return self._instance

    def evict(self, instance: Optional[PreferencesStorage] = None) -> bool:
        """Empty the slot.

        When `instance` is given the slot is only emptied if it holds that
        instance. Returns True if something was evicted.
        """
        if self._instance is None:
            return False
        if instance is not None and self._instance is not instance:
            return False
        self._instance = None
        return True

    def reset(self, settings: Optional[StorageSettings] = None) -> None:
        """Forget the current instance and start over with a fresh lock."""
        self._instance = None
        self._settings = settings
        self.lock = asyncio.Lock()
        self._lock_loop = None


_default_registry = StorageRegistry()


def get_registry() -> StorageRegistry:
    """Return the process-wide default registry."""
    return _default_registry


def reset_registry(settings: Optional[StorageSettings] = None) -> StorageRegistry:
    _default_registry.reset(settings)
    return _default_registry
