"""Storage backend interface definitions.

Defines the StorageBackend abstract class wrapped by the preferences
adapter. A backend is a flat string-keyed store of text values; it knows
nothing about the structure of what it holds, the adapter translates
values to text before handing them over.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional, Set


class StorageBackend(ABC):
    """Abstract key/text backend.

    Implementations must be thread-safe: mutations may be persisted from a
    worker thread while reads happen on the event loop.

    Every failure is reported as `BackendOperationFailure`.
    """

    @abstractmethod
    def get_text(self, key: str) -> Optional[str]:
        """Return the text stored under `key`, or None if there is none."""

    @abstractmethod
    async def set_text(self, key: str, text: str) -> None:
        """Store `text` under `key`, replacing any previous value."""

    @abstractmethod
    async def remove(self, key: str) -> None:
        """Remove `key`. Removing a missing key is not an error."""

    @abstractmethod
    async def clear_all(self) -> None:
        """Erase every key held by the backend."""

    @abstractmethod
    def keys(self) -> Set[str]:
        """Return a snapshot of the keys currently stored."""

    async def close(self) -> None:
        """Release resources held by the backend. No-op by default."""
        return
