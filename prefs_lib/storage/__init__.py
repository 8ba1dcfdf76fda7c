"""Preferences storage package."""

from .adapter import PreferencesStorage
from .base import StorageBackend
from .errors import (
    BackendOperationFailure,
    BackendUnavailable,
    DecodeFailure,
    EncodeFailure,
    StorageError,
)
from .file_backend import FileBackend
from .interfaces import StorageProtocol
from .memory_backend import MemoryBackend
from .registry import StorageRegistry, get_registry, reset_registry

__all__ = [
    "PreferencesStorage",
    "StorageBackend",
    "StorageProtocol",
    "MemoryBackend",
    "FileBackend",
    "StorageRegistry",
    "get_registry",
    "reset_registry",
    "StorageError",
    "BackendUnavailable",
    "BackendOperationFailure",
    "EncodeFailure",
    "DecodeFailure",
]
