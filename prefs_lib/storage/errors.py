"""Storage error hierarchy.

Only `BackendUnavailable` is expected to reach callers of the storage
adapter during normal use. Codec errors are always absorbed by the adapter
and `BackendOperationFailure` is absorbed on read/write.
"""


class StorageError(Exception):
    """Base exception for all storage errors."""


class BackendUnavailable(StorageError):
    """Raised when a backend cannot be acquired."""


class BackendOperationFailure(StorageError):
    """Raised when a backend rejects a get/set/remove/clear call."""


class CodecError(StorageError):
    """Base exception for value (de)serialization errors."""


class EncodeFailure(CodecError):
    """Raised when a value cannot be represented as text."""


class DecodeFailure(CodecError):
    """Raised when stored text cannot be decoded back into a value."""
