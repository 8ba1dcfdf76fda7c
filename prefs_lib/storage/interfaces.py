from typing import Protocol, Any, Optional, runtime_checkable


@runtime_checkable
class StorageProtocol(Protocol):
    """Storage contract offered to state-persistence callers.

    `read` is synchronous; every mutation is a coroutine. Implementations
    follow the best-effort semantics documented on
    `prefs_lib.storage.adapter.PreferencesStorage` (absent on decode
    failure, silent no-op on encode failure, no-op after close).
    """

    def read(self, key: str) -> Optional[Any]: ...

    async def write(self, key: str, value: Any) -> None: ...

    async def delete(self, key: str) -> None: ...

    async def clear(self) -> None: ...

    async def close(self) -> None: ...
