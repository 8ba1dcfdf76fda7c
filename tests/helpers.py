import asyncio
from typing import Dict, List, Optional, Set, Tuple

from prefs_lib.storage.base import StorageBackend
from prefs_lib.storage.errors import BackendOperationFailure


class RecordingBackend(StorageBackend):
    """In-memory backend that records every call made against it.

    `fail_on` names operations ('get_text', 'set_text', 'remove',
    'clear_all') that raise `BackendOperationFailure`. `delay` makes every
    mutation yield to the event loop that many times before completing.
    """

    def __init__(self, values: Optional[Dict[str, str]] = None, fail_on: Tuple[str, ...] = (), delay: int = 0):
        self.values: Dict[str, str] = dict(values or {})
        self.calls: List[tuple] = []
        self.fail_on = set(fail_on)
        self.delay = delay
        self.in_flight = 0
        self.max_in_flight = 0
        self.closed = False

    def _check(self, op):
        if op in self.fail_on:
            raise BackendOperationFailure(f"{op} rejected")

    async def _mutate(self, call, apply):
        self.calls.append(call)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            for _ in range(self.delay):
                await asyncio.sleep(0)
            self._check(call[0])
            apply()
        finally:
            self.in_flight -= 1

    def get_text(self, key):
        self.calls.append(('get_text', key))
        self._check('get_text')
        return self.values.get(key)

    async def set_text(self, key, text):
        await self._mutate(('set_text', key, text), lambda: self.values.__setitem__(key, text))

    async def remove(self, key):
        await self._mutate(('remove', key), lambda: self.values.pop(key, None))

    async def clear_all(self):
        await self._mutate(('clear_all',), self.values.clear)

    def keys(self) -> Set[str]:
        return set(self.values)

    async def close(self):
        self.closed = True

    def ops(self, name):
        return [c for c in self.calls if c[0] == name]
