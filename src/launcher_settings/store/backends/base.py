"""
Defines the document handle shared by every settings store backend.

A backend keeps the whole settings document in memory and writes it
back through `_write()` after each change when auto-persist is on.

Copyright (c) 2025 The launcher-settings authors.
All rights reserved.
"""

from __future__ import annotations

import asyncio
import copy
import json

from launcher_settings.exceptions import StoreWriteError


class DocumentStore:
    """
    Async key-value handle over a single JSON object document.

    Subclasses implement `open()` and `_write()`.
    """

    def __init__(self, path, document=None, auto_persist=True):
        self.path = path
        self.auto_persist = auto_persist
        self._document = dict(document or {})
        self._lock = asyncio.Lock()

    @classmethod
    async def open(cls, path, auto_persist=True, **kwargs):
        raise NotImplementedError

    async def _write(self, document):
        raise NotImplementedError

    async def get(self, key):
        """
        Return the stored value for key, or None when absent.
        """
        return copy.deepcopy(self._document.get(key))

    async def keys(self):
        return list(self._document)

    async def set(self, key, value):
        try:
            json.dumps(value)
        except (TypeError, ValueError) as exc:
            raise StoreWriteError(
                f'Value for {key!r} is not JSON serializable'
            ) from exc
        async with self._lock:
            document = dict(self._document)
            document[key] = copy.deepcopy(value)
            await self._commit(document)

    async def delete(self, key):
        async with self._lock:
            document = dict(self._document)
            document.pop(key, None)
            await self._commit(document)

    async def clear(self):
        async with self._lock:
            await self._commit({})

    async def save(self):
        """
        Write the current document, whatever the auto-persist mode.
        """
        async with self._lock:
            await self._write(dict(self._document))

    async def _commit(self, document):
        # The in-memory document only changes once the write succeeded.
        if self.auto_persist:
            await self._write(document)
        self._document = document
