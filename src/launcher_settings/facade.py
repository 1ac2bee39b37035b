"""
Defines the settings facade that the application's UI and controller
code use to read and change settings.

Reads favour availability: any store failure is logged and the default
value is returned. Writes favour correctness: any failure is raised so
the caller knows the change was not persisted.

Usage:

    from launcher_settings import SettingsFacade

    settings = SettingsFacade()

    async def on_theme_toggled(theme):
        await settings.save_setting('theme', theme)

Copyright (c) 2025 The launcher-settings authors.
All rights reserved.
"""

from __future__ import annotations

import asyncio
import logging
from types import MappingProxyType

from launcher_settings import store
from launcher_settings.defaults import DEFAULT_SETTINGS, SETTING_KEYS
from launcher_settings.exceptions import (
    InitializationFailure,
    StoreError,
    StoreUnavailable,
    UnknownSettingError,
)


logger = logging.getLogger(__name__)

DEFAULT_STORE_PATH = 'settings.json'


class SettingsFacade:
    """
    Lazily opens the settings store on first use and exposes
    default-safe accessors over it.

    Create one instance at application startup and pass it to the
    components that need settings.

    Args:
        path (str): Store path or namespace
        backend (str or None): Store backend name; defaults to the
            STORE_BACKEND setting
        defaults (mapping or None): Replacement default table; must
            define exactly the keys of the settings record
        store_kwargs: Extra arguments for the backend's open()
    """

    DEFAULT_SETTINGS = DEFAULT_SETTINGS

    def __init__(self, path=DEFAULT_STORE_PATH, backend=None, defaults=None,
                 **store_kwargs):
        if defaults is not None:
            if set(defaults) != set(SETTING_KEYS):
                raise ValueError(
                    'defaults must define exactly one value per setting'
                )
            self.DEFAULT_SETTINGS = MappingProxyType(dict(defaults))
        self._path = path
        self._backend = backend
        self._store_kwargs = store_kwargs
        self._store = None
        self._initialized = False
        self._init_lock = asyncio.Lock()

    @property
    def initialized(self) -> bool:
        return self._initialized

    async def ensure_ready(self) -> None:
        """
        Open the store once. Safe to call repeatedly and concurrently;
        after a failure the next call tries again.
        """
        if self._initialized:
            return
        async with self._init_lock:
            if self._initialized:
                return
            try:
                self._store = await store.open_store(
                    self._path,
                    auto_persist=True,
                    backend=self._backend,
                    **self._store_kwargs
                )
            except Exception as exc:
                logger.error('Failed to initialize settings store: %s', exc)
                raise InitializationFailure(
                    f'Unable to open settings store {self._path!r}'
                ) from exc
            self._initialized = True
            logger.info('Settings store initialized successfully')

    async def _require_store(self):
        await self.ensure_ready()
        if self._store is None:
            logger.error('Store not initialized')
            raise StoreUnavailable('Settings store is not initialized')
        return self._store

    @staticmethod
    def _check_key(key):
        if key not in SETTING_KEYS:
            raise UnknownSettingError(key)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def get_setting(self, key):
        """
        Return the stored value for key, or its default when the value
        is absent or cannot be read.
        """
        self._check_key(key)
        default = self.DEFAULT_SETTINGS[key]
        try:
            handle = await self._require_store()
            value = await handle.get(key)
        except Exception:
            logger.exception('Failed to get setting %s', key)
            return default
        return default if value is None else value

    async def get_all_settings(self) -> dict:
        """
        Return a complete settings record. Stored values are laid over
        the defaults; any failure returns the defaults alone.
        """
        settings = dict(self.DEFAULT_SETTINGS)
        try:
            handle = await self._require_store()
            for key in SETTING_KEYS:
                value = await handle.get(key)
                if value is not None:
                    settings[key] = value
        except Exception:
            logger.exception('Failed to get all settings')
            return dict(self.DEFAULT_SETTINGS)
        return settings

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def save_setting(self, key, value) -> None:
        self._check_key(key)
        handle = await self._require_store()
        try:
            await handle.set(key, value)
        except StoreError:
            logger.exception('Failed to save setting %s', key)
            raise

    async def save_settings(self, settings) -> None:
        """
        Write each key of a partial settings record in order. Not
        atomic: if one write fails, the earlier ones stay committed and
        the later ones are skipped.
        """
        for key in settings:
            self._check_key(key)
        handle = await self._require_store()
        try:
            for key, value in settings.items():
                await handle.set(key, value)
        except StoreError:
            logger.exception('Failed to save settings')
            raise

    async def clear_settings(self) -> None:
        """
        Remove every stored value; later reads return the defaults.
        """
        handle = await self._require_store()
        try:
            await handle.clear()
        except StoreError:
            logger.exception('Failed to clear settings')
            raise
