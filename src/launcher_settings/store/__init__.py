"""
Defines functions used to open the durable store that backs the
application settings.

Copyright (c) 2025 The launcher-settings authors.
All rights reserved.
"""

from launcher_settings import config
from launcher_settings.exceptions import StoreOpenError
from launcher_settings.store import backends


DEFAULT_BACKEND = 'json'


def get_backend(backend=None):
    """
    Return the store backend class registered under the given name.
    """
    _backend = backend or config.resolve('STORE_BACKEND', DEFAULT_BACKEND)
    klass = backends.backend_classes.get(_backend)
    if klass is None:
        raise StoreOpenError(f'Unknown settings store backend: {_backend!r}')
    return klass


async def open_store(path, auto_persist=True, backend=None, **kwargs):
    """
    Open a store handle.

    Args:
        path (str): Store path or namespace, e.g. 'settings.json'
        auto_persist (bool): Write through to durable storage on every
            change instead of waiting for save()
        backend (str or None): Backend name; defaults to the
            STORE_BACKEND setting
    """
    klass = get_backend(backend)
    return await klass.open(path, auto_persist=auto_persist, **kwargs)
