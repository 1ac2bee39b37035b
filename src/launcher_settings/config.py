"""
Defines a global configuration registry used by other modules.

Copyright (c) 2025 The launcher-settings authors.
All rights reserved.
"""

import os

ENV_PREFIX = 'LAUNCHER_SETTINGS_'

_config = {}


def set(**kwargs):
    _config.update(kwargs)


def load_dict(dict_items):
    _config.update(dict_items)


def get(key, default=None):
    return _config.get(key, default)


def clear():
    _config.clear()


def resolve(key, default=None):
    """
    Look up a value in order of priority:
    1. The configuration registry
    2. The LAUNCHER_SETTINGS_<KEY> environment variable
    3. The given default
    """
    value = get(key)
    if value is None:
        value = os.environ.get(f'{ENV_PREFIX}{key}')
    return value if value is not None else default
