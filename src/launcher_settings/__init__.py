"""
Persistent, typed application settings for the mod launcher.

Copyright (c) 2025 The launcher-settings authors.
All rights reserved.
"""

from launcher_settings.defaults import (
    DEFAULT_SETTINGS,
    SETTING_KEYS,
    AppSettings,
    SettingsPatch,
)
from launcher_settings.exceptions import (
    InitializationFailure,
    SettingsError,
    StoreError,
    StoreOpenError,
    StoreReadError,
    StoreUnavailable,
    StoreWriteError,
    UnknownSettingError,
)
from launcher_settings.facade import SettingsFacade

__all__ = [
    'AppSettings',
    'DEFAULT_SETTINGS',
    'InitializationFailure',
    'SETTING_KEYS',
    'SettingsError',
    'SettingsFacade',
    'SettingsPatch',
    'StoreError',
    'StoreOpenError',
    'StoreReadError',
    'StoreUnavailable',
    'StoreWriteError',
    'UnknownSettingError',
]
