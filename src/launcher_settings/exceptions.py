"""
Defines the exceptions raised by the settings facade and the storage
backends.

Copyright (c) 2025 The launcher-settings authors.
All rights reserved.
"""


class SettingsError(Exception):
    """Base class for every settings error."""


class InitializationFailure(SettingsError):
    """Raised when the settings store could not be opened."""


class StoreUnavailable(SettingsError):
    """Raised when a write is requested but no store handle exists."""


class StoreError(SettingsError):
    """Raised by storage backends on I/O or serialization failures."""


class StoreOpenError(StoreError):
    pass


class StoreReadError(StoreError):
    pass


class StoreWriteError(StoreError):
    pass


class UnknownSettingError(SettingsError, KeyError):
    """Raised for keys outside the settings record."""

    def __str__(self):
        return f'Unknown setting: {self.args[0]!r}'
