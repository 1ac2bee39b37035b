"""
Defines the shape of the settings record and its default values.

Copyright (c) 2025 The launcher-settings authors.
All rights reserved.
"""

from types import MappingProxyType
from typing import TypedDict

THEME_DARK = 'dark'
THEME_LIGHT = 'light'
THEMES = (THEME_DARK, THEME_LIGHT)


class AppSettings(TypedDict):
    accentColor: str
    installLocation: str
    theme: str
    useSystemTheme: bool
    customCSS: str
    validateFnfMods: bool
    showTerminalOutput: bool


class SettingsPatch(TypedDict, total=False):
    """
    Any subset of the settings record, used for bulk writes.
    """
    accentColor: str
    installLocation: str
    theme: str
    useSystemTheme: bool
    customCSS: str
    validateFnfMods: bool
    showTerminalOutput: bool


DEFAULT_SETTINGS = MappingProxyType({
    'accentColor': '#FF0088',
    'installLocation': 'C:\\Users\\Public\\Documents\\FNF Mods',
    'theme': THEME_DARK,
    'useSystemTheme': True,
    'customCSS': '',
    'validateFnfMods': True,
    'showTerminalOutput': True,
})

SETTING_KEYS = tuple(AppSettings.__annotations__)

if set(SETTING_KEYS) != set(DEFAULT_SETTINGS):
    raise RuntimeError(
        'DEFAULT_SETTINGS must define exactly one value per setting'
    )
