"""
Defines a settings store backend that keeps the document in a JSON file
under the user's data directory.

Copyright (c) 2025 The launcher-settings authors.
All rights reserved.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import time
from pathlib import Path

from launcher_settings import config
from launcher_settings.exceptions import StoreOpenError, StoreWriteError
from launcher_settings.store.backends.base import DocumentStore


logger = logging.getLogger(__name__)


def get_data_dir() -> Path:
    """
    Determines the data directory in order of priority:
    1. DATA_DIR configuration value
    2. LAUNCHER_SETTINGS_DATA_DIR environment variable
    3. ~/.launcher_settings
    """
    data_dir = config.resolve('DATA_DIR', Path.home() / '.launcher_settings')
    return Path(data_dir).expanduser()


def _backup_corrupt_file(file_path: Path) -> None:
    stamp = time.strftime('%Y%m%d_%H%M%S')
    backup = file_path.with_name(f'{file_path.name}.bak.{stamp}')
    try:
        backup.write_bytes(file_path.read_bytes())
    except OSError:
        logger.warning('Could not back up corrupt settings file %s', file_path)
    else:
        logger.warning(
            'Settings file %s is corrupt; backed up to %s',
            file_path,
            backup,
        )


def _load_document(file_path: Path) -> dict:
    file_path.parent.mkdir(parents=True, exist_ok=True)
    if not file_path.exists():
        return {}
    raw = file_path.read_bytes()
    try:
        document = json.loads(raw)
        if not isinstance(document, dict):
            raise ValueError('settings document root is not an object')
    except ValueError:
        _backup_corrupt_file(file_path)
        return {}
    return document


def _write_document(file_path: Path, document: dict) -> None:
    file_path.parent.mkdir(parents=True, exist_ok=True)
    tmp = file_path.with_suffix(file_path.suffix + '.tmp')
    try:
        tmp.write_text(
            json.dumps(document, indent=2, sort_keys=True),
            encoding='utf-8',
        )
        os.replace(tmp, file_path)
    except Exception:
        tmp.unlink(missing_ok=True)
        raise


class JsonFileBackend(DocumentStore):

    def __init__(self, path, file_path, document=None, auto_persist=True):
        super().__init__(path, document, auto_persist=auto_persist)
        self.file_path = file_path

    @classmethod
    async def open(cls, path, auto_persist=True, data_dir=None, **kwargs):
        """
        Load the document at <data_dir>/<path>. A missing file opens an
        empty document.
        """
        base = Path(data_dir) if data_dir is not None else get_data_dir()
        file_path = base / path
        try:
            document = await asyncio.to_thread(_load_document, file_path)
        except OSError as exc:
            raise StoreOpenError(
                f'Unable to open settings file {file_path}'
            ) from exc
        return cls(path, file_path, document, auto_persist=auto_persist)

    async def _write(self, document):
        try:
            await asyncio.to_thread(_write_document, self.file_path, document)
        except (OSError, TypeError, ValueError) as exc:
            raise StoreWriteError(
                f'Unable to write settings file {self.file_path}'
            ) from exc
