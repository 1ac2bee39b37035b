"""
Defines a settings store backend that keeps documents in memory. Used
mainly for unit testing an application.

Copyright (c) 2025 The launcher-settings authors.
All rights reserved.
"""

from launcher_settings import store
from launcher_settings.store.backends.base import DocumentStore


def reset():
    """
    Drop every in-memory document.
    """
    store.documents = {}


class SettingsBackend(DocumentStore):
    """
    Handles opened on the same path read and write one shared document.
    """

    @property
    def _document(self):
        return store.documents.setdefault(self.path, {})

    @_document.setter
    def _document(self, document):
        store.documents[self.path] = document

    @classmethod
    async def open(cls, path, auto_persist=True, **kwargs):
        if not hasattr(store, 'documents'):
            store.documents = {}
        return cls(path, store.documents.get(path), auto_persist=auto_persist)

    async def _write(self, document):
        store.documents[self.path] = document
