"""
Storage Package

The application owns exactly one storage object, created by ``init_storage``
and stored on ``app.extensions['storage']``.
"""

from flask import current_app

from restaurant_app.storage.base import (
    Storage, StorageError, DuplicateUsernameError, MissingReferenceError,
)
from restaurant_app.storage.database import DatabaseStorage
from restaurant_app.storage.memory import MemStorage

BACKENDS = {
    'database': DatabaseStorage,
    'memory': MemStorage,
}


def init_storage(app, storage=None):
    """Attach a storage backend to the app, building one from config if needed."""
    if storage is None:
        backend = app.config.get('STORAGE_BACKEND', 'database')
        try:
            storage = BACKENDS[backend]()
        except KeyError:
            raise ValueError(f'Unknown STORAGE_BACKEND: {backend!r}') from None
    app.extensions['storage'] = storage
    return storage


def get_storage():
    """Return the storage backend of the current application."""
    return current_app.extensions['storage']


__all__ = [
    'Storage',
    'StorageError',
    'DuplicateUsernameError',
    'MissingReferenceError',
    'DatabaseStorage',
    'MemStorage',
    'init_storage',
    'get_storage',
]
