"""
Data stores backing the matching engine.

- PreferencesStore: "UserPreferences" table, one row per user
- FieldsStore: "CareerFields" catalog, read-only
- CoachesStore: "Coaches" directory, verified coaches only
"""

from .coaches import CoachesStore
from .db import Database
from .errors import StoreError, StoreFetchError, StoreWriteError
from .fields import FieldsStore
from .preferences import PreferencesStore

__all__ = [
    "Database",
    "StoreError",
    "StoreFetchError",
    "StoreWriteError",
    "FieldsStore",
    "PreferencesStore",
    "CoachesStore",
]
