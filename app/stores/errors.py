"""
Store errors.

"No rows" is never an error: stores return None or an empty list for it.
These exceptions mean the query or the connection itself failed.
"""

import asyncio

import asyncpg


# Failures raised by asyncpg while connecting, acquiring or querying
DB_ERRORS = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
    asyncio.TimeoutError,
)


class StoreError(Exception):
    """Base exception for store failures."""

    def __init__(self, store: str, message: str):
        self.store = store
        self.message = message
        super().__init__(f"{store}: {message}")


class StoreFetchError(StoreError):
    """A read against a store failed."""
    pass


class StoreWriteError(StoreError):
    """A write against a store failed."""
    pass
