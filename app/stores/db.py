"""
Database Connection
===================
asyncpg pool owned by the application lifespan.

The pool is created lazily on first use and closed on shutdown. Every store
call acquires its own connection for the duration of one query, so
concurrent fetches within a request never share a connection.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import asyncpg

from app.config import Settings
from .errors import DB_ERRORS, StoreFetchError

logger = logging.getLogger(__name__)


class Database:
    """Lazily created asyncpg pool with scoped connection acquisition."""

    def __init__(self, settings: Settings):
        self._dsn = settings.database_url
        self._min_size = settings.db_pool_min_size
        self._max_size = settings.db_pool_max_size
        self._pool: Optional[asyncpg.Pool] = None
        self._lock = asyncio.Lock()

        if not self.is_configured:
            logger.warning("DATABASE_URL not configured")

    @property
    def is_configured(self) -> bool:
        return bool(self._dsn)

    async def get_pool(self) -> asyncpg.Pool:
        """Get or create the connection pool."""
        if not self.is_configured:
            raise StoreFetchError("database", "DATABASE_URL not configured")

        if self._pool is None:
            async with self._lock:
                if self._pool is None:
                    try:
                        self._pool = await asyncpg.create_pool(
                            self._dsn,
                            min_size=self._min_size,
                            max_size=self._max_size,
                        )
                    except DB_ERRORS as e:
                        logger.error(f"Database connection error: {e}")
                        raise StoreFetchError("database", "Database connection failed") from e
                    logger.info(
                        f"Database pool ready (min={self._min_size}, max={self._max_size})"
                    )
        return self._pool

    @asynccontextmanager
    async def connection(self) -> AsyncIterator[asyncpg.Connection]:
        """Acquire a connection for one unit of work and release it afterwards."""
        pool = await self.get_pool()
        async with pool.acquire() as conn:
            yield conn

    async def close(self) -> None:
        """Close the connection pool."""
        if self._pool is not None:
            await self._pool.close()
            self._pool = None
            logger.info("Database pool closed")
