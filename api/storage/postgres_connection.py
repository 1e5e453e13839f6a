"""
PostgreSQL connection pool management using asyncpg.

The pool is process-wide shared state with an explicit lifecycle: opened
once at startup (and pinged, so an unreachable database fails fast) and
closed on shutdown. It is handed to DriveStore explicitly.
"""
import asyncio
import logging
from typing import Optional

import asyncpg

from config import default_config

logger = logging.getLogger(__name__)


class PostgresPool:
    """Owns the asyncpg connection pool."""

    def __init__(self, config=default_config.database):
        self.config = config
        self._pool: Optional[asyncpg.Pool] = None

    @property
    def pool(self) -> asyncpg.Pool:
        """The open pool.

        Raises:
            RuntimeError: If open() has not been called
        """
        if self._pool is None:
            raise RuntimeError("PostgreSQL pool is not open")
        return self._pool

    @property
    def is_open(self) -> bool:
        return self._pool is not None

    async def open(self) -> asyncpg.Pool:
        """Create the pool and ping the database.

        Both steps share the connect timeout. On failure the half-open pool
        is closed and the error propagates.
        """
        try:
            await asyncio.wait_for(self._connect(), timeout=self.config.connect_timeout)
        except BaseException:
            await self.close()
            raise
        logger.info("PostgreSQL pool ready (min=%d, max=%d)",
                    self.config.pool_min_size, self.config.pool_max_size)
        return self._pool

    async def _connect(self):
        self._pool = await asyncpg.create_pool(
            dsn=self.config.database_url,
            min_size=self.config.pool_min_size,
            max_size=self.config.pool_max_size,
        )
        await self.ping()

    async def ping(self):
        """Run a trivial query on a pooled connection"""
        await self.pool.fetchval("SELECT 1", timeout=self.config.connect_timeout)

    async def close(self):
        """Close the pool (no-op when not open)."""
        if self._pool is not None:
            pool, self._pool = self._pool, None
            await pool.close()
