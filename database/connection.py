import logging
import os
from typing import Optional

import asyncpg

logger = logging.getLogger(__name__)


def dsn_from_env() -> Optional[str]:
    """DATABASE_URL if set, otherwise a DSN assembled from the PG* variables."""
    url = os.environ.get("DATABASE_URL")
    if url:
        return url
    if not os.environ.get("PGHOST"):
        return None
    host = os.environ["PGHOST"]
    port = os.getenv("PGPORT", "5432")
    dbname = os.getenv("PGDATABASE", "golf_handicap")
    user = os.getenv("PGUSER", "postgres")
    password = os.getenv("PGPASSWORD", "")
    auth = f"{user}:{password}" if password else user
    return f"postgresql://{auth}@{host}:{port}/{dbname}"


class DatabasePool:
    """Owns the asyncpg pool shared by the profile, round and friendship repositories."""

    def __init__(self):
        self._pool: Optional[asyncpg.Pool] = None

    async def initialize(
        self,
        dsn: Optional[str] = None,
        *,
        min_size: int = 2,
        max_size: int = 10,
        command_timeout: float = 30.0,
    ) -> None:
        """Create the pool once at app startup. Falls back to dsn_from_env()."""
        if self._pool is not None:
            return
        dsn = dsn or dsn_from_env()
        self._pool = await asyncpg.create_pool(
            dsn=dsn,
            min_size=min_size,
            max_size=max_size,
            command_timeout=command_timeout,
        )
        logger.info("Database pool ready (min=%d, max=%d)", min_size, max_size)

    async def close(self) -> None:
        if self._pool:
            await self._pool.close()
            self._pool = None

    @property
    def pool(self) -> asyncpg.Pool:
        """Get the pool, raising if not initialized."""
        if self._pool is None:
            raise RuntimeError(
                "Database pool not initialized. Call await db.initialize() first."
            )
        return self._pool

    async def health_check(self) -> bool:
        """Test connectivity with SELECT 1."""
        try:
            async with self.pool.acquire() as conn:
                await conn.fetchval("SELECT 1")
            return True
        except Exception as e:
            logger.warning("Database health check failed: %s", e)
            return False


# Module-level singleton for convenience
db = DatabasePool()
