"""
PostgreSQL access for the Boardroom persona service

One asyncpg pool shared by the repositories. Queries are read-only and
bounded by the pool's command timeout.
"""

import asyncio
import time
from collections import deque
from typing import Any, Dict, List, Optional, Union
from contextlib import asynccontextmanager
import asyncpg
import logging
from ..config.database import db_config, PostgreSQLConfig

logger = logging.getLogger(__name__)

SLOW_QUERY_SECONDS = 1.0
SLOW_QUERY_HISTORY = 100


class DatabaseConnectionError(Exception):
    """Raised when the pool is missing or cannot be created"""
    pass


class DatabaseManager:
    """Owns the asyncpg pool and tracks query counts and slow queries"""

    def __init__(self, config: Optional[PostgreSQLConfig] = None):
        self.config = config or db_config.postgresql
        self.pg_pool: Optional[asyncpg.Pool] = None
        self.query_count = 0
        self.error_count = 0
        self.slow_queries: deque = deque(maxlen=SLOW_QUERY_HISTORY)

    @property
    def schema(self) -> str:
        return self.config.schema

    async def initialize(self):
        """Create the pool, retrying with exponential backoff"""
        if self.pg_pool:
            return

        config = self.config
        for attempt in range(1, config.max_retries + 1):
            try:
                pool = await asyncpg.create_pool(**config.get_pool_config())
                async with pool.acquire() as conn:
                    await conn.fetchval("SELECT 1")
            except Exception as e:
                if attempt >= config.max_retries:
                    raise DatabaseConnectionError(f"Failed to connect to PostgreSQL: {e}") from e

                wait_time = config.retry_delay * (config.retry_backoff ** (attempt - 1))
                logger.warning(
                    f"PostgreSQL connection failed, retry {attempt}/{config.max_retries} in {wait_time}s"
                )
                await asyncio.sleep(wait_time)
            else:
                self.pg_pool = pool
                logger.info(f"PostgreSQL connected: {config.host}:{config.port}/{config.database}")
                return

    async def close(self):
        if self.pg_pool:
            await self.pg_pool.close()
            self.pg_pool = None
        logger.info("Database connections closed")

    @asynccontextmanager
    async def connection(self, query: str):
        """Borrow a pooled connection; slow uses are remembered by query text"""
        if not self.pg_pool:
            raise DatabaseConnectionError("PostgreSQL pool not initialized")

        start_time = time.time()
        async with self.pg_pool.acquire() as conn:
            try:
                yield conn
            finally:
                elapsed = time.time() - start_time
                if elapsed > SLOW_QUERY_SECONDS:
                    statement = " ".join(query.split())[:200]
                    logger.warning(f"Slow query ({elapsed:.2f}s): {statement}")
                    self.slow_queries.append({"query": statement, "time": elapsed})

    async def execute_query(
        self,
        query: str,
        *args,
        fetch_one: bool = False
    ) -> Union[List[asyncpg.Record], asyncpg.Record, None]:
        """Run a SELECT and return all rows, or the first row with ``fetch_one``"""
        try:
            async with self.connection(query) as conn:
                fetch = conn.fetchrow if fetch_one else conn.fetch
                result = await fetch(query, *args)
        except Exception as e:
            self.error_count += 1
            logger.error(f"PostgreSQL query error: {e}")
            raise

        self.query_count += 1
        return result

    def get_pool_status(self) -> Dict[str, Any]:
        pool = self.pg_pool
        return {
            "postgresql": {
                "initialized": pool is not None,
                "min_size": pool.get_min_size() if pool else 0,
                "max_size": pool.get_max_size() if pool else 0,
                "current_size": pool.get_size() if pool else 0,
                "queries": self.query_count,
                "errors": self.error_count
            },
            "slow_queries": len(self.slow_queries)
        }

    async def health_check(self) -> Dict[str, bool]:
        healthy = False
        if self.pg_pool:
            try:
                await self.execute_query("SELECT 1", fetch_one=True)
                healthy = True
            except Exception as e:
                logger.warning(f"PostgreSQL health check failed: {e}")
        return {"postgresql": healthy}


# Global database manager instance
db_manager = DatabaseManager()
