"""
PostgreSQL settings for the Boardroom persona service
"""

import os
from typing import Dict, Any
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


@dataclass
class PostgreSQLConfig:
    """Where the boardroom tables live and how the read pool behaves"""
    host: str
    port: int
    database: str
    user: str
    password: str
    schema: str = "boardroom"

    # Read pool; the service only runs short SELECTs
    pool_min_size: int = 5
    pool_max_size: int = 20
    pool_max_inactive_connection_lifetime: float = 300.0

    # Startup retries while the database comes up
    max_retries: int = 3
    retry_delay: float = 1.0
    retry_backoff: float = 2.0

    # Applied by asyncpg to every query on the pool
    command_timeout: float = 60.0

    @classmethod
    def from_env(cls) -> 'PostgreSQLConfig':
        """Create configuration from environment variables"""
        return cls(
            host=os.getenv("POSTGRES_HOST", "localhost"),
            port=int(os.getenv("POSTGRES_PORT", "5432")),
            database=os.getenv("POSTGRES_DB", "boardroom"),
            user=os.getenv("POSTGRES_USER", "boardroom_user"),
            password=os.getenv("POSTGRES_PASSWORD", ""),
            schema=os.getenv("POSTGRES_SCHEMA", "boardroom"),
            pool_min_size=int(os.getenv("DB_POOL_MIN_SIZE", "5")),
            pool_max_size=int(os.getenv("DB_POOL_MAX_SIZE", "20")),
            pool_max_inactive_connection_lifetime=float(
                os.getenv("DB_POOL_MAX_INACTIVE_LIFETIME", "300.0")
            ),
            max_retries=int(os.getenv("DB_MAX_RETRIES", "3")),
            retry_delay=float(os.getenv("DB_RETRY_DELAY", "1.0")),
            retry_backoff=float(os.getenv("DB_RETRY_BACKOFF", "2.0")),
            command_timeout=float(os.getenv("DB_COMMAND_TIMEOUT", "60.0"))
        )

    def get_pool_config(self) -> Dict[str, Any]:
        """Keyword arguments for asyncpg.create_pool"""
        return {
            "host": self.host,
            "port": self.port,
            "database": self.database,
            "user": self.user,
            "password": self.password,
            "min_size": self.pool_min_size,
            "max_size": self.pool_max_size,
            "max_inactive_connection_lifetime": self.pool_max_inactive_connection_lifetime,
            "command_timeout": self.command_timeout,
            "server_settings": {"application_name": "boardroom-personas"}
        }

    def describe(self) -> Dict[str, Any]:
        """Connection target without credentials, for health reports"""
        return {
            "host": self.host,
            "port": self.port,
            "database": self.database,
            "schema": self.schema
        }


class DatabaseConfig:
    """Database settings loaded once at import"""

    def __init__(self):
        self.postgresql = PostgreSQLConfig.from_env()

    def get_health_check_config(self) -> Dict[str, Any]:
        return {"postgresql": self.postgresql.describe()}


db_config = DatabaseConfig()
