"""
Configuration for the Boardroom persona service
"""

from .database import PostgreSQLConfig, DatabaseConfig, db_config
from .completion import CompletionConfig, OrchestratorConfig, ContextWindowMode

__all__ = [
    "PostgreSQLConfig",
    "DatabaseConfig",
    "db_config",
    "CompletionConfig",
    "OrchestratorConfig",
    "ContextWindowMode"
]
