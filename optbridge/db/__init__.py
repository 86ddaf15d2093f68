"""
SQLite persistence for optbridge options via SQLAlchemy.
"""

from .engine import create_optbridge_engine, create_session_factory, init_database
from .repositories import SQLAlchemyOptionStore

__all__ = [
    "SQLAlchemyOptionStore",
    "create_optbridge_engine",
    "create_session_factory",
    "init_database",
]
