"""
SQLAlchemy store implementations.
"""

from .option import SQLAlchemyOptionStore

__all__ = [
    "SQLAlchemyOptionStore",
]
