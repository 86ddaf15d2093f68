"""
SQLAlchemy engine and session configuration.

Handles database connection setup with SQLite-specific settings.
"""

from pathlib import Path

from sqlalchemy import MetaData, Table, create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from .models import build_options_table


def _set_sqlite_pragma(dbapi_connection, connection_record):
    """Enable WAL mode for SQLite connections."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode = WAL")
    cursor.close()


def create_optbridge_engine(db_path: Path) -> Engine:
    """
    Create SQLAlchemy engine for the given database path.

    Args:
        db_path: Path to SQLite database file

    Returns:
        Configured SQLAlchemy Engine
    """
    db_path.parent.mkdir(parents=True, exist_ok=True)
    engine = create_engine(
        f"sqlite:///{db_path}",
        echo=False,  # Set to True for SQL debugging
    )
    event.listen(engine, "connect", _set_sqlite_pragma)
    return engine


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """
    Create a session factory for the engine.

    Args:
        engine: SQLAlchemy Engine

    Returns:
        Configured sessionmaker
    """
    return sessionmaker(bind=engine, expire_on_commit=False)


def init_database(engine: Engine, table_prefix: str = "wp_") -> Table:
    """
    Create the options table if it does not exist yet.

    Args:
        engine: SQLAlchemy Engine
        table_prefix: Prefix for the options table name

    Returns:
        The options Table bound to a fresh MetaData
    """
    metadata = MetaData()
    table = build_options_table(metadata, table_prefix)
    metadata.create_all(engine)
    return table
