"""
SQLAlchemy option store implementation.

Persists options in a WordPress-shaped ``<prefix>options`` table inside a
SQLite database. Values are stored as JSON text.
"""

from pathlib import Path
from typing import Any

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...core.exceptions import OptionValueError, StoreConnectionError
from ...core.interfaces.store import IOptionStore
from ...core.models.option import OptionRecord
from ...utils.serialization import deserialize_value, serialize_value
from ..engine import create_optbridge_engine, create_session_factory, init_database
from ..models import AUTOLOAD_NO, AUTOLOAD_YES, OPTION_NAME_MAX_LENGTH


def _autoload_flag(autoload: bool) -> str:
    return AUTOLOAD_YES if autoload else AUTOLOAD_NO


class SQLAlchemyOptionStore(IOptionStore):
    """
    SQLAlchemy implementation of the option store.

    Holds one session for its lifetime and commits after every write.

    Usage:
        store = SQLAlchemyOptionStore(Path(".optbridge/options.db"))
        store.insert("blogname", "My Blog")
        store.close()

        # Or as a context manager:
        with SQLAlchemyOptionStore(db_path) as store:
            ...
    """

    def __init__(self, db_path: Path, table_prefix: str = "wp_"):
        """
        Open (and if needed create) the options database.

        Args:
            db_path: Path to SQLite database file
            table_prefix: Prefix for the options table name

        Raises:
            StoreConnectionError: If the database cannot be opened or initialized
        """
        self.db_path = Path(db_path)
        self.table_prefix = table_prefix
        try:
            self._engine: Engine | None = create_optbridge_engine(self.db_path)
            self._table = init_database(self._engine, table_prefix)
        except (SQLAlchemyError, OSError) as e:
            raise StoreConnectionError(
                "Failed to open option store",
                db_path=str(self.db_path),
                cause=e,
            ) from e
        self._session: Session | None = create_session_factory(self._engine)()

    @property
    def session(self) -> Session:
        """Get the active session, raising if the store was closed."""
        if self._session is None:
            raise StoreConnectionError("Option store is closed", db_path=str(self.db_path))
        return self._session

    def _write(self, stmt) -> int:
        """Execute a write statement and commit. Returns affected row count."""
        try:
            result = self.session.execute(stmt)
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
        return result.rowcount

    def get(self, name: str) -> tuple[bool, Any]:
        raw = self.session.execute(
            select(self._table.c.option_value).where(self._table.c.option_name == name)
        ).scalar_one_or_none()
        if raw is None:
            return False, None
        return True, deserialize_value(raw)

    def exists(self, name: str) -> bool:
        option_id = self.session.execute(
            select(self._table.c.option_id).where(self._table.c.option_name == name)
        ).scalar_one_or_none()
        return option_id is not None

    def insert(self, name: str, value: Any, autoload: bool = True) -> None:
        if len(name) > OPTION_NAME_MAX_LENGTH:
            raise OptionValueError(
                f"Option name exceeds {OPTION_NAME_MAX_LENGTH} characters",
                option_name=name,
            )
        self._write(
            insert(self._table).values(
                option_name=name,
                option_value=serialize_value(value, name),
                autoload=_autoload_flag(autoload),
            )
        )

    def replace(self, name: str, value: Any, autoload: bool | None = None) -> None:
        values: dict[str, Any] = {"option_value": serialize_value(value, name)}
        if autoload is not None:
            values["autoload"] = _autoload_flag(autoload)
        updated = self._write(
            update(self._table).where(self._table.c.option_name == name).values(**values)
        )
        if updated == 0:
            raise OptionValueError("Option does not exist", option_name=name)

    def remove(self, name: str) -> bool:
        deleted = self._write(delete(self._table).where(self._table.c.option_name == name))
        return deleted > 0

    def list_options(self) -> list[OptionRecord]:
        rows = self.session.execute(
            select(
                self._table.c.option_name,
                self._table.c.option_value,
                self._table.c.autoload,
            ).order_by(self._table.c.option_name)
        ).all()
        return [
            OptionRecord(
                name=row.option_name,
                value=deserialize_value(row.option_value),
                autoload=row.autoload == AUTOLOAD_YES,
            )
            for row in rows
        ]

    def close(self) -> None:
        """Close the session and dispose of the engine."""
        if self._session is not None:
            self._session.close()
            self._session = None
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None

    def __enter__(self) -> "SQLAlchemyOptionStore":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
