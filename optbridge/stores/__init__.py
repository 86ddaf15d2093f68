"""
Option store backends.

create_store() picks a backend from settings; the SQLite backend lives
in optbridge.db and is imported lazily so the memory backend works
without touching SQLAlchemy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .memory import InMemoryOptionStore

if TYPE_CHECKING:
    from ..core.interfaces.store import IOptionStore
    from ..core.settings import OptBridgeSettings


def create_store(settings: OptBridgeSettings) -> IOptionStore:
    """
    Create the option store configured in settings.

    Args:
        settings: Loaded settings

    Returns:
        A ready-to-use option store
    """
    if settings.store.backend == "sqlite":
        from ..db.repositories.option import SQLAlchemyOptionStore

        return SQLAlchemyOptionStore(
            settings.resolve_store_path(),
            table_prefix=settings.store.table_prefix,
        )
    return InMemoryOptionStore()


__all__ = [
    "InMemoryOptionStore",
    "create_store",
]
