"""
SQLAlchemy table definitions for the options store.

The options table name carries a configurable prefix (WordPress style,
e.g. ``wp_options``), so tables are built per MetaData instance rather
than declared once at import time.
"""

from sqlalchemy import Column, Index, Integer, MetaData, String, Table, Text

OPTION_NAME_MAX_LENGTH = 191
AUTOLOAD_YES = "yes"
AUTOLOAD_NO = "no"


def options_table_name(prefix: str) -> str:
    """Return the options table name for a table prefix."""
    return f"{prefix}options"


def build_options_table(metadata: MetaData, prefix: str = "wp_") -> Table:
    """
    Define the options table on the given metadata.

    Args:
        metadata: MetaData to attach the table to
        prefix: Table name prefix

    Returns:
        The options Table
    """
    name = options_table_name(prefix)
    return Table(
        name,
        metadata,
        Column("option_id", Integer, primary_key=True, autoincrement=True),
        Column("option_name", String(OPTION_NAME_MAX_LENGTH), nullable=False, unique=True),
        Column("option_value", Text, nullable=False),
        Column("autoload", String(20), nullable=False, default=AUTOLOAD_YES),
        Index(f"idx_{name}_autoload", "autoload"),
    )
