"""
Click command implementations for optbridge CLI.

Commands are registered with the main CLI group via the
register_commands() function in optbridge.cli.
"""

from .init import init
from .options import add, delete, get, list_options, update

COMMANDS = [
    init,
    get,
    add,
    update,
    delete,
    list_options,
]

__all__ = [
    "COMMANDS",
    "add",
    "delete",
    "get",
    "init",
    "list_options",
    "update",
]
