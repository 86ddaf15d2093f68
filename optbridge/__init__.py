"""
optbridge - object-oriented access to a key-value options store.

    >>> from optbridge import OptionBridge
    >>> bridge = OptionBridge()
    >>> bridge.add("blogname", "My Blog")
    True
    >>> bridge.get("blogname")
    'My Blog'
"""

from .bridge import OptionBridge
from .platform import (
    add_option,
    delete_option,
    get_default_store,
    get_option,
    reset_default_store,
    set_default_store,
    update_option,
)

__version__ = "0.1.0"

__all__ = [
    "OptionBridge",
    "__version__",
    "add_option",
    "delete_option",
    "get_default_store",
    "get_option",
    "reset_default_store",
    "set_default_store",
    "update_option",
]
