"""
Interface definitions for optbridge's services.

These define the contracts that implementations must follow,
enabling dependency inversion between the bridge, the platform
functions and the storage backends.
"""

from .logger import ILogger
from .store import IOptionStore

__all__ = [
    "ILogger",
    "IOptionStore",
]
