"""
Option store interface definitions.

An option store is the storage primitive underneath the platform
functions in optbridge.platform. It knows nothing about the options API
rules (empty names, no-op updates); those live one level up.
"""

from abc import ABC, abstractmethod
from typing import Any

from ..models.option import OptionRecord


class IOptionStore(ABC):
    """
    Interface for a named key-value option store.

    Implementations must treat option names as exact keys; name
    normalization is the caller's job.
    """

    @abstractmethod
    def get(self, name: str) -> tuple[bool, Any]:
        """
        Look up an option.

        Args:
            name: Option name

        Returns:
            Tuple of (found, value). value is None when not found.
        """
        pass

    @abstractmethod
    def exists(self, name: str) -> bool:
        """Check whether an option with this name is stored."""
        pass

    @abstractmethod
    def insert(self, name: str, value: Any, autoload: bool = True) -> None:
        """
        Insert a new option.

        Callers must check exists() first; inserting a duplicate name
        is an error.
        """
        pass

    @abstractmethod
    def replace(self, name: str, value: Any, autoload: bool | None = None) -> None:
        """
        Replace the value of an existing option.

        Args:
            name: Option name
            value: New value
            autoload: New autoload flag, or None to keep the current one
        """
        pass

    @abstractmethod
    def remove(self, name: str) -> bool:
        """
        Remove an option.

        Returns:
            True if a row was removed, False if the option did not exist
        """
        pass

    @abstractmethod
    def list_options(self) -> list[OptionRecord]:
        """List all stored options ordered by name."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Release any resources held by the store."""
        pass
