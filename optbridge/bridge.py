"""
Object-oriented access to the options API.

OptionBridge exposes get/add/update/delete against a named key-value
option store. Each operation delegates to a replaceable function so
callers can swap the storage (or a test stub) in without touching the
code that consumes options.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from . import platform
from .core.di import resolve_or_default
from .core.exceptions import InvalidOptionNameError
from .core.interfaces.logger import ILogger

if TYPE_CHECKING:
    from .core.settings import OptBridgeSettings

ReadFunction = Callable[[str, Any], Any]
WriteFunction = Callable[[str, Any], bool]
DeleteFunction = Callable[[str], bool]

# Operation name -> wording used in the invalid-name diagnostic
_OPERATION_ACTIONS = {
    "get": "retrieval",
    "add": "adding",
    "update": "updating",
    "delete": "deletion",
}


def _default_logger() -> ILogger:
    from .services.logging import OptBridgeLogger

    return resolve_or_default(ILogger, OptBridgeLogger)  # type: ignore[type-abstract]


class OptionBridge:
    """
    Facade over the four options operations.

    Every operation checks that the option name is a string before
    delegating. A non-string name is logged as a warning and the
    operation returns its no-op result (``default`` for get, False for
    the writes) without calling the bound function. With ``strict=True``
    an InvalidOptionNameError is raised instead.

    Bound functions are called as-is: their return values and exceptions
    pass through untouched.

    Example:
        >>> bridge = OptionBridge(read_function=lambda name, default: "My Blog")
        >>> bridge.get("blogname", "Untitled")
        'My Blog'
    """

    def __init__(
        self,
        read_function: ReadFunction | None = None,
        *,
        create_function: WriteFunction | None = None,
        update_function: WriteFunction | None = None,
        delete_function: DeleteFunction | None = None,
        logger: ILogger | None = None,
        strict: bool = False,
    ) -> None:
        """
        Initialize the bridge.

        Args:
            read_function: Replacement for platform.get_option
            create_function: Replacement for platform.add_option
            update_function: Replacement for platform.update_option
            delete_function: Replacement for platform.delete_option
            logger: Logger for invalid-name diagnostics (resolved from
                the container when omitted, else a stderr logger)
            strict: Raise InvalidOptionNameError on non-string names
        """
        if read_function is None:
            read_function = platform.get_option
        if create_function is None:
            create_function = platform.add_option
        if update_function is None:
            update_function = platform.update_option
        if delete_function is None:
            delete_function = platform.delete_option

        self._read_function: ReadFunction = read_function
        self._create_function: WriteFunction = create_function
        self._update_function: WriteFunction = update_function
        self._delete_function: DeleteFunction = delete_function
        self._logger = logger
        self.strict = strict

    @classmethod
    def from_settings(
        cls,
        settings: OptBridgeSettings,
        logger: ILogger | None = None,
    ) -> OptionBridge:
        """Create a bridge with the platform bindings and configured strictness."""
        return cls(logger=logger, strict=settings.bridge.strict_names)

    @property
    def logger(self) -> ILogger:
        if self._logger is None:
            self._logger = _default_logger()
        return self._logger

    # -------------------------------------------------------------------------
    # Bindings
    # -------------------------------------------------------------------------

    @property
    def read_function(self) -> ReadFunction:
        return self._read_function

    @property
    def create_function(self) -> WriteFunction:
        return self._create_function

    @property
    def update_function(self) -> WriteFunction:
        return self._update_function

    @property
    def delete_function(self) -> DeleteFunction:
        return self._delete_function

    def set_read_function(self, fn: ReadFunction) -> None:
        """Replace the function used by get()."""
        self._read_function = fn

    def set_create_function(self, fn: WriteFunction) -> None:
        """Replace the function used by add()."""
        self._create_function = fn

    def set_update_function(self, fn: WriteFunction) -> None:
        """Replace the function used by update()."""
        self._update_function = fn

    def set_delete_function(self, fn: DeleteFunction) -> None:
        """Replace the function used by delete()."""
        self._delete_function = fn

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def get(self, name: str, default: Any = False) -> Any:
        """
        Retrieve an option value.

        Args:
            name: The name of the option to retrieve
            default: Value to return if the option does not exist

        Returns:
            The value of the option, or default if it does not exist
            or the name is not a string
        """
        if not self._is_valid_name("get", name):
            return default
        return self._read_function(name, default)

    def add(self, name: str, value: Any) -> bool:
        """
        Add a new option.

        Returns:
            True if the option was added, False otherwise
        """
        if not self._is_valid_name("add", name):
            return False
        return self._create_function(name, value)

    def update(self, name: str, value: Any) -> bool:
        """
        Update an existing option.

        Returns:
            True if the option was updated, False otherwise
        """
        if not self._is_valid_name("update", name):
            return False
        return self._update_function(name, value)

    def delete(self, name: str) -> bool:
        """
        Delete an option.

        Returns:
            True if the option was deleted, False otherwise
        """
        if not self._is_valid_name("delete", name):
            return False
        return self._delete_function(name)

    def _is_valid_name(self, operation: str, name: Any) -> bool:
        if isinstance(name, str):
            return True

        given_type = type(name).__name__
        message = (
            f"OptionBridge: Option name must be a string for "
            f"{_OPERATION_ACTIONS[operation]}. Given: {given_type}"
        )
        if self.strict:
            raise InvalidOptionNameError(message, operation=operation, given_type=given_type)
        self.logger.warning(message)
        return False

    def __repr__(self) -> str:
        return f"OptionBridge(strict={self.strict})"
