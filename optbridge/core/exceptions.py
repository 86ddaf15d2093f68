"""
Exception hierarchy for optbridge.

Configuration, store and name-validation failures each have a family so
callers can catch the kind they can handle. Every exception carries the
option name, path or config key it concerns in ``context``.
"""

from __future__ import annotations

from typing import Any


class OptBridgeException(Exception):
    """
    Base exception for all optbridge errors.

    Keyword arguments other than ``cause`` are collected into ``context``
    (None values are dropped) and rendered after the message.
    """

    def __init__(self, message: str, *, cause: Exception | None = None, **context: Any) -> None:
        self.message = message
        self.context = {k: v for k, v in context.items() if v is not None}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class OptBridgeConfigError(OptBridgeException):
    """Base class for configuration-related errors."""


class ConfigFileError(OptBridgeConfigError):
    """The config file could not be written (``file_path`` in context)."""


class ConfigValidationError(OptBridgeConfigError, ValueError):
    """A config value failed validation (dotted ``key`` in context)."""


# =============================================================================
# Store Errors
# =============================================================================


class OptBridgeStoreError(OptBridgeException):
    """Base class for option store errors."""


class StoreConnectionError(OptBridgeStoreError):
    """The store is closed or its database could not be opened (``db_path``)."""


class OptionValueError(OptBridgeStoreError, ValueError):
    """
    An option could not be stored as given.

    Raised for values that cannot be serialized, names longer than the
    options table allows, and inserts/replaces that contradict what the
    store holds.
    """


# =============================================================================
# Validation Errors
# =============================================================================


class OptBridgeValidationError(OptBridgeException, ValueError):
    """Base class for input validation errors."""


class InvalidOptionNameError(OptBridgeValidationError):
    """
    A non-string option name was passed to the bridge.

    Only raised when the bridge runs in strict mode; otherwise the
    condition is logged and the operation returns its no-op result.
    """

    def __init__(self, message: str, *, operation: str, given_type: str) -> None:
        self.operation = operation
        self.given_type = given_type
        super().__init__(message, operation=operation, given_type=given_type)
