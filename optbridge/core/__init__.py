"""
Core infrastructure for optbridge.

This module provides:
- ServiceContainer: DI container using dependency-injector
- Application bootstrap for initialization
- Interface definitions for the logger and option stores
- Settings loading
- Custom exception hierarchy
"""

from .bootstrap import bootstrap, get_bridge, is_initialized, reset
from .container import ServiceContainer, get_container
from .di import resolve_or_default, try_resolve
from .exceptions import (
    ConfigFileError,
    ConfigValidationError,
    InvalidOptionNameError,
    OptBridgeConfigError,
    OptBridgeException,
    OptBridgeStoreError,
    OptBridgeValidationError,
    OptionValueError,
    StoreConnectionError,
)
from .settings import OptBridgeSettings, find_config_file, load_settings

__all__ = [
    "ConfigFileError",
    "ConfigValidationError",
    "InvalidOptionNameError",
    "OptBridgeConfigError",
    "OptBridgeException",
    "OptBridgeSettings",
    "OptBridgeStoreError",
    "OptBridgeValidationError",
    "OptionValueError",
    "ServiceContainer",
    "StoreConnectionError",
    "bootstrap",
    "find_config_file",
    "get_bridge",
    "get_container",
    "is_initialized",
    "load_settings",
    "reset",
    "resolve_or_default",
    "try_resolve",
]
