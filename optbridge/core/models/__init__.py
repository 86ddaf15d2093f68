"""
Pydantic models for optbridge.
"""

from .base import OptBridgeBaseModel
from .config import (
    BridgeConfig,
    ConfigBaseModel,
    LoggingConfig,
    LogLevel,
    StoreBackend,
    StoreConfig,
)
from .option import OptionRecord

__all__ = [
    "BridgeConfig",
    "ConfigBaseModel",
    "LogLevel",
    "LoggingConfig",
    "OptBridgeBaseModel",
    "OptionRecord",
    "StoreBackend",
    "StoreConfig",
]
