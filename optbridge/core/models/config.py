"""
Configuration models.

Provides Pydantic models for optbridge configuration with validation.
"""

from __future__ import annotations

import re
from typing import Literal

from pydantic import ConfigDict, field_validator

from .base import OptBridgeBaseModel

# Type aliases
StoreBackend = Literal["memory", "sqlite"]
LogLevel = Literal["debug", "info", "warning", "error"]

_TABLE_PREFIX_RE = re.compile(r"^[A-Za-z0-9_]*$")


class ConfigBaseModel(OptBridgeBaseModel):
    """Base model for config sections. TOML and env strings are coerced."""

    model_config = ConfigDict(extra="ignore")  # Unknown keys in config files are skipped


class StoreConfig(ConfigBaseModel):
    """Option store configuration section."""

    backend: StoreBackend = "memory"
    path: str = ".optbridge/options.db"
    table_prefix: str = "wp_"

    @field_validator("table_prefix")
    @classmethod
    def validate_table_prefix(cls, v: str) -> str:
        """Table prefix ends up in SQL identifiers, so keep it to word characters."""
        if not _TABLE_PREFIX_RE.match(v):
            raise ValueError("table_prefix may only contain letters, digits and underscores")
        return v


class BridgeConfig(ConfigBaseModel):
    """Option bridge configuration section."""

    strict_names: bool = False


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = True
    file: bool = False

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Accept level names in any case."""
        if isinstance(v, str):
            return v.lower()
        return v
