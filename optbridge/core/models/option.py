"""
Option record model.

Read-only view of a stored option, used when listing store contents.
"""

from __future__ import annotations

from typing import Any

from pydantic import ConfigDict

from .base import OptBridgeBaseModel


class OptionRecord(OptBridgeBaseModel):
    """A single stored option."""

    model_config = ConfigDict(frozen=True, strict=True)

    name: str
    value: Any = None
    autoload: bool = True
