"""
Base Pydantic model for optbridge.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class OptBridgeBaseModel(BaseModel):
    """Shared model settings: validate on assignment, reject unknown fields.

    Subclasses extend ``model_config``; pydantic merges it with this one.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
    )
