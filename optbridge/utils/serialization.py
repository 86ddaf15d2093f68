"""
Option value serialization.

Option values are persisted as JSON text. Anything json can represent
round-trips; tuples come back as lists.
"""

import json
from typing import Any

from ..core.exceptions import OptionValueError


def serialize_value(value: Any, option_name: str | None = None) -> str:
    """
    Serialize an option value for storage.

    Raises:
        OptionValueError: If the value is not JSON-serializable
    """
    try:
        return json.dumps(value, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise OptionValueError(
            f"Option value of type {type(value).__name__} cannot be stored",
            option_name=option_name,
            cause=e,
        ) from e


def deserialize_value(raw: str | None) -> Any:
    """Deserialize a stored option value. NULL columns read back as None."""
    if raw is None:
        return None
    return json.loads(raw)
