"""
Logger interface for optbridge diagnostics.

The bridge reports rejected option names through this channel and the
settings loader reports unreadable config files. CLI output does not go
through here; it uses click.echo.
"""

from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    """Sink for optbridge diagnostics."""

    @abstractmethod
    def debug(self, message: str, *args: Any) -> None:
        """Log detail that is only useful when tracking down a problem."""

    @abstractmethod
    def warning(self, message: str, *args: Any) -> None:
        """Log a recoverable problem, such as a rejected option name."""
