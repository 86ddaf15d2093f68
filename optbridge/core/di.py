"""
Dependency injection helpers for optbridge.

Lazy resolution patterns that allow fallback to default implementations
when the service container has not been bootstrapped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")


def resolve_or_default(
    interface: type[T],
    default_factory: Callable[[], T],
) -> T:
    """Resolve a service from the container or create a default.

    Args:
        interface: The interface type to resolve
        default_factory: Callable that creates the default implementation

    Returns:
        Resolved service instance or default

    Example:
        >>> from optbridge.core.interfaces.logger import ILogger
        >>> from optbridge.services.logging import OptBridgeLogger
        >>> logger = resolve_or_default(ILogger, OptBridgeLogger)
    """
    from .container import get_container

    instance = get_container().try_resolve(interface)
    if instance is not None:
        return instance
    return default_factory()


def try_resolve(interface: type[T]) -> T | None:
    """Try to resolve a service from the container.

    Returns None if the service isn't registered.
    """
    from .container import get_container

    return get_container().try_resolve(interface)
