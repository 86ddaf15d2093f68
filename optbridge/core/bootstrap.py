"""
Application bootstrap for optbridge.

Initializes the DI container with the logger, the option store and a
ready-to-use OptionBridge. Call once at application startup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .container import ServiceContainer, get_container
from .interfaces.logger import ILogger
from .interfaces.store import IOptionStore
from .settings import OptBridgeSettings, load_settings

if TYPE_CHECKING:
    from ..bridge import OptionBridge

_initialized = False

# Stores built by the container, closed on reset()
_created_stores: list[IOptionStore] = []


def bootstrap(settings: OptBridgeSettings | None = None) -> ServiceContainer:
    """
    Bootstrap the optbridge application.

    Args:
        settings: Settings to use; loaded from config/env when omitted

    Returns:
        Initialized ServiceContainer
    """
    global _initialized

    container = get_container()

    if _initialized:
        return container

    if settings is None:
        settings = load_settings()

    _register_core_services(container, settings)

    _initialized = True
    return container


def _register_core_services(container: ServiceContainer, settings: OptBridgeSettings) -> None:
    """Register core application services."""
    from ..bridge import OptionBridge
    from ..services.logging import OptBridgeLogger
    from ..stores import create_store

    container.register_singleton(OptBridgeSettings, implementation=settings)

    def create_logger() -> ILogger:
        return OptBridgeLogger(settings.logging)

    container.register_singleton(ILogger, factory=create_logger)  # type: ignore[type-abstract]

    def create_option_store() -> IOptionStore:
        store = create_store(settings)
        _created_stores.append(store)
        return store

    container.register_singleton(IOptionStore, factory=create_option_store)  # type: ignore[type-abstract]

    def create_bridge() -> OptionBridge:
        return OptionBridge.from_settings(settings, logger=container.resolve(ILogger))  # type: ignore[type-abstract]

    container.register_singleton(OptionBridge, factory=create_bridge)


def reset() -> None:
    """
    Reset the application state.

    Closes the registered option store, clears the container and
    forgets the platform's cached default store.
    """
    global _initialized
    from ..platform import reset_default_store

    while _created_stores:
        _created_stores.pop().close()

    ServiceContainer.reset()
    reset_default_store()
    _initialized = False


def is_initialized() -> bool:
    """Check if the application has been bootstrapped."""
    return _initialized


def get_bridge() -> OptionBridge:
    """Return the container's OptionBridge, bootstrapping on first use."""
    from ..bridge import OptionBridge

    return bootstrap().resolve(OptionBridge)
