"""
Service container for optbridge.

Holds one dependency-injector provider per interface: the settings, the
diagnostic logger, the option store and the bridge built by bootstrap().
"""

from collections.abc import Callable
from typing import Optional, TypeVar

from dependency_injector import providers

T = TypeVar("T")


class ServiceContainer:
    """Process-wide registry mapping interface types to providers."""

    _instance: Optional["ServiceContainer"] = None

    def __init__(self) -> None:
        self._providers: dict[type, providers.Provider] = {}

    @classmethod
    def get_instance(cls) -> "ServiceContainer":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the global container. Stores it built are closed by bootstrap.reset()."""
        cls._instance = None

    def register_singleton(
        self,
        interface: type[T],
        implementation: T | None = None,
        factory: Callable[[], T] | None = None,
    ) -> None:
        """
        Register a service built once.

        Pass a ready instance, or a factory that runs on first resolve
        (the option store is registered this way so it is only opened
        when something needs it).
        """
        if implementation is not None:
            self._providers[interface] = providers.Object(implementation)
        elif factory is not None:
            self._providers[interface] = providers.Singleton(factory)
        else:
            raise ValueError("Must provide either implementation or factory")

    def resolve(self, interface: type[T]) -> T:
        """Resolve a service. Raises KeyError if nothing is registered."""
        if interface not in self._providers:
            raise KeyError(f"No provider registered for: {interface}")
        return self._providers[interface]()

    def try_resolve(self, interface: type[T]) -> T | None:
        if interface not in self._providers:
            return None
        return self._providers[interface]()

    def override(self, interface: type[T], provider: providers.Provider) -> None:
        """Swap the provider for an interface, e.g. a stub store in tests."""
        self._providers[interface] = provider


def get_container() -> ServiceContainer:
    """Get the global service container instance."""
    return ServiceContainer.get_instance()
