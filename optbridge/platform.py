"""
Platform options API.

Module-level ``get_option`` / ``add_option`` / ``update_option`` /
``delete_option`` functions with WordPress options API semantics. These
are the default bindings of OptionBridge.

The functions operate on the process default store, resolved in this
order: a store installed with set_default_store(), the IOptionStore
registered in the bootstrapped container, and finally a store built
from settings on first use and cached.
"""

from __future__ import annotations

from typing import Any

from .core.di import try_resolve
from .core.interfaces.store import IOptionStore
from .core.settings import load_settings
from .stores import create_store

_default_store: IOptionStore | None = None
_owns_default_store = False


def get_default_store() -> IOptionStore:
    """Return the store the platform functions operate on."""
    global _default_store, _owns_default_store

    if _default_store is not None:
        return _default_store

    store = try_resolve(IOptionStore)  # type: ignore[type-abstract]
    if store is not None:
        return store

    _default_store = create_store(load_settings())
    _owns_default_store = True
    return _default_store


def set_default_store(store: IOptionStore) -> None:
    """
    Install a store for the platform functions.

    The caller keeps ownership; reset_default_store() will not close it.
    """
    global _default_store, _owns_default_store

    reset_default_store()
    _default_store = store
    _owns_default_store = False


def reset_default_store() -> None:
    """Forget the current default store, closing it if it was built here."""
    global _default_store, _owns_default_store

    if _default_store is not None and _owns_default_store:
        _default_store.close()
    _default_store = None
    _owns_default_store = False


def _normalize(name: str) -> str:
    return name.strip()


def _same_value(old: Any, new: Any) -> bool:
    """
    Strict equality: equal values of the same type, all the way down.

    ``1`` and ``True`` (or ``1`` and ``1.0``) differ, also inside lists and dicts.
    """
    if type(old) is not type(new):
        return False
    if isinstance(old, dict):
        return old.keys() == new.keys() and all(_same_value(v, new[k]) for k, v in old.items())
    if isinstance(old, (list, tuple)):
        return len(old) == len(new) and all(_same_value(a, b) for a, b in zip(old, new))
    return old == new


def get_option(name: str, default: Any = False) -> Any:
    """
    Retrieve an option value.

    Args:
        name: Option name
        default: Value returned when the option does not exist

    Returns:
        The stored value, ``default`` if missing, False for an empty name
    """
    name = _normalize(name)
    if not name:
        return False

    found, value = get_default_store().get(name)
    if not found:
        return default
    return value


def add_option(name: str, value: Any, autoload: bool = True) -> bool:
    """
    Add a new option. Does nothing if the option already exists.

    Returns:
        True if the option was added, False otherwise
    """
    name = _normalize(name)
    if not name:
        return False

    store = get_default_store()
    if store.exists(name):
        return False

    store.insert(name, value, autoload)
    return True


def update_option(name: str, value: Any, autoload: bool | None = None) -> bool:
    """
    Update an option, adding it if it does not exist yet.

    Returns:
        True if the value changed or the option was added,
        False if the value was unchanged or the name is empty
    """
    name = _normalize(name)
    if not name:
        return False

    store = get_default_store()
    found, old_value = store.get(name)
    if not found:
        return add_option(name, value, True if autoload is None else autoload)

    if _same_value(old_value, value):
        return False

    store.replace(name, value, autoload)
    return True


def delete_option(name: str) -> bool:
    """
    Delete an option.

    Returns:
        True if the option was deleted, False if it did not exist
    """
    name = _normalize(name)
    if not name:
        return False

    return get_default_store().remove(name)
