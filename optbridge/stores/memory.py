"""
In-memory option store.

Process-local dict-backed store. Used as the default backend and in tests.
"""

import copy
from typing import Any

from ..core.exceptions import OptionValueError
from ..core.interfaces.store import IOptionStore
from ..core.models.option import OptionRecord


class InMemoryOptionStore(IOptionStore):
    """
    Dict-backed option store.

    Values are deep-copied on the way in and out so callers can't
    mutate stored state through a reference they hold.
    """

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = {}
        self._autoload: dict[str, bool] = {}
        for name, value in (initial or {}).items():
            self.insert(name, value)

    def get(self, name: str) -> tuple[bool, Any]:
        if name not in self._values:
            return False, None
        return True, copy.deepcopy(self._values[name])

    def exists(self, name: str) -> bool:
        return name in self._values

    def insert(self, name: str, value: Any, autoload: bool = True) -> None:
        if name in self._values:
            raise OptionValueError("Option already exists", option_name=name)
        self._values[name] = copy.deepcopy(value)
        self._autoload[name] = autoload

    def replace(self, name: str, value: Any, autoload: bool | None = None) -> None:
        if name not in self._values:
            raise OptionValueError("Option does not exist", option_name=name)
        self._values[name] = copy.deepcopy(value)
        if autoload is not None:
            self._autoload[name] = autoload

    def remove(self, name: str) -> bool:
        if name not in self._values:
            return False
        del self._values[name]
        del self._autoload[name]
        return True

    def list_options(self) -> list[OptionRecord]:
        return [
            OptionRecord(name=name, value=copy.deepcopy(self._values[name]), autoload=self._autoload[name])
            for name in sorted(self._values)
        ]

    def close(self) -> None:
        """Nothing to release."""
        pass

    def __len__(self) -> int:
        return len(self._values)
