"""
Settings Container

Read-only mapping of resolved settings with strict lookup.
"""

import copy
from collections.abc import Mapping
from typing import Any, Dict, Iterator

from envsettings.utils.exceptions import UnknownKeyError

_MUTABLE_TYPES = (list, dict, set, bytearray)


def _detached(value: Any) -> Any:
    """Copy of a mutable container value; other values as-is."""
    if isinstance(value, _MUTABLE_TYPES):
        return copy.deepcopy(value)
    return value


class Settings(Mapping):
    """
    Immutable mapping from declared key to resolved value.

    Keys are looked up by their string form, so enum members or other objects
    whose str() is the env var name work too. Iteration follows declaration
    order. Lists, dicts and sets are handed out as copies, so a container
    can be shared without callers changing each other's view.
    """

    def __init__(self, values: Mapping[str, Any]):
        self._values: Dict[str, Any] = {key: _detached(value) for key, value in values.items()}

    def __getitem__(self, key) -> Any:
        name = str(key)
        try:
            value = self._values[name]
        except KeyError:
            raise UnknownKeyError(name) from None
        return _detached(value)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict snapshot of all settings."""
        return {key: _detached(value) for key, value in self._values.items()}

    def __repr__(self) -> str:
        # Values may be secrets
        return f"Settings(keys={list(self._values)!r})"
