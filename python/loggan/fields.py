# Insertion-ordered key/value fields attached to an entry.

from __future__ import annotations
from collections.abc import Iterator, MutableMapping
from typing import Any


class Fields(MutableMapping):
    """Mapping of str keys to arbitrary values that remembers first-insertion order.

    Updating an existing key keeps its position; deleting a key and setting
    it again moves it to the end. Formatters only read from it.
    """

    __slots__ = ("_values",)

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self._values: dict[str, Any] = {}
        self.update(*args, **kwargs)

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __setitem__(self, key: str, value: Any) -> None:
        if not isinstance(key, str):
            raise TypeError(f"field keys must be str, not {type(key).__name__}")
        self._values[key] = value

    def __delitem__(self, key: str) -> None:
        del self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Fields({self._values!r})"

    def lookup(self, key: str) -> tuple[Any, bool]:
        """Return (value, True) for a present key, (None, False) otherwise."""
        if key in self._values:
            return self._values[key], True
        return None, False

    def ordered_keys(self) -> list[str]:
        return list(self._values)

    def copy(self) -> "Fields":
        return Fields(self._values)
