"""Key/value maps built on the open-addressing hash table, and a shared-storage dictionary."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Optional

from aklib.hashtable import HashSetResult, HashTable, default_hash


@dataclass(slots=True)
class _Entry:
    key: Any
    value: Any


def _pairs(entries: Iterable[Any] | Mapping[Any, Any]) -> list[tuple[Any, Any]]:
    if isinstance(entries, Mapping):
        return list(entries.items())
    return [(key, value) for key, value in entries]


class HashMap:
    """A map from keys to values stored as entries of a ``HashTable``.

    Keys are hashed with ``key_hash`` (integer mixing for ints by default)
    and compared with ``key_equals``. With ``ordered=True`` iteration follows
    insertion order.
    """

    def __init__(
        self,
        entries: Iterable[Any] | Mapping[Any, Any] = (),
        *,
        ordered: bool = False,
        key_hash: Optional[Callable[[Any], int]] = None,
        key_equals: Optional[Callable[[Any, Any], bool]] = None,
    ) -> None:
        self._key_hash = key_hash or default_hash
        self._key_equals = key_equals or operator.eq
        self._table = HashTable(
            ordered=ordered,
            hash_function=lambda entry: self._key_hash(entry.key),
            equals=lambda a, b: self._key_equals(a.key, b.key),
        )
        pairs = _pairs(entries)
        if pairs:
            self.ensure_capacity(len(pairs))
            for key, value in pairs:
                self.set(key, value)

    def _find_entry(self, key: Any) -> Optional[_Entry]:
        return self._table.find_with_hash(
            self._key_hash(key), lambda entry: self._key_equals(key, entry.key)
        )

    @property
    def capacity(self) -> int:
        return self._table.capacity

    @property
    def ordered(self) -> bool:
        return self._table.ordered

    def is_empty(self) -> bool:
        return self._table.is_empty()

    def __len__(self) -> int:
        return len(self._table)

    def __bool__(self) -> bool:
        return len(self._table) != 0

    def set(self, key: Any, value: Any) -> HashSetResult:
        """Insert or replace the value for key."""
        return self._table.set(_Entry(key, value))

    def get(self, key: Any) -> Optional[Any]:
        """The value stored for key, or None."""
        entry = self._find_entry(key)
        return None if entry is None else entry.value

    def remove(self, key: Any) -> bool:
        entry = self._find_entry(key)
        if entry is None:
            return False
        return self._table.remove(entry)

    def contains(self, key: Any) -> bool:
        return self._find_entry(key) is not None

    def ensure(self, key: Any, initialization_callback: Optional[Callable[[], Any]] = None) -> Any:
        """The value for key, inserting the callback's result (or None) if absent."""
        entry = self._find_entry(key)
        if entry is not None:
            return entry.value
        value = initialization_callback() if initialization_callback is not None else None
        result = self.set(key, value)
        if result != HashSetResult.INSERTED_NEW_ENTRY:
            raise RuntimeError("ensure failed to insert a new entry")
        return value

    def keys(self) -> list[Any]:
        return [entry.key for entry in self._table]

    def values(self) -> list[Any]:
        return [entry.value for entry in self._table]

    def items(self) -> Iterator[tuple[Any, Any]]:
        for entry in self._table:
            yield entry.key, entry.value

    def remove_all_matching(self, predicate: Callable[[Any, Any], bool]) -> bool:
        """Remove every entry for which predicate(key, value) holds."""
        return self._table.remove_all_matching(lambda entry: predicate(entry.key, entry.value))

    def ensure_capacity(self, capacity: int) -> None:
        self._table.ensure_capacity(capacity)

    def clear(self) -> None:
        self._table.clear()

    def clear_with_capacity(self) -> None:
        self._table.clear_with_capacity()

    def __iter__(self) -> Iterator[Any]:
        for entry in self._table:
            yield entry.key

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def __getitem__(self, key: Any) -> Any:
        entry = self._find_entry(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __setitem__(self, key: Any, value: Any) -> None:
        self.set(key, value)

    def __delitem__(self, key: Any) -> None:
        if not self.remove(key):
            raise KeyError(key)

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"HashMap({{{body}}})"


class Dictionary:
    """A map whose storage is shared between copies of the same dictionary."""

    def __init__(self) -> None:
        self._storage = HashMap()

    @classmethod
    def create_empty(cls) -> "Dictionary":
        return cls()

    @classmethod
    def create_with_entries(cls, entries: Iterable[Any] | Mapping[Any, Any]) -> "Dictionary":
        """A dictionary holding the given (key, value) pairs; later keys win."""
        dictionary = cls.create_empty()
        pairs = _pairs(entries)
        dictionary.ensure_capacity(len(pairs))
        for key, value in pairs:
            dictionary.set(key, value)
        return dictionary

    def __copy__(self) -> "Dictionary":
        other = type(self).__new__(type(self))
        other._storage = self._storage
        return other

    def is_empty(self) -> bool:
        return self._storage.is_empty()

    def __len__(self) -> int:
        return len(self._storage)

    def set(self, key: Any, value: Any) -> None:
        self._storage.set(key, value)

    def get(self, key: Any) -> Optional[Any]:
        return self._storage.get(key)

    def remove(self, key: Any) -> bool:
        return self._storage.remove(key)

    def contains(self, key: Any) -> bool:
        return self._storage.contains(key)

    def keys(self) -> list[Any]:
        return self._storage.keys()

    def items(self) -> Iterator[tuple[Any, Any]]:
        return self._storage.items()

    def ensure_capacity(self, capacity: int) -> None:
        self._storage.ensure_capacity(capacity)

    def clear(self) -> None:
        self._storage.clear()

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._storage)

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"Dictionary({{{body}}})"