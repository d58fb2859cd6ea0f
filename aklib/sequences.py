"""Fixed-size arrays and linear searches over iterables."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any, Optional


class IterationDecision(enum.Enum):
    """What a visiting callback asks of the iteration driving it."""

    CONTINUE = enum.auto()
    BREAK = enum.auto()


class LinearArray(Sequence):
    """A sequence whose length is fixed when it is created; elements may be replaced."""

    __slots__ = ("_data",)

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._data = list(values)

    def __len__(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return not self._data

    def _check_index(self, index: int) -> int:
        if not isinstance(index, int):
            raise TypeError("LinearArray indices must be integers")
        if not 0 <= index < len(self._data):
            raise IndexError(f"index {index} out of range for size {len(self._data)}")
        return index

    def at(self, index: int) -> Any:
        """The element at index; negative or too large indices raise IndexError."""
        return self._data[self._check_index(index)]

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._data[index]
        return self.at(index)

    def __setitem__(self, index: int, value: Any) -> None:
        self._data[self._check_index(index)] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def first(self) -> Any:
        return self.at(0)

    def last(self) -> Any:
        if not self._data:
            raise IndexError("last() of an empty LinearArray")
        return self.at(len(self._data) - 1)

    def fill(self, value: Any) -> int:
        """Set every element to value and return the size."""
        self._data[:] = [value] * len(self._data)
        return len(self._data)

    def max(self) -> Any:
        if not self._data:
            raise ValueError("no values to max() over")
        value = self._data[0]
        for item in self._data[1:]:
            value = value if item < value else item
        return value

    def min(self) -> Any:
        if not self._data:
            raise ValueError("no values to min() over")
        value = self._data[0]
        for item in self._data[1:]:
            value = value if value < item else item
        return value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LinearArray):
            return self._data == other._data
        if isinstance(other, (list, tuple)):
            return self._data == list(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"LinearArray({self._data!r})"


def iota_linear_array(count: int, offset: int = 0) -> LinearArray:
    """An array of count consecutive values starting at offset."""
    if count < 0:
        raise ValueError("negative sizes are not allowed")
    return LinearArray(offset + i for i in range(count))


def find_if(iterable: Iterable[Any], predicate: Callable[[Any], bool]) -> Optional[Any]:
    """The first element satisfying predicate, or None."""
    return next((item for item in iterable if predicate(item)), None)


def find(iterable: Iterable[Any], value: Any) -> Optional[Any]:
    """The first element equal to value, or None."""
    return find_if(iterable, lambda item: value == item)


def find_index(iterable: Iterable[Any], value: Any) -> int:
    """Index of the first element equal to value; the element count if there is none."""
    count = 0
    for index, item in enumerate(iterable):
        if value == item:
            return index
        count = index + 1
    return count