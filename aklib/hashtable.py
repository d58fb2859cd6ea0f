"""Open-addressing hash table with double-hash probing and optional insertion order."""

from __future__ import annotations

import enum
import operator
from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import Any, Optional

from aklib.bits import double_hash, int_hash, u64_hash

_U32_MASK = 0xFFFFFFFF
_U64_MASK = 0xFFFFFFFFFFFFFFFF
_LOAD_FACTOR_IN_PERCENT = 60
_MIN_CAPACITY = 4


class HashSetResult(enum.Enum):
    INSERTED_NEW_ENTRY = enum.auto()
    REPLACED_EXISTING_ENTRY = enum.auto()
    KEPT_EXISTING_ENTRY = enum.auto()


class HashSetExistingEntryBehavior(enum.Enum):
    KEEP = enum.auto()
    REPLACE = enum.auto()


class BucketState(enum.IntEnum):
    """Upper nibble is the state class: 0 unused, 1 used, F end."""

    FREE = 0x00
    USED = 0x10
    DELETED = 0x01
    REHASHED = 0x12
    END = 0xFF


def is_used_bucket(state: BucketState) -> bool:
    return (int(state) & 0xF0) == 0x10


def is_free_bucket(state: BucketState) -> bool:
    return (int(state) & 0xF0) == 0x00


def default_hash(value: Hashable) -> int:
    """32-bit hash: integer mixing for ints, Python's hash for anything else."""
    if isinstance(value, int):
        unsigned = value & _U64_MASK
        if unsigned <= _U32_MASK:
            return int_hash(unsigned)
        return u64_hash(unsigned)
    return hash(value) & _U32_MASK


class HashTable:
    """A set of values stored in open-addressed buckets.

    Probing follows ``double_hash``; the table grows by doubling once it is
    60% full (deleted buckets included) and is rehashed in place when
    deletions dominate. With ``ordered=True`` iteration follows insertion
    order, otherwise bucket order.
    """

    def __init__(
        self,
        values: Iterable[Any] = (),
        *,
        capacity: int = 0,
        ordered: bool = False,
        hash_function: Optional[Callable[[Any], int]] = None,
        equals: Optional[Callable[[Any, Any], bool]] = None,
    ) -> None:
        self._hash_function = hash_function or default_hash
        self._equals = equals or operator.eq
        self._ordered = ordered
        self._reset(0)
        if capacity:
            self._rehash(capacity)
        for value in values:
            self.set(value)

    def _reset(self, capacity: int) -> None:
        self._states: list[BucketState] = [BucketState.FREE] * capacity
        self._slots: list[Any] = [None] * capacity
        self._prev: list[Optional[int]] = [None] * capacity
        self._next: list[Optional[int]] = [None] * capacity
        self._head: Optional[int] = None
        self._tail: Optional[int] = None
        self._size = 0
        self._deleted_count = 0

    @property
    def capacity(self) -> int:
        return len(self._states)

    @property
    def ordered(self) -> bool:
        return self._ordered

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size != 0

    def _hash_of(self, value: Any) -> int:
        return self._hash_function(value) & _U32_MASK

    def _used_indices(self) -> Iterator[int]:
        if self._ordered:
            index = self._head
            while index is not None:
                following = self._next[index]
                yield index
                index = following
        else:
            for index, state in enumerate(self._states):
                if is_used_bucket(state):
                    yield index

    def __iter__(self) -> Iterator[Any]:
        for index in self._used_indices():
            yield self._slots[index]

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __repr__(self) -> str:
        kind = "ordered " if self._ordered else ""
        return f"HashTable({list(self)!r}, {kind}capacity={self.capacity})"

    def copy(self) -> "HashTable":
        result = HashTable(
            capacity=self.capacity,
            ordered=self._ordered,
            hash_function=self._hash_function,
            equals=self._equals,
        )
        for value in self:
            result.set(value)
        return result

    def _link(self, index: int) -> None:
        self._prev[index] = self._tail
        self._next[index] = None
        if self._tail is None:
            self._head = index
        else:
            self._next[self._tail] = index
        self._tail = index

    def _unlink(self, index: int) -> None:
        previous, following = self._prev[index], self._next[index]
        if previous is None:
            self._head = following
        else:
            self._next[previous] = following
        if following is None:
            self._tail = previous
        else:
            self._prev[following] = previous
        self._prev[index] = self._next[index] = None

    def _place(self, index: int, value: Any) -> None:
        self._slots[index] = value
        self._states[index] = BucketState.USED
        if self._ordered:
            self._link(index)

    def _should_grow(self) -> bool:
        used = self._size + self._deleted_count
        return (used + 1) * 100 >= self.capacity * _LOAD_FACTOR_IN_PERCENT

    def _probe_for_writing(self, value: Any) -> int:
        capacity = self.capacity
        hash_value = self._hash_of(value)
        first_empty: Optional[int] = None
        while True:
            index = hash_value % capacity
            state = self._states[index]
            if is_used_bucket(state) and self._equals(self._slots[index], value):
                return index
            if not is_used_bucket(state):
                if first_empty is None:
                    first_empty = index
                if state != BucketState.DELETED:
                    return first_empty
            hash_value = double_hash(hash_value)

    def _lookup(self, hash_value: int, predicate: Callable[[Any], bool]) -> Optional[int]:
        if self._size == 0:
            return None
        capacity = self.capacity
        while True:
            index = hash_value % capacity
            state = self._states[index]
            if is_used_bucket(state) and predicate(self._slots[index]):
                return index
            if state not in (BucketState.USED, BucketState.DELETED):
                return None
            hash_value = double_hash(hash_value)

    def _lookup_value(self, value: Any) -> Optional[int]:
        return self._lookup(self._hash_of(value), lambda other: self._equals(value, other))

    def _rehash(self, new_capacity: int) -> None:
        if new_capacity == self.capacity and new_capacity >= _MIN_CAPACITY:
            self._rehash_in_place()
            return
        new_capacity = max(new_capacity, _MIN_CAPACITY)
        old_values = list(self)
        size = self._size
        self._reset(new_capacity)
        for value in old_values:
            self._place(self._probe_for_writing(value), value)
        self._size = size

    def _rehash_in_place(self) -> None:
        capacity = self.capacity
        states, slots = self._states, self._slots
        order = list(self._used_indices()) if self._ordered else []
        origin = list(range(capacity))

        for i in range(capacity):
            state = states[i]
            if state in (BucketState.REHASHED, BucketState.END, BucketState.FREE):
                continue
            if state == BucketState.DELETED:
                states[i] = BucketState.FREE
                continue

            new_hash = self._hash_of(slots[i])
            if new_hash % capacity == i:
                states[i] = BucketState.REHASHED
                continue

            target_hash = new_hash
            target = target_hash % capacity
            while not is_free_bucket(states[i]):
                if i == target_hash % capacity:
                    states[i] = BucketState.REHASHED
                    break
                if is_free_bucket(states[target]):
                    slots[target], slots[i] = slots[i], None
                    origin[target] = origin[i]
                    states[target] = BucketState.REHASHED
                    states[i] = BucketState.FREE
                elif states[target] == BucketState.REHASHED:
                    target_hash = double_hash(target_hash)
                    target = target_hash % capacity
                else:
                    slots[i], slots[target] = slots[target], slots[i]
                    origin[i], origin[target] = origin[target], origin[i]
                    states[i] = states[target]
                    states[target] = BucketState.REHASHED
                    target_hash = self._hash_of(slots[i])
                    target = target_hash % capacity
                    if target == i:
                        states[i] = BucketState.REHASHED
                        break
            if states[i] == BucketState.DELETED:
                states[i] = BucketState.FREE

        for i, state in enumerate(states):
            if state == BucketState.REHASHED:
                states[i] = BucketState.USED
        self._deleted_count = 0

        if self._ordered:
            new_position = {origin[i]: i for i, state in enumerate(states) if is_used_bucket(state)}
            self._prev = [None] * capacity
            self._next = [None] * capacity
            self._head = self._tail = None
            for original in order:
                self._link(new_position[original])

    def _rehash_in_place_if_needed(self) -> None:
        if self._deleted_count >= self._size and self._should_grow():
            self._rehash_in_place()

    def _delete_bucket(self, index: int) -> None:
        if self._ordered:
            self._unlink(index)
        self._slots[index] = None
        self._states[index] = BucketState.DELETED

    def set(
        self,
        value: Any,
        existing_entry_behavior: HashSetExistingEntryBehavior = HashSetExistingEntryBehavior.REPLACE,
    ) -> HashSetResult:
        """Insert value, or keep/replace an equal entry already present."""
        if self._should_grow():
            self._rehash(self.capacity * 2)
        index = self._probe_for_writing(value)
        if is_used_bucket(self._states[index]):
            if existing_entry_behavior == HashSetExistingEntryBehavior.KEEP:
                return HashSetResult.KEPT_EXISTING_ENTRY
            self._slots[index] = value
            return HashSetResult.REPLACED_EXISTING_ENTRY
        if self._states[index] == BucketState.DELETED:
            self._deleted_count -= 1
        self._place(index, value)
        self._size += 1
        return HashSetResult.INSERTED_NEW_ENTRY

    def contains(self, value: Any) -> bool:
        return self._lookup_value(value) is not None

    def find(self, value: Any) -> Optional[Any]:
        """The stored entry equal to value, or None."""
        index = self._lookup_value(value)
        return None if index is None else self._slots[index]

    def find_with_hash(self, hash_value: int, predicate: Callable[[Any], bool]) -> Optional[Any]:
        """The first entry on the probe chain of hash_value matching predicate, or None."""
        index = self._lookup(hash_value & _U32_MASK, predicate)
        return None if index is None else self._slots[index]

    def remove(self, value: Any) -> bool:
        index = self._lookup_value(value)
        if index is None:
            return False
        self._delete_bucket(index)
        self._size -= 1
        self._deleted_count += 1
        self._rehash_in_place_if_needed()
        return True

    def remove_all_matching(self, predicate: Callable[[Any], bool]) -> bool:
        removed = 0
        for index, state in enumerate(self._states):
            if is_used_bucket(state) and predicate(self._slots[index]):
                self._delete_bucket(index)
                removed += 1
        self._deleted_count += removed
        self._size -= removed
        self._rehash_in_place_if_needed()
        return removed > 0

    def ensure_capacity(self, capacity: int) -> None:
        if capacity < self._size:
            raise ValueError(f"capacity {capacity} is smaller than the size {self._size}")
        self._rehash(capacity * 2)

    def clear(self) -> None:
        self._reset(0)

    def clear_with_capacity(self) -> None:
        self._reset(self.capacity)