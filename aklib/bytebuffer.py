"""Growable byte buffer with a small inline capacity."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

INLINE_CAPACITY = 32


def _as_bytes(data: Any) -> bytes:
    if isinstance(data, ByteBuffer):
        return data.bytes()
    return memoryview(data).tobytes()


class ByteBuffer:
    """A resizable sequence of bytes.

    Small contents live in an inline area of ``inline_capacity`` bytes;
    larger contents move to an outline allocation of exactly the requested
    capacity, and shrinking back to the inline size returns to inline storage.
    """

    def __init__(self, data: Any = b"", *, inline_capacity: int = INLINE_CAPACITY) -> None:
        if inline_capacity < 0:
            raise ValueError("inline capacity must not be negative")
        self._inline_capacity = inline_capacity
        self._storage = bytearray(inline_capacity)
        self._inline = True
        self._size = 0
        if data:
            self.append(data)

    @classmethod
    def create_uninitialized(cls, size: int) -> "ByteBuffer":
        buffer = cls()
        buffer.resize(size)
        return buffer

    @classmethod
    def create_zeroed(cls, size: int) -> "ByteBuffer":
        buffer = cls.create_uninitialized(size)
        buffer.zero_fill()
        return buffer

    @classmethod
    def copy(cls, data: Any) -> "ByteBuffer":
        """A new buffer holding a copy of data."""
        content = _as_bytes(data)
        buffer = cls.create_uninitialized(len(content))
        buffer._storage[: len(content)] = content
        return buffer

    @property
    def capacity(self) -> int:
        return self._inline_capacity if self._inline else len(self._storage)

    @property
    def is_inline(self) -> bool:
        return self._inline

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def _trim(self, size: int, may_discard_existing_data: bool) -> None:
        if size > self._size:
            raise ValueError("cannot trim to a larger size")
        if not self._inline and size <= self._inline_capacity:
            inline = bytearray(self._inline_capacity)
            if not may_discard_existing_data:
                inline[:size] = self._storage[:size]
            self._storage = inline
            self._inline = True
        self._size = size

    def resize(self, new_size: int) -> None:
        if new_size < 0:
            raise ValueError("size must not be negative")
        if new_size <= self._size:
            self._trim(new_size, False)
            return
        self.ensure_capacity(new_size)
        self._size = new_size

    def ensure_capacity(self, new_capacity: int) -> None:
        if new_capacity <= self.capacity:
            return
        grown = bytearray(new_capacity)
        kept = min(len(self._storage), new_capacity)
        grown[:kept] = self._storage[:kept]
        self._storage = grown
        self._inline = False

    def get_bytes_for_writing(self, length: int) -> memoryview:
        """A writable view of ``length`` bytes just past the end; the size is unchanged."""
        if length < 0:
            raise ValueError("length must not be negative")
        self.ensure_capacity(self._size + length)
        return memoryview(self._storage)[self._size : self._size + length]

    def append(self, data: Any) -> None:
        """Append one byte (an int) or the contents of a bytes-like object."""
        if isinstance(data, int):
            if not 0 <= data <= 0xFF:
                raise ValueError(f"byte value out of range: {data}")
            content = bytes((data,))
        else:
            content = _as_bytes(data)
        if not content:
            return
        old_size = self._size
        self.resize(old_size + len(content))
        self._storage[old_size : old_size + len(content)] = content

    def overwrite(self, offset: int, data: Any) -> None:
        content = _as_bytes(data)
        if offset < 0 or offset + len(content) > self._size:
            raise IndexError("overwrite past the end of the buffer")
        self._storage[offset : offset + len(content)] = content

    def zero_fill(self) -> None:
        self._storage[: self._size] = bytes(self._size)

    def slice(self, offset: int, size: int) -> "ByteBuffer":
        if offset < 0 or size < 0 or offset + size > self._size:
            raise IndexError("slice out of range")
        return ByteBuffer.copy(self._storage[offset : offset + size])

    def clear(self) -> None:
        if not self._inline:
            self._storage = bytearray(self._inline_capacity)
            self._inline = True
        self._size = 0

    def bytes(self) -> bytes:
        return bytes(self._storage[: self._size])

    def __bytes__(self) -> bytes:
        return self.bytes()

    def _check_index(self, index: int) -> int:
        if not isinstance(index, int):
            raise TypeError("ByteBuffer indices must be integers")
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range for size {self._size}")
        return index

    def __getitem__(self, index: int) -> int:
        return self._storage[self._check_index(index)]

    def __setitem__(self, index: int, value: int) -> None:
        self._storage[self._check_index(index)] = value

    def __iter__(self) -> Iterator[int]:
        return iter(self.bytes())

    def __iadd__(self, other: Any) -> "ByteBuffer":
        self.append(other)
        return self

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ByteBuffer):
            return self.bytes() == other.bytes()
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self.bytes() == bytes(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"ByteBuffer({self.bytes()!r})"