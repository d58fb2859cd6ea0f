"""A value cell whose reads, writes and read-modify-write operations are atomic."""

from __future__ import annotations

import enum
import operator
import threading
from collections.abc import Callable
from typing import Any, Optional

_SUPPORTED_WIDTHS = (8, 16, 32, 64)


class MemoryOrder(enum.IntEnum):
    """Memory ordering constraints, numbered as the usual compiler intrinsics number them."""

    RELAXED = 0
    CONSUME = 1
    ACQUIRE = 2
    RELEASE = 3
    ACQ_REL = 4
    SEQ_CST = 5


def _compare_exchange_orders(order: MemoryOrder) -> tuple[MemoryOrder, MemoryOrder]:
    """Success and failure orderings a compare-exchange uses for the requested order."""
    if order in (MemoryOrder.ACQ_REL, MemoryOrder.RELEASE):
        return MemoryOrder.RELEASE, MemoryOrder.ACQUIRE
    return order, order


class Atomic:
    """A value guarded so that every operation on it happens as one step.

    With ``bits`` set the value is an integer of that width and signedness,
    and arithmetic wraps as machine integers do. Without it the cell holds
    any value; the ``fetch_*`` operations then need integers. Operations are
    serialised with a lock, so every ordering behaves as sequential
    consistency; the ordering arguments are validated and otherwise accepted.
    """

    __slots__ = ("_value", "_lock", "_bits", "_signed", "_default_order")

    def __init__(
        self,
        value: Any = 0,
        *,
        bits: Optional[int] = None,
        signed: bool = True,
        default_order: MemoryOrder = MemoryOrder.SEQ_CST,
    ) -> None:
        if bits is not None and bits not in _SUPPORTED_WIDTHS:
            raise ValueError(f"unsupported integer width: {bits}")
        self._bits = bits
        self._signed = signed
        self._default_order = MemoryOrder(default_order)
        self._lock = threading.Lock()
        self._value = self._normalize(value)

    @property
    def bits(self) -> Optional[int]:
        return self._bits

    @property
    def signed(self) -> bool:
        return self._signed

    def _normalize(self, value: Any) -> Any:
        if self._bits is None:
            return value
        if not isinstance(value, int):
            raise TypeError(f"a {self._bits}-bit atomic needs an integer, got {type(value).__name__}")
        value &= (1 << self._bits) - 1
        if self._signed and value >> (self._bits - 1):
            value -= 1 << self._bits
        return value

    def _order(self, order: Optional[MemoryOrder]) -> MemoryOrder:
        if order is None:
            return self._default_order
        return MemoryOrder(order)

    def load(self, order: Optional[MemoryOrder] = None) -> Any:
        self._order(order)
        with self._lock:
            return self._value

    def store(self, desired: Any, order: Optional[MemoryOrder] = None) -> None:
        self._order(order)
        value = self._normalize(desired)
        with self._lock:
            self._value = value

    def exchange(self, desired: Any, order: Optional[MemoryOrder] = None) -> Any:
        """Store desired and return the value it replaced."""
        self._order(order)
        value = self._normalize(desired)
        with self._lock:
            old, self._value = self._value, value
            return old

    def compare_exchange_strong(
        self, expected: Any, desired: Any, order: Optional[MemoryOrder] = None
    ) -> tuple[bool, Any]:
        """Store desired if the value equals expected.

        Returns whether the store happened and the value found in the cell.
        """
        _compare_exchange_orders(self._order(order))
        value = self._normalize(desired)
        with self._lock:
            current = self._value
            if current == expected:
                self._value = value
                return True, current
            return False, current

    def _fetch(self, op: Callable[[int, int], int], val: int, order: Optional[MemoryOrder]) -> int:
        self._order(order)
        if not isinstance(val, int):
            raise TypeError(f"operand must be an integer, got {type(val).__name__}")
        with self._lock:
            old = self._value
            if not isinstance(old, int):
                raise TypeError(f"atomic holds a {type(old).__name__}, not an integer")
            self._value = self._normalize(op(old, val))
            return old

    def fetch_add(self, val: int, order: Optional[MemoryOrder] = None) -> int:
        """Add val and return the previous value."""
        return self._fetch(operator.add, val, order)

    def fetch_sub(self, val: int, order: Optional[MemoryOrder] = None) -> int:
        return self._fetch(operator.sub, val, order)

    def fetch_and(self, val: int, order: Optional[MemoryOrder] = None) -> int:
        return self._fetch(operator.and_, val, order)

    def fetch_or(self, val: int, order: Optional[MemoryOrder] = None) -> int:
        return self._fetch(operator.or_, val, order)

    def fetch_xor(self, val: int, order: Optional[MemoryOrder] = None) -> int:
        return self._fetch(operator.xor, val, order)

    def is_lock_free(self) -> bool:
        """Operations here are serialised with a lock, so never lock-free."""
        return False

    def __iadd__(self, val: int) -> "Atomic":
        self.fetch_add(val)
        return self

    def __isub__(self, val: int) -> "Atomic":
        self.fetch_sub(val)
        return self

    def __iand__(self, val: int) -> "Atomic":
        self.fetch_and(val)
        return self

    def __ior__(self, val: int) -> "Atomic":
        self.fetch_or(val)
        return self

    def __ixor__(self, val: int) -> "Atomic":
        self.fetch_xor(val)
        return self

    def __int__(self) -> int:
        value = self.load()
        if not isinstance(value, int):
            raise TypeError(f"atomic holds a {type(value).__name__}, not an integer")
        return value

    def __bool__(self) -> bool:
        return bool(self.load())

    def __repr__(self) -> str:
        width = "" if self._bits is None else f", bits={self._bits}, signed={self._signed}"
        return f"Atomic({self.load()!r}{width})"