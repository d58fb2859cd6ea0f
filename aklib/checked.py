"""Integers of a fixed width that record overflow instead of silently wrapping."""

from __future__ import annotations

_SUPPORTED_WIDTHS = (8, 16, 32, 64)


def _bounds(bits: int, signed: bool) -> tuple[int, int]:
    if bits not in _SUPPORTED_WIDTHS:
        raise ValueError(f"unsupported integer width: {bits}")
    if signed:
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    return 0, (1 << bits) - 1


def _wrap(value: int, bits: int, signed: bool) -> int:
    value &= (1 << bits) - 1
    if signed and value >> (bits - 1):
        value -= 1 << bits
    return value


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def is_within_range(value: int, bits: int = 32, signed: bool = True) -> bool:
    """Whether value is representable in an integer of the given width and signedness."""
    low, high = _bounds(bits, signed)
    return low <= value <= high


class Checked:
    """A fixed-width integer whose arithmetic sets a sticky overflow flag.

    The stored value wraps like machine arithmetic; reading it through
    ``value()`` raises ``OverflowError`` once an overflow has happened.
    Division and modulo truncate toward zero.
    """

    __slots__ = ("_value", "_overflow", "bits", "signed")

    def __init__(self, value: int = 0, bits: int = 32, signed: bool = True) -> None:
        if not isinstance(value, int):
            raise TypeError(f"Checked needs an integer, got {type(value).__name__}")
        _bounds(bits, signed)
        self.bits = bits
        self.signed = signed
        self._overflow = not is_within_range(value, bits, signed)
        self._value = _wrap(value, bits, signed)

    def _copy(self) -> "Checked":
        other = Checked(0, self.bits, self.signed)
        other._value = self._value
        other._overflow = self._overflow
        return other

    def _store(self, result: int) -> None:
        if not is_within_range(result, self.bits, self.signed):
            self._overflow = True
        self._value = _wrap(result, self.bits, self.signed)

    @staticmethod
    def _operand(other) -> int:
        if isinstance(other, Checked):
            return other.value()
        if isinstance(other, int):
            return other
        raise TypeError(f"unsupported operand type: {type(other).__name__}")

    def has_overflow(self) -> bool:
        return self._overflow

    def value(self) -> int:
        """The stored value; raises OverflowError if an overflow has occurred."""
        if self._overflow:
            raise OverflowError("Checked value has overflowed")
        return self._value

    def value_unchecked(self) -> int:
        """The stored (possibly wrapped) value, regardless of overflow."""
        return self._value

    def add(self, other: int) -> None:
        self._store(self._value + other)

    def sub(self, other: int) -> None:
        self._store(self._value - other)

    def mul(self, other: int) -> None:
        self._store(self._value * other)

    def div(self, other: int) -> None:
        """Divide, truncating toward zero; division by zero or MIN / -1 overflows."""
        low, _ = _bounds(self.bits, self.signed)
        if self.signed and other == -1 and self._value == low:
            self._overflow = True
            return
        if other == 0:
            self._overflow = True
            return
        self._value = _wrap(_trunc_div(self._value, other), self.bits, self.signed)

    def mod(self, other: int) -> None:
        """Remainder of truncating division, with the sign of the dividend."""
        initial = self._value
        self.div(other)
        self._value = _wrap(self._value * other, self.bits, self.signed)
        self._value = _wrap(initial - self._value, self.bits, self.signed)

    def __iadd__(self, other) -> "Checked":
        self.add(self._operand(other))
        return self

    def __isub__(self, other) -> "Checked":
        self.sub(self._operand(other))
        return self

    def __imul__(self, other) -> "Checked":
        self.mul(self._operand(other))
        return self

    def __ifloordiv__(self, other) -> "Checked":
        self.div(self._operand(other))
        return self

    def __imod__(self, other) -> "Checked":
        self.mod(self._operand(other))
        return self

    def __add__(self, other) -> "Checked":
        result = self._copy()
        result.add(self._operand(other))
        return result

    def __sub__(self, other) -> "Checked":
        result = self._copy()
        result.sub(self._operand(other))
        return result

    def __mul__(self, other) -> "Checked":
        result = self._copy()
        result.mul(self._operand(other))
        return result

    def __floordiv__(self, other) -> "Checked":
        result = self._copy()
        result.div(self._operand(other))
        return result

    def __mod__(self, other) -> "Checked":
        result = self._copy()
        result.mod(self._operand(other))
        return result

    def _compare_operand(self, other):
        if isinstance(other, Checked):
            return other.value()
        if isinstance(other, int):
            return other
        return None

    def __eq__(self, other) -> bool:
        plain = self._compare_operand(other)
        if plain is None:
            return NotImplemented
        return self.value() == plain

    def __lt__(self, other) -> bool:
        plain = self._compare_operand(other)
        if plain is None:
            return NotImplemented
        return self.value() < plain

    def __le__(self, other) -> bool:
        plain = self._compare_operand(other)
        if plain is None:
            return NotImplemented
        return self.value() <= plain

    def __gt__(self, other) -> bool:
        plain = self._compare_operand(other)
        if plain is None:
            return NotImplemented
        return self.value() > plain

    def __ge__(self, other) -> bool:
        plain = self._compare_operand(other)
        if plain is None:
            return NotImplemented
        return self.value() >= plain

    __hash__ = None

    def __bool__(self) -> bool:
        return self.value() != 0

    def __int__(self) -> int:
        return self.value()

    def __repr__(self) -> str:
        kind = "i" if self.signed else "u"
        flag = ", overflow" if self._overflow else ""
        return f"Checked<{kind}{self.bits}>({self._value}{flag})"

    @classmethod
    def addition_would_overflow(cls, u: int, v: int, bits: int = 32, signed: bool = True) -> bool:
        return not is_within_range(u + v, bits, signed)

    @classmethod
    def multiplication_would_overflow(
        cls, u: int, v: int, *args: int, bits: int = 32, signed: bool = True
    ) -> bool:
        """Whether the product overflows; with extra factors every step is checked."""
        if not args:
            return not is_within_range(u * v, bits, signed)
        checked = cls(u, bits, signed)
        for factor in (v, *args):
            checked.mul(factor)
        return checked.has_overflow()