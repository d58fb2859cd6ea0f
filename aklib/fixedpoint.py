"""Binary fixed-point numbers stored in a signed integer of fixed width."""

from __future__ import annotations

import math

_SUPPORTED_WIDTHS = (8, 16, 32, 64)


def _validate(precision: int, bits: int) -> None:
    if bits not in _SUPPORTED_WIDTHS:
        raise ValueError(f"unsupported integer width: {bits}")
    if not isinstance(precision, int) or not 1 <= precision < bits:
        raise ValueError(f"precision must be between 1 and {bits - 1}, got {precision}")


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


class FixedPoint:
    """A signed fixed-point number with ``precision`` fractional bits in ``bits`` total.

    Arithmetic wraps like machine integers; multiplication and conversion to
    int round to nearest, breaking ties toward even.
    """

    __slots__ = ("_raw", "precision", "bits")

    def __init__(self, value=0, *, precision: int, bits: int = 32) -> None:
        _validate(precision, bits)
        self.precision = precision
        self.bits = bits
        if isinstance(value, FixedPoint):
            self._raw = value.cast_to(precision, bits)._raw
        elif isinstance(value, int):
            self._raw = self._wrap(self._wrap(value) << precision)
        elif isinstance(value, float):
            if not math.isfinite(value):
                raise ValueError("cannot represent a non-finite value")
            self._raw = self._wrap(int(value * (1 << precision)))
        else:
            raise TypeError(f"cannot make a FixedPoint from {type(value).__name__}")

    def _wrap(self, value: int) -> int:
        value &= (1 << self.bits) - 1
        if value >> (self.bits - 1):
            value -= 1 << self.bits
        return value

    @property
    def _mask(self) -> int:
        return (1 << self.precision) - 1

    @property
    def raw(self) -> int:
        return self._raw

    @raw.setter
    def raw(self, value: int) -> None:
        self._raw = self._wrap(value)

    @classmethod
    def create_raw(cls, raw: int, precision: int, bits: int = 32) -> "FixedPoint":
        result = cls(0, precision=precision, bits=bits)
        result._raw = result._wrap(raw)
        return result

    def _make(self, raw: int) -> "FixedPoint":
        return FixedPoint.create_raw(raw, self.precision, self.bits)

    def _coerce(self, other):
        if isinstance(other, FixedPoint):
            if other.precision == self.precision and other.bits == self.bits:
                return other
            return other.cast_to(self.precision, self.bits)
        if isinstance(other, float):
            return FixedPoint(other, precision=self.precision, bits=self.bits)
        return None

    def _rounded_shift(self, value: int, tie_parity_of=None) -> int:
        p = self.precision
        result = value >> p
        if value & (1 << (p - 1)):
            if value & (self._mask >> 2):
                result += 1 if value > 0 else -1
            else:
                result += (result if tie_parity_of is None else tie_parity_of) & 1
        return result

    def cast_to(self, precision: int, bits: int = 32) -> "FixedPoint":
        """Convert to another precision and width, keeping integer and fraction bits."""
        _validate(precision, bits)
        target = FixedPoint(0, precision=precision, bits=bits)
        p = self.precision
        fraction = self._raw & self._mask
        raw = target._wrap(target._wrap(self._raw >> p) << precision)
        if p > precision:
            raw |= fraction >> (p - precision)
        elif p < precision:
            raw |= fraction << (precision - p)
        else:
            raw |= fraction
        return FixedPoint.create_raw(raw, precision, bits)

    def __float__(self) -> float:
        return self._raw * 0.5**self.precision

    def __int__(self) -> int:
        return self._rounded_shift(self._raw)

    def fract(self) -> "FixedPoint":
        return self._make(self._raw & self._mask)

    def round(self) -> "FixedPoint":
        return FixedPoint(self.lround(), precision=self.precision, bits=self.bits)

    def floor(self) -> "FixedPoint":
        return self._make(self._raw & ~self._mask)

    def ceil(self) -> "FixedPoint":
        step = (1 << self.precision) if self._raw & self._mask else 0
        return self._make((self._raw & ~self._mask) + step)

    def trunk(self) -> "FixedPoint":
        step = 0
        if self._raw & self._mask and self._raw <= 0:
            step = 1 << self.precision
        return self._make((self._raw & ~self._mask) + step)

    def lround(self) -> int:
        return self._wrap(int(self))

    def lfloor(self) -> int:
        return self._raw >> self.precision

    def lceil(self) -> int:
        return (self._raw >> self.precision) + (1 if self._raw & self._mask else 0)

    def ltrunk(self) -> int:
        step = 1 if self._raw & self._mask and self._raw <= 0 else 0
        return (self._raw >> self.precision) + step

    def log2(self) -> "FixedPoint":
        """Binary logarithm; the most negative value stands in for minus infinity."""
        p = self.precision
        b = self._make(1 << (p - 1))
        y = self._make(0)
        x = self._make(self._raw)
        if x.raw <= 0:
            return self._make(-(1 << (self.bits - 1)))
        if x != 1:
            shift_amount = (x.raw.bit_length() - 1) - p
            if shift_amount > 0:
                x >>= shift_amount
            else:
                x <<= -shift_amount
            y += shift_amount
        for _ in range(p):
            x *= x
            if x >= 2:
                x >>= 1
                y += b
            b >>= 1
        return y

    def signbit(self) -> bool:
        return self._raw < 0

    def __neg__(self) -> "FixedPoint":
        return self._make(-self._raw)

    def __add__(self, other):
        if isinstance(other, int):
            return self._make(self._raw + (other << self.precision))
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._make(self._raw + o._raw)

    def __sub__(self, other):
        if isinstance(other, int):
            return self._make(self._raw - (other << self.precision))
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._make(self._raw - o._raw)

    def __mul__(self, other):
        if isinstance(other, int):
            return self._make(self._raw * other)
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        value = self._wrap(self._raw * o._raw)
        return self._make(self._rounded_shift(value, tie_parity_of=self._raw))

    def __truediv__(self, other):
        if isinstance(other, int):
            return self._make(_trunc_div(self._raw, other))
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._make(self._wrap(_trunc_div(self._raw, o._raw)) << self.precision)

    def __rshift__(self, other: int) -> "FixedPoint":
        return self._make(self._raw >> other)

    def __lshift__(self, other: int) -> "FixedPoint":
        return self._make(self._raw << other)

    def __iadd__(self, other):
        if isinstance(other, int):
            self._raw = self._wrap(self._raw + (other << self.precision))
            return self
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        self._raw = self._wrap(self._raw + o._raw)
        return self

    def __isub__(self, other):
        if isinstance(other, int):
            self._raw = self._wrap(self._raw - (other << self.precision))
            return self
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        self._raw = self._wrap(self._raw - o._raw)
        return self

    def __imul__(self, other):
        if isinstance(other, int):
            self._raw = self._wrap(self._raw * other)
            return self
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        value = self._wrap(self._raw * o._raw)
        self._raw = self._wrap(self._rounded_shift(value))
        return self

    def __itruediv__(self, other):
        if isinstance(other, int):
            self._raw = self._wrap(_trunc_div(self._raw, other))
            return self
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        self._raw = self._wrap(self._wrap(_trunc_div(self._raw, o._raw)) << self.precision)
        return self

    def __irshift__(self, other: int) -> "FixedPoint":
        self._raw = self._wrap(self._raw >> other)
        return self

    def __ilshift__(self, other: int) -> "FixedPoint":
        self._raw = self._wrap(self._raw << other)
        return self

    def __eq__(self, other):
        if isinstance(other, int):
            return (self._raw >> self.precision) == other and not self._raw & self._mask
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._raw == o._raw

    def __lt__(self, other):
        if isinstance(other, int):
            return (self._raw >> self.precision) < other or self._raw < (other << self.precision)
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._raw < o._raw

    def __le__(self, other):
        if isinstance(other, int):
            return self < other or self == other
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._raw <= o._raw

    def __gt__(self, other):
        if isinstance(other, int):
            return not self <= other
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._raw > o._raw

    def __ge__(self, other):
        if isinstance(other, int):
            return not self < other
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._raw >= o._raw

    __hash__ = None

    def __repr__(self) -> str:
        return f"FixedPoint({float(self)!r}, precision={self.precision}, bits={self.bits})"