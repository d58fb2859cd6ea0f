"""Bit counting, integer math, integer hashing and bit casts on fixed-width integers."""

from __future__ import annotations

import struct

_SUPPORTED_WIDTHS = (8, 16, 32, 64)
_U32_MASK = 0xFFFFFFFF
_U64_MASK = 0xFFFFFFFFFFFFFFFF
_DOUBLE_HASH_MAGIC = 0xBA5EDB01


def _check_width(bits: int) -> int:
    if bits not in _SUPPORTED_WIDTHS:
        raise ValueError(f"unsupported integer width: {bits}")
    return (1 << bits) - 1


def _check_unsigned(value: int, bits: int) -> None:
    mask = _check_width(bits)
    if not 0 <= value <= mask:
        raise ValueError(f"{value} does not fit in an unsigned {bits}-bit integer")


def _check_integral(value: int, bits: int) -> int:
    """Accept a signed or unsigned value of the width; return its unsigned view."""
    mask = _check_width(bits)
    if not -(1 << (bits - 1)) <= value <= mask:
        raise ValueError(f"{value} does not fit in a {bits}-bit integer")
    return value & mask


def popcount(value: int, bits: int = 32) -> int:
    """Number of set bits in an unsigned integer of the given width."""
    _check_unsigned(value, bits)
    return bin(value).count("1")


def count_trailing_zeroes(value: int, bits: int = 32) -> int:
    """Number of trailing zero bits; the value must not be zero."""
    _check_unsigned(value, bits)
    if value == 0:
        raise ValueError("count_trailing_zeroes is undefined for zero")
    return (value & -value).bit_length() - 1


def count_trailing_zeroes_safe(value: int, bits: int = 32) -> int:
    """Number of trailing zero bits, or the width when the value is zero."""
    _check_unsigned(value, bits)
    if value == 0:
        return bits
    return count_trailing_zeroes(value, bits)


def count_leading_zeroes(value: int, bits: int = 32) -> int:
    """Number of leading zero bits within the width; the value must not be zero."""
    _check_unsigned(value, bits)
    if value == 0:
        raise ValueError("count_leading_zeroes is undefined for zero")
    return bits - value.bit_length()


def count_leading_zeroes_safe(value: int, bits: int = 32) -> int:
    """Number of leading zero bits, or the width when the value is zero."""
    _check_unsigned(value, bits)
    if value == 0:
        return bits
    return count_leading_zeroes(value, bits)


def bit_scan_forward(value: int, bits: int = 32) -> int:
    """One plus the index of the lowest set bit, or zero when no bit is set."""
    unsigned = _check_integral(value, bits)
    if unsigned == 0:
        return 0
    return 1 + count_trailing_zeroes(unsigned, bits)


def exp2(exponent: int) -> int:
    """Two raised to a non-negative integer exponent."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    return 1 << exponent


def log2(x: int, bits: int = 32) -> int:
    """Integer base-two logarithm (index of the highest set bit); zero for zero."""
    unsigned = _check_integral(x, bits)
    if unsigned == 0:
        return 0
    return (bits - 1) - count_leading_zeroes(unsigned, bits)


def ipow(base: int, exponent: int) -> int:
    """Integer power by squaring; negative exponents give zero."""
    if exponent < 0:
        return 0
    result = 1
    while exponent > 0:
        if exponent & 1:
            result *= base
        base *= base
        exponent //= 2
    return result


def int_hash(key: int) -> int:
    """Integer mixing hash over 32-bit unsigned arithmetic."""
    key &= _U32_MASK
    key = (key + (~(key << 15) & _U32_MASK)) & _U32_MASK
    key ^= key >> 10
    key = (key + (key << 3)) & _U32_MASK
    key ^= key >> 6
    key = (key + (~(key << 11) & _U32_MASK)) & _U32_MASK
    key ^= key >> 16
    return key


def double_hash(key: int) -> int:
    """Secondary xorshift hash used for probing."""
    key &= _U32_MASK
    if key == _DOUBLE_HASH_MAGIC:
        return 0
    if key == 0:
        key = _DOUBLE_HASH_MAGIC
    key ^= (key << 13) & _U32_MASK
    key ^= key >> 17
    key ^= (key << 5) & _U32_MASK
    return key


def pair_int_hash(key1: int, key2: int) -> int:
    """Combine two 32-bit keys into one hash."""
    return int_hash(((int_hash(key1) * 209) & _U32_MASK) ^ int_hash((key2 * 413) & _U32_MASK))


def u64_hash(key: int) -> int:
    """Hash a 64-bit key by combining its two halves."""
    key &= _U64_MASK
    return pair_int_hash(key & _U32_MASK, key >> 32)


def ptr_hash(ptr: int, pointer_size: int = 8) -> int:
    """Hash an address of the given pointer size in bytes."""
    if pointer_size == 8:
        return u64_hash(ptr)
    if pointer_size == 4:
        return int_hash(ptr)
    raise ValueError(f"unsupported pointer size: {pointer_size}")


def bit_cast(value, from_format: str, to_format: str):
    """Reinterpret the bytes of a value packed with one struct format as another."""
    if struct.calcsize(from_format) != struct.calcsize(to_format):
        raise ValueError("bit_cast requires formats of equal size")
    (result,) = struct.unpack(to_format, struct.pack(from_format, value))
    return result