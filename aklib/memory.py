"""Substring search over byte buffers and helpers for sensitive memory."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

_U64_MASK = 0xFFFFFFFFFFFFFFFF


def _kmp_table(needle: bytes) -> list[int]:
    table = [0] * len(needle)
    table[0] = -1
    position, candidate = 1, 0
    while position < len(needle):
        if needle[position] == needle[candidate]:
            table[position] = table[candidate]
        else:
            table[position] = candidate
            candidate = table[candidate]
            while candidate >= 0 and needle[candidate] != needle[position]:
                candidate = table[candidate]
        position += 1
        candidate += 1
    return table


def memmem_chunks(chunks: Iterable[bytes], needle: bytes) -> Optional[int]:
    """Offset of the first occurrence of needle in the concatenated chunks, or None."""
    needle = bytes(needle)
    if not needle:
        return 0
    table = _kmp_table(needle)
    total = 0
    needle_index = 0
    for chunk in chunks:
        i = 0
        while i < len(chunk):
            if needle[needle_index] == chunk[i]:
                needle_index += 1
                i += 1
                total += 1
                if needle_index == len(needle):
                    return total - needle_index
                continue
            needle_index = table[needle_index]
            if needle_index < 0:
                needle_index += 1
                i += 1
                total += 1
    return None


def _bitap(haystack: bytes, needle: bytes) -> Optional[int]:
    n = len(needle)
    if n >= 32:
        raise ValueError("bitap search needs a needle shorter than 32 bytes")
    lookup = 0xFFFFFFFE
    needle_mask = [0xFFFFFFFF] * 256
    for i, byte in enumerate(needle):
        needle_mask[byte] &= ~(1 << i) & _U64_MASK
    for i, byte in enumerate(haystack):
        lookup |= needle_mask[byte]
        lookup = (lookup << 1) & _U64_MASK
        if not lookup & (1 << n):
            return i - n + 1
    return None


def memmem_optional(haystack: bytes, needle: bytes) -> Optional[int]:
    """Offset of the first occurrence of needle in haystack, or None."""
    haystack = bytes(haystack)
    needle = bytes(needle)
    if not needle:
        return 0
    if len(haystack) < len(needle):
        return None
    if len(haystack) == len(needle):
        return 0 if haystack == needle else None
    if len(needle) < 32:
        return _bitap(haystack, needle)
    return memmem_chunks([haystack], needle)


def timing_safe_compare(a: bytes, b: bytes) -> bool:
    """Compare two byte strings without branching on their contents."""
    result = 0
    for x, y in zip(a, b):
        result |= x ^ y
    return result == 0 and len(a) == len(b)


def secure_zero(buffer) -> None:
    """Overwrite a writable byte buffer with zeroes."""
    buffer[:] = bytes(len(buffer))