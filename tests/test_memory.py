import pytest
from hypothesis import given, strategies as st

from aklib.memory import memmem_chunks, memmem_optional, secure_zero, timing_safe_compare

small_bytes = st.binary(max_size=80)


def test_empty_needle_found_at_start():
    assert memmem_optional(b"abc", b"") == 0
    assert memmem_chunks([b"abc"], b"") == 0


def test_needle_longer_than_haystack():
    assert memmem_optional(b"ab", b"abc") is None


def test_equal_lengths():
    assert memmem_optional(b"abc", b"abc") == 0
    assert memmem_optional(b"abc", b"abd") is None


@given(st.binary(max_size=60), st.binary(min_size=1, max_size=31))
def test_short_needle_matches_find(haystack, needle):
    found = haystack.find(needle)
    assert memmem_optional(haystack, needle) == (None if found < 0 else found)


@given(small_bytes, st.binary(min_size=1, max_size=31), small_bytes)
def test_short_needle_embedded(prefix, needle, suffix):
    haystack = prefix + needle + suffix
    assert memmem_optional(haystack, needle) == haystack.find(needle)


@given(small_bytes, st.binary(min_size=32, max_size=64), small_bytes)
def test_long_needle_embedded(prefix, needle, suffix):
    haystack = prefix + needle + suffix
    assert memmem_optional(haystack, needle) == haystack.find(needle)


@given(st.binary(min_size=33, max_size=120), st.binary(min_size=32, max_size=40))
def test_long_needle_matches_find(haystack, needle):
    found = haystack.find(needle)
    assert memmem_optional(haystack, needle) == (None if found < 0 else found)


@given(
    st.lists(st.binary(max_size=12), max_size=8),
    st.binary(min_size=1, max_size=6),
)
def test_chunks_match_find_on_concatenation(chunks, needle):
    joined = b"".join(chunks)
    found = joined.find(needle)
    assert memmem_chunks(chunks, needle) == (None if found < 0 else found)


def test_repetitive_pattern_across_chunks():
    chunks = [b"aaa", b"ab", b"aab", b"aaab"]
    needle = b"aaab"
    assert memmem_chunks(chunks, needle) == b"".join(chunks).find(needle)


@given(st.binary(max_size=40))
def test_timing_safe_compare_equal(data):
    assert timing_safe_compare(data, bytes(data))


@given(st.binary(min_size=1, max_size=40), st.data())
def test_timing_safe_compare_detects_change(data, draw):
    index = draw.draw(st.integers(0, len(data) - 1))
    changed = bytearray(data)
    changed[index] ^= 0xFF
    assert not timing_safe_compare(data, bytes(changed))


def test_timing_safe_compare_length_mismatch():
    assert not timing_safe_compare(b"abc", b"abcd")


def test_secure_zero_wipes_bytearray():
    buf = bytearray(b"sensitive data")
    secure_zero(buf)
    assert buf == bytearray(len(buf))


def test_secure_zero_rejects_immutable():
    with pytest.raises(TypeError):
        secure_zero(b"immutable")