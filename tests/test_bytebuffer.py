import pytest
from hypothesis import given, strategies as st

from aklib.bytebuffer import INLINE_CAPACITY, ByteBuffer


def test_new_buffer_is_empty_and_inline():
    buf = ByteBuffer()
    assert buf.is_empty()
    assert buf.is_inline
    assert buf.capacity == 32


def test_grows_to_outline_and_shrinks_back():
    data = bytes(range(40))
    buf = ByteBuffer()
    buf.append(data)
    assert not buf.is_inline
    assert buf.capacity >= 40
    assert buf.bytes() == data
    buf.resize(10)
    assert buf.is_inline
    assert buf.capacity == INLINE_CAPACITY
    assert buf.bytes() == data[:10]


def test_create_zeroed():
    buf = ByteBuffer.create_zeroed(50)
    assert len(buf) == 50
    assert buf.bytes() == bytes(50)


def test_copy_and_equality():
    buf = ByteBuffer.copy(b"hello world")
    other = ByteBuffer.copy(buf)
    assert buf == other
    assert buf == b"hello world"
    other[0] = ord("j")
    assert buf != other


def test_append_single_byte_and_range_check():
    buf = ByteBuffer()
    buf.append(7)
    buf += b"\x08"
    assert buf.bytes() == b"\x07\x08"
    with pytest.raises(ValueError):
        buf.append(256)


def test_index_out_of_range():
    buf = ByteBuffer(b"abc")
    assert buf[2] == ord("c")
    with pytest.raises(IndexError):
        buf[3]
    with pytest.raises(IndexError):
        buf[-1]


def test_slice():
    buf = ByteBuffer(b"abcdefgh")
    assert buf.slice(2, 3) == b"cde"
    with pytest.raises(IndexError):
        buf.slice(6, 5)


def test_overwrite():
    buf = ByteBuffer(b"abcdef")
    buf.overwrite(1, b"XY")
    assert buf.bytes() == b"aXYdef"
    with pytest.raises(IndexError):
        buf.overwrite(5, b"XY")


def test_get_bytes_for_writing_then_resize():
    buf = ByteBuffer(b"ab")
    view = buf.get_bytes_for_writing(100)
    assert len(buf) == 2
    view[:] = b"z" * 100
    buf.resize(102)
    assert buf.bytes() == b"ab" + b"z" * 100


def test_zero_fill_and_clear():
    buf = ByteBuffer(b"\xff" * 64)
    buf.zero_fill()
    assert buf.bytes() == bytes(64)
    buf.clear()
    assert buf.is_empty()
    assert buf.is_inline


def test_negative_resize_rejected():
    with pytest.raises(ValueError):
        ByteBuffer().resize(-1)


@given(st.lists(st.binary(max_size=50), max_size=10))
def test_appends_concatenate(chunks):
    buf = ByteBuffer()
    for chunk in chunks:
        buf.append(chunk)
    joined = b"".join(chunks)
    assert buf.bytes() == joined
    assert list(buf) == list(joined)
    assert buf.capacity >= len(buf)


@given(st.binary(max_size=100), st.integers(0, 100))
def test_resize_keeps_prefix(data, new_size):
    buf = ByteBuffer.copy(data)
    buf.resize(new_size)
    assert len(buf) == new_size
    keep = min(len(data), new_size)
    assert buf.bytes()[:keep] == data[:keep]