import pytest
from hypothesis import given
from hypothesis import strategies as st

from aklib.sequences import (
    LinearArray,
    find,
    find_if,
    find_index,
    iota_linear_array,
)


def test_at_and_indexing_agree():
    array = LinearArray(["a", "b", "c"])
    assert array.at(1) == "b"
    assert array[2] == "c"
    assert len(array) == 3


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_at_out_of_range_raises(index):
    array = LinearArray([1, 2, 3])
    with pytest.raises(IndexError):
        array.at(index)


def test_setitem_replaces_element():
    array = LinearArray([1, 2, 3])
    array[1] = 9
    assert list(array) == [1, 9, 3]
    with pytest.raises(IndexError):
        array[3] = 0


def test_first_and_last():
    array = LinearArray("xyz")
    assert array.first() == "x"
    assert array.last() == "z"


def test_first_and_last_of_empty_raise():
    array = LinearArray()
    assert array.is_empty()
    with pytest.raises(IndexError):
        array.first()
    with pytest.raises(IndexError):
        array.last()


@given(st.lists(st.integers(), max_size=20), st.integers())
def test_fill_sets_every_element(values, fill_value):
    array = LinearArray(values)
    assert array.fill(fill_value) == len(values)
    assert list(array) == [fill_value] * len(values)


@given(st.lists(st.integers(), min_size=1, max_size=30))
def test_max_and_min_match_builtins(values):
    array = LinearArray(values)
    assert array.max() == max(values)
    assert array.min() == min(values)


def test_max_and_min_of_empty_raise():
    with pytest.raises(ValueError):
        LinearArray().max()
    with pytest.raises(ValueError):
        LinearArray().min()


def test_equality():
    assert LinearArray([1, 2]) == LinearArray([1, 2])
    assert not LinearArray([1, 2]) == LinearArray([1, 2, 3])
    assert LinearArray([1, 2]) == [1, 2]


@given(st.integers(min_value=0, max_value=50), st.integers(min_value=-100, max_value=100))
def test_iota_counts_up_from_offset(count, offset):
    array = iota_linear_array(count, offset)
    assert list(array) == list(range(offset, offset + count))


def test_iota_negative_count_raises():
    with pytest.raises(ValueError):
        iota_linear_array(-1)


def test_find_if_returns_first_match():
    assert find_if([1, 4, 6, 9], lambda v: v % 2 == 0) == 4
    assert find_if([1, 3, 5], lambda v: v % 2 == 0) is None


def test_find_returns_equal_element():
    assert find(["a", "b"], "b") == "b"
    assert find(["a", "b"], "z") is None


def test_find_index_found():
    assert find_index(["a", "b", "c"], "c") == 2


@given(st.lists(st.integers(min_value=0, max_value=9), max_size=20))
def test_find_index_missing_is_size(values):
    assert find_index(values, 100) == len(values)


@given(st.lists(st.integers(min_value=0, max_value=5), min_size=1, max_size=20))
def test_find_index_matches_list_index(values):
    target = values[-1]
    assert find_index(values, target) == values.index(target)
    assert find_index(LinearArray(values), target) == values.index(target)