import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from aklib.hashtable import (
    BucketState,
    HashSetExistingEntryBehavior,
    HashSetResult,
    HashTable,
    is_free_bucket,
    is_used_bucket,
)


class _Folded:
    """String wrapper compared case-insensitively, for replace/keep tests."""

    def __init__(self, text):
        self.text = text


def _folded_table(**kwargs):
    return HashTable(
        hash_function=lambda v: hash(v.text.lower()),
        equals=lambda a, b: a.text.lower() == b.text.lower(),
        **kwargs,
    )


def test_bucket_state_classes():
    assert is_used_bucket(BucketState.USED)
    assert is_used_bucket(BucketState.REHASHED)
    assert not is_used_bucket(BucketState.FREE)
    assert not is_used_bucket(BucketState.DELETED)
    assert not is_used_bucket(BucketState.END)
    assert is_free_bucket(BucketState.FREE)
    assert is_free_bucket(BucketState.DELETED)
    assert not is_free_bucket(BucketState.END)
    assert not is_free_bucket(BucketState.USED)


def test_set_results():
    table = HashTable()
    assert table.set(5) == HashSetResult.INSERTED_NEW_ENTRY
    assert table.set(5) == HashSetResult.REPLACED_EXISTING_ENTRY
    assert table.set(5, HashSetExistingEntryBehavior.KEEP) == HashSetResult.KEPT_EXISTING_ENTRY
    assert len(table) == 1


def test_first_insert_allocates_minimum_capacity():
    table = HashTable()
    assert table.capacity == 0
    table.set("a")
    assert table.capacity == 4


def test_replace_and_keep_store_expected_object():
    table = _folded_table()
    first = _Folded("Hello")
    second = _Folded("HELLO")
    table.set(first)
    table.set(second, HashSetExistingEntryBehavior.KEEP)
    assert table.find(_Folded("hello")) is first
    table.set(second)
    assert table.find(_Folded("hello")) is second
    assert len(table) == 1


def test_contains_find_remove():
    table = HashTable(range(10))
    assert 3 in table
    assert table.contains(9)
    assert table.find(4) == 4
    assert table.find(42) is None
    assert table.remove(3) is True
    assert table.remove(3) is False
    assert 3 not in table
    assert len(table) == 9


def test_find_with_hash_uses_predicate():
    table = HashTable(hash_function=lambda v: v[0], equals=lambda a, b: a == b)
    table.set((1, "x"))
    table.set((1, "y"))
    assert table.find_with_hash(1, lambda v: v[1] == "y") == (1, "y")
    assert table.find_with_hash(1, lambda v: v[1] == "z") is None


def test_empty_table_lookups():
    table = HashTable()
    assert table.find(1) is None
    assert not table.contains(1)
    assert table.remove(1) is False
    assert list(table) == []


def test_remove_all_matching():
    table = HashTable(range(20))
    assert table.remove_all_matching(lambda v: v % 2 == 0) is True
    assert sorted(table) == list(range(1, 20, 2))
    assert table.remove_all_matching(lambda v: v > 100) is False
    assert len(table) == 10


def test_ensure_capacity():
    table = HashTable(range(5))
    table.ensure_capacity(50)
    assert table.capacity >= 100
    assert sorted(table) == list(range(5))
    with pytest.raises(ValueError):
        table.ensure_capacity(2)


def test_clear_and_clear_with_capacity():
    table = HashTable(range(10))
    capacity = table.capacity
    table.clear_with_capacity()
    assert len(table) == 0
    assert table.capacity == capacity
    assert 3 not in table
    table.set(3)
    assert list(table) == [3]
    table.clear()
    assert table.capacity == 0
    assert list(table) == []


def test_ordered_iteration_follows_insertion():
    values = [50, 3, 17, 99, 4, 1000, 8]
    table = HashTable(values, ordered=True)
    assert list(table) == values
    table.remove(17)
    table.set(17)
    assert list(table) == [50, 3, 99, 4, 1000, 8, 17]


def test_ordered_survives_heavy_deletion():
    table = HashTable(range(40), ordered=True)
    for value in range(0, 40, 3):
        table.remove(value)
    for value in range(1, 40, 3):
        table.remove(value)
    expected = [v for v in range(40) if v % 3 == 2]
    assert list(table) == expected
    assert all(v in table for v in expected)


def test_constant_hash_collisions():
    table = HashTable(hash_function=lambda v: 7)
    for value in range(25):
        table.set(value)
    for value in range(0, 25, 2):
        assert table.remove(value)
    assert sorted(table) == list(range(1, 25, 2))
    assert all(table.contains(v) for v in range(1, 25, 2))
    assert not any(table.contains(v) for v in range(0, 25, 2))


def test_copy_is_independent():
    table = HashTable([1, 2, 3], ordered=True)
    duplicate = table.copy()
    duplicate.set(4)
    assert list(table) == [1, 2, 3]
    assert list(duplicate) == [1, 2, 3, 4]


def test_large_and_negative_integers():
    values = [-1, -(2**40), 2**40, 2**63, 0]
    table = HashTable(values)
    assert sorted(table) == sorted(values)


_operations = st.lists(
    st.tuples(st.sampled_from(["set", "remove"]), st.integers(min_value=-20, max_value=20)),
    max_size=200,
)


@settings(max_examples=150)
@given(_operations, st.booleans())
def test_matches_model(operations, ordered):
    table = HashTable(ordered=ordered)
    model = {}
    for op, key in operations:
        if op == "set":
            result = table.set(key)
            expected = (
                HashSetResult.REPLACED_EXISTING_ENTRY if key in model
                else HashSetResult.INSERTED_NEW_ENTRY
            )
            assert result == expected
            model.setdefault(key, None)
        else:
            assert table.remove(key) == (key in model)
            model.pop(key, None)
        assert len(table) == len(model)
        if table.capacity:
            assert len(table) * 100 < table.capacity * 60
    if ordered:
        assert list(table) == list(model)
    else:
        assert sorted(table) == sorted(model)
    for key in range(-20, 21):
        assert table.contains(key) == (key in model)