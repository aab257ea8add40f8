import random

import pytest

from algokit.linked_list import (
    SinglyLinkedList,
    from_values,
    merge_k_lists,
    merge_two,
    reorder_list,
    sort_list,
    to_values,
)


@pytest.mark.parametrize("values", [[], [1], [3, 1, 2], list(range(20))])
def test_round_trip(values):
    assert to_values(from_values(values)) == values


def test_from_values_empty_is_none():
    assert from_values([]) is None


def test_insert_at_beginning_reverses():
    lst = SinglyLinkedList()
    values = [5, 6, 7, 8]
    for v in values:
        lst.insert_at_beginning(v)
    assert list(lst) == list(reversed(values))
    assert len(lst) == len(values)


def test_insert_at_end_keeps_order():
    lst = SinglyLinkedList()
    values = [5, 6, 7, 8]
    for v in values:
        lst.insert_at_end(v)
    assert list(lst) == values


def test_insert_at_position_matches_list_insert():
    lst = SinglyLinkedList()
    expected = []
    for v in [10, 20, 30]:
        lst.insert_at_end(v)
        expected.append(v)
    for value, pos in [(1, 1), (2, 3), (3, len(expected) + 3)]:
        lst.insert_at_position(value, pos)
        expected.insert(pos - 1, value)
        assert list(lst) == expected
    assert len(lst) == len(expected)


@pytest.mark.parametrize("pos", [0, -1, 5])
def test_insert_at_position_out_of_range(pos):
    lst = SinglyLinkedList()
    lst.insert_at_end(1)
    lst.insert_at_end(2)
    with pytest.raises(IndexError):
        lst.insert_at_position(9, pos)


def test_delete_beginning():
    lst = SinglyLinkedList()
    for v in [4, 5]:
        lst.insert_at_end(v)
    assert lst.delete_beginning() == 4
    assert list(lst) == [5]
    assert lst.delete_beginning() == 5
    assert len(lst) == 0
    assert lst.delete_beginning() is None


def test_merge_two_sorted():
    a, b = [1, 4, 9], [2, 3, 10, 11]
    assert to_values(merge_two(from_values(a), from_values(b))) == sorted(a + b)


def test_merge_two_with_empty():
    assert to_values(merge_two(None, from_values([1, 2]))) == [1, 2]
    assert to_values(merge_two(from_values([1, 2]), None)) == [1, 2]


def test_merge_k_lists():
    rng = random.Random(3)
    groups = [sorted(rng.randint(-50, 50) for _ in range(rng.randint(0, 8))) for _ in range(6)]
    merged = merge_k_lists([from_values(g) for g in groups])
    assert to_values(merged) == sorted(v for g in groups for v in g)


def test_merge_k_lists_empty():
    assert merge_k_lists([]) is None


@pytest.mark.parametrize("n", [0, 1, 2, 3, 4, 5, 10, 11])
def test_reorder_list_interleaves_front_and_back(n):
    values = list(range(n))
    head = from_values(values)
    reorder_list(head)
    result = to_values(head)
    half = (n + 1) // 2
    assert result[0::2] == values[:half]
    assert result[1::2] == list(reversed(values[half:]))


@pytest.mark.parametrize("seed", range(5))
def test_sort_list(seed):
    rng = random.Random(seed)
    values = [rng.randint(-100, 100) for _ in range(rng.randint(0, 40))]
    assert to_values(sort_list(from_values(values))) == sorted(values)