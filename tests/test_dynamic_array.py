import pytest

from algokit.dynamic_array import DynamicArray


def test_append_and_index():
    array = DynamicArray()
    for value in (10, 20, 30):
        array.append(value)
    assert list(array) == [10, 20, 30]
    assert array[1] == 20
    assert array[-1] == 30
    assert len(array) == 3


def test_capacity_doubles():
    array = DynamicArray()
    assert array.capacity() == 0
    seen = []
    for value in range(5):
        array.append(value)
        seen.append(array.capacity())
    assert seen == [1, 2, 4, 4, 8]


def test_capacity_never_below_size():
    array = DynamicArray()
    for value in range(37):
        array.append(value)
        assert array.capacity() >= len(array)


def test_pop_returns_last_and_shrinks():
    array = DynamicArray()
    for value in (10, 20, 30):
        array.append(value)
    assert array.pop() == 30
    assert len(array) == 2
    assert array.capacity() == 4


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        DynamicArray().pop()


def test_clear_keeps_capacity():
    array = DynamicArray()
    for value in range(3):
        array.append(value)
    capacity = array.capacity()
    array.clear()
    assert len(array) == 0
    assert list(array) == []
    assert array.capacity() == capacity


def test_setitem_and_bounds():
    array = DynamicArray()
    array.append("a")
    array[0] = "b"
    assert array[0] == "b"
    with pytest.raises(IndexError):
        array[1]
    with pytest.raises(IndexError):
        array[5] = "c"