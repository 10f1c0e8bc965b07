import pytest

from dinorun.dynarray import BLOCK_SIZE, DynArray


def filled(values):
    array = DynArray()
    for value in values:
        array.push_back(value)
    return array


def test_push_back_and_index():
    array = filled(["a", "b", "c"])
    assert len(array) == 3
    assert list(array) == ["a", "b", "c"]
    assert array[1] == "b"


def test_index_out_of_range_raises():
    array = filled([1])
    with pytest.raises(IndexError):
        array[1]
    with pytest.raises(IndexError):
        array[-1]
    assert len(array) == 1
    assert array[0] == 1


def test_default_capacity_and_growth():
    array = DynArray()
    assert array.capacity() == BLOCK_SIZE
    for i in range(BLOCK_SIZE + 1):
        array.push_back(i)
    assert array.capacity() == BLOCK_SIZE * 2
    assert len(array) == BLOCK_SIZE + 1


def test_explicit_capacity():
    array = DynArray(4)
    assert array.capacity() == 4


def test_pop_is_lifo_and_empty_raises():
    array = filled([1, 2])
    assert array.pop() == 2
    assert array.pop() == 1
    with pytest.raises(IndexError):
        array.pop()


def test_clear_keeps_capacity():
    array = filled(range(20))
    capacity = array.capacity()
    array.clear()
    assert len(array) == 0
    assert array.capacity() == capacity


def test_insert_in_middle_and_at_end():
    array = filled([1, 3])
    array.insert(2, 1)
    array.insert(4, 3)
    assert list(array) == [1, 2, 3, 4]


def test_insert_past_end_raises():
    array = filled([1])
    with pytest.raises(IndexError):
        array.insert(5, 2)


def test_insert_all():
    array = filled(["a", "d", "e"])
    array.insert_all(["b", "c"], 1)
    assert list(array) == ["a", "b", "c", "d", "e"]
    with pytest.raises(IndexError):
        array.insert_all(["x"], 10)


def test_extend_and_iadd():
    array = filled([1])
    array.extend(filled([2, 3]))
    array += [4]
    assert list(array) == [1, 2, 3, 4]


def test_at_returns_none_out_of_range():
    array = filled(["x"])
    assert array.at(0) == "x"
    assert array.at(1) is None


def test_flip_reverses():
    values = [5, 1, 4, 2]
    array = filled(values)
    array.flip()
    assert list(array) == values[::-1]


@pytest.mark.parametrize("method", ["bubble_sort", "bubble_sort_optimized", "comb_sort"])
def test_sorts_order_all_but_last_element(method):
    values = [9, 4, 7, 1, 8, 2, 6, 3]
    array = filled(values)
    getattr(array, method)()
    result = list(array)
    assert result[:-1] == sorted(values[:-1])
    assert result[-1] == values[-1]
    assert sorted(result) == sorted(values)


def test_bubble_sort_counts_full_passes():
    values = [4, 3, 2, 1, 0]
    array = filled(values)
    comparisons = array.bubble_sort()
    assert comparisons > 0
    assert comparisons % (len(values) - 2) == 0


def test_sorts_on_tiny_arrays_do_nothing():
    for method in ("bubble_sort", "bubble_sort_optimized", "comb_sort"):
        array = filled([2, 1])
        assert getattr(array, method)() == 0
        assert list(array) == [2, 1]
        assert getattr(DynArray(), method)() == 0