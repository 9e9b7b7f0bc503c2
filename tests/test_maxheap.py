import random
from collections import Counter

import pytest

from labstructs.maxheap import MaxHeap


def is_max_heap(items):
    return all(
        items[(i - 1) // 2] >= items[i] for i in range(1, len(items))
    )


def build(values, capacity=100):
    heap = MaxHeap(capacity)
    for value in values:
        heap.insert(value)
    return heap


def test_source_inserts_render():
    heap = build([10, 40, 20, 5, 25])
    assert heap.render() == "Heap: 40 25 20 5 10"
    assert heap.peek() == 40


def test_change_priority_keeps_order():
    heap = build([10, 40, 20, 5, 25])
    heap.change_priority(3, 50)
    assert heap.peek() == 50
    assert is_max_heap(list(heap))
    heap.change_priority(0, 15)
    assert is_max_heap(list(heap))
    assert sorted(heap) == sorted([10, 40, 20, 15, 25])


def test_extract_gives_descending_order():
    values = random.Random(7).sample(range(1000), 60)
    heap = build(values)
    drained = [heap.extract_max() for _ in range(len(values))]
    assert drained == sorted(values, reverse=True)
    assert len(heap) == 0


def test_empty_heap_raises():
    heap = MaxHeap()
    with pytest.raises(IndexError):
        heap.extract_max()
    with pytest.raises(IndexError):
        heap.peek()


def test_capacity_limit():
    heap = build([1, 2], capacity=2)
    with pytest.raises(OverflowError):
        heap.insert(3)
    assert len(heap) == 2


def test_increase_key_rejects_smaller_value():
    heap = build([10, 40, 20])
    with pytest.raises(ValueError):
        heap.increase_key(1, 0)


def test_increase_key_moves_up():
    heap = build([10, 40, 20, 5])
    index = list(heap).index(5)
    heap.increase_key(index, 100)
    assert heap.peek() == 100
    assert is_max_heap(list(heap))


@pytest.mark.parametrize("index", [0, 1, 2, 3, 4])
def test_delete_key_removes_that_element(index):
    heap = build([10, 40, 20, 5, 25])
    before = list(heap)
    removed = before[index]
    heap.delete_key(index)
    after = list(heap)
    assert Counter(after) == Counter(before) - Counter([removed])
    assert is_max_heap(after)


def test_invalid_index():
    heap = build([1])
    with pytest.raises(IndexError):
        heap.change_priority(3, 9)
    with pytest.raises(IndexError):
        heap.delete_key(-1)