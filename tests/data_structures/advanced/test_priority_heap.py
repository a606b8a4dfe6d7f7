import random

import pytest

from mstgraph.data_structures.advanced.priority_heap import (
    PriorityHeap,
    max_relation,
    min_relation,
)
from mstgraph.exceptions import CapacityError, InvalidCollaboratorError, MSTGraphError


def _identity(x):
    return x


def test_min_heap_extracts_in_ascending_order():
    heap = PriorityHeap(10, min_relation(_identity))
    data = [5, 1, 4, 2, 8, 2]
    for value in data:
        assert heap.insert(value)
    assert heap.size() == len(data)
    assert heap.root() == 1
    assert [heap.extract_root() for _ in data] == sorted(data)
    assert heap.is_empty()


def test_max_heap_with_key():
    heap = PriorityHeap(5, max_relation(lambda item: item[1]))
    for item in [("a", 3), ("b", 7), ("c", 1)]:
        heap.insert(item)
    assert heap.extract_root() == ("b", 7)
    assert heap.extract_root() == ("a", 3)
    assert heap.extract_root() == ("c", 1)


def test_empty_heap_returns_none():
    heap = PriorityHeap(1, min_relation(_identity))
    assert heap.root() is None
    assert heap.extract_root() is None


def test_insert_beyond_capacity_fails_and_leaves_heap_unchanged():
    heap = PriorityHeap(3, min_relation(_identity))
    for value in [3, 1, 2]:
        heap.insert(value)
    before = heap.snapshot()
    assert heap.is_full()
    assert not heap.insert(0)
    assert heap.snapshot() == before
    assert heap.size() == 3
    assert heap.capacity() == 3


def test_random_interleaving_matches_sorted_reference():
    rng = random.Random(1234)
    heap = PriorityHeap(64, min_relation(_identity))
    reference = []
    for _ in range(500):
        if reference and rng.random() < 0.4:
            expected = min(reference)
            reference.remove(expected)
            assert heap.extract_root() == expected
        elif not heap.is_full():
            value = rng.randint(-50, 50)
            heap.insert(value)
            reference.append(value)
        assert heap.size() == len(reference)


def test_heap_holds_references():
    heap = PriorityHeap(2, min_relation(len))
    item = [1, 2]
    heap.insert(item)
    assert heap.root() is item


def test_heap_rejects_bad_arguments():
    with pytest.raises(CapacityError):
        PriorityHeap(0, min_relation(_identity))
    with pytest.raises(InvalidCollaboratorError):
        PriorityHeap(3, None)
    with pytest.raises(MSTGraphError):
        PriorityHeap(3, "not callable")
