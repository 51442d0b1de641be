import random
from functools import total_ordering

import pytest

from algorithms.sorting import bubble_sort, insertion_sort, merge_sort, quick_sort, selection_sort
from algorithms.step import StepKind
from engine.recorder import replay

SORTS = [bubble_sort, selection_sort, insertion_sort, merge_sort, quick_sort]


@total_ordering
class Keyed:
    """Compares on `key` only so equal keys can be told apart by `tag`."""

    def __init__(self, key, tag):
        self.key = key
        self.tag = tag

    def __eq__(self, other):
        return self.key == other.key

    def __lt__(self, other):
        return self.key < other.key

    def __str__(self):
        return f"{self.key}{self.tag}"


@pytest.mark.parametrize("sort", SORTS)
@pytest.mark.parametrize("seed", range(5))
def test_sorts_produce_sorted_permutation(sort, seed, drain):
    rng = random.Random(seed)
    seq = [rng.randint(1, 20) for _ in range(rng.randint(1, 25))]
    original = list(seq)

    events = drain(sort(seq))

    assert seq == sorted(original)
    assert events[-1].is_final
    assert events[-1].result == sorted(original)


@pytest.mark.parametrize("sort", SORTS)
def test_sorts_handle_trivial_inputs(sort, drain):
    for seq in ([], [7], [2, 2, 2]):
        expected = sorted(seq)
        drain(sort(seq))
        assert seq == expected


@pytest.mark.parametrize("sort", [insertion_sort, merge_sort, bubble_sort])
def test_stable_sorts_keep_equal_elements_in_order(sort, drain):
    keys = [3, 1, 3, 2, 1, 3, 2]
    seq = [Keyed(k, tag) for tag, k in enumerate(keys)]

    drain(sort(seq))

    for a, b in zip(seq, seq[1:]):
        if a.key == b.key:
            assert a.tag < b.tag


def test_bubble_sort_scenario(drain):
    seq = [5, 3, 8, 1]
    events = drain(bubble_sort(seq))

    assert seq == [1, 3, 5, 8]
    final = events[-1]
    assert final.counters["comparisons"] == 6
    assert final.counters["swaps"] == 4

    swaps = [e for e in events if e.kind is StepKind.SWAP]
    states = []
    for swap in swaps:
        upto = events.index(swap) + 1
        states.append(replay([5, 3, 8, 1], events[:upto]))
    assert states == [[3, 5, 8, 1], [3, 5, 1, 8], [3, 1, 5, 8], [1, 3, 5, 8]]


def test_one_pause_per_comparison(drain):
    events = drain(bubble_sort([4, 3, 2, 1]))
    pauses = [e for e in events if e.pause]
    assert all(e.kind is StepKind.COMPARE for e in pauses)
    assert len(pauses) == events[-1].counters["comparisons"]


def test_merge_sort_emits_divide_events_and_counts_writes(drain):
    seq = [4, 1, 3, 2]
    events = drain(merge_sort(seq))

    divides = [e for e in events if e.kind is StepKind.DIVIDE]
    assert len(divides) == 3
    assert all(not e.changes and not e.pause for e in divides)
    assert events[-1].counters["writes"] == 8
    assert events[-1].counters["swaps"] == 0


def test_quick_sort_emits_one_pivot_per_partition(drain):
    seq = [3, 6, 1, 8, 2, 9, 4]
    events = drain(quick_sort(seq))

    pivots = [e for e in events if e.kind is StepKind.PIVOT]
    assert pivots[0].indices == (6,)
    assert pivots[0].overlay == {"low": 0, "high": 6, "pivot": 6}
    assert seq == [1, 2, 3, 4, 6, 8, 9]


def test_quick_sort_on_sorted_input_does_not_recurse(drain):
    seq = list(range(60))
    drain(quick_sort(seq))
    assert seq == list(range(60))


def test_step_numbers_are_consecutive(drain):
    events = drain(selection_sort([9, 7, 5, 3]))
    assert [e.step_number for e in events] == list(range(len(events)))


def test_counters_are_monotonic(drain):
    events = drain(insertion_sort([5, 2, 4, 6, 1, 3]))
    for prev, cur in zip(events, events[1:]):
        for name, value in prev.counters.items():
            assert cur.counters[name] >= value
