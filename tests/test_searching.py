import random

import pytest

from algorithms.searching import binary_search, linear_search
from algorithms.step import StepKind

SORTED = [1, 4, 7, 10, 13, 16, 19]


def test_binary_search_scenario_found(drain):
    events = drain(binary_search(SORTED, 13))

    mids = [e.overlay["mid"] for e in events if e.kind is StepKind.COMPARE]
    assert mids == [3, 5, 4]
    assert events[-1].kind is StepKind.FOUND
    assert events[-1].result == 4


def test_binary_search_scenario_not_found(drain):
    events = drain(binary_search(SORTED, 2))

    assert events[-1].kind is StepKind.NOT_FOUND
    assert events[-1].result is None
    assert [e.overlay["mid"] for e in events if e.pause] == [3, 1, 0]


def test_binary_search_keeps_explicit_bounds(drain):
    events = drain(binary_search(SORTED, 19))
    for e in events:
        if e.kind is StepKind.COMPARE:
            assert e.overlay["low"] <= e.overlay["mid"] <= e.overlay["high"]


@pytest.mark.parametrize("seed", range(10))
def test_binary_search_finds_any_present_value(seed, drain):
    rng = random.Random(seed)
    seq = sorted(rng.randint(0, 30) for _ in range(rng.randint(1, 20)))
    target = rng.choice(seq)
    result = drain(binary_search(seq, target))[-1].result
    assert seq[result] == target


def test_binary_search_on_unsorted_input_does_not_crash(drain):
    events = drain(binary_search([9, 2, 7, 1, 5], 1))
    assert events[-1].is_final


@pytest.mark.parametrize("seed", range(10))
def test_linear_search_returns_lowest_index(seed, drain):
    rng = random.Random(seed)
    seq = [rng.randint(0, 5) for _ in range(15)]
    target = rng.randint(0, 6)

    result = drain(linear_search(seq, target))[-1].result

    expected = seq.index(target) if target in seq else None
    assert result == expected


def test_linear_search_one_step_per_element_examined(drain):
    events = drain(linear_search([4, 8, 15, 16, 23, 42], 16))
    visits = [e for e in events if e.pause]
    assert [e.indices for e in visits] == [(0,), (1,), (2,), (3,)]
    assert events[-1].counters["visits"] == 4


def test_linear_search_exhaustion(drain):
    events = drain(linear_search([1, 2, 3], 9))
    assert len([e for e in events if e.pause]) == 3
    assert events[-1].kind is StepKind.NOT_FOUND
