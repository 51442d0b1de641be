import pytest

from algorithms.dp import DEFAULT_ITEMS, factorial, fibonacci, knapsack, lcs
from algorithms.step import StepKind


@pytest.mark.parametrize("n, expected", [(0, 0), (1, 1), (2, 1), (8, 21), (30, 832040)])
def test_fibonacci(n, expected, drain):
    events = drain(fibonacci(n))
    assert events[-1].result == expected
    assert len([e for e in events if e.kind is StepKind.FILL]) == n + 1


@pytest.mark.parametrize("n, expected", [(0, 1), (1, 1), (5, 120), (20, 2432902008176640000)])
def test_factorial(n, expected, drain):
    assert drain(factorial(n))[-1].result == expected


def test_knapsack_default_items(drain):
    events = drain(knapsack(7))
    assert events[-1].result == 9
    fills = [e for e in events if e.kind is StepKind.FILL]
    assert len(fills) == len(DEFAULT_ITEMS) * 8


def test_knapsack_zero_capacity(drain):
    assert drain(knapsack(0))[-1].result == 0


def test_lcs(drain):
    events = drain(lcs("ABCBDAB", "BDCAB"))
    assert events[-1].result == 4
    assert len(events[-1].overlay["subsequence"]) == 4
    assert len([e for e in events if e.kind is StepKind.FILL]) == 7 * 5


def test_fill_events_capture_recurrence_inputs(drain):
    events = drain(fibonacci(5))
    cell = [e for e in events if e.kind is StepKind.FILL][-1]
    assert cell.changes == {5: 5}
    assert cell.overlay["inputs"] == {"fib(4)": 3, "fib(3)": 2}
    assert cell.overlay["value"] == 5
    assert "3 + 2 = 5" in cell.description


def test_two_dimensional_cells_use_tuple_keys(drain):
    events = drain(lcs("AB", "B"))
    keys = [k for e in events if e.kind is StepKind.FILL for k in e.changes]
    assert keys == ["(1, 1)", "(2, 1)"]
