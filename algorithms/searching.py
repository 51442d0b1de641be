"""
searching.py — Linear & Binary Search
======================================
Linear search yields one VISIT step per element examined and stops on the
first match, so its result is always the LOWEST matching index.

Binary search yields one COMPARE step per midpoint and keeps explicit
[low, high] bounds in the overlay.  It assumes the sequence is sorted; on
unsorted input it still terminates but may report "not found" for a value
that is present.  That precondition is deliberately not checked.
"""

from typing import Generator, List

from algorithms.step import StepBuilder, StepEvent, StepKind


LINEAR_PSEUDOCODE: List[str] = [
    "for i in 0 .. n-1:",                   # 0
    "    if a[i] == target: return i",      # 1
    "return NOT FOUND",                     # 2
]

BINARY_PSEUDOCODE: List[str] = [
    "low ← 0;  high ← n-1",                 # 0
    "while low <= high:",                   # 1
    "    mid ← (low + high) / 2",           # 2
    "    if a[mid] == target: return mid",  # 3
    "    if a[mid] < target: low ← mid+1",  # 4
    "    else: high ← mid-1",               # 5
    "return NOT FOUND",                     # 6
]


def linear_search(seq: List[int], target: int) -> Generator[StepEvent, None, None]:
    sb = StepBuilder()

    for i, value in enumerate(seq):
        sb.counters.visits += 1
        sb.counters.comparisons += 1
        relation = "=" if value == target else "≠"
        yield sb.build(
            StepKind.VISIT,
            f"Checking index {i}: {value} {relation} {target}",
            indices=(i,), line=1,
        )
        if value == target:
            yield sb.done(
                f"Found {target} at index {i} in {sb.counters.visits} steps!",
                result=i, kind=StepKind.FOUND, indices=(i,), line=1,
            )
            return

    yield sb.done(
        f"{target} not found after checking all {len(seq)} elements.",
        result=None, kind=StepKind.NOT_FOUND, line=2,
    )


def binary_search(seq: List[int], target: int) -> Generator[StepEvent, None, None]:
    sb = StepBuilder()
    low, high = 0, len(seq) - 1

    while low <= high:
        mid = (low + high) // 2
        value = seq[mid]
        sb.counters.visits += 1
        sb.counters.comparisons += 1
        relation = "=" if value == target else ("<" if value < target else ">")
        yield sb.build(
            StepKind.COMPARE,
            f"Range [{low}...{high}], Mid={mid}, Value={value} {relation} {target}",
            indices=(mid,), line=2,
            overlay={"low": low, "high": high, "mid": mid},
        )
        if value == target:
            yield sb.done(
                f"Found {target} at index {mid} in {sb.counters.visits} steps!",
                result=mid, kind=StepKind.FOUND, indices=(mid,), line=3,
            )
            return
        if value < target:
            low = mid + 1
        else:
            high = mid - 1

    yield sb.done(
        f"{target} not found in the array.",
        result=None, kind=StepKind.NOT_FOUND, line=6,
        overlay={"low": low, "high": high},
    )
