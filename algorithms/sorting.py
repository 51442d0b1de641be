"""
sorting.py — Comparison Sorts
==============================
Generator-based bubble, selection, insertion, merge and quick sort.
All of them sort the given list IN PLACE and yield:

  1. A COMPARE step for every comparison          (pausing)
  2. A SWAP / WRITE event for every mutation        (step-adjacent)
  3. Merge sort: DIVIDE events (informational, no mutation)
  4. Quick sort: one PIVOT event per partition (last element, Lomuto)
  5. A final DONE event carrying the sorted list as result

Quick sort keeps its pending ranges on an explicit (low, high) work-stack
so every algorithm here suspends the same way and stack depth is bounded
by the list size rather than the interpreter's recursion limit.
"""

from typing import Generator, List, Tuple

from algorithms.step import StepBuilder, StepEvent, StepKind


BUBBLE_PSEUDOCODE: List[str] = [
    "for i in 0 .. n-1:",                               # 0
    "    for j in 0 .. n-i-2:",                         # 1
    "        if a[j] > a[j+1]:",                        # 2
    "            swap(a[j], a[j+1])",                   # 3
]

SELECTION_PSEUDOCODE: List[str] = [
    "for i in 0 .. n-1:",                               # 0
    "    min ← i",                                      # 1
    "    for j in i+1 .. n-1:",                         # 2
    "        if a[j] < a[min]: min ← j",                # 3
    "    if min ≠ i: swap(a[i], a[min])",               # 4
]

INSERTION_PSEUDOCODE: List[str] = [
    "for i in 1 .. n-1:",                               # 0
    "    j ← i",                                        # 1
    "    while j > 0 and a[j] < a[j-1]:",               # 2
    "        swap(a[j], a[j-1])",                       # 3
    "        j ← j - 1",                                # 4
]

MERGE_PSEUDOCODE: List[str] = [
    "def merge_sort(a, lo, hi):",                       # 0
    "    if lo >= hi: return",                          # 1
    "    mid ← (lo + hi) / 2",                          # 2
    "    merge_sort(a, lo, mid); merge_sort(a, mid+1, hi)",  # 3
    "    while both halves non-empty:",                 # 4
    "        take the smaller head (left on ties)",     # 5
    "    copy the remaining elements",                  # 6
]

QUICK_PSEUDOCODE: List[str] = [
    "push (0, n-1)",                                    # 0
    "while work-stack not empty:",                      # 1
    "    (lo, hi) ← pop();  if lo >= hi: continue",     # 2
    "    pivot ← a[hi];  i ← lo - 1",                   # 3
    "    for j in lo .. hi-1:",                         # 4
    "        if a[j] < pivot: i ← i+1; swap(a[i], a[j])",  # 5
    "    swap(a[i+1], a[hi])",                          # 6
    "    push (i+2, hi); push (lo, i)",                 # 7
]


def _swap(seq: List[int], i: int, j: int) -> dict:
    seq[i], seq[j] = seq[j], seq[i]
    return {i: seq[i], j: seq[j]}


# ---------------------------------------------------------------------------
# Bubble sort
# ---------------------------------------------------------------------------
def bubble_sort(seq: List[int]) -> Generator[StepEvent, None, None]:
    sb = StepBuilder()
    n  = len(seq)

    for i in range(n):
        for j in range(n - i - 1):
            sb.counters.comparisons += 1
            yield sb.build(
                StepKind.COMPARE,
                f"Comparing index {j} ({seq[j]}) with index {j + 1} ({seq[j + 1]})",
                indices=(j, j + 1), line=2,
            )
            if seq[j] > seq[j + 1]:
                changes = _swap(seq, j, j + 1)
                sb.counters.swaps += 1
                yield sb.build(
                    StepKind.SWAP,
                    f"Swap {seq[j + 1]} ↔ {seq[j]}",
                    indices=(j, j + 1), changes=changes, line=3, pause=False,
                )

    yield sb.done("Sorting complete!", result=list(seq))


# ---------------------------------------------------------------------------
# Selection sort
# ---------------------------------------------------------------------------
def selection_sort(seq: List[int]) -> Generator[StepEvent, None, None]:
    sb = StepBuilder()
    n  = len(seq)

    for i in range(n):
        smallest = i
        for j in range(i + 1, n):
            sb.counters.comparisons += 1
            yield sb.build(
                StepKind.COMPARE,
                f"Finding minimum in [{i}...{n - 1}]: compare a[{j}]={seq[j]} "
                f"with current min a[{smallest}]={seq[smallest]}",
                indices=(smallest, j), line=3,
            )
            if seq[j] < seq[smallest]:
                smallest = j
        if smallest != i:
            changes = _swap(seq, i, smallest)
            sb.counters.swaps += 1
            yield sb.build(
                StepKind.SWAP,
                f"Swapping {seq[smallest]} ↔ {seq[i]}",
                indices=(i, smallest), changes=changes, line=4, pause=False,
            )

    yield sb.done("Sorting complete!", result=list(seq))


# ---------------------------------------------------------------------------
# Insertion sort
# ---------------------------------------------------------------------------
def insertion_sort(seq: List[int]) -> Generator[StepEvent, None, None]:
    sb = StepBuilder()

    for i in range(1, len(seq)):
        j = i
        while j > 0:
            sb.counters.comparisons += 1
            yield sb.build(
                StepKind.COMPARE,
                f"Inserting {seq[j]}: compare with a[{j - 1}]={seq[j - 1]}",
                indices=(j - 1, j), line=2,
            )
            # strict < keeps equal elements in their original order
            if not seq[j] < seq[j - 1]:
                break
            changes = _swap(seq, j, j - 1)
            sb.counters.swaps += 1
            yield sb.build(
                StepKind.SWAP,
                f"Shift {seq[j]} right, {seq[j - 1]} moves to index {j - 1}",
                indices=(j - 1, j), changes=changes, line=3, pause=False,
            )
            j -= 1

    yield sb.done("Sorting complete!", result=list(seq))


# ---------------------------------------------------------------------------
# Merge sort
# ---------------------------------------------------------------------------
def merge_sort(seq: List[int]) -> Generator[StepEvent, None, None]:
    sb = StepBuilder()
    yield from _merge_sort_range(seq, 0, len(seq) - 1, sb)
    yield sb.done("Sorting complete!", result=list(seq))


def _merge_sort_range(
    seq: List[int], start: int, end: int, sb: StepBuilder,
) -> Generator[StepEvent, None, None]:
    if start >= end:
        return
    mid = (start + end) // 2
    yield sb.build(
        StepKind.DIVIDE,
        f"Dividing [{start}...{end}] at mid={mid}",
        indices=(start, mid, end), line=2, pause=False,
        overlay={"low": start, "mid": mid, "high": end},
    )
    yield from _merge_sort_range(seq, start, mid, sb)
    yield from _merge_sort_range(seq, mid + 1, end, sb)

    left, right = seq[start:mid + 1], seq[mid + 1:end + 1]
    i = j = 0
    k = start
    while i < len(left) and j < len(right):
        sb.counters.comparisons += 1
        yield sb.build(
            StepKind.COMPARE,
            f"Merging [{start}...{mid}] and [{mid + 1}...{end}]: "
            f"compare {left[i]} with {right[j]}",
            indices=(k, mid + 1 + j), line=5,
        )
        # <= takes from the left half on ties, which keeps the sort stable
        if left[i] <= right[j]:
            value = left[i]
            i += 1
        else:
            value = right[j]
            j += 1
        yield _write(seq, k, value, sb, line=5)
        k += 1

    for value in left[i:] + right[j:]:
        yield _write(seq, k, value, sb, line=6)
        k += 1


def _write(seq: List[int], index: int, value: int, sb: StepBuilder, line: int) -> StepEvent:
    seq[index] = value
    sb.counters.writes += 1
    return sb.build(
        StepKind.WRITE,
        f"Write {value} to index {index}",
        indices=(index,), changes={index: value}, line=line, pause=False,
    )


# ---------------------------------------------------------------------------
# Quick sort (Lomuto, explicit work-stack)
# ---------------------------------------------------------------------------
def quick_sort(seq: List[int]) -> Generator[StepEvent, None, None]:
    sb = StepBuilder()
    work: List[Tuple[int, int]] = [(0, len(seq) - 1)]

    while work:
        low, high = work.pop()
        if low >= high:
            continue

        pivot = seq[high]
        yield sb.build(
            StepKind.PIVOT,
            f"Pivot: {pivot} at index {high} (partition [{low}...{high}])",
            indices=(high,), line=3, pause=False,
            overlay={"low": low, "high": high, "pivot": high},
        )

        i = low - 1
        for j in range(low, high):
            sb.counters.comparisons += 1
            yield sb.build(
                StepKind.COMPARE,
                f"Compare a[{j}]={seq[j]} with pivot {pivot}",
                indices=(j, high), line=5,
                overlay={"low": low, "high": high, "pivot": high},
            )
            if seq[j] < pivot:
                i += 1
                changes = _swap(seq, i, j)
                sb.counters.swaps += 1
                yield sb.build(
                    StepKind.SWAP,
                    f"{seq[i]} < pivot: swap a[{i}] ↔ a[{j}]",
                    indices=(i, j), changes=changes, line=5, pause=False,
                )

        changes = _swap(seq, i + 1, high)
        sb.counters.swaps += 1
        yield sb.build(
            StepKind.SWAP,
            f"Place pivot {pivot} at its final index {i + 1}",
            indices=(i + 1, high), changes=changes, line=6, pause=False,
        )

        # right range pushed first so the left one is processed next
        work.append((i + 2, high))
        work.append((low, i))

    yield sb.done("Sorting complete!", result=list(seq))
