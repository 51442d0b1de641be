"""
heap_ops.py — Heap Insert / Extract / Build
============================================
Stepped sift operations on a BinaryHeap (mutated in place).

  • insert  – append, then sift-up: one COMPARE per parent/child pair
  • extract – move last element to the root, then sift-down: one COMPARE
              per (node, left, right) triple
  • build   – bottom-up sift-down from the last non-leaf to the root

Swaps are step-adjacent SWAP events.  Extracting from an empty heap is a
guarded no-op: a single final EMPTY event and no mutation.
"""

from typing import Generator, List

from structures.heap import BinaryHeap, left, parent, right
from algorithms.step import StepBuilder, StepEvent, StepKind


INSERT_PSEUDOCODE: List[str] = [
    "heap.append(value);  i ← n-1",                       # 0
    "while i > 0:",                                       # 1
    "    p ← (i-1) / 2",                                  # 2
    "    if heap[i] beats heap[p]: swap; i ← p",          # 3
    "    else: break",                                    # 4
]

EXTRACT_PSEUDOCODE: List[str] = [
    "root ← heap[0]",                                     # 0
    "heap[0] ← heap.pop_last()",                          # 1
    "i ← 0",                                              # 2
    "loop:",                                              # 3
    "    best ← winner of i, 2i+1, 2i+2",                 # 4
    "    if best = i: break",                             # 5
    "    swap(heap[i], heap[best]);  i ← best",           # 6
]

BUILD_PSEUDOCODE: List[str] = [
    "for i in n/2-1 down to 0:",                          # 0
    "    sift_down(i)",                                   # 1
    "        best ← winner of j, 2j+1, 2j+2",             # 2
    "        if best = j: break",                         # 3
    "        swap(heap[j], heap[best]);  j ← best",       # 4
]


def _swap(items: List[int], i: int, j: int) -> dict:
    items[i], items[j] = items[j], items[i]
    return {i: items[i], j: items[j]}


def heap_insert(heap: BinaryHeap, value: int) -> Generator[StepEvent, None, None]:
    sb = StepBuilder()
    a = heap.items
    a.append(value)
    i = len(a) - 1
    sb.counters.writes += 1
    yield sb.build(
        StepKind.INSERT,
        f"Inserted {value}, bubbling up...",
        indices=(i,), changes={i: value}, line=0, pause=False,
    )

    while i > 0:
        p = parent(i)
        sb.counters.comparisons += 1
        yield sb.build(
            StepKind.COMPARE,
            f"Compare child {a[i]} (index {i}) with parent {a[p]} (index {p})",
            indices=(i, p), line=3,
        )
        if not heap.higher_priority(a[i], a[p]):
            break
        changes = _swap(a, i, p)
        sb.counters.swaps += 1
        yield sb.build(
            StepKind.SWAP,
            f"Swap {a[p]} up to index {p}",
            indices=(i, p), changes=changes, line=3, pause=False,
        )
        i = p

    yield sb.done(f"Inserted {value} — heap property restored", result=list(a), line=4)


def heap_extract(heap: BinaryHeap) -> Generator[StepEvent, None, None]:
    sb = StepBuilder()
    a = heap.items
    if not a:
        yield sb.done("Heap Underflow! Heap is empty.", result=None, kind=StepKind.EMPTY)
        return

    root = a[0]
    last = a.pop()
    # None at the old tail index marks the slot as removed
    changes = {len(a): None}
    if a:
        a[0] = last
        changes[0] = last
    sb.counters.writes += 1
    yield sb.build(
        StepKind.EXTRACT,
        f"Extracted {root}, heapifying down...",
        indices=(0,), changes=changes, line=1, pause=False,
        overlay={"removed_index": len(a), "extracted": root},
    )

    yield from _sift_down(heap, 0, sb, line=4)
    yield sb.done(f"Extracted {root} — heap property restored", result=root, line=5)


def heap_build(heap: BinaryHeap) -> Generator[StepEvent, None, None]:
    sb = StepBuilder()
    for i in range(len(heap.items) // 2 - 1, -1, -1):
        yield from _sift_down(heap, i, sb, line=2)
    yield sb.done(f"Heap built! ({heap.kind}-heap)", result=list(heap.items), line=0)


def _sift_down(heap: BinaryHeap, i: int, sb: StepBuilder, line: int) -> Generator[StepEvent, None, None]:
    a = heap.items
    n = len(a)
    while left(i) < n:
        l, r = left(i), right(i)
        best = i
        if heap.higher_priority(a[l], a[best]):
            best = l
        if r < n and heap.higher_priority(a[r], a[best]):
            best = r
        triple = (i, l, r) if r < n else (i, l)
        sb.counters.comparisons += len(triple) - 1
        yield sb.build(
            StepKind.COMPARE,
            f"Compare {', '.join(f'a[{k}]={a[k]}' for k in triple)} → winner index {best}",
            indices=triple, line=line,
        )
        if best == i:
            return
        changes = _swap(a, i, best)
        sb.counters.swaps += 1
        yield sb.build(
            StepKind.SWAP,
            f"Swap {a[i]} up to index {i}, {a[best]} down to index {best}",
            indices=(i, best), changes=changes, line=line, pause=False,
        )
        i = best
