"""
list_ops.py — Linked List Search & Traversal
=============================================
Walk the list node by node, one VISIT step each.
"""

from typing import Generator

from structures.linked_list import SinglyLinkedList
from algorithms.step import StepBuilder, StepEvent, StepKind


SEARCH_PSEUDOCODE = [
    "node ← head;  i ← 0",
    "while node ≠ NULL:",
    "    if node.value = target: return i",
    "    node ← node.next;  i ← i + 1",
    "return NOT FOUND",
]

TRAVERSE_PSEUDOCODE = [
    "node ← head",
    "while node ≠ NULL:",
    "    visit(node);  node ← node.next",
]


def list_search(lst: SinglyLinkedList, target: int) -> Generator[StepEvent, None, None]:
    sb = StepBuilder()
    for i, node in enumerate(lst.nodes()):
        sb.counters.visits += 1
        sb.counters.comparisons += 1
        yield sb.build(
            StepKind.VISIT,
            f"Searching... checking index {i}, value {node.value}",
            indices=(i,), nodes=(node.id,), line=2,
        )
        if node.value == target:
            yield sb.done(f"Found {target} at index {i}!", result=i,
                          kind=StepKind.FOUND, indices=(i,), nodes=(node.id,), line=2)
            return
    yield sb.done(f"{target} not found in list", result=None, kind=StepKind.NOT_FOUND, line=4)


def list_traverse(lst: SinglyLinkedList) -> Generator[StepEvent, None, None]:
    sb = StepBuilder()
    values = []
    for i, node in enumerate(lst.nodes()):
        sb.counters.visits += 1
        values.append(node.value)
        nxt = f"node {i + 1}" if node.next else "NULL"
        yield sb.build(
            StepKind.VISIT,
            f"Traversing... node {i}: value = {node.value}, next → {nxt}",
            indices=(i,), nodes=(node.id,), line=2,
        )
    yield sb.done("Traversal complete!", result=values, line=1)
