"""
bfs.py — Breadth-First Search
==============================
Generator-based BFS traversal from a start node.  Yields:
  1. Init  →  start node enqueued and marked seen
  2. Dequeue a node  →  VISIT (one pausing step per node)
  3. First traversal of an edge to an unseen neighbour  →  EDGE (step-adjacent)
  4. Queue empty  →  DONE with the visit order

Neighbours are enumerated in edge-declaration order; a node is enqueued
at most once, so every node is dequeued (and visited) exactly once.
"""

from collections import deque
from typing import Generator, List, Set

from structures import Graph
from algorithms.step import StepBuilder, StepEvent, StepKind


PSEUDOCODE: List[str] = [
    "def BFS(graph, start):",                   # 0
    "    queue ← [start]",                      # 1
    "    seen ← {start}",                       # 2
    "    while queue is not empty:",            # 3
    "        node ← queue.dequeue()",           # 4
    "        visit(node)",                      # 5
    "        for neighbour in adj(node):",      # 6
    "            if neighbour not seen:",       # 7
    "                seen.add(neighbour)",      # 8
    "                queue.enqueue(neighbour)", # 9
]


def bfs(graph: Graph, start: int) -> Generator[StepEvent, None, None]:
    """
    Args:
        graph : The graph to traverse.
        start : Start node id (validated by the caller).

    Yields:
        StepEvent – VISIT per dequeued node, EDGE per newly traversed edge.
    """
    sb    = StepBuilder()
    queue = deque([start])
    seen: Set[int] = {start}
    seen_edges: Set[str] = set()
    order: List[int] = []

    yield sb.build(
        StepKind.INIT,
        f"Start from node {start}: enqueue it and mark it seen.",
        nodes=(start,), line=1, pause=False,
        overlay={"queue": list(queue)},
    )

    while queue:
        node = queue.popleft()
        order.append(node)
        sb.counters.visits += 1
        yield sb.build(
            StepKind.VISIT,
            f"Visiting node {node}",
            nodes=(node,), line=5,
            overlay={"queue": list(queue), "order": list(order)},
        )

        for nbr, edge in graph.neighbours(node):
            if nbr in seen:
                continue
            seen.add(nbr)
            queue.append(nbr)
            if edge.key not in seen_edges:
                seen_edges.add(edge.key)
                yield sb.build(
                    StepKind.EDGE,
                    f"Edge {edge.key}: discover node {nbr} and enqueue it.",
                    nodes=(node, nbr), edges=(edge.key,), line=9, pause=False,
                    overlay={"queue": list(queue)},
                )

    yield sb.done(
        "BFS Complete! Order: " + " → ".join(str(n) for n in order),
        result=order, line=3, overlay={"order": list(order)},
    )
