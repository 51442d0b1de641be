"""
dfs.py — Depth-First Search
=============================
Generator-based DFS using an explicit stack (no Python recursion limit issues).

Yields:
  1. Init  →  start pushed onto the stack
  2. First pop of a node  →  VISIT (one pausing step per node)
  3. Edge to an unvisited neighbour pushed for the first time  →  EDGE
  4. Stack empty  →  DONE with the visit order

Neighbours are pushed in REVERSE adjacency order, so the first declared
neighbour is popped first and the left-to-right order matches BFS.
A node may sit on the stack several times; popping it again after it has
been visited is skipped without producing a step.
"""

from typing import Generator, List, Set

from structures import Graph
from algorithms.step import StepBuilder, StepEvent, StepKind


PSEUDOCODE: List[str] = [
    "def DFS(graph, start):",                       # 0
    "    stack ← [start]",                          # 1
    "    visited ← {}",                             # 2
    "    while stack is not empty:",                # 3
    "        node ← stack.pop()",                   # 4
    "        if node in visited: continue",         # 5
    "        visit(node)",                          # 6
    "        for neighbour in reversed(adj(node)):",  # 7
    "            if neighbour not visited:",        # 8
    "                stack.push(neighbour)",        # 9
]


def dfs(graph: Graph, start: int) -> Generator[StepEvent, None, None]:
    """
    Iterative DFS with "mark on pop".  The overlay exposes the full stack
    at every step so the UI can render the stack panel.
    """
    sb    = StepBuilder()
    stack = [start]
    visited: Set[int] = set()
    seen_edges: Set[str] = set()
    order: List[int] = []

    yield sb.build(
        StepKind.INIT,
        f"Start from node {start}: push it onto the stack.",
        nodes=(start,), line=1, pause=False,
        overlay={"stack": list(stack)},
    )

    while stack:
        node = stack.pop()
        if node in visited:
            continue

        visited.add(node)
        order.append(node)
        sb.counters.visits += 1
        yield sb.build(
            StepKind.VISIT,
            f"Visiting node {node}",
            nodes=(node,), line=6,
            overlay={"stack": list(stack), "order": list(order)},
        )

        for nbr, edge in reversed(graph.neighbours(node)):
            if nbr in visited:
                continue
            stack.append(nbr)
            if edge.key not in seen_edges:
                seen_edges.add(edge.key)
                yield sb.build(
                    StepKind.EDGE,
                    f"Edge {edge.key}: push node {nbr} onto the stack.",
                    nodes=(node, nbr), edges=(edge.key,), line=9, pause=False,
                    overlay={"stack": list(stack)},
                )

    yield sb.done(
        "DFS Complete! Order: " + " → ".join(str(n) for n in order),
        result=order, line=3, overlay={"order": list(order)},
    )
