"""
dijkstra.py — Dijkstra's Shortest Distances
=============================================
Generator-based Dijkstra with an explicit distance map and a linear scan
for the next node (no priority queue — the graphs here have a handful of
nodes and the scan makes the tie-break visible: lowest id wins).

Yields:
  1. Init  →  every distance ∞ except the source (0)
  2. Select the minimum-distance unvisited node  →  FINALIZE (pausing)
  3. Each successful relaxation  →  RELAX (step-adjacent)
  4. No reachable unvisited node left  →  DONE with the distance map

Overlay exposes "distances" with None standing in for ∞ so the map stays
JSON-serialisable.

Correctness note: Dijkstra requires non-negative weights.  The validator
refuses graphs with negative edges before a run starts.
"""

from typing import Dict, Generator, List, Optional, Set

from structures import Graph
from algorithms.step import StepBuilder, StepEvent, StepKind


INF = float("inf")

PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, source):",                 # 0
    "    dist ← {v: ∞ for v in V}",                 # 1
    "    dist[source] ← 0",                         # 2
    "    repeat |V| times:",                        # 3
    "        u ← unvisited node with min dist",     # 4
    "        if dist[u] = ∞: stop",                 # 5
    "        visited.add(u)",                       # 6
    "        for (v, w) in adj(u):",                # 7
    "            if dist[u] + w < dist[v]:",        # 8
    "                dist[v] ← dist[u] + w",        # 9
]


def _snapshot(dist: Dict[int, float]) -> Dict[int, Optional[float]]:
    return {n: (None if d == INF else d) for n, d in dist.items()}


def _fmt(d: float) -> str:
    return "∞" if d == INF else f"{d:g}"


def dijkstra(graph: Graph, start: int) -> Generator[StepEvent, None, None]:
    sb = StepBuilder()
    node_ids = graph.node_ids()
    dist: Dict[int, float] = {nid: INF for nid in node_ids}
    dist[start] = 0
    visited: Set[int] = set()

    yield sb.build(
        StepKind.INIT,
        f"Set distance of source {start} = 0, all others = ∞.",
        nodes=(start,), line=2, pause=False,
        overlay={"distances": _snapshot(dist)},
    )

    for _ in range(len(node_ids)):
        # ascending-id scan with strict < : ties go to the lowest id
        u, best = None, INF
        for nid in node_ids:
            if nid not in visited and dist[nid] < best:
                u, best = nid, dist[nid]
        if u is None:
            break

        visited.add(u)
        sb.counters.visits += 1
        yield sb.build(
            StepKind.FINALIZE,
            f"Processing node {u}, distance = {_fmt(dist[u])}",
            nodes=(u,), line=6,
            overlay={"distances": _snapshot(dist), "visited": sorted(visited)},
        )

        for nbr, edge in graph.neighbours(u):
            candidate = dist[u] + edge.weight
            sb.counters.comparisons += 1
            if candidate < dist[nbr]:
                old = dist[nbr]
                dist[nbr] = candidate
                yield sb.build(
                    StepKind.RELAX,
                    f"Relax {u}→{nbr}: {_fmt(dist[u])} + {edge.weight} = {_fmt(candidate)} "
                    f"< {_fmt(old)}",
                    nodes=(u, nbr), edges=(edge.key,), line=9, pause=False,
                    changes={nbr: candidate},
                    overlay={"distances": _snapshot(dist)},
                )

    yield sb.done(
        "Dijkstra Complete! Shortest distances found.",
        result=_snapshot(dist), line=3,
        overlay={"distances": _snapshot(dist), "visited": sorted(visited)},
    )
