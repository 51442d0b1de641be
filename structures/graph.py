"""
graph.py — Graph Container
===========================
Single source of truth for the graph.  Algorithms and the API both talk
to this object.

Responsibilities:
  1. CRUD on nodes & edges                  (add / remove / get)
  2. Adjacency queries                      (neighbours, edge_between, …)
  3. The default classroom graph            (seven nodes, nine edges)
  4. Import from an edge-list text          ("0-1:4, 1-2")
  5. Serialisation                          (to_dict / from_dict)

Design decisions:
  - Edges are kept in a list in declaration order.
  - There is NO cached adjacency: every neighbour query scans the edge
    list.  At a few dozen nodes that is cheaper than keeping a second
    structure in sync.
  - Neighbours come back in edge-declaration order, duplicates included
    when the same pair was connected twice.
"""

import math
import random
from typing import Dict, List, Optional, Tuple

from structures.edge import Edge
from structures.node import GraphNode


DEFAULT_NODES: List[Tuple[int, float, float]] = [
    (0, 100, 80), (1, 250, 40), (2, 400, 80),
    (3, 80, 200), (4, 250, 180), (5, 420, 200),
    (6, 250, 280),
]

DEFAULT_EDGES: List[Tuple[int, int, float]] = [
    (0, 1, 4), (0, 3, 2), (1, 2, 3),
    (1, 4, 1), (2, 5, 6), (3, 4, 5),
    (3, 6, 7), (4, 5, 2), (4, 6, 3),
]


class Graph:
    """
    Attributes:
        nodes : {node_id: GraphNode}
        edges : [Edge, …] in declaration order
    """

    def __init__(self, seed: Optional[int] = None):
        self.nodes: Dict[int, GraphNode] = {}
        self.edges: List[Edge]           = []
        self._rng = random.Random(seed)

    # ==================================================================
    # NODE CRUD
    # ==================================================================
    def add_node(self, node_id: int, x: Optional[float] = None, y: Optional[float] = None) -> GraphNode:
        if node_id in self.nodes:
            return self.nodes[node_id]
        # new nodes land somewhere inside the default canvas area
        if x is None:
            x = 80 + self._rng.random() * 360
        if y is None:
            y = 40 + self._rng.random() * 240
        node = GraphNode(node_id, x, y)
        self.nodes[node_id] = node
        return node

    def remove_node(self, node_id: int) -> None:
        if node_id not in self.nodes:
            return
        self.edges = [e for e in self.edges if node_id not in (e.source, e.target)]
        del self.nodes[node_id]

    def has_node(self, node_id: int) -> bool:
        return node_id in self.nodes

    def node_ids(self) -> List[int]:
        return sorted(self.nodes)

    # ==================================================================
    # EDGE CRUD
    # ==================================================================
    def add_edge(self, source: int, target: int, weight: float = 1) -> Edge:
        """Connect source ↔ target, creating either endpoint if it is new."""
        self.add_node(source)
        self.add_node(target)
        edge = Edge(source, target, weight)
        self.edges.append(edge)
        return edge

    def remove_edge(self, source: int, target: int) -> bool:
        for i, e in enumerate(self.edges):
            if e.connects(source, target):
                del self.edges[i]
                return True
        return False

    def edge_between(self, a: int, b: int) -> Optional[Edge]:
        """First declared edge connecting a and b."""
        for e in self.edges:
            if e.connects(a, b):
                return e
        return None

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, node_id: int) -> List[Tuple[int, Edge]]:
        """Return [(neighbour_id, edge)] by scanning edges in declaration order."""
        result = []
        for e in self.edges:
            other = e.other_end(node_id)
            if other is not None:
                result.append((other, e))
        return result

    # ==================================================================
    # FACTORIES
    # ==================================================================
    @classmethod
    def default(cls, seed: Optional[int] = None) -> "Graph":
        g = cls(seed=seed)
        for nid, x, y in DEFAULT_NODES:
            g.add_node(nid, x, y)
        for a, b, w in DEFAULT_EDGES:
            g.add_edge(a, b, w)
        return g

    @classmethod
    def from_edge_list(
        cls,
        text: str,
        canvas_w: float = 500,
        canvas_h: float = 320,
    ) -> "Graph":
        """
        Parse a comma / newline separated edge list.

        Supported tokens:
            0-1         → 0 ↔ 1, weight 1
            0-1:4       → 0 ↔ 1, weight 4
            2           → isolated node 2

        Nodes are auto-laid-out in a circle.  Raises ValueError on a token
        that cannot be parsed or a negative weight.
        """
        pairs: List[Tuple[int, int, float]] = []
        ids: List[int] = []

        for token in text.replace("\n", ",").split(","):
            token = token.strip()
            if not token:
                continue
            weight: float = 1
            if ":" in token:
                token, w_str = token.split(":", 1)
                weight = float(w_str)
                if not math.isfinite(weight):
                    raise ValueError(f"Weight must be a finite number in '{token}:{w_str}'")
                if weight.is_integer():
                    weight = int(weight)
                if weight < 0:
                    raise ValueError(f"Negative weight in '{token}:{w_str}'")
            if "-" in token:
                a_str, b_str = token.split("-", 1)
                a, b = int(a_str), int(b_str)
                pairs.append((a, b, weight))
                for nid in (a, b):
                    if nid not in ids:
                        ids.append(nid)
            else:
                nid = int(token)
                if nid not in ids:
                    ids.append(nid)

        g = cls()
        n = len(ids)
        cx, cy = canvas_w / 2, canvas_h / 2
        radius = min(canvas_w, canvas_h) * 0.4
        for i, nid in enumerate(ids):
            angle = 2 * math.pi * i / n
            g.add_node(nid, cx + radius * math.cos(angle), cy + radius * math.sin(angle))
        for a, b, w in pairs:
            g.add_edge(a, b, w)
        return g

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "nodes": [self.nodes[nid].to_dict() for nid in self.node_ids()],
            "edges": [e.to_dict() for e in self.edges],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        g = cls()
        for nd in data.get("nodes", []):
            node = GraphNode.from_dict(nd)
            g.nodes[node.id] = node
        for ed in data.get("edges", []):
            edge = Edge.from_dict(ed)
            g.add_edge(edge.source, edge.target, edge.weight)
        return g

    def clear(self) -> None:
        self.nodes.clear()
        self.edges.clear()

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self.nodes)}, edges={len(self.edges)})"
