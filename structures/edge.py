"""
edge.py — Graph Edge
====================
Connects two nodes with a weight.

Design decisions:
  - `source` and `target` are node ids, NOT node references.
    This keeps edges serialisable and avoids circular references.
  - Edges are undirected; `source`/`target` only record declaration order,
    which decides the order neighbours are enumerated in.
  - Weight defaults to 1 — BFS / DFS simply never read it.
"""

from typing import Optional

from structures.node import edge_key


class Edge:
    """
    Attributes:
        source : Id of the first endpoint as declared.
        target : Id of the second endpoint as declared.
        weight : Non-negative numeric cost (default 1).
    """

    __slots__ = ("source", "target", "weight")

    def __init__(self, source: int, target: int, weight: float = 1):
        self.source: int   = source
        self.target: int   = target
        self.weight: float = weight

    @property
    def key(self) -> str:
        return edge_key(self.source, self.target)

    def connects(self, node_a: int, node_b: int) -> bool:
        return {self.source, self.target} == {node_a, node_b}

    def other_end(self, node_id: int) -> Optional[int]:
        """Given one endpoint, return the other. None if node_id isn't an endpoint."""
        if node_id == self.source:
            return self.target
        if node_id == self.target:
            return self.source
        return None

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {"source": self.source, "target": self.target, "weight": self.weight}

    @classmethod
    def from_dict(cls, data: dict) -> "Edge":
        return cls(source=int(data["source"]), target=int(data["target"]),
                   weight=data.get("weight", 1))

    def __repr__(self) -> str:
        return f"Edge({self.source} ↔ {self.target}, w={self.weight})"
