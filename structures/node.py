"""
node.py — Graph Node
=====================
Nodes are plain ids with a canvas position; edges refer to them by id.
"""


class GraphNode:
    """
    Identity plus display position.  Algorithm state never lives on the
    node: it is carried by the StepEvents of a run.

    Attributes:
        id    : Integer node id (also its label on the canvas).
        x, y  : Canvas coordinates in pixels.
    """

    __slots__ = ("id", "x", "y")

    def __init__(self, node_id: int, x: float = 0.0, y: float = 0.0):
        self.id: int   = node_id
        self.x:  float = x
        self.y:  float = y

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {"id": self.id, "x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict) -> "GraphNode":
        return cls(node_id=int(data["id"]), x=data.get("x", 0.0), y=data.get("y", 0.0))

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"GraphNode(id={self.id}, pos=({self.x:.0f},{self.y:.0f}))"

    def __eq__(self, other) -> bool:
        return isinstance(other, GraphNode) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


def edge_key(a: int, b: int) -> str:
    """Direction-free key for the edge between a and b, e.g. '1-4'."""
    lo, hi = (a, b) if a <= b else (b, a)
    return f"{lo}-{hi}"
