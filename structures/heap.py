"""
heap.py — Array-backed Binary Heap
===================================
A list interpreted as a complete binary tree:

    parent(i) = (i - 1) // 2      children(i) = 2i + 1, 2i + 2

`kind` is "min" or "max".  The sift operations live in
algorithms/heap_ops.py as stepped generators; this class only holds the
data plus the index arithmetic and the invariant check.
"""

from typing import Iterable, List, Optional

from structures.result import OperationResult


HEAP_KINDS = ("min", "max")
DEFAULT_ITEMS: List[int] = [10, 20, 30, 25, 35, 40, 50]


def parent(i: int) -> int:
    return (i - 1) // 2


def left(i: int) -> int:
    return 2 * i + 1


def right(i: int) -> int:
    return 2 * i + 2


class BinaryHeap:
    def __init__(self, items: Iterable[int] = (), kind: str = "min"):
        if kind not in HEAP_KINDS:
            raise ValueError(f"Unknown heap kind: {kind}")
        self.items: List[int] = list(items)
        self.kind:  str       = kind

    @classmethod
    def default(cls) -> "BinaryHeap":
        return cls(DEFAULT_ITEMS, "min")

    def higher_priority(self, a: int, b: int) -> bool:
        """True if a must sit above b (strictly)."""
        return a < b if self.kind == "min" else a > b

    def is_valid(self) -> bool:
        """Heap-order invariant holds for every parent with children in range."""
        n = len(self.items)
        for i in range(n):
            for c in (left(i), right(i)):
                if c < n and self.higher_priority(self.items[c], self.items[i]):
                    return False
        return True

    # ------------------------------------------------------------------
    # Instant operations
    # ------------------------------------------------------------------
    def peek(self) -> OperationResult:
        if not self.items:
            return OperationResult(False, "Heap is empty!")
        return OperationResult(True, f"Root element: {self.items[0]}", self.items[0])

    def toggle_kind(self) -> OperationResult:
        """Flip min/max and re-heapify in place so the order invariant holds."""
        self.kind = "max" if self.kind == "min" else "min"
        self.heapify()
        return OperationResult(True, f"Switched to {self.kind}-heap and re-heapified", self.kind)

    def heapify(self) -> None:
        """Instant bottom-up heapify; the stepped version is heap_ops.heap_build."""
        a = self.items
        n = len(a)
        for start in range(n // 2 - 1, -1, -1):
            i = start
            while left(i) < n:
                best = i
                for c in (left(i), right(i)):
                    if c < n and self.higher_priority(a[c], a[best]):
                        best = c
                if best == i:
                    break
                a[i], a[best] = a[best], a[i]
                i = best

    def clear(self) -> OperationResult:
        self.items.clear()
        return OperationResult(True, "Heap cleared")

    def __len__(self) -> int:
        return len(self.items)

    def root(self) -> Optional[int]:
        return self.items[0] if self.items else None

    def to_dict(self) -> dict:
        return {"items": list(self.items), "kind": self.kind, "valid": self.is_valid()}
