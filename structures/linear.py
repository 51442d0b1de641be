"""
linear.py — Stack & Queue
==========================
Instant LIFO / FIFO containers.  Pop / dequeue / peek on an empty
container is a guarded no-op that reports underflow instead of raising.
"""

from collections import deque
from typing import Iterable, List

from structures.result import OperationResult


DEFAULT_STACK: List[int] = [42, 17, 85]
DEFAULT_QUEUE: List[int] = [12, 45, 78]

HISTORY_LIMIT = 10


class Stack:
    def __init__(self, items: Iterable[int] = ()):
        self.items: List[int] = list(items)

    @classmethod
    def default(cls) -> "Stack":
        return cls(DEFAULT_STACK)

    def push(self, value: int) -> OperationResult:
        self.items.append(value)
        return OperationResult(True, f"Pushed {value} onto stack", value)

    def pop(self) -> OperationResult:
        if not self.items:
            return OperationResult(False, "Stack Underflow! Stack is empty.")
        value = self.items.pop()
        return OperationResult(True, f"Popped {value} from stack", value)

    def peek(self) -> OperationResult:
        if not self.items:
            return OperationResult(False, "Stack is empty!")
        return OperationResult(True, f"Top element: {self.items[-1]}", self.items[-1])

    def __len__(self) -> int:
        return len(self.items)

    def to_dict(self) -> dict:
        return {"items": list(self.items), "top": self.items[-1] if self.items else None}


class Queue:
    def __init__(self, items: Iterable[int] = ()):
        self.items:   deque     = deque(items)
        self.history: List[str] = []

    @classmethod
    def default(cls) -> "Queue":
        return cls(DEFAULT_QUEUE)

    def _record(self, entry: str) -> None:
        self.history.insert(0, entry)
        del self.history[HISTORY_LIMIT:]

    def enqueue(self, value: int) -> OperationResult:
        self.items.append(value)
        self._record(f"ENQUEUE({value})")
        return OperationResult(True, f"Enqueued {value} at rear", value)

    def dequeue(self) -> OperationResult:
        if not self.items:
            return OperationResult(False, "Queue Underflow! Queue is empty.")
        value = self.items.popleft()
        self._record(f"DEQUEUE() → {value}")
        return OperationResult(True, f"Dequeued {value} from front", value)

    def front(self) -> OperationResult:
        if not self.items:
            return OperationResult(False, "Queue is empty!")
        return OperationResult(True, f"Front element: {self.items[0]}", self.items[0])

    def clear(self) -> OperationResult:
        self.items.clear()
        self.history.clear()
        return OperationResult(True, "Queue cleared")

    def __len__(self) -> int:
        return len(self.items)

    def to_dict(self) -> dict:
        return {"items": list(self.items), "history": list(self.history)}
