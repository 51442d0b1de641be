"""
linked_list.py — Singly Linked List
====================================
Nodes carry a stable `id` next to their value so a renderer can animate a
node as it moves.  Ids come from a counter OWNED BY THE LIST INSTANCE and
incremented on every insert; two lists never share a counter.
"""

from typing import Iterable, Iterator, List, Optional

from structures.result import OperationResult


DEFAULT_VALUES: List[int] = [10, 20, 30]


class ListNode:
    __slots__ = ("id", "value", "next")

    def __init__(self, node_id: int, value: int, nxt: Optional["ListNode"] = None):
        self.id:    int                  = node_id
        self.value: int                  = value
        self.next:  Optional["ListNode"] = nxt

    def __repr__(self) -> str:
        return f"ListNode(id={self.id}, value={self.value})"


class SinglyLinkedList:
    def __init__(self, values: Iterable[int] = ()):
        self.head:    Optional[ListNode] = None
        self._length: int                = 0
        self._next_id: int               = 1
        for v in values:
            self.append(v)

    @classmethod
    def default(cls) -> "SinglyLinkedList":
        return cls(DEFAULT_VALUES)

    def _new_node(self, value: int, nxt: Optional[ListNode] = None) -> ListNode:
        node = ListNode(self._next_id, value, nxt)
        self._next_id += 1
        self._length += 1
        return node

    def _node_at(self, index: int) -> ListNode:
        node = self.head
        for _ in range(index):
            node = node.next
        return node

    # ------------------------------------------------------------------
    # Inserts
    # ------------------------------------------------------------------
    def prepend(self, value: int) -> OperationResult:
        self.head = self._new_node(value, self.head)
        return OperationResult(True, f"Added {value} to head — O(1) operation", value)

    def append(self, value: int) -> OperationResult:
        if self.head is None:
            self.head = self._new_node(value)
        else:
            tail = self._node_at(self._length - 1)
            tail.next = self._new_node(value)
        return OperationResult(True, f"Added {value} to end — O(n) operation", value)

    def insert_at(self, index: int, value: int) -> OperationResult:
        if not 0 <= index <= self._length:
            return OperationResult(False, "Invalid value or index")
        if index == 0:
            self.prepend(value)
        else:
            prev = self._node_at(index - 1)
            prev.next = self._new_node(value, prev.next)
        return OperationResult(True, f"Inserted {value} at index {index} — O(n) operation", value)

    # ------------------------------------------------------------------
    # Removals (guarded no-ops on an empty list)
    # ------------------------------------------------------------------
    def remove_head(self) -> OperationResult:
        if self.head is None:
            return OperationResult(False, "List is empty!")
        node = self.head
        self.head = node.next
        self._length -= 1
        return OperationResult(True, f"Removed {node.value} from head — O(1) operation", node.value)

    def remove_tail(self) -> OperationResult:
        if self.head is None:
            return OperationResult(False, "List is empty!")
        if self._length == 1:
            return self.remove_head()
        prev = self._node_at(self._length - 2)
        value = prev.next.value
        prev.next = None
        self._length -= 1
        return OperationResult(True, f"Removed {value} from end — O(n) operation", value)

    def remove_at(self, index: int) -> OperationResult:
        if not 0 <= index < self._length:
            return OperationResult(False, "Invalid index")
        if index == 0:
            result = self.remove_head()
            return OperationResult(True, f"Removed {result.value} at index 0", result.value)
        prev = self._node_at(index - 1)
        value = prev.next.value
        prev.next = prev.next.next
        self._length -= 1
        return OperationResult(True, f"Removed {value} at index {index}", value)

    def clear(self) -> OperationResult:
        self.head = None
        self._length = 0
        return OperationResult(True, "List cleared")

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    def nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node:
            yield node
            node = node.next

    def values(self) -> List[int]:
        return [n.value for n in self.nodes()]

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[int]:
        return iter(self.values())

    def to_dict(self) -> dict:
        return {"nodes": [{"id": n.id, "value": n.value} for n in self.nodes()]}
