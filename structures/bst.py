"""
bst.py — Binary Search Tree
============================
Immutable-style node records.  Inserting copies the nodes on the
root-to-leaf path and shares every untouched subtree, so a root held by a
running traversal is never changed underneath it.

Equal values go to the RIGHT subtree.
"""

from collections import deque
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional


DEFAULT_VALUES: List[int] = [50, 30, 70, 20, 40, 60, 80]

TRAVERSAL_ORDERS = ("inorder", "preorder", "postorder", "levelorder")


@dataclass(frozen=True)
class TreeNode:
    value: int
    left:  Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def insert(root: Optional[TreeNode], value: int) -> TreeNode:
    if root is None:
        return TreeNode(value)
    if value < root.value:
        return replace(root, left=insert(root.left, value))
    return replace(root, right=insert(root.right, value))


def build(values: Iterable[int]) -> Optional[TreeNode]:
    root = None
    for v in values:
        root = insert(root, v)
    return root


def traversal(root: Optional[TreeNode], order: str) -> List[int]:
    """Full traversal computed eagerly — the stepper only replays it."""
    if order == "levelorder":
        return _level_order(root)
    out: List[int] = []
    _walk(root, order, out)
    return out


def _walk(node: Optional[TreeNode], order: str, out: List[int]) -> None:
    if node is None:
        return
    if order == "preorder":
        out.append(node.value)
    _walk(node.left, order, out)
    if order == "inorder":
        out.append(node.value)
    _walk(node.right, order, out)
    if order == "postorder":
        out.append(node.value)


def _level_order(root: Optional[TreeNode]) -> List[int]:
    out: List[int] = []
    queue = deque([root] if root else [])
    while queue:
        node = queue.popleft()
        out.append(node.value)
        if node.left:
            queue.append(node.left)
        if node.right:
            queue.append(node.right)
    return out


def levels(root: Optional[TreeNode]) -> List[List[int]]:
    """Values grouped by depth, left to right."""
    result: List[List[int]] = []
    frontier = [root] if root else []
    while frontier:
        result.append([n.value for n in frontier])
        frontier = [c for n in frontier for c in (n.left, n.right) if c]
    return result


def height(root: Optional[TreeNode]) -> int:
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def contains(root: Optional[TreeNode], value: int) -> bool:
    node = root
    while node:
        if value == node.value:
            return True
        node = node.left if value < node.value else node.right
    return False


def to_dict(node: Optional[TreeNode]) -> Optional[dict]:
    if node is None:
        return None
    return {"value": node.value, "left": to_dict(node.left), "right": to_dict(node.right)}


class BinarySearchTree:
    """Mutable holder for the current root of an immutable tree."""

    def __init__(self, values: Iterable[int] = ()):
        self.root: Optional[TreeNode] = build(values)

    @classmethod
    def default(cls) -> "BinarySearchTree":
        return cls(DEFAULT_VALUES)

    def insert(self, value: int) -> None:
        self.root = insert(self.root, value)

    def traversal(self, order: str) -> List[int]:
        return traversal(self.root, order)

    def __contains__(self, value: int) -> bool:
        return contains(self.root, value)

    def __len__(self) -> int:
        return len(traversal(self.root, "inorder"))

    def to_dict(self) -> dict:
        return {"root": to_dict(self.root), "height": height(self.root)}
