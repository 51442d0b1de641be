"""
traversal.py — BST Traversals
==============================
Inorder / preorder / postorder / level-order.  The traversal is computed
EAGERLY in full from the root captured at run start, then replayed one
VISIT step per value purely for the animation.
"""

from typing import Generator, Optional

from structures.bst import TreeNode, traversal
from algorithms.step import StepBuilder, StepEvent, StepKind


PSEUDOCODE = {
    "inorder":    ["inorder(left)", "visit(node)", "inorder(right)"],
    "preorder":   ["visit(node)", "preorder(left)", "preorder(right)"],
    "postorder":  ["postorder(left)", "postorder(right)", "visit(node)"],
    "levelorder": ["queue ← [root]", "node ← queue.dequeue(); visit(node)",
                   "enqueue(node.left, node.right)"],
}

_VISIT_LINE = {"inorder": 1, "preorder": 0, "postorder": 2, "levelorder": 1}


def tree_traversal(root: Optional[TreeNode], order: str) -> Generator[StepEvent, None, None]:
    sb = StepBuilder()
    values = traversal(root, order)
    line = _VISIT_LINE[order]

    for i, value in enumerate(values):
        sb.counters.visits += 1
        yield sb.build(
            StepKind.VISIT,
            f"{order}: visit {value}",
            indices=(i,), nodes=(value,), line=line,
            overlay={"visited": values[:i + 1]},
        )

    yield sb.done(f"{order}: [{', '.join(str(v) for v in values)}]", result=values, line=line)


def inorder(root):
    return tree_traversal(root, "inorder")


def preorder(root):
    return tree_traversal(root, "preorder")


def postorder(root):
    return tree_traversal(root, "postorder")


def levelorder(root):
    return tree_traversal(root, "levelorder")


