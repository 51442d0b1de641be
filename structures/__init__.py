"""
structures/
-----------
Core data layer.  Public API:

    from structures import Graph, GraphNode, Edge
    from structures import BinarySearchTree, BinaryHeap, Trie
    from structures import ChainedHashTable, SinglyLinkedList, Stack, Queue
    from structures import OperationResult
"""

from structures.node        import GraphNode, edge_key
from structures.edge        import Edge
from structures.graph       import Graph
from structures.bst         import BinarySearchTree, TreeNode, TRAVERSAL_ORDERS
from structures.heap        import BinaryHeap, HEAP_KINDS
from structures.trie        import Trie, TrieNode
from structures.hash_table  import ChainedHashTable
from structures.linked_list import SinglyLinkedList, ListNode
from structures.linear      import Stack, Queue
from structures.result      import OperationResult

__all__ = [
    "GraphNode",        "Edge",       "Graph",     "edge_key",
    "BinarySearchTree", "TreeNode",   "TRAVERSAL_ORDERS",
    "BinaryHeap",       "HEAP_KINDS",
    "Trie",             "TrieNode",
    "ChainedHashTable",
    "SinglyLinkedList", "ListNode",
    "Stack",            "Queue",
    "OperationResult",
]
