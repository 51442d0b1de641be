"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bubble": AlgoInfo(key, label, family, fn, args, pseudocode, …),
        …
    }

AlgoInfo is a lightweight dataclass.  The engine and the API both consume
it, so adding a new algorithm is: write the generator, write (or reuse)
an argument validator, add one entry here.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generator, List, Optional

from algorithms import validation as v
from algorithms.step import StepEvent
from algorithms.sorting import (
    bubble_sort, selection_sort, insertion_sort, merge_sort, quick_sort,
    BUBBLE_PSEUDOCODE, SELECTION_PSEUDOCODE, INSERTION_PSEUDOCODE,
    MERGE_PSEUDOCODE, QUICK_PSEUDOCODE,
)
from algorithms.searching import linear_search, binary_search, LINEAR_PSEUDOCODE, BINARY_PSEUDOCODE
from algorithms.bfs import bfs, PSEUDOCODE as _bfs_pc
from algorithms.dfs import dfs, PSEUDOCODE as _dfs_pc
from algorithms.dijkstra import dijkstra, PSEUDOCODE as _dij_pc
from algorithms.traversal import inorder, preorder, postorder, levelorder, PSEUDOCODE as _trav_pc
from algorithms.heap_ops import (
    heap_insert, heap_extract, heap_build,
    INSERT_PSEUDOCODE as _hins_pc, EXTRACT_PSEUDOCODE as _hext_pc, BUILD_PSEUDOCODE as _hbld_pc,
)
from algorithms.trie_ops import trie_insert, trie_search, INSERT_PSEUDOCODE as _tins_pc, SEARCH_PSEUDOCODE as _tsrch_pc
from algorithms.dp import (
    fibonacci, factorial, knapsack, lcs,
    FIBONACCI_PSEUDOCODE, FACTORIAL_PSEUDOCODE, KNAPSACK_PSEUDOCODE, LCS_PSEUDOCODE,
)
from algorithms.list_ops import list_search, list_traverse, SEARCH_PSEUDOCODE as _lsrch_pc, TRAVERSE_PSEUDOCODE as _ltrav_pc


FAMILIES = ("sorting", "searching", "graph", "tree", "heap", "trie", "dp", "linked_list")


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:             str                          # registry key, e.g. "bubble"
    label:           str                          # human label, e.g. "Bubble Sort"
    family:          str                          # visualizer it runs on
    fn:              Callable                     # the generator function
    args:            Callable                     # (data, params) → fn args; raises InvalidInput
    pseudocode:      List[str]                    # lines for the side-panel
    tags:            List[str] = field(default_factory=list)
    stable:          Optional[bool] = None        # sorts only
    complexity_time:  str = ""
    complexity_space: str = ""
    description:     str = ""

    def prepare(self, data: Any, params: Optional[Dict[str, Any]] = None) -> Generator[StepEvent, None, None]:
        """Validate eagerly, then return the (not yet started) generator."""
        return self.fn(*self.args(data, params or {}))

    def card(self) -> dict:
        return {
            "key":              self.key,
            "label":            self.label,
            "family":           self.family,
            "pseudocode":       list(self.pseudocode),
            "tags":             list(self.tags),
            "stable":           self.stable,
            "complexity_time":  self.complexity_time,
            "complexity_space": self.complexity_space,
            "description":      self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    # -- sorting --
    "bubble": AlgoInfo(
        key="bubble", label="Bubble Sort", family="sorting", fn=bubble_sort,
        args=v.sort_args, pseudocode=BUBBLE_PSEUDOCODE, stable=True,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Repeatedly compares adjacent elements and swaps them if they are out of order.",
    ),
    "selection": AlgoInfo(
        key="selection", label="Selection Sort", family="sorting", fn=selection_sort,
        args=v.sort_args, pseudocode=SELECTION_PSEUDOCODE, stable=False,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Finds the minimum of the unsorted part and moves it to the front.",
    ),
    "insertion": AlgoInfo(
        key="insertion", label="Insertion Sort", family="sorting", fn=insertion_sort,
        args=v.sort_args, pseudocode=INSERTION_PSEUDOCODE, stable=True,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Builds the sorted prefix one element at a time.",
    ),
    "merge": AlgoInfo(
        key="merge", label="Merge Sort", family="sorting", fn=merge_sort,
        args=v.sort_args, pseudocode=MERGE_PSEUDOCODE, stable=True,
        complexity_time="O(n log n)", complexity_space="O(n)",
        description="Splits in half, sorts each half, merges the sorted halves.",
    ),
    "quick": AlgoInfo(
        key="quick", label="Quick Sort", family="sorting", fn=quick_sort,
        args=v.sort_args, pseudocode=QUICK_PSEUDOCODE, stable=False,
        complexity_time="O(n log n)", complexity_space="O(log n)",
        description="Partitions around the last element, then sorts both partitions.",
    ),

    # -- searching --
    "linear": AlgoInfo(
        key="linear", label="Linear Search", family="searching", fn=linear_search,
        args=v.search_args, pseudocode=LINEAR_PSEUDOCODE,
        complexity_time="O(n)", complexity_space="O(1)",
        description="Checks each element from the start until the target is found.",
    ),
    "binary": AlgoInfo(
        key="binary", label="Binary Search", family="searching", fn=binary_search,
        args=v.search_args, pseudocode=BINARY_PSEUDOCODE, tags=["requires-sorted"],
        complexity_time="O(log n)", complexity_space="O(1)",
        description="Halves a SORTED interval each step. Unsorted input gives unreliable results.",
    ),

    # -- graph --
    "bfs": AlgoInfo(
        key="bfs", label="BFS (Breadth-First Search)", family="graph", fn=bfs,
        args=v.graph_args, pseudocode=_bfs_pc, tags=["traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores level by level using a queue.",
    ),
    "dfs": AlgoInfo(
        key="dfs", label="DFS (Depth-First Search)", family="graph", fn=dfs,
        args=v.graph_args, pseudocode=_dfs_pc, tags=["traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores as deep as possible before backtracking, using a stack.",
    ),
    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", family="graph", fn=dijkstra,
        args=v.dijkstra_args, pseudocode=_dij_pc, tags=["weighted", "shortest-path"],
        complexity_time="O(V²)", complexity_space="O(V)",
        description="Shortest distances from the source on non-negative weights.",
    ),

    # -- tree --
    "inorder": AlgoInfo(
        key="inorder", label="Inorder Traversal", family="tree", fn=inorder,
        args=v.tree_args, pseudocode=_trav_pc["inorder"],
        complexity_time="O(n)", complexity_space="O(h)",
        description="Left, node, right: yields a BST in ascending order.",
    ),
    "preorder": AlgoInfo(
        key="preorder", label="Preorder Traversal", family="tree", fn=preorder,
        args=v.tree_args, pseudocode=_trav_pc["preorder"],
        complexity_time="O(n)", complexity_space="O(h)",
        description="Node, left, right: the root comes first.",
    ),
    "postorder": AlgoInfo(
        key="postorder", label="Postorder Traversal", family="tree", fn=postorder,
        args=v.tree_args, pseudocode=_trav_pc["postorder"],
        complexity_time="O(n)", complexity_space="O(h)",
        description="Left, right, node: the root comes last.",
    ),
    "levelorder": AlgoInfo(
        key="levelorder", label="Level-order Traversal", family="tree", fn=levelorder,
        args=v.tree_args, pseudocode=_trav_pc["levelorder"],
        complexity_time="O(n)", complexity_space="O(w)",
        description="Depth by depth, left to right.",
    ),

    # -- heap --
    "heap_insert": AlgoInfo(
        key="heap_insert", label="Heap Insert", family="heap", fn=heap_insert,
        args=v.heap_value_args, pseudocode=_hins_pc,
        complexity_time="O(log n)", complexity_space="O(1)",
        description="Add element and bubble up.",
    ),
    "heap_extract": AlgoInfo(
        key="heap_extract", label="Heap Extract", family="heap", fn=heap_extract,
        args=v.heap_ordered_args, pseudocode=_hext_pc,
        complexity_time="O(log n)", complexity_space="O(1)",
        description="Remove root and heapify down.",
    ),
    "heap_build": AlgoInfo(
        key="heap_build", label="Build Heap", family="heap", fn=heap_build,
        args=v.heap_args, pseudocode=_hbld_pc,
        complexity_time="O(n)", complexity_space="O(1)",
        description="Sift down every non-leaf, bottom-up.",
    ),

    # -- trie --
    "trie_insert": AlgoInfo(
        key="trie_insert", label="Trie Insert", family="trie", fn=trie_insert,
        args=v.trie_args, pseudocode=_tins_pc,
        complexity_time="O(m)", complexity_space="O(m)",
        description="Walk / create one node per character, mark the last as a word end.",
    ),
    "trie_search": AlgoInfo(
        key="trie_search", label="Trie Search", family="trie", fn=trie_search,
        args=v.trie_args, pseudocode=_tsrch_pc,
        complexity_time="O(m)", complexity_space="O(1)",
        description="Follow one edge per character; fail on the first missing edge.",
    ),

    # -- dynamic programming --
    "fibonacci": AlgoInfo(
        key="fibonacci", label="Fibonacci", family="dp", fn=fibonacci,
        args=v.fibonacci_args, pseudocode=FIBONACCI_PSEUDOCODE,
        complexity_time="O(n)", complexity_space="O(n)",
        description="fib(n) = fib(n-1) + fib(n-2), stored in a table.",
    ),
    "factorial": AlgoInfo(
        key="factorial", label="Factorial", family="dp", fn=factorial,
        args=v.factorial_args, pseudocode=FACTORIAL_PSEUDOCODE,
        complexity_time="O(n)", complexity_space="O(n)",
        description="n! = n × (n-1)!, built up from 0! = 1.",
    ),
    "knapsack": AlgoInfo(
        key="knapsack", label="0/1 Knapsack", family="dp", fn=knapsack,
        args=v.knapsack_args, pseudocode=KNAPSACK_PSEUDOCODE,
        complexity_time="O(n×W)", complexity_space="O(n×W)",
        description="Maximum value that fits in the given capacity.",
    ),
    "lcs": AlgoInfo(
        key="lcs", label="Longest Common Subsequence", family="dp", fn=lcs,
        args=v.lcs_args, pseudocode=LCS_PSEUDOCODE,
        complexity_time="O(m×n)", complexity_space="O(m×n)",
        description="Longest subsequence common to two strings.",
    ),

    # -- linked list --
    "list_search": AlgoInfo(
        key="list_search", label="Linked List Search", family="linked_list", fn=list_search,
        args=v.list_value_args, pseudocode=_lsrch_pc,
        complexity_time="O(n)", complexity_space="O(1)",
        description="Follow next pointers until the value is found.",
    ),
    "list_traverse": AlgoInfo(
        key="list_traverse", label="Linked List Traversal", family="linked_list", fn=list_traverse,
        args=v.list_args, pseudocode=_ltrav_pc,
        complexity_time="O(n)", complexity_space="O(1)",
        description="Visit every node from head to NULL.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms(family: Optional[str] = None) -> List[AlgoInfo]:
    """Return registered algorithms in insertion order, optionally for one family."""
    return [a for a in REGISTRY.values() if family is None or a.family == family]


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    return [a for a in REGISTRY.values() if tag in a.tags]


__all__ = [
    "AlgoInfo",
    "FAMILIES",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
]
