"""
validation.py — Input Validation at the Run Boundary
=====================================================
Every check here runs synchronously BEFORE a generator is created.  A
failure raises InvalidInput with a user-facing message and leaves the data
untouched; a generator that does get created never raises.

Each `*_args` function maps (data, raw params) to the positional
arguments of the matching algorithm generator.
"""

from typing import Any, Dict, List, Optional, Tuple


class InvalidInput(ValueError):
    """User input rejected before a run starts."""


MAX_SEQUENCE = 100
MAX_WORD = 20
MAX_LCS = 12


# ---------------------------------------------------------------------------
# Primitive parsers
# ---------------------------------------------------------------------------
def parse_int(raw: Any, name: str = "value", lo: Optional[int] = None, hi: Optional[int] = None) -> int:
    if isinstance(raw, bool) or raw is None:
        raise InvalidInput(f"Enter a number for {name}")
    try:
        value = int(str(raw).strip())
    except ValueError:
        raise InvalidInput(f"'{raw}' is not a valid number for {name}") from None
    if lo is not None and hi is not None and not lo <= value <= hi:
        raise InvalidInput(f"Enter a number {lo}-{hi} for {name}")
    if lo is not None and value < lo:
        raise InvalidInput(f"{name} must be at least {lo}")
    if hi is not None and value > hi:
        raise InvalidInput(f"{name} must be at most {hi}")
    return value


def parse_values(
    raw: Any,
    lo: Optional[int] = None,
    hi: Optional[int] = None,
    min_count: int = 2,
) -> List[int]:
    """
    Comma-separated integers (or a list).  Tokens that are not integers or
    fall outside [lo, hi] are dropped; at least `min_count` must survive.
    """
    tokens = raw if isinstance(raw, (list, tuple)) else str(raw or "").split(",")
    values: List[int] = []
    for token in tokens:
        try:
            v = int(str(token).strip())
        except ValueError:
            continue
        if lo is not None and v < lo:
            continue
        if hi is not None and v > hi:
            continue
        values.append(v)
    if len(values) < min_count:
        raise InvalidInput(f"Enter at least {min_count} comma-separated numbers")
    if len(values) > MAX_SEQUENCE:
        raise InvalidInput(f"At most {MAX_SEQUENCE} values are supported")
    return values


def parse_word(raw: Any, name: str = "word", max_len: int = MAX_WORD) -> str:
    word = str(raw or "").strip().lower()
    if not word:
        raise InvalidInput(f"Enter a {name}")
    if not (word.isascii() and word.isalpha()):
        raise InvalidInput(f"'{word}' must contain letters a-z only")
    if len(word) > max_len:
        raise InvalidInput(f"{name} must be at most {max_len} letters")
    return word


def _require_sequence(seq: List[int]) -> None:
    if not seq:
        raise InvalidInput("The array is empty")


# ---------------------------------------------------------------------------
# Per-family argument builders
# ---------------------------------------------------------------------------
def sort_args(seq, params: Dict[str, Any]) -> Tuple:
    _require_sequence(seq)
    return (seq,)


def search_args(seq, params: Dict[str, Any]) -> Tuple:
    _require_sequence(seq)
    return (seq, parse_int(params.get("target"), "target"))


def graph_args(graph, params: Dict[str, Any]) -> Tuple:
    start = parse_int(params.get("start", 0), "start node")
    if not graph.has_node(start):
        raise InvalidInput("Invalid start node")
    return (graph, start)


def dijkstra_args(graph, params: Dict[str, Any]) -> Tuple:
    if any(e.weight < 0 for e in graph.edges):
        raise InvalidInput("Dijkstra requires non-negative edge weights")
    return graph_args(graph, params)


def tree_args(tree, params: Dict[str, Any]) -> Tuple:
    if tree.root is None:
        raise InvalidInput("The tree is empty")
    return (tree.root,)


def heap_value_args(heap, params: Dict[str, Any]) -> Tuple:
    return (_require_heap_order(heap), parse_int(params.get("value"), "value"))


def heap_ordered_args(heap, params: Dict[str, Any]) -> Tuple:
    return (_require_heap_order(heap),)


def heap_args(heap, params: Dict[str, Any]) -> Tuple:
    return (heap,)


def _require_heap_order(heap):
    if not heap.is_valid():
        raise InvalidInput(f"Array is not a valid {heap.kind}-heap; run Build Heap first")
    return heap


def trie_args(trie, params: Dict[str, Any]) -> Tuple:
    return (trie, parse_word(params.get("word")))


def fibonacci_args(_, params: Dict[str, Any]) -> Tuple:
    return (parse_int(params.get("n", 8), "n", 0, 30),)


def factorial_args(_, params: Dict[str, Any]) -> Tuple:
    return (parse_int(params.get("n", 8), "n", 0, 20),)


def knapsack_args(_, params: Dict[str, Any]) -> Tuple:
    return (parse_int(params.get("capacity", 7), "capacity", 0, 20),)


def lcs_args(_, params: Dict[str, Any]) -> Tuple:
    first = str(params.get("first", "ABCBDAB") or "").strip().upper()
    second = str(params.get("second", "BDCAB") or "").strip().upper()
    if not first or not second:
        raise InvalidInput("Enter two strings")
    if len(first) > MAX_LCS or len(second) > MAX_LCS:
        raise InvalidInput(f"Strings must be at most {MAX_LCS} characters")
    return (first, second)


def list_value_args(lst, params: Dict[str, Any]) -> Tuple:
    return (lst, parse_int(params.get("value"), "value"))


def list_args(lst, params: Dict[str, Any]) -> Tuple:
    if len(lst) == 0:
        raise InvalidInput("List is empty!")
    return (lst,)
