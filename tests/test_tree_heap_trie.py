import random

import pytest

from algorithms import get_algorithm
from algorithms.heap_ops import heap_build, heap_extract, heap_insert
from algorithms.step import StepKind
from algorithms.traversal import inorder, levelorder, postorder, preorder
from algorithms.trie_ops import trie_insert, trie_search
from algorithms.validation import InvalidInput
from structures import BinaryHeap, BinarySearchTree, Trie
from structures.bst import levels


# ---------------------------------------------------------------------------
# BST traversals
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("seed", range(8))
def test_inorder_is_non_decreasing_for_any_insert_order(seed, drain):
    rng = random.Random(seed)
    tree = BinarySearchTree(rng.randint(0, 50) for _ in range(rng.randint(1, 20)))

    result = drain(inorder(tree.root))[-1].result

    assert result == sorted(result)
    assert len(result) == len(tree)


def test_preorder_root_first_and_postorder_root_last(drain):
    tree = BinarySearchTree.default()
    assert drain(preorder(tree.root))[-1].result == [50, 30, 20, 40, 70, 60, 80]
    assert drain(postorder(tree.root))[-1].result == [20, 40, 30, 60, 80, 70, 50]


def test_levelorder_groups_by_depth(drain):
    tree = BinarySearchTree([50, 30, 70, 20, 40, 60, 80, 10])
    result = drain(levelorder(tree.root))[-1].result
    assert result == [v for level in levels(tree.root) for v in level]
    assert levels(tree.root) == [[50], [30, 70], [20, 40, 60, 80], [10]]


def test_traversal_replays_one_visit_per_value(drain):
    tree = BinarySearchTree.default()
    events = drain(inorder(tree.root))
    visits = [e for e in events if e.kind is StepKind.VISIT]
    assert [e.nodes[0] for e in visits] == [20, 30, 40, 50, 60, 70, 80]
    assert visits[-1].overlay["visited"] == [20, 30, 40, 50, 60, 70, 80]


def test_insert_keeps_captured_root_unchanged(drain):
    tree = BinarySearchTree.default()
    gen = inorder(tree.root)
    tree.insert(55)
    assert 55 not in drain(gen)[-1].result
    assert 55 in tree


def test_duplicates_go_right():
    tree = BinarySearchTree([5, 5])
    assert tree.root.left is None
    assert tree.root.right.value == 5


# ---------------------------------------------------------------------------
# Heap
# ---------------------------------------------------------------------------
def test_heap_insert_sifts_up(drain):
    heap = BinaryHeap.default()
    events = drain(heap_insert(heap, 5))

    assert heap.items == [5, 10, 30, 20, 35, 40, 50, 25]
    assert heap.is_valid()
    assert len([e for e in events if e.kind is StepKind.COMPARE]) == 3


def test_heap_extract_sifts_down(drain):
    heap = BinaryHeap.default()
    events = drain(heap_extract(heap))

    assert events[-1].result == 10
    assert heap.items == [20, 25, 30, 50, 35, 40]
    assert heap.is_valid()


def test_heap_extract_on_empty_heap_is_guarded(drain):
    heap = BinaryHeap([], "min")
    events = drain(heap_extract(heap))

    assert len(events) == 1
    assert events[0].kind is StepKind.EMPTY
    assert events[0].is_final and events[0].result is None
    assert heap.items == []


def test_heap_extract_single_element(drain):
    heap = BinaryHeap([7])
    assert drain(heap_extract(heap))[-1].result == 7
    assert heap.items == []


@pytest.mark.parametrize("kind", ["min", "max"])
@pytest.mark.parametrize("seed", range(6))
def test_heap_invariant_after_every_operation(kind, seed, drain):
    rng = random.Random(seed)
    heap = BinaryHeap([rng.randint(0, 99) for _ in range(rng.randint(0, 15))], kind)

    drain(heap_build(heap))
    assert heap.is_valid()

    for _ in range(5):
        drain(heap_insert(heap, rng.randint(0, 99)))
        assert heap.is_valid()

    while heap.items:
        before = sorted(heap.items)
        root = drain(heap_extract(heap))[-1].result
        assert root == (before[0] if kind == "min" else before[-1])
        assert heap.is_valid()


def test_toggle_reheapifies_in_place():
    heap = BinaryHeap.default()
    result = heap.toggle_kind()

    assert result.value == "max"
    assert heap.is_valid()
    assert heap.items == [50, 35, 40, 25, 20, 10, 30]


def test_insert_after_toggle_keeps_heap_order(drain):
    heap = BinaryHeap.default()
    heap.toggle_kind()
    drain(get_algorithm("heap_insert").prepare(heap, {"value": 5}))

    assert heap.kind == "max"
    assert heap.is_valid()
    assert heap.root() == 50


def test_insert_and_extract_refuse_out_of_order_array():
    heap = BinaryHeap([10, 20, 30], "max")
    with pytest.raises(InvalidInput):
        get_algorithm("heap_insert").prepare(heap, {"value": 5})
    with pytest.raises(InvalidInput):
        get_algorithm("heap_extract").prepare(heap, {})
    assert heap.items == [10, 20, 30]


def test_build_restores_an_out_of_order_array(drain):
    heap = BinaryHeap([10, 20, 30, 25, 35, 40, 50], "max")
    assert not heap.is_valid()
    drain(heap_build(heap))
    assert heap.is_valid()
    assert heap.root() == 50


# ---------------------------------------------------------------------------
# Trie
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("word, outcome", [("car", "found"), ("ca", "prefix"), ("cow", "missing")])
def test_trie_search_outcomes(word, outcome, drain):
    assert drain(trie_search(Trie.default(), word))[-1].result == outcome


def test_trie_search_miss_step(drain):
    events = drain(trie_search(Trie.default(), "cow"))
    assert [e.kind for e in events] == [StepKind.ADVANCE, StepKind.MISS, StepKind.NOT_FOUND]
    assert events[-1].nodes == ("root", "root-c")


def test_trie_insert_one_step_per_character(drain):
    trie = Trie.default()
    events = drain(trie_insert(trie, "cart"))

    steps = [e for e in events if e.pause]
    assert [e.kind for e in steps] == [StepKind.ADVANCE] * 3 + [StepKind.INSERT]
    assert steps[-1].nodes[-1] == "root-c-a-r-t"
    assert "cart" in trie
    assert "car" in trie


def test_trie_delete_prunes_dead_branches():
    trie = Trie(["card", "care"])
    before = trie.node_count()
    assert trie.delete("card").ok
    assert trie.node_count() == before - 1
    assert trie.words() == ["care"]
    assert not trie.delete("car").ok
