import pytest

from structures import ChainedHashTable, Graph, Queue, SinglyLinkedList, Stack
from structures.linear import HISTORY_LIMIT


# ---------------------------------------------------------------------------
# Hash table
# ---------------------------------------------------------------------------
def test_hash_table_chaining_scenario():
    table = ChainedHashTable(10, [15, 25, 35])

    assert table.buckets[5] == [15, 25, 35]
    assert table.load_factor == pytest.approx(0.3)
    assert table.max_chain_length == 3


def test_hash_table_rejects_duplicates_and_removes():
    table = ChainedHashTable.default()
    assert not table.insert(15).ok
    assert len(table) == 5

    found = table.search(42)
    assert found.ok and found.value == 2

    assert table.remove(25).ok
    assert table.buckets[5] == [15, 35]
    assert not table.remove(25).ok


def test_hash_table_negative_keys_land_in_range():
    table = ChainedHashTable(10)
    assert table.insert(-3).value == 7


# ---------------------------------------------------------------------------
# Linked list
# ---------------------------------------------------------------------------
def test_linked_list_append_links_new_tail():
    lst = SinglyLinkedList()
    lst.append(10)
    lst.append(20)
    lst.append(30)
    assert lst.values() == [10, 20, 30]
    assert [n.id for n in lst.nodes()] == [1, 2, 3]
    assert SinglyLinkedList.default().values() == [10, 20, 30]


def test_linked_list_ids_are_per_instance():
    a = SinglyLinkedList.default()
    b = SinglyLinkedList.default()
    a.append(40)
    b.append(99)

    assert [n.id for n in a.nodes()] == [1, 2, 3, 4]
    assert [n.id for n in b.nodes()] == [1, 2, 3, 4]


def test_linked_list_ids_keep_increasing_after_removal():
    lst = SinglyLinkedList([1, 2])
    lst.remove_tail()
    lst.append(3)
    assert [n.id for n in lst.nodes()] == [1, 3]


def test_linked_list_operations():
    lst = SinglyLinkedList.default()
    lst.prepend(5)
    lst.insert_at(2, 15)
    assert lst.values() == [5, 10, 15, 20, 30]

    assert lst.remove_at(1).value == 10
    assert lst.remove_head().value == 5
    assert lst.remove_tail().value == 30
    assert lst.values() == [15, 20]
    assert not lst.insert_at(5, 1).ok


def test_linked_list_empty_removals_are_guarded():
    lst = SinglyLinkedList()
    for result in (lst.remove_head(), lst.remove_tail(), lst.remove_at(0)):
        assert not result.ok
    assert len(lst) == 0


# ---------------------------------------------------------------------------
# Stack / queue
# ---------------------------------------------------------------------------
def test_stack_underflow_is_a_message():
    stack = Stack()
    result = stack.pop()
    assert not result.ok
    assert "Underflow" in result.message
    assert not stack.peek().ok


def test_stack_lifo():
    stack = Stack.default()
    stack.push(1)
    assert stack.pop().value == 1
    assert stack.peek().value == 85


def test_queue_fifo_and_bounded_history():
    queue = Queue.default()
    assert queue.dequeue().value == 12
    assert queue.front().value == 45

    for i in range(HISTORY_LIMIT + 5):
        queue.enqueue(i)
    assert len(queue.history) == HISTORY_LIMIT
    assert queue.history[0] == f"ENQUEUE({HISTORY_LIMIT + 4})"


def test_queue_underflow():
    queue = Queue()
    assert not queue.dequeue().ok
    assert not queue.front().ok


# ---------------------------------------------------------------------------
# Graph
# ---------------------------------------------------------------------------
def test_add_edge_creates_missing_nodes():
    g = Graph()
    g.add_edge(3, 9, 2)
    assert g.node_ids() == [3, 9]
    assert g.neighbours(3)[0][0] == 9


def test_neighbours_in_declaration_order():
    g = Graph.default()
    assert [n for n, _ in g.neighbours(4)] == [1, 3, 5, 6]


def test_edge_list_parsing():
    g = Graph.from_edge_list("0-1:4, 1-2\n5")
    assert g.node_ids() == [0, 1, 2, 5]
    assert g.edge_between(1, 0).weight == 4
    assert g.edge_between(1, 2).weight == 1


def test_edge_list_rejects_negative_weights():
    with pytest.raises(ValueError):
        Graph.from_edge_list("0-1:-3")


@pytest.mark.parametrize("text", ["0-1:nan", "0-1:inf", "0-1:-inf"])
def test_edge_list_rejects_non_finite_weights(text):
    with pytest.raises(ValueError):
        Graph.from_edge_list(text)


def test_graph_round_trips_through_dict():
    g = Graph.default()
    clone = Graph.from_dict(g.to_dict())
    assert clone.node_ids() == g.node_ids()
    assert [e.key for e in clone.edges] == [e.key for e in g.edges]
