import pytest

from engine import InvalidInput, RunRejected, RunState, UnknownOperation, Workspace
from engine.visualizer import (
    DPVisualizer, GraphVisualizer, HeapVisualizer, LinkedListVisualizer,
    SearchingVisualizer, SortingVisualizer,
)
from structures import BinaryHeap, Graph, SinglyLinkedList


def test_run_rejects_other_family_algorithms():
    viz = SortingVisualizer([3, 1, 2])
    with pytest.raises(UnknownOperation):
        viz.run("dijkstra")


def test_mutation_rejected_while_running():
    viz = SortingVisualizer([5, 3, 8, 1])
    viz.run("bubble")
    viz.step()

    with pytest.raises(RunRejected):
        viz.apply("shuffle", {})
    with pytest.raises(RunRejected):
        viz.run("quick")

    viz.finish()
    assert viz.apply("shuffle", {"size": 5}).ok
    assert len(viz.data) == 5


def test_read_only_operations_allowed_while_running():
    viz = HeapVisualizer(BinaryHeap.default())
    viz.run("heap_insert", {"value": 1})
    viz.step()
    assert viz.apply("peek").ok
    with pytest.raises(RunRejected):
        viz.apply("clear")


def test_invalid_input_leaves_visualizer_idle():
    viz = SearchingVisualizer([1, 2, 3])
    with pytest.raises(InvalidInput):
        viz.run("binary", {"target": "abc"})
    assert viz.stepper.state is RunState.IDLE


def test_invalid_start_node():
    viz = GraphVisualizer(Graph.default())
    with pytest.raises(InvalidInput):
        viz.run("bfs", {"start": 42})


def test_dijkstra_rejects_negative_weights():
    g = Graph.default()
    g.add_edge(0, 6, -1)
    with pytest.raises(InvalidInput):
        GraphVisualizer(g).run("dijkstra", {"start": 0})


def test_cancel_observes_flag_immediately():
    viz = SortingVisualizer([5, 3, 8, 1])
    viz.run("bubble")
    viz.step()
    summary = viz.cancel()
    assert summary.state is RunState.CANCELLED
    assert viz.data == [5, 3, 8, 1]


def test_unknown_operation():
    with pytest.raises(UnknownOperation):
        SortingVisualizer([1, 2]).apply("explode")


def test_custom_values_filtered():
    viz = SortingVisualizer([1, 2])
    result = viz.apply("custom", {"values": "5, x, 300, 3, 8"})
    assert result.value == [5, 3, 8]
    with pytest.raises(InvalidInput):
        viz.apply("custom", {"values": "7"})


def test_linked_list_operations_and_runs():
    viz = LinkedListVisualizer(SinglyLinkedList.default())
    viz.apply("insert_at", {"index": 1, "value": 15})
    assert viz.data.values() == [10, 15, 20, 30]

    with pytest.raises(InvalidInput):
        viz.apply("insert_at", {"index": 9, "value": 1})

    viz.run("list_search", {"value": 20})
    assert viz.finish().result == 2

    viz.apply("clear")
    with pytest.raises(InvalidInput):
        viz.run("list_traverse")
    assert not viz.apply("remove_head").ok


def test_dp_snapshot_rebuilt_from_cells():
    viz = DPVisualizer()
    viz.run("fibonacci", {"n": 5})
    viz.finish()
    assert viz.snapshot()["cells"] == {"0": 0, "1": 1, "2": 1, "3": 2, "4": 3, "5": 5}


def test_workspace_is_reproducible_with_seed():
    a = Workspace(seed=3)
    b = Workspace(seed=3)
    assert a["sorting"].data == b["sorting"].data
    assert a["searching"].data == sorted(a["searching"].data)


def test_workspace_from_config():
    ws = Workspace.from_config({"SORT_ARRAY_SIZE": 6, "HASH_TABLE_SIZE": 7, "DEFAULT_SPEED": 70})
    assert len(ws["sorting"].data) == 6
    assert ws["hash_table"].data.size == 7
    assert ws["graph"].stepper.speed == 70


def test_workspace_unknown_family():
    with pytest.raises(UnknownOperation):
        Workspace().get("btree")


def test_structure_only_families_have_no_algorithms():
    ws = Workspace()
    assert ws["stack"].state()["algorithms"] == []
    with pytest.raises(UnknownOperation):
        ws["stack"].run("bubble")
    assert ws["stack"].apply("pop").value == 85
