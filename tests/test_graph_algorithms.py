import pytest

from algorithms.bfs import bfs
from algorithms.dfs import dfs
from algorithms.dijkstra import dijkstra
from algorithms.step import StepKind
from structures import Graph


@pytest.fixture
def graph():
    return Graph.default(seed=1)


def test_bfs_scenario_visit_order(graph, drain):
    events = drain(bfs(graph, 0))

    visits = [e.nodes[0] for e in events if e.kind is StepKind.VISIT]
    assert visits == [0, 1, 3, 2, 4, 6, 5]
    assert events[-1].result == [0, 1, 3, 2, 4, 6, 5]


def test_bfs_from_edge_list_matches_default_order(drain):
    g = Graph.from_edge_list("0-1,0-3,1-2,1-4,2-5,3-4,3-6,4-5,4-6")
    assert drain(bfs(g, 0))[-1].result == [0, 1, 3, 2, 4, 6, 5]


def test_bfs_edge_events_are_deduplicated(graph, drain):
    events = drain(bfs(graph, 0))
    keys = [e.edges[0] for e in events if e.kind is StepKind.EDGE]
    assert len(keys) == len(set(keys))
    assert keys == ["0-1", "0-3", "1-2", "1-4", "3-6", "2-5"]


def test_dfs_visit_order_and_stale_pops_skipped(graph, drain):
    events = drain(dfs(graph, 0))

    visits = [e.nodes[0] for e in events if e.kind is StepKind.VISIT]
    assert visits == [0, 1, 2, 5, 4, 3, 6]
    assert len([e for e in events if e.pause]) == len(graph.nodes)


def test_dfs_and_bfs_agree_on_first_neighbour(graph, drain):
    bfs_order = drain(bfs(graph, 0))[-1].result
    dfs_order = drain(dfs(graph, 0))[-1].result
    assert bfs_order[:2] == dfs_order[:2]


def test_dijkstra_distances_and_finalize_order(graph, drain):
    events = drain(dijkstra(graph, 0))

    assert events[-1].result == {0: 0, 1: 4, 2: 7, 3: 2, 4: 5, 5: 7, 6: 8}
    finalized = [e.nodes[0] for e in events if e.kind is StepKind.FINALIZE]
    # 2 and 5 tie at distance 7: lowest id first
    assert finalized == [0, 3, 1, 4, 2, 5, 6]


def test_dijkstra_relaxations_are_step_adjacent(graph, drain):
    events = drain(dijkstra(graph, 0))
    relax = [e for e in events if e.kind is StepKind.RELAX]
    assert relax and all(not e.pause for e in relax)
    assert relax[0].changes == {1: 4}


def test_dijkstra_unreachable_node_is_none(graph, drain):
    graph.add_node(7)
    result = drain(dijkstra(graph, 0))[-1].result
    assert result[7] is None
    assert result[6] == 8


def test_traversals_skip_unreachable_nodes(graph, drain):
    graph.add_node(9)
    assert 9 not in drain(bfs(graph, 0))[-1].result
    assert 9 not in drain(dfs(graph, 0))[-1].result
