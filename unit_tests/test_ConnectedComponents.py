import numpy as np
import pytest
from scipy.sparse.csgraph import connected_components as csgraph_components
from pygraphtools.Graph import Graph, UNDISCOVERED, to_sparse_matrix
from pygraphtools.ConnectedComponents import (
    ComponentStats,
    bfs_component,
    connected_components,
    component_sizes,
    largest_component,
    count_components,
    summarize_components,
    component_growth,
)
from pygraphtools.random_graphs import random_graph


@pytest.fixture
def square_graph():
    g = Graph(4)
    g.add_edge(0, 1, 1)
    g.add_edge(1, 2, 2)
    g.add_edge(2, 3, 3)
    g.add_edge(0, 3, 10)
    return g


def test_connected_square(square_graph):
    assert largest_component(square_graph) == 4
    assert count_components(square_graph) == 1
    assert summarize_components(square_graph).is_connected


def test_no_edges():
    g = Graph(5)
    assert largest_component(g) == 1
    assert count_components(g) == 5
    assert connected_components(g) == [[0], [1], [2], [3], [4]]


def test_empty_graph():
    g = Graph(0)
    assert largest_component(g) == 0
    assert count_components(g) == 0


def test_components_in_discovery_order():
    g = Graph(7)
    g.add_edge(5, 1)
    g.add_edge(1, 3)
    g.add_edge(0, 6)
    g.add_edge(2, 4)
    comps = connected_components(g)
    assert comps == [[0, 6], [1, 5, 3], [2, 4]]
    assert component_sizes(g) == [2, 3, 2]


def test_bfs_visits_in_fifo_order():
    g = Graph(6)
    g.add_edge(0, 2)
    g.add_edge(0, 1)
    g.add_edge(2, 5)
    g.add_edge(1, 3)
    g.add_edge(3, 5)
    discovered = np.zeros(6, dtype=bool)
    order = bfs_component(g, 0, discovered)
    assert order == [0, 2, 1, 5, 3]
    assert discovered.tolist() == [True, True, True, True, False, True]


def test_graph_marks_untouched(square_graph):
    square_graph.mark_all(7)
    largest_component(square_graph)
    assert [square_graph.get_mark(v) for v in square_graph] == [7] * 4


def test_sizes_partition_vertices():
    for seed in range(5):
        g = random_graph(300, 250, seed)
        sizes = component_sizes(g)
        assert sum(sizes) == g.vertex_count
        assert max(sizes) <= g.vertex_count
        flat = sorted(v for c in connected_components(g) for v in c)
        assert flat == list(range(g.vertex_count))


def test_matches_scipy():
    g = random_graph(500, 400, 3)
    n_components, labels = csgraph_components(to_sparse_matrix(g), directed=False)
    assert count_components(g) == n_components
    assert largest_component(g) == np.bincount(labels).max()


def test_summarize_components():
    g = Graph(6)
    g.add_edge(0, 1)
    g.add_edge(1, 2)
    g.add_edge(4, 5)
    stats = summarize_components(g)
    assert stats == ComponentStats(
        vertex_count=6, edge_count=3, largest_component=3, component_count=3
    )
    assert not stats.is_connected


def test_component_growth_monotone():
    graphs = [random_graph(200, e, 15) for e in (50, 100, 200, 400)]
    stats = component_growth(graphs)
    assert [s.edge_count for s in stats] == [50, 100, 200, 400]
    largest = [s.largest_component for s in stats]
    counts = [s.component_count for s in stats]
    assert all(s.vertex_count == 200 for s in stats)
    assert counts[0] > counts[-1]
    assert largest[0] < largest[-1]


def test_directed_follows_outgoing_edges():
    g = Graph(3, directed=True)
    g.add_edge(1, 0)
    g.add_edge(1, 2)
    assert connected_components(g) == [[0], [1, 2]]
    assert [g.get_mark(v) for v in g] == [UNDISCOVERED] * 3
