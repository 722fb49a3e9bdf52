import logging
from typing import Iterator, Optional
import numpy as np
from pygraphtools.Graph import Graph


def _max_edges(vertex_count: int, directed: bool) -> int:
    pairs = vertex_count * (vertex_count - 1)
    return pairs if directed else pairs // 2


def _fill_random_edges(
    graph: Graph,
    edge_count: int,
    rng: np.random.Generator,
    max_weight: Optional[int] = None,
) -> Graph:
    """Add random edges to ``graph`` until it holds ``edge_count`` edges.

    Vertex pairs are drawn in batches from ``rng``; self pairs and pairs that
    are already joined are skipped. With ``max_weight`` set, each accepted
    edge takes one further draw for an integer weight in ``[1, max_weight]``.
    """
    n = graph.vertex_count
    if edge_count < 0:
        raise ValueError("edge_count must be ≥ 0")
    if edge_count > _max_edges(n, graph.directed):
        raise ValueError(
            f"Cannot place {edge_count} edges on {n} vertices without "
            "self loops or duplicates"
        )

    while graph.edge_count < edge_count:
        remaining = edge_count - graph.edge_count
        pairs = rng.integers(0, n, size=(max(remaining, 16), 2))
        for a, b in pairs:
            if a == b or graph.edge_exists(a, b):
                continue
            if max_weight is None:
                graph.add_edge(int(a), int(b))
            else:
                graph.add_edge(int(a), int(b), int(rng.integers(1, max_weight + 1)))
            if graph.edge_count == edge_count:
                break

    logging.debug("Generated %r", graph)
    return graph


def random_graph(
    vertex_count: int, edge_count: int, seed: int, directed: bool = False
) -> Graph:
    """
    Create a random graph with unit edge weights.

    Parameters
    ----------
    vertex_count : int
        Number of vertices.
    edge_count : int
        Exact number of edges in the result.
    seed : int
        Seed of the pseudo-random generator. Equal arguments give graphs
        with the same edges added in the same order.
    directed : bool, default False
        Build a directed graph.

    Returns
    -------
    Graph
        The populated graph.
    """
    graph = Graph(vertex_count, directed=directed)
    return _fill_random_edges(graph, edge_count, np.random.default_rng(seed))


def random_weighted_graph(
    vertex_count: int,
    edge_count: int,
    max_weight: int,
    seed: int,
    directed: bool = False,
) -> Graph:
    """
    Create a random graph with integer edge weights in ``[1, max_weight]``.

    Parameters
    ----------
    vertex_count : int
        Number of vertices.
    edge_count : int
        Exact number of edges in the result.
    max_weight : int
        Largest possible edge weight. Must be ≥ 1.
    seed : int
        Seed of the pseudo-random generator.
    directed : bool, default False
        Build a directed graph.

    Returns
    -------
    Graph
        The populated graph.
    """
    if max_weight < 1:
        raise ValueError("max_weight must be ≥ 1")
    graph = Graph(vertex_count, directed=directed)
    return _fill_random_edges(
        graph, edge_count, np.random.default_rng(seed), max_weight=max_weight
    )


def graph_sweep(
    vertex_count: int, factor: int, edge_ceiling: int, seed: int = 15
) -> Iterator[Graph]:
    """
    Yield random graphs on the same vertex set with growing edge counts.

    Edge counts run ``step, 2 * step, ...`` up to and including
    ``edge_ceiling``, where ``step = vertex_count // factor``. Every graph is
    generated from the same seed.

    Parameters
    ----------
    vertex_count : int
        Number of vertices of every graph.
    factor : int
        Divides ``vertex_count`` to give the edge-count step.
    edge_ceiling : int
        Largest edge count generated.
    seed : int, optional
        Seed used for every graph. Default is 15.
    """
    step = vertex_count // factor if factor > 0 else 0
    if step <= 0:
        raise ValueError("vertex_count // factor must be ≥ 1")

    for edge_count in range(step, edge_ceiling + 1, step):
        yield random_graph(vertex_count, edge_count, seed)
