"""
Kruskal minimum spanning tree module
====================================

Edges are considered in ascending weight order; an edge is kept when its
endpoints lie in different trees of the forest built so far, which a
:class:`~pygraphtools.DisjointSet` answers in near-constant time.

A disconnected graph yields a minimum spanning *forest*.  This is logged
but is not an error, so callers comparing against ``vertex_count - 1`` edges
should check :func:`minimum_spanning_forest` themselves.
"""

import logging
from typing import List, Literal
from pygraphtools.DisjointSet import DisjointSet
from pygraphtools.Graph import Edge, Graph


def minimum_spanning_forest(
    graph: Graph,
    union_policy: Literal["size", "depth"] = "size",
) -> List[Edge]:
    """Select the edges of a minimum spanning forest.

    Parameters
    ----------
    graph : Graph
        The weighted graph. Its edges and scratch fields are not modified.
    union_policy : {"size", "depth"}, optional
        Merge rule of the disjoint set, see :class:`DisjointSet`. Both give
        the same total weight. Default is "size".

    Returns
    -------
    List[Edge]
        The chosen edges, in the order they were accepted. Edges of equal
        weight are considered in :meth:`Graph.get_all_edges` order.

    """
    edges = graph.get_all_edges()
    edges.sort(key=lambda e: e.weight)  # stable

    forest = DisjointSet(graph.vertex_count, union_policy=union_policy)
    chosen = []
    for e in edges:
        if forest.union(e.source, e.target):
            chosen.append(e)
            if len(forest) == 1:
                break

    if graph.vertex_count > 0 and len(chosen) < graph.vertex_count - 1:
        logging.warning(
            "Graph has %d components; returning a spanning forest of %d edges",
            len(forest),
            len(chosen),
        )
    return chosen


def kruskal_mst_weight(
    graph: Graph,
    union_policy: Literal["size", "depth"] = "size",
) -> float:
    """Return the total weight of a minimum spanning tree (or forest).

    Parameters
    ----------
    graph : Graph
        The weighted graph.
    union_policy : {"size", "depth"}, optional
        Merge rule of the disjoint set. Default is "size".

    Returns
    -------
    float
        Sum of the chosen edge weights; 0.0 for a graph without edges.

    """
    total_weight = 0.0
    for e in minimum_spanning_forest(graph, union_policy=union_policy):
        total_weight += e.weight
    return total_weight
