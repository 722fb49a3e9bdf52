"""
Connected components module
===========================

Breadth-first discovery of the connected components of a
:class:`~pygraphtools.Graph`.  Vertices are swept in ascending id order; each
vertex not yet discovered starts a new traversal, and every vertex reached by
that traversal belongs to the same component.

The traversal state lives in a boolean array created per call, so the
graph's own ``mark`` fields are never touched and several sweeps may run over
the same graph.
"""

from collections import deque
from typing import Iterable, List, NamedTuple
import numpy as np
from pygraphtools.Graph import Graph


class ComponentStats(NamedTuple):
    """Summary of one full component sweep over a graph."""

    vertex_count: int
    edge_count: int
    largest_component: int
    component_count: int

    @property
    def is_connected(self) -> bool:
        """True if a single traversal reached every vertex."""
        return self.largest_component == self.vertex_count


def bfs_component(graph: Graph, start: int, discovered: np.ndarray) -> List[int]:
    """Breadth-first traversal from ``start`` over undiscovered vertices.

    Parameters
    ----------
    graph : Graph
        The graph to traverse.
    start : int
        Root of the traversal. Must not already be discovered.
    discovered : np.ndarray
        Boolean array of length ``graph.vertex_count``. Updated in place:
        every vertex reached is set to True the moment it is enqueued.

    Returns
    -------
    List[int]
        The reached vertices in visitation order, ``start`` first.

    """
    discovered[start] = True
    queue = deque([start])
    visited = []

    while queue:
        vertex = queue.popleft()
        visited.append(vertex)
        for neighbor in graph.get_connected_vertices(vertex):
            if not discovered[neighbor]:
                discovered[neighbor] = True
                queue.append(int(neighbor))

    return visited


def connected_components(graph: Graph) -> List[List[int]]:
    """Return the components of ``graph`` in discovery order.

    Parameters
    ----------
    graph : Graph
        The graph to sweep.

    Returns
    -------
    List[List[int]]
        One list per component, each in BFS visitation order. The first
        vertex of each list is the smallest id in that component.

    """
    discovered = np.zeros(graph.vertex_count, dtype=bool)
    components = []
    for vertex in graph:
        if not discovered[vertex]:
            components.append(bfs_component(graph, vertex, discovered))
    return components


def component_sizes(graph: Graph) -> List[int]:
    """Return the size of each component, in discovery order."""
    return [len(c) for c in connected_components(graph)]


def largest_component(graph: Graph) -> int:
    """Return the number of vertices in the largest component.

    A graph without vertices has a largest component of size 0.
    """
    return max(component_sizes(graph), default=0)


def count_components(graph: Graph) -> int:
    """Return the number of traversals needed to discover every vertex."""
    return len(component_sizes(graph))


def summarize_components(graph: Graph) -> ComponentStats:
    """Compute the largest component and the component count in one sweep.

    Parameters
    ----------
    graph : Graph
        The graph to sweep.

    Returns
    -------
    ComponentStats
        Vertex and edge counts of ``graph`` together with the two results.

    """
    sizes = component_sizes(graph)
    return ComponentStats(
        vertex_count=graph.vertex_count,
        edge_count=graph.edge_count,
        largest_component=max(sizes, default=0),
        component_count=len(sizes),
    )


def component_growth(graphs: Iterable[Graph]) -> List[ComponentStats]:
    """Summarize a series of graphs, typically of growing edge count.

    Pair with :func:`pygraphtools.random_graphs.graph_sweep` to see how the
    largest component grows and the component count falls as edges are
    added to a fixed vertex set.
    """
    return [summarize_components(g) for g in graphs]
