"""
Graph module
============

An adjacency-list graph over a dense range of integer vertex ids
``0 .. vertex_count - 1``.  Graphs may be directed or undirected; edges carry
a real weight that defaults to 1.  Self loops and parallel edges are rejected.

Each vertex also carries an integer *mark* and a *parent* vertex id.  The
graph never reads these values itself; they are scratch fields for callers
that write their own traversals.  The algorithms shipped with this package
(:mod:`pygraphtools.ConnectedComponents`, :mod:`pygraphtools.KruskalMST`)
keep their own per-call state instead and leave them untouched.
"""

import operator
from typing import Iterator, List, NamedTuple, Optional, Tuple
import numpy as np
from scipy.sparse import csr_matrix


UNDISCOVERED = 0
DISCOVERED = 1
PROCESSED = 2

NO_PARENT = -1


class InvalidVertexError(ValueError):
    """Raised when a vertex id lies outside ``[0, vertex_count)``."""


class InvalidEdgeError(ValueError):
    """Raised when adding a self loop or an edge that already exists."""


class Edge(NamedTuple):
    """A directed edge record stored in an adjacency list.

    For undirected graphs every edge is stored twice, once as
    ``(u, v, w)`` in the list of ``u`` and once as ``(v, u, w)`` in the list
    of ``v``.
    """

    source: int
    target: int
    weight: float = 1.0


class Graph:
    """Adjacency-list graph with a fixed number of vertices."""

    def __init__(self, vertex_count: int, directed: bool = False):
        """Create a graph with no edges.

        Parameters
        ----------
        vertex_count : int
            Number of vertices. Cannot be changed once the graph is built.
        directed : bool, default False
            If True, ``add_edge(u, v)`` only records the edge ``u -> v``.

        """
        try:
            vertex_count = operator.index(vertex_count)
        except TypeError:
            raise ValueError(
                f"vertex_count must be an integer, got {vertex_count!r}"
            ) from None
        if vertex_count < 0:
            raise ValueError("vertex_count must be ≥ 0")

        self._vertex_count = vertex_count
        self._directed = bool(directed)
        self._edge_count = 0

        self._adjacency: List[List[Edge]] = [[] for _ in range(self._vertex_count)]
        self._marks = np.full(self._vertex_count, UNDISCOVERED, dtype=np.int64)
        self._parents = np.full(self._vertex_count, NO_PARENT, dtype=np.int64)

    def __repr__(self) -> str:
        return (
            f"Graph(vertex_count={self._vertex_count}, "
            f"directed={self._directed}, edge_count={self._edge_count})"
        )

    def __len__(self) -> int:
        return self._vertex_count

    def __iter__(self) -> Iterator[int]:
        return iter(range(self._vertex_count))

    @property
    def vertex_count(self) -> int:
        """Number of vertices."""
        return self._vertex_count

    @property
    def directed(self) -> bool:
        """True for a directed graph."""
        return self._directed

    @property
    def edge_count(self) -> int:
        """Number of edges. An undirected edge is counted once."""
        return self._edge_count

    def _vertex_index(self, vertex) -> Optional[int]:
        # integer-like ids only; 1.0 and "1" are not vertices
        try:
            vertex = operator.index(vertex)
        except TypeError:
            return None
        if vertex < 0 or vertex >= self._vertex_count:
            return None
        return vertex

    def _check_vertex(self, vertex: int) -> int:
        index = self._vertex_index(vertex)
        if index is None:
            raise InvalidVertexError(f"No such vertex: {vertex!r}")
        return index

    def add_edge(self, source: int, target: int, weight: float = 1.0) -> None:
        """Add an edge between two vertices.

        In an undirected graph the edge is appended to the adjacency lists of
        both endpoints but only counts once towards :attr:`edge_count`.

        Parameters
        ----------
        source : int
            One endpoint. For a directed graph, the source vertex.
        target : int
            Other endpoint. For a directed graph, the destination vertex.
        weight : float, optional
            Weight of the edge. Default is 1.

        Raises
        ------
        InvalidVertexError
            If either endpoint is out of range.
        InvalidEdgeError
            If ``source == target`` or the edge already exists.

        """
        source = self._check_vertex(source)
        target = self._check_vertex(target)
        if source == target:
            raise InvalidEdgeError(f"Self loops are not allowed: ({source},{target})")
        if self.edge_exists(source, target):
            raise InvalidEdgeError(f"Edge ({source},{target}) already exists.")

        weight = float(weight)
        self._adjacency[source].append(Edge(source, target, weight))
        if not self._directed:
            self._adjacency[target].append(Edge(target, source, weight))
        self._edge_count += 1

    def edge_exists(self, source: int, target: int) -> bool:
        """Test whether the edge ``source -> target`` is stored.

        Out-of-range vertex ids give False rather than an exception. The scan
        is linear in the degree of ``source``.
        """
        source = self._vertex_index(source)
        target = self._vertex_index(target)
        if source is None or target is None:
            return False
        return any(e.target == target for e in self._adjacency[source])

    def edge_list(self, vertex: int) -> Tuple[Edge, ...]:
        """Return the outgoing edges of ``vertex`` in insertion order.

        Parameters
        ----------
        vertex : int
            The vertex whose edges are wanted.

        Returns
        -------
        Tuple[Edge, ...]
            An immutable snapshot of the adjacency list.

        """
        vertex = self._check_vertex(vertex)
        return tuple(self._adjacency[vertex])

    def get_connected_vertices(self, vertex: int) -> np.ndarray:
        """Return the destination of every edge leaving ``vertex``.

        Parameters
        ----------
        vertex : int
            The source vertex.

        Returns
        -------
        np.ndarray
            Integer array in insertion order; length zero if ``vertex`` has
            no outgoing edges.

        """
        vertex = self._check_vertex(vertex)
        return np.fromiter(
            (e.target for e in self._adjacency[vertex]),
            dtype=np.int64,
            count=len(self._adjacency[vertex]),
        )

    def get_all_edges(self) -> List[Edge]:
        """Return every edge of the graph once.

        For an undirected graph only the stored copy with ``target > source``
        is reported, so each edge appears exactly once.
        """
        edges = [
            e
            for e_list in self._adjacency
            for e in e_list
            if self._directed or e.target > e.source
        ]
        assert len(edges) == self._edge_count
        return edges

    def get_degree(self, vertex: int) -> int:
        """Return the length of the adjacency list of ``vertex``.

        This is the out-degree of a directed graph and the degree of an
        undirected one.
        """
        vertex = self._check_vertex(vertex)
        return len(self._adjacency[vertex])

    # ---------- scratch fields ----------------------------------------------

    def mark(self, vertex: int, mark: int) -> None:
        """Set the integer mark of ``vertex``.

        Parameters
        ----------
        vertex : int
            Vertex to mark.
        mark : int
            Arbitrary value. ``UNDISCOVERED``, ``DISCOVERED`` and ``PROCESSED``
            cover the usual traversal states.

        """
        vertex = self._check_vertex(vertex)
        self._marks[vertex] = mark

    def mark_all(self, mark: int) -> None:
        """Set the mark of every vertex to ``mark``."""
        self._marks.fill(mark)

    def get_mark(self, vertex: int) -> int:
        """Return the mark of ``vertex``."""
        vertex = self._check_vertex(vertex)
        return int(self._marks[vertex])

    def set_parent(self, vertex: int, parent: int) -> None:
        """Set the parent of ``vertex``.

        Parameters
        ----------
        vertex : int
            Vertex whose parent is set.
        parent : int
            A vertex id, or ``-1`` for "no parent".

        Raises
        ------
        InvalidVertexError
            If ``vertex`` is out of range, or ``parent`` is neither ``-1``
            nor a vertex id.

        """
        vertex = self._check_vertex(vertex)
        try:
            index = operator.index(parent)
        except TypeError:
            index = None
        if index is not None and index != NO_PARENT:
            index = self._vertex_index(index)
        if index is None:
            raise InvalidVertexError(
                f"Parent must be -1 or a legal vertex number: {parent!r}"
            )
        self._parents[vertex] = index

    def get_parent(self, vertex: int) -> int:
        """Return the parent of ``vertex``, or ``-1`` if it has none."""
        vertex = self._check_vertex(vertex)
        return int(self._parents[vertex])

    def clear_parents(self) -> None:
        """Reset the parent of every vertex to ``-1``."""
        self._parents.fill(NO_PARENT)


def to_sparse_matrix(graph: Graph) -> csr_matrix:
    """Export the stored edges as a weighted sparse adjacency matrix.

    Parameters
    ----------
    graph : Graph
        Graph to export.

    Returns
    -------
    scipy.sparse.csr_matrix
        ``(n, n)`` matrix whose entry ``[u, v]`` is the weight of the stored
        edge ``u -> v``. Undirected graphs give a symmetric matrix.

    """
    n = graph.vertex_count
    rows, cols, weights = [], [], []
    for u in graph:
        for e in graph.edge_list(u):
            rows.append(e.source)
            cols.append(e.target)
            weights.append(e.weight)

    return csr_matrix(
        (
            np.asarray(weights, dtype=float),
            (np.asarray(rows, dtype=np.int64), np.asarray(cols, dtype=np.int64)),
        ),
        shape=(n, n),
    )
