"""Read weighted graphs from whitespace-separated text.

The format is the vertex count, the edge count, and then one
``from to weight`` triple per edge. Line breaks carry no meaning, so a
triple may be split across lines or several triples may share one.
"""

import logging
import os
from typing import List, Union
from pygraphtools.Graph import Graph


class GraphFormatError(ValueError):
    """Raised when text does not describe a weighted graph."""


def _to_int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise GraphFormatError(f"Expected an integer {what}, got {token!r}") from None


def _to_float(token: str, what: str) -> float:
    try:
        return float(token)
    except ValueError:
        raise GraphFormatError(f"Expected a number {what}, got {token!r}") from None


def parse_weighted_graph(text: str, directed: bool = False) -> Graph:
    """Build a graph from the text of a weighted-graph description.

    Parameters
    ----------
    text : str
        The description.
    directed : bool, default False
        Build a directed graph.

    Returns
    -------
    Graph
        The graph, with edges added in the order they appear.

    Raises
    ------
    GraphFormatError
        If the header is missing or invalid, a token is not numeric, or
        fewer triples are present than the header announces.

    """
    tokens: List[str] = text.split()
    if len(tokens) < 2:
        raise GraphFormatError("Missing vertex count and edge count")

    vertex_count = _to_int(tokens[0], "vertex count")
    edge_count = _to_int(tokens[1], "edge count")
    if vertex_count < 0 or edge_count < 0:
        raise GraphFormatError("Vertex count and edge count must be ≥ 0")

    body = tokens[2:]
    if len(body) < 3 * edge_count:
        raise GraphFormatError(
            f"Expected {edge_count} edges but found only {len(body) // 3}"
        )
    if len(body) > 3 * edge_count:
        logging.warning(
            "Ignoring %d tokens after the last of %d edges",
            len(body) - 3 * edge_count,
            edge_count,
        )

    graph = Graph(vertex_count, directed=directed)
    for i in range(edge_count):
        a, b, w = body[3 * i: 3 * i + 3]
        graph.add_edge(
            _to_int(a, "vertex"), _to_int(b, "vertex"), _to_float(w, "weight")
        )
    return graph


def read_weighted_graph(
    path: Union[str, "os.PathLike[str]"], directed: bool = False
) -> Graph:
    """Read a weighted-graph description from a file.

    See :func:`parse_weighted_graph` for the format and the errors raised.
    A missing file raises ``FileNotFoundError``.
    """
    with open(path, "r") as f:
        return parse_weighted_graph(f.read(), directed=directed)
