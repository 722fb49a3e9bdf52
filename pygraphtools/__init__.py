from pygraphtools.Graph import (
    Graph,
    Edge,
    UNDISCOVERED,
    DISCOVERED,
    PROCESSED,
    InvalidVertexError,
    InvalidEdgeError,
    to_sparse_matrix
)
from pygraphtools.DisjointSet import DisjointSet
from pygraphtools.ConnectedComponents import (
    ComponentStats,
    connected_components,
    component_sizes,
    largest_component,
    count_components,
    summarize_components,
    component_growth
)
from pygraphtools.KruskalMST import minimum_spanning_forest, kruskal_mst_weight
from pygraphtools.random_graphs import random_graph, random_weighted_graph, graph_sweep
from pygraphtools.graph_io import GraphFormatError, parse_weighted_graph, read_weighted_graph
from pygraphtools.plotting import plot_component_growth

__all__ = [
    "Graph",
    "Edge",
    "UNDISCOVERED",
    "DISCOVERED",
    "PROCESSED",
    "InvalidVertexError",
    "InvalidEdgeError",
    "to_sparse_matrix",
    "DisjointSet",
    "ComponentStats",
    "connected_components",
    "component_sizes",
    "largest_component",
    "count_components",
    "summarize_components",
    "component_growth",
    "minimum_spanning_forest",
    "kruskal_mst_weight",
    "random_graph",
    "random_weighted_graph",
    "graph_sweep",
    "GraphFormatError",
    "parse_weighted_graph",
    "read_weighted_graph",
    "plot_component_growth",
]
