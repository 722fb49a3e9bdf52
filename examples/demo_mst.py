import os
from pygraphtools import kruskal_mst_weight, random_weighted_graph, read_weighted_graph

here = os.path.dirname(os.path.abspath(__file__))

graphs = [
    read_weighted_graph(os.path.join(here, "weighted-graph.txt")),
    random_weighted_graph(100, 300, 10, 1),
    random_weighted_graph(300000, 5000000, 1000, 2),
]

for graph_id, g in enumerate(graphs, start=1):
    print(f"Graph {graph_id} Weight: {kruskal_mst_weight(g)}")
