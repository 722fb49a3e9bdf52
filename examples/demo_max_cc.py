from pygraphtools import random_graph, largest_component

cases = [
    (100, 100, 1),
    (1000, 2000, 17),
    (5000, 2500, 42),
    (250000, 300000, 1),
]

for graph_id, (vertices, edges, seed) in enumerate(cases, start=1):
    g = random_graph(vertices, edges, seed)
    print(f"Largest connected component of graph {graph_id}: {largest_component(g)}")
