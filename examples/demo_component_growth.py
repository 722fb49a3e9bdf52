import matplotlib.pyplot as plt
from pygraphtools import component_growth, graph_sweep, plot_component_growth

vertex_count = 10000
stats = component_growth(graph_sweep(vertex_count, factor=10, edge_ceiling=2 * vertex_count))

for graph_id, s in enumerate(stats, start=1):
    verdict = (
        "the graph is connected" if s.is_connected
        else "there are multiple connected components"
    )
    print(
        f"Graph {graph_id} has {s.edge_count} edges. "
        f"Largest connected component: {s.largest_component}. "
        f"Connected components: {s.component_count}, so {verdict}."
    )

fig, ax = plt.subplots()
plot_component_growth(stats, ax=ax)
plt.show()
