from typing import Any, Optional, Sequence
from matplotlib.axes import Axes
import plotly.graph_objects as go
from pygraphtools.ConnectedComponents import ComponentStats


def plot_component_growth(
    stats: Sequence[ComponentStats],
    title: str = "Component Growth",
    fig: Optional[go.Figure] = None,
    ax: Optional[Axes] = None,
    marker_size: float = 5,
    largest_color: Any = "blue",
    count_color: Any = "red",
    line_width: float = 1.5,
    line_style: str = "-",
):
    """
    Plot largest-component size and component count against edge count,
    using either Matplotlib or Plotly.

    Parameters
    ----------
    stats : Sequence[ComponentStats]
        One summary per graph, usually from
        :func:`pygraphtools.ConnectedComponents.component_growth`.
    title : str, optional
        Title of the plot. Default is "Component Growth".
    fig : plotly.graph_objects.Figure, optional
        A Plotly figure to add to. If None, a new figure is created.
    ax : matplotlib.axes.Axes, optional
        A Matplotlib axis to plot on. If provided, Matplotlib is used.
    marker_size : float, optional
        Size of the point markers. Default is 5.
    largest_color : Any, optional
        Color of the largest-component series. Default is "blue".
    count_color : Any, optional
        Color of the component-count series. Default is "red".
    line_width : float, optional
        Width of the lines. Default is 1.5.
    line_style : str, optional
        Line style for Matplotlib (e.g., "-", "--"). Ignored in Plotly.

    Returns
    -------
    plotly.graph_objects.Figure or matplotlib.axes.Axes
        The figure or axis object used for plotting.
    """

    edges = [s.edge_count for s in stats]
    largest = [s.largest_component for s in stats]
    counts = [s.component_count for s in stats]

    if ax is not None:
        ax.set_title(title)
        ax.set_xlabel("edges")
        ax.set_ylabel("vertices")
        ax.plot(
            edges,
            largest,
            marker="o",
            markersize=marker_size,
            color=largest_color,
            linewidth=line_width,
            linestyle=line_style,
            label="largest component",
        )
        ax.plot(
            edges,
            counts,
            marker="s",
            markersize=marker_size,
            color=count_color,
            linewidth=line_width,
            linestyle=line_style,
            label="components",
        )
        ax.legend()
        return ax

    if fig is None:
        fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=edges,
        y=largest,
        mode="lines+markers",
        marker=dict(size=marker_size, color=largest_color),
        line=dict(width=line_width, color=largest_color),
        name="largest component",
    ))
    fig.add_trace(go.Scatter(
        x=edges,
        y=counts,
        mode="lines+markers",
        marker=dict(size=marker_size, color=count_color, symbol="square"),
        line=dict(width=line_width, color=count_color),
        name="components",
    ))
    fig.update_layout(
        title=title,
        xaxis_title="edges",
        yaxis_title="vertices",
    )
    return fig
