"""Static rendering of a cut on its mesh."""

import os

import matplotlib.pyplot as plt
import numpy as np
from mpl_toolkits.mplot3d.art3d import Line3DCollection

from .diff import cut_diff

REGULAR_EDGE_COLOR = (0.25, 0.25, 0.25, 1.0)
CUT_EDGE_COLOR = (1.0, 0.0, 1.0, 1.0)
NEW_EDGE_COLOR = (0.0, 0.9, 0.4, 1.0)
OLD_EDGE_COLOR = (0.5, 0.0, 0.8, 1.0)


def edge_colors(mesh, cut, reduced=None):
    """
    Assign an RGBA color to every undirected edge of the mesh.

    Parameters
    ----------
    mesh : HalfEdgeMesh
        Mesh the cut lives on.
    cut : sequence of int
        Cut edges, drawn in magenta.
    reduced : sequence of int or None, optional
        Reduced cut. Edges only in `reduced` are drawn green and edges only
        in `cut` purple.

    Returns
    -------
    edges : ndarray of shape (E,)
        Canonical half-edge of every undirected edge.
    colors : ndarray of shape (E, 4)
        RGBA color per edge.
    """
    edges = mesh.undirected_edges()
    colors = np.tile(REGULAR_EDGE_COLOR, (len(edges), 1))
    position = {int(e): i for i, e in enumerate(edges)}
    for e in cut:
        colors[position[mesh.canonical(int(e))]] = CUT_EDGE_COLOR
    if reduced is not None:
        for e, is_new in cut_diff(cut, reduced):
            color = NEW_EDGE_COLOR if is_new else OLD_EDGE_COLOR
            colors[position[mesh.canonical(e)]] = color
    return edges, colors


def plot_cut(mesh, cut, reduced=None, output=None, title=None):
    """
    Draw the mesh wireframe with its cut highlighted.

    Parameters
    ----------
    mesh : HalfEdgeMesh
        Mesh to draw.
    cut : sequence of int
        Cut edges.
    reduced : sequence of int or None, optional
        Reduced cut to compare against `cut`.
    output : str or None, optional
        If given, the figure is saved to this PNG path and closed.
    title : str or None, optional
        Figure title.

    Returns
    -------
    matplotlib.figure.Figure or str
        The figure, or the output path when `output` is given.
    """
    edges, colors = edge_colors(mesh, cut, reduced)
    points = mesh.vertices()
    segments = np.stack(
        [points[mesh.target[mesh.previous[edges]]], points[mesh.target[edges]]],
        axis=1,
    )
    widths = np.where(np.all(colors == REGULAR_EDGE_COLOR, axis=1), 0.5, 2.0)

    fig = plt.figure(figsize=(6, 6))
    ax = fig.add_subplot(projection="3d")
    ax.add_collection3d(Line3DCollection(segments, colors=colors, linewidths=widths))
    lo, hi = points.min(axis=0), points.max(axis=0)
    ax.set_xlim(lo[0], hi[0])
    ax.set_ylim(lo[1], hi[1])
    ax.set_zlim(lo[2], hi[2])
    ax.set_axis_off()
    if title:
        ax.set_title(title)

    if output is None:
        return fig
    os.makedirs(os.path.dirname(os.path.abspath(output)), exist_ok=True)
    fig.savefig(output, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return output
