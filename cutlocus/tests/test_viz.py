"""
Tests for cut rendering.
"""

import os

import matplotlib.pyplot as plt
import numpy as np

from cutlocus.viz import (
    CUT_EDGE_COLOR,
    NEW_EDGE_COLOR,
    OLD_EDGE_COLOR,
    REGULAR_EDGE_COLOR,
    edge_colors,
    plot_cut,
)


def test_edge_colors(octahedron):
    edges = octahedron.undirected_edges()
    a = int(edges[3])
    edges_out, colors = edge_colors(octahedron, [int(octahedron.opposite[a])])

    np.testing.assert_array_equal(edges_out, edges)
    assert colors.shape == (12, 4)
    np.testing.assert_array_equal(colors[3], CUT_EDGE_COLOR)
    assert sum(np.all(c == REGULAR_EDGE_COLOR) for c in colors) == 11


def test_edge_colors_with_reduced_cut(octahedron):
    a, b, c = (int(e) for e in octahedron.undirected_edges()[:3])
    _, colors = edge_colors(octahedron, [a, b], reduced=[a, c])
    np.testing.assert_array_equal(colors[0], CUT_EDGE_COLOR)
    np.testing.assert_array_equal(colors[1], OLD_EDGE_COLOR)
    np.testing.assert_array_equal(colors[2], NEW_EDGE_COLOR)


def test_plot_cut_returns_figure(cube):
    fig = plot_cut(cube, [0], title="cube")
    assert fig.axes[0].get_title() == "cube"
    plt.close(fig)


def test_plot_cut_saves_png(tmp_path, torus):
    output = str(tmp_path / "plots" / "torus.png")
    assert plot_cut(torus, [0, 1], reduced=[0], output=output) == output
    assert os.path.getsize(output) > 0
