"""Topology of a closed mesh cut open along a set of edges."""

import numpy as np
from scipy.sparse import coo_matrix
from scipy.sparse.csgraph import connected_components

from .mesh import NO_EDGE


def canonical_cut(mesh, cut):
    """Map every edge of `cut` to its canonical half-edge, dropping repeats.

    The first occurrence of each undirected edge keeps its position.
    """
    seen = set()
    out = []
    for e in cut:
        c = mesh.canonical(int(e))
        if c not in seen:
            seen.add(c)
            out.append(c)
    return out


def mirror_cut(mesh, cut):
    """Return both half-edges of every cut edge, sorted."""
    out = set()
    for e in cut:
        out.add(int(e))
        o = int(mesh.opposite[e])
        if o != NO_EDGE:
            out.add(o)
    return sorted(out)


def cut_degrees(mesh, cut):
    """Number of cut edges incident to each vertex."""
    degrees = np.zeros(mesh.number_of_vertices(), dtype=np.int64)
    for e in cut:
        s, t = mesh.endpoints(e)
        degrees[s] += 1
        degrees[t] += 1
    return degrees


def count_complement_components(mesh, cut):
    """Number of connected pieces of the surface after cutting along `cut`."""
    cut = set(canonical_cut(mesh, cut))
    n_triangles = mesh.number_of_triangles()
    rows, cols = [], []
    for e in mesh.undirected_edges():
        o = int(mesh.opposite[e])
        if o == NO_EDGE or int(e) in cut:
            continue
        rows.append(e // 3)
        cols.append(o // 3)
    graph = coo_matrix(
        (np.ones(len(rows)), (rows, cols)), shape=(n_triangles, n_triangles)
    )
    n_components, _ = connected_components(graph, directed=False)
    return int(n_components)


def complement_euler_characteristic(mesh, cut):
    """Euler characteristic V - E + F of the surface cut open along `cut`.

    A vertex touched by d > 0 cut edges splits into d copies, and every cut
    edge into two.
    """
    cut = canonical_cut(mesh, cut)
    degrees = cut_degrees(mesh, cut)
    n_vertices = int(np.maximum(degrees[mesh.used_vertices()], 1).sum())
    n_edges = mesh.number_of_undirected_edges() + len(cut)
    return n_vertices - n_edges + mesh.number_of_triangles()


def is_disk_cut(mesh, cut):
    """True if cutting along `cut` leaves a single topological disk."""
    return (
        complement_euler_characteristic(mesh, cut) == 1
        and count_complement_components(mesh, cut) == 1
    )


def dual_spanning_tree_size(mesh, cut):
    """Number of dual edges left uncut."""
    return mesh.number_of_undirected_edges() - len(canonical_cut(mesh, cut))
