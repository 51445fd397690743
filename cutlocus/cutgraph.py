"""Cut graph construction and chord removal."""

import logging

import networkx as nx

from .errors import MalformedCutGraphError
from .mesh import NO_EDGE, triangle_of
from .topology import canonical_cut, complement_euler_characteristic, is_disk_cut

logger = logging.getLogger(__name__)


class CutGraph:
    """Graph whose nodes are cut vertices and whose edges are cut edges.

    Each graph edge is keyed by the canonical half-edge it stands for, so
    parallel mesh edges between the same two vertices stay distinct.
    """

    def __init__(self, mesh):
        self.mesh = mesh
        self.graph = nx.MultiGraph()
        self._ends = {}

    def __len__(self):
        return len(self._ends)

    def __contains__(self, e):
        return self.mesh.canonical(int(e)) in self._ends

    def add_cut_edge(self, e):
        e = self.mesh.canonical(int(e))
        if e in self._ends:
            return
        s, t = self.mesh.endpoints(e)
        self._ends[e] = (s, t)
        self.graph.add_edge(s, t, key=e)

    def remove_cut_edge(self, e):
        e = self.mesh.canonical(int(e))
        s, t = self._ends.pop(e)
        self.graph.remove_edge(s, t, key=e)
        for v in (s, t):
            if self.graph.degree(v) == 0:
                self.graph.remove_node(v)

    def endpoints(self, e):
        return self._ends[e]

    def degree(self, v):
        if v not in self.graph:
            return 0
        return self.graph.degree(v)

    def number_of_components(self):
        return nx.number_connected_components(self.graph)

    def cut_edges(self):
        """Return the cut edges, sorted."""
        return sorted(self._ends)


def cut_graph_from_edges(mesh, cut):
    """Build a `CutGraph` from a sequence of cut edges."""
    cut_graph = CutGraph(mesh)
    for e in canonical_cut(mesh, cut):
        cut_graph.add_cut_edge(e)
    return cut_graph


def _complement_regions(mesh, cut_graph):
    """Union the triangles that stay connected across uncut edges."""
    regions = nx.utils.UnionFind(range(mesh.number_of_triangles()))
    for e in mesh.undirected_edges():
        o = int(mesh.opposite[e])
        if o != NO_EDGE and int(e) not in cut_graph:
            regions.union(triangle_of(int(e)), triangle_of(o))
    return regions


def _chord_kind(cut_graph, regions, e):
    """Classify `e` as a removable chord, or return None."""
    mesh = cut_graph.mesh
    o = int(mesh.opposite[e])
    if o != NO_EDGE and regions[triangle_of(e)] != regions[triangle_of(o)]:
        return "cycle"
    s, t = cut_graph.endpoints(e)
    ds, dt = cut_graph.degree(s), cut_graph.degree(t)
    if min(ds, dt) == 1 and max(ds, dt) >= 2:
        return "spur"
    if ds == dt == 1 and cut_graph.number_of_components() > 1:
        return "slit"
    return None


def remove_chords(cut_graph, max_passes=None):
    """Delete redundant cut edges until the cut is a minimal disk cut.

    A chord is a cut edge that can go without losing the single disk: an edge
    separating two regions of the cut-open surface (it closes a redundant
    cycle), a dangling spur, or an isolated slit next to other cut
    components. Every pass sweeps the remaining edges in index order and
    removes chords one at a time; passes repeat until one removes nothing.

    Parameters
    ----------
    cut_graph : CutGraph
        Cut graph, modified in place.
    max_passes : int, optional
        Maximum number of passes. Defaults to the number of cut edges plus one.

    Returns
    -------
    list of int
        Removed chords, in removal order.

    Raises
    ------
    MalformedCutGraphError
        If the passes do not converge or the result is not a single disk.
    """
    mesh = cut_graph.mesh
    if max_passes is None:
        max_passes = len(cut_graph) + 1

    regions = _complement_regions(mesh, cut_graph)
    removed = []
    for n_pass in range(1, max_passes + 1):
        chords = []
        for e in cut_graph.cut_edges():
            kind = _chord_kind(cut_graph, regions, e)
            if kind is None:
                continue
            cut_graph.remove_cut_edge(e)
            o = int(mesh.opposite[e])
            if o != NO_EDGE:
                regions.union(triangle_of(e), triangle_of(o))
            chords.append(e)
            logger.debug("Removed %s chord %d", kind, e)
        if not chords:
            break
        logger.debug("Chord pass %d removed %d edges", n_pass, len(chords))
        removed.extend(chords)
    else:
        raise MalformedCutGraphError(
            f"chord removal did not converge within {max_passes} passes "
            f"({len(cut_graph)} cut edges left)"
        )

    remaining = cut_graph.cut_edges()
    if not is_disk_cut(mesh, remaining):
        raise MalformedCutGraphError(
            f"reduced cut of {len(remaining)} edges does not leave a single "
            f"disk (Euler characteristic "
            f"{complement_euler_characteristic(mesh, remaining)})"
        )
    return removed


def reduce_cut(mesh, cut, max_passes=None):
    """Return `cut` with all chords removed."""
    cut_graph = cut_graph_from_edges(mesh, cut)
    remove_chords(cut_graph, max_passes=max_passes)
    return cut_graph.cut_edges()
