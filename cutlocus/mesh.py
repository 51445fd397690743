"""Half-edge mesh built from a triangle face array.

Half-edge ``3 * t + i`` runs from ``faces[t][i]`` to ``faces[t][(i + 1) % 3]``,
so the triangle of an edge is ``e // 3`` and the edge index space of a closed
mesh is exactly ``3 * T``. The mesh is never modified after construction; its
arrays are flagged read-only.
"""

import logging
from collections import namedtuple

import numpy as np
from scipy.sparse import coo_matrix
from scipy.sparse.csgraph import connected_components

from .errors import InconsistentVertexCountError, UnsupportedTopologyError

logger = logging.getLogger(__name__)

# Missing edge: boundary opposite, unvisited dual node, exhausted frontier.
NO_EDGE = -1

Edge = namedtuple("Edge", ["vertex", "next", "previous", "opposite"])


def triangle_of(e):
    """Return the triangle owning half-edge `e`."""
    return e // 3


def _readonly(arr):
    arr.flags.writeable = False
    return arr


class HalfEdgeMesh:
    """Read-only half-edge adjacency over a triangle mesh.

    Parameters
    ----------
    vertices : array-like of shape (V, 3)
        Vertex positions.
    faces : array-like of shape (T, 3)
        Triangle vertex indices with consistent orientation.

    Raises
    ------
    InconsistentVertexCountError
        If a face references a vertex that does not exist.
    """

    def __init__(self, vertices, faces):
        vertices = np.asarray(vertices, dtype=float)
        faces = np.asarray(faces, dtype=np.int64)
        if vertices.ndim != 2 or vertices.shape[1] != 3:
            raise ValueError(
                f"vertices must have shape (V, 3), got {vertices.shape}"
            )
        if faces.ndim != 2 or faces.shape[1] != 3 or len(faces) == 0:
            raise ValueError(f"faces must have shape (T, 3), got {faces.shape}")
        bad = faces[(faces < 0) | (faces >= len(vertices))]
        if len(bad):
            raise InconsistentVertexCountError(
                f"faces reference vertex {int(bad[0])} but only "
                f"{len(vertices)} vertices were given"
            )

        n_edges = 3 * len(faces)
        offset = np.arange(n_edges) % 3
        base = np.arange(n_edges) - offset
        source = faces.reshape(-1)
        target = faces[:, [1, 2, 0]].reshape(-1)

        self._vertices = _readonly(vertices.copy())
        self._faces = _readonly(faces.copy())
        self.target = _readonly(target.copy())
        self.next = _readonly(base + (offset + 1) % 3)
        self.previous = _readonly(base + (offset + 2) % 3)

        # Pair each directed edge with its reverse. A repeated directed edge
        # means the surface is non-manifold or inconsistently oriented.
        lookup = {}
        self._manifold = not np.any(source == target)
        for e, key in enumerate(zip(source.tolist(), target.tolist())):
            if key in lookup:
                self._manifold = False
            lookup[key] = e
        opposite = np.fromiter(
            (
                lookup.get((t, s), NO_EDGE)
                for s, t in zip(source.tolist(), target.tolist())
            ),
            dtype=np.int64,
            count=n_edges,
        )
        self.opposite = _readonly(opposite)

        outgoing = np.full(len(vertices), NO_EDGE, dtype=np.int64)
        # Reversed so the lowest edge index wins.
        outgoing[source[::-1]] = np.arange(n_edges)[::-1]
        self._outgoing = _readonly(outgoing)
        self._centroids = None

    def __repr__(self):
        return (
            f"HalfEdgeMesh(n_vertices={self.number_of_vertices()}, "
            f"n_triangles={self.number_of_triangles()})"
        )

    # ---- input contract ----

    def vertices(self):
        return self._vertices

    @property
    def faces(self):
        return self._faces

    def edges(self):
        """Return all half-edges as `Edge` records."""
        return [self.edge(e) for e in range(self.number_of_edges())]

    def edge(self, e):
        return Edge(
            int(self.target[e]),
            int(self.next[e]),
            int(self.previous[e]),
            int(self.opposite[e]),
        )

    def number_of_triangles(self):
        return len(self._faces)

    def number_of_edges(self):
        return len(self.target)

    def number_of_vertices(self):
        return len(self._vertices)

    def outgoing_edge(self, v):
        """Return a half-edge leaving vertex `v`, or NO_EDGE if `v` is unused."""
        return int(self._outgoing[v])

    # ---- derived queries ----

    def source(self, e):
        return int(self.target[self.previous[e]])

    def endpoints(self, e):
        return self.source(e), int(self.target[e])

    def canonical(self, e):
        """Return the lower of `e` and its opposite."""
        o = int(self.opposite[e])
        return e if o == NO_EDGE or e < o else o

    def undirected_edges(self):
        """Return the canonical half-edge of every undirected edge."""
        e = np.arange(self.number_of_edges())
        keep = (self.opposite == NO_EDGE) | (e < self.opposite)
        return e[keep]

    def number_of_undirected_edges(self):
        return len(self.undirected_edges())

    def used_vertices(self):
        return np.flatnonzero(self._outgoing != NO_EDGE)

    @property
    def has_boundary(self):
        return bool(np.any(self.opposite == NO_EDGE))

    @property
    def is_manifold(self):
        return self._manifold

    def vertex_star(self, v):
        """Yield the half-edges leaving `v`, walking around its fan."""
        start = self.outgoing_edge(v)
        if start == NO_EDGE:
            return
        e = start
        while True:
            yield e
            e = int(self.opposite[self.previous[e]])
            if e == NO_EDGE or e == start:
                return

    def number_of_components(self):
        """Number of connected components of the dual graph."""
        e = self.undirected_edges()
        e = e[self.opposite[e] != NO_EDGE]
        n_triangles = self.number_of_triangles()
        graph = coo_matrix(
            (np.ones(len(e)), (e // 3, self.opposite[e] // 3)),
            shape=(n_triangles, n_triangles),
        )
        n_components, _ = connected_components(graph, directed=False)
        return int(n_components)

    def euler_characteristic(self):
        return (
            len(self.used_vertices())
            - self.number_of_undirected_edges()
            + self.number_of_triangles()
        )

    def centroids(self):
        """Return the (T, 3) array of triangle centroids."""
        if self._centroids is None:
            self._centroids = _readonly(self._vertices[self._faces].mean(axis=1))
        return self._centroids

    def check_closed_manifold(self):
        """Raise UnsupportedTopologyError unless the mesh is a connected closed
        manifold.
        """
        if not self._manifold:
            raise UnsupportedTopologyError(
                "mesh has non-manifold, degenerate or inconsistently oriented edges"
            )
        n_boundary = int(np.sum(self.opposite == NO_EDGE))
        if n_boundary:
            raise UnsupportedTopologyError(
                f"mesh has {n_boundary} boundary edges; only closed surfaces "
                "can be cut"
            )
        valence = np.bincount(self._faces.reshape(-1), minlength=len(self._vertices))
        for v in self.used_vertices():
            n_star = sum(1 for _ in self.vertex_star(v))
            if n_star != valence[v]:
                raise UnsupportedTopologyError(
                    f"vertex {v} is non-manifold: {valence[v]} incident "
                    f"triangles but a single fan of {n_star}"
                )
        n_components = self.number_of_components()
        if n_components > 1:
            raise UnsupportedTopologyError(
                f"mesh has {n_components} connected components; only "
                "connected surfaces can be cut"
            )
        logger.debug("%r is a closed manifold", self)
