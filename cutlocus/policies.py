"""Frontier priority policies for the cut search.

A policy decides which frontier edge the search crosses next. The search asks
it for the next edge with `select_next` and for the priority of every new
frontier edge with `priority`; it never looks at priorities itself.
"""

import logging

import numpy as np

from .errors import InconsistentVertexCountError
from .mesh import NO_EDGE, triangle_of

logger = logging.getLogger(__name__)


class EdgeWeightPolicy:
    """Base strategy: pop the lowest-priority valid frontier edge."""

    name = None

    def prepare(self, mesh):
        """Precompute per-mesh data before a search starts."""

    def seed_priority(self, mesh, t):
        return 0

    def priority(self, state, e, child, branch):
        """Priority of `child`, a new frontier edge.

        Parameters
        ----------
        state : FrontierState
            Search state; ``state.current_priority`` holds the priority of `e`.
        e : int
            Frontier edge that was just crossed.
        child : int
            Half-edge of the newly reached triangle being pushed.
        branch : {"previous", "next"}
            Which side of the crossed edge `child` lies on.
        """
        raise NotImplementedError

    def select_next(self, state):
        """Return the next frontier edge to cross, or NO_EDGE when exhausted."""
        edge, priority = state.queue.pop_valid()
        state.current_priority = priority
        return edge

    def __repr__(self):
        return f"{type(self).__name__}()"


class HopDistance(EdgeWeightPolicy):
    """Number of dual edges from the seed; grows a breadth-first tree."""

    name = "hop"

    def priority(self, state, e, child, branch):
        return state.current_priority + 1


class GeodesicDistance(EdgeWeightPolicy):
    """Accumulated distance between adjacent triangle centroids.

    Parameters
    ----------
    symmetric : bool
        If True (default) both branches accumulate the centroid distance.
        If False, the ``next`` branch adds a constant 1 instead, reproducing
        an older variant of this metric.
    """

    name = "geodesic"

    def __init__(self, symmetric=True):
        self.symmetric = symmetric
        self._centroids = None

    def prepare(self, mesh):
        self._centroids = mesh.centroids()
        if not self.symmetric:
            logger.warning(
                "GeodesicDistance(symmetric=False): the 'next' branch adds a "
                "constant 1 instead of the centroid distance"
            )

    def priority(self, state, e, child, branch):
        if branch == "next" and not self.symmetric:
            return state.current_priority + 1
        here = triangle_of(child)
        there = triangle_of(int(state.mesh.opposite[child]))
        step = np.linalg.norm(self._centroids[there] - self._centroids[here])
        return state.current_priority + float(step)

    def __repr__(self):
        return f"GeodesicDistance(symmetric={self.symmetric})"


def vertex_angle_deficits(vertices, faces):
    """Compute the discrete angular deficit density at every vertex.

    The deficit of vertex v is ``3 * (2*pi - sum of incident angles) /
    sum of incident triangle areas``. Vertices whose incident triangles
    all have zero area get 0.

    Parameters
    ----------
    vertices : ndarray of shape (V, 3)
        Vertex positions.
    faces : ndarray of shape (T, 3)
        Triangle vertex indices.

    Returns
    -------
    ndarray of shape (V,)
        Angular deficit per vertex.
    """
    vertices = np.asarray(vertices, dtype=float)
    faces = np.asarray(faces)
    p = vertices[faces]

    angles = np.empty(faces.shape)
    for i in range(3):
        u = p[:, (i + 1) % 3] - p[:, i]
        v = p[:, (i + 2) % 3] - p[:, i]
        norms = np.linalg.norm(u, axis=1) * np.linalg.norm(v, axis=1)
        # Corners with a zero-length side get angle 0.
        cos = np.divide(
            np.einsum("ij,ij->i", u, v),
            norms,
            out=np.ones(len(faces)),
            where=norms > 0,
        )
        angles[:, i] = np.arccos(np.clip(cos, -1.0, 1.0))
    areas = 0.5 * np.linalg.norm(np.cross(p[:, 1] - p[:, 0], p[:, 2] - p[:, 0]), axis=1)

    angle_sum = np.zeros(len(vertices))
    area_sum = np.zeros(len(vertices))
    np.add.at(angle_sum, faces.reshape(-1), angles.reshape(-1))
    np.add.at(area_sum, faces.reshape(-1), np.repeat(areas, 3))

    deficits = np.zeros(len(vertices))
    used = area_sum > 0
    deficits[used] = 3.0 * (2.0 * np.pi - angle_sum[used]) / area_sum[used]
    return deficits


class CurvatureWeighted(EdgeWeightPolicy):
    """Absolute mean angular deficit of the triangle a frontier edge leads to.

    Flatter triangles are reached first.

    Parameters
    ----------
    vertex_deficits : array-like of shape (V,), optional
        Precomputed per-vertex deficits. Computed from the mesh if omitted.
    """

    name = "curvature"

    def __init__(self, vertex_deficits=None):
        self.vertex_deficits = vertex_deficits
        self._triangle_weights = None

    def prepare(self, mesh):
        if self.vertex_deficits is None:
            deficits = vertex_angle_deficits(mesh.vertices(), mesh.faces)
        else:
            deficits = np.asarray(self.vertex_deficits, dtype=float)
            if deficits.shape != (mesh.number_of_vertices(),):
                raise InconsistentVertexCountError(
                    f"got {deficits.size} vertex deficits for a mesh with "
                    f"{mesh.number_of_vertices()} vertices"
                )
        self._triangle_weights = np.abs(deficits[mesh.faces].mean(axis=1))

    def triangle_weights(self):
        return self._triangle_weights

    def priority(self, state, e, child, branch):
        there = int(state.mesh.opposite[child])
        if there == NO_EDGE:
            return float(self._triangle_weights[triangle_of(child)])
        return float(self._triangle_weights[triangle_of(there)])


POLICIES = {
    HopDistance.name: HopDistance,
    GeodesicDistance.name: GeodesicDistance,
    CurvatureWeighted.name: CurvatureWeighted,
}


def get_policy(name, **kwargs):
    """Instantiate a policy by name ('hop', 'geodesic' or 'curvature')."""
    try:
        cls = POLICIES[name]
    except KeyError:
        raise ValueError(
            f"Unknown policy {name!r}; expected one of {sorted(POLICIES)}"
        ) from None
    return cls(**kwargs)
