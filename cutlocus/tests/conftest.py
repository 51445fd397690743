"""Shared pytest fixtures for cutlocus tests."""

import matplotlib

matplotlib.use("Agg")

import numpy as np  # noqa: E402
import pytest  # noqa: E402

from cutlocus.mesh import HalfEdgeMesh  # noqa: E402


def _torus(n=4, m=4, major=2.0, minor=1.0):
    u = 2 * np.pi * np.arange(n) / n
    v = 2 * np.pi * np.arange(m) / m
    uu, vv = np.meshgrid(u, v, indexing="ij")
    vertices = np.stack(
        [
            (major + minor * np.cos(vv)) * np.cos(uu),
            (major + minor * np.cos(vv)) * np.sin(uu),
            minor * np.sin(vv),
        ],
        axis=-1,
    ).reshape(-1, 3)

    faces = []
    for i in range(n):
        for j in range(m):
            a = i * m + j
            b = ((i + 1) % n) * m + j
            c = ((i + 1) % n) * m + (j + 1) % m
            d = i * m + (j + 1) % m
            faces.append([a, b, c])
            faces.append([a, c, d])
    return vertices, np.array(faces)


@pytest.fixture
def tetrahedron():
    """Closed tetrahedron: 4 vertices, 4 triangles."""
    vertices = np.array([[0, 0, 0], [1, 0, 0], [0, 1, 0], [0, 0, 1]], dtype=float)
    faces = np.array([[0, 2, 1], [0, 1, 3], [0, 3, 2], [1, 2, 3]])
    return HalfEdgeMesh(vertices, faces)


@pytest.fixture
def octahedron():
    """Regular octahedron: 6 vertices, 8 triangles, 12 edges."""
    vertices = np.array(
        [
            [1, 0, 0],
            [-1, 0, 0],
            [0, 1, 0],
            [0, -1, 0],
            [0, 0, 1],
            [0, 0, -1],
        ],
        dtype=float,
    )
    faces = np.array(
        [
            [0, 2, 4],
            [2, 1, 4],
            [1, 3, 4],
            [3, 0, 4],
            [2, 0, 5],
            [1, 2, 5],
            [3, 1, 5],
            [0, 3, 5],
        ]
    )
    return HalfEdgeMesh(vertices, faces)


@pytest.fixture
def cube():
    """Unit cube, each square face split into two triangles.

    Vertex index is x + 2*y + 4*z for corners (x, y, z) in {0, 1}^3.
    """
    vertices = np.array(
        [[x, y, z] for z in (0, 1) for y in (0, 1) for x in (0, 1)], dtype=float
    )
    faces = np.array(
        [
            [0, 2, 3],
            [0, 3, 1],  # z = 0
            [4, 5, 7],
            [4, 7, 6],  # z = 1
            [0, 1, 5],
            [0, 5, 4],  # y = 0
            [2, 6, 7],
            [2, 7, 3],  # y = 1
            [0, 4, 6],
            [0, 6, 2],  # x = 0
            [1, 3, 7],
            [1, 7, 5],  # x = 1
        ]
    )
    return HalfEdgeMesh(vertices, faces)


@pytest.fixture
def torus():
    """4 x 4 torus grid: 16 vertices, 32 triangles, genus 1."""
    vertices, faces = _torus()
    return HalfEdgeMesh(vertices, faces)


@pytest.fixture
def double_triangle():
    """Two triangles glued along all three edges (a degenerate sphere)."""
    vertices = np.array([[0, 0, 0], [1, 0, 0], [0, 1, 0]], dtype=float)
    faces = np.array([[0, 1, 2], [0, 2, 1]])
    return HalfEdgeMesh(vertices, faces)


@pytest.fixture
def single_triangle():
    """A lone triangle."""
    vertices = np.array([[0, 0, 0], [1, 0, 0], [0, 1, 0]], dtype=float)
    return HalfEdgeMesh(vertices, np.array([[0, 1, 2]]))


@pytest.fixture
def open_tetrahedron():
    """Tetrahedron with its last face removed (a disk with boundary)."""
    vertices = np.array([[0, 0, 0], [1, 0, 0], [0, 1, 0], [0, 0, 1]], dtype=float)
    faces = np.array([[0, 2, 1], [0, 1, 3], [0, 3, 2]])
    return HalfEdgeMesh(vertices, faces)


@pytest.fixture
def edge_between():
    """Return a function finding the half-edge from vertex a to vertex b."""

    def find(mesh, a, b):
        for e in range(mesh.number_of_edges()):
            if mesh.endpoints(e) == (a, b):
                return e
        raise KeyError(f"no half-edge {a} -> {b}")

    return find


@pytest.fixture
def two_tetrahedra():
    """Two disjoint closed tetrahedra: 8 vertices, 8 triangles."""
    vertices = np.array([[0, 0, 0], [1, 0, 0], [0, 1, 0], [0, 0, 1]], dtype=float)
    faces = np.array([[0, 2, 1], [0, 1, 3], [0, 3, 2], [1, 2, 3]])
    return HalfEdgeMesh(
        np.vstack([vertices, vertices + 5.0]), np.vstack([faces, faces + 4])
    )
