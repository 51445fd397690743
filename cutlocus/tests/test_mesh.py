"""
Tests for the half-edge mesh.
"""

import numpy as np
import pytest

from cutlocus.errors import InconsistentVertexCountError, UnsupportedTopologyError
from cutlocus.mesh import NO_EDGE, Edge, HalfEdgeMesh, triangle_of


class TestCounts:
    def test_octahedron_counts(self, octahedron):
        assert octahedron.number_of_vertices() == 6
        assert octahedron.number_of_triangles() == 8
        assert octahedron.number_of_edges() == 24
        assert octahedron.number_of_undirected_edges() == 12

    def test_euler_characteristic(self, octahedron, cube, torus, tetrahedron):
        assert octahedron.euler_characteristic() == 2
        assert cube.euler_characteristic() == 2
        assert tetrahedron.euler_characteristic() == 2
        assert torus.euler_characteristic() == 0


class TestAdjacency:
    def test_opposite_is_involution(self, octahedron, torus):
        for mesh in (octahedron, torus):
            e = np.arange(mesh.number_of_edges())
            np.testing.assert_array_equal(mesh.opposite[mesh.opposite], e)
            assert np.all(mesh.opposite != e)

    def test_opposite_reverses_endpoints(self, cube):
        for e in range(cube.number_of_edges()):
            s, t = cube.endpoints(e)
            assert cube.endpoints(int(cube.opposite[e])) == (t, s)

    def test_next_and_previous_stay_in_triangle(self, octahedron):
        for e in range(octahedron.number_of_edges()):
            edge = octahedron.edge(e)
            assert triangle_of(edge.next) == triangle_of(e)
            assert triangle_of(edge.previous) == triangle_of(e)
            assert octahedron.next[edge.next] == edge.previous
            assert octahedron.previous[edge.next] == e

    def test_edge_record(self, octahedron):
        # Half-edge 0 of face [0, 2, 4] runs 0 -> 2.
        edge = octahedron.edge(0)
        assert isinstance(edge, Edge)
        assert edge.vertex == 2
        assert edge.next == 1
        assert edge.previous == 2
        assert octahedron.endpoints(edge.opposite) == (2, 0)
        assert len(octahedron.edges()) == 24

    def test_outgoing_edge(self, torus):
        for v in range(torus.number_of_vertices()):
            e = torus.outgoing_edge(v)
            assert torus.source(e) == v

    def test_outgoing_edge_of_unused_vertex(self):
        vertices = np.zeros((4, 3))
        vertices[1:3] = [[1, 0, 0], [0, 1, 0]]
        mesh = HalfEdgeMesh(vertices, [[0, 1, 2]])
        assert mesh.outgoing_edge(3) == NO_EDGE
        np.testing.assert_array_equal(mesh.used_vertices(), [0, 1, 2])

    def test_vertex_star_covers_fan(self, octahedron, torus):
        for v in range(octahedron.number_of_vertices()):
            star = list(octahedron.vertex_star(v))
            assert len(star) == 4
            assert all(octahedron.source(e) == v for e in star)
        for v in range(torus.number_of_vertices()):
            assert len(list(torus.vertex_star(v))) == 6

    def test_canonical_is_lower_half(self, cube):
        for e in range(cube.number_of_edges()):
            o = int(cube.opposite[e])
            assert cube.canonical(e) == cube.canonical(o) == min(e, o)

    def test_centroids(self, cube):
        centroids = cube.centroids()
        assert centroids.shape == (12, 3)
        np.testing.assert_allclose(centroids[0], [1 / 3, 2 / 3, 0])


class TestValidation:
    def test_arrays_are_read_only(self, octahedron):
        with pytest.raises(ValueError):
            octahedron.opposite[0] = 5
        with pytest.raises(ValueError):
            octahedron.vertices()[0, 0] = 1.0

    def test_face_out_of_range(self):
        with pytest.raises(InconsistentVertexCountError, match="vertex 3 "):
            HalfEdgeMesh(np.zeros((3, 3)), [[0, 1, 3]])

    def test_negative_face_index_is_reported(self):
        with pytest.raises(InconsistentVertexCountError, match="vertex -1 "):
            HalfEdgeMesh(np.zeros((3, 3)), [[0, 1, 2], [0, -1, 1]])

    def test_disconnected_mesh_rejected(self, two_tetrahedra):
        assert not two_tetrahedra.has_boundary
        assert two_tetrahedra.is_manifold
        assert two_tetrahedra.number_of_components() == 2
        with pytest.raises(UnsupportedTopologyError, match="2 connected components"):
            two_tetrahedra.check_closed_manifold()

    def test_number_of_components(self, octahedron, torus, single_triangle):
        for mesh in (octahedron, torus, single_triangle):
            assert mesh.number_of_components() == 1

    def test_bad_shapes(self):
        with pytest.raises(ValueError):
            HalfEdgeMesh(np.zeros((3, 2)), [[0, 1, 2]])
        with pytest.raises(ValueError):
            HalfEdgeMesh(np.zeros((3, 3)), np.zeros((0, 3), dtype=int))

    def test_closed_manifold_passes(self, octahedron, torus, double_triangle):
        for mesh in (octahedron, torus, double_triangle):
            mesh.check_closed_manifold()
            assert not mesh.has_boundary
            assert mesh.is_manifold

    def test_boundary_rejected(self, open_tetrahedron, single_triangle):
        assert open_tetrahedron.has_boundary
        assert single_triangle.has_boundary
        with pytest.raises(UnsupportedTopologyError, match="boundary"):
            open_tetrahedron.check_closed_manifold()

    def test_non_manifold_edge_rejected(self):
        # Three triangles hanging off the edge 0 -> 1.
        vertices = np.array(
            [[0, 0, 0], [1, 0, 0], [0, 1, 0], [0, -1, 0], [0, 0, 1]], dtype=float
        )
        mesh = HalfEdgeMesh(vertices, [[0, 1, 2], [0, 1, 3], [1, 0, 4]])
        assert not mesh.is_manifold
        with pytest.raises(UnsupportedTopologyError):
            mesh.check_closed_manifold()

    def test_inconsistent_orientation_rejected(self, octahedron):
        faces = octahedron.faces.copy()
        faces[0] = faces[0][::-1]
        mesh = HalfEdgeMesh(octahedron.vertices(), faces)
        with pytest.raises(UnsupportedTopologyError):
            mesh.check_closed_manifold()

    def test_non_manifold_vertex_rejected(self):
        # Two tetrahedra sharing only vertex 0.
        vertices = np.array(
            [
                [0, 0, 0],
                [1, 0, 0],
                [0, 1, 0],
                [0, 0, 1],
                [-1, 0, 0],
                [0, -1, 0],
                [0, 0, -1],
            ],
            dtype=float,
        )
        faces = [
            [0, 2, 1],
            [0, 1, 3],
            [0, 3, 2],
            [1, 2, 3],
            [0, 5, 4],
            [0, 4, 6],
            [0, 6, 5],
            [4, 5, 6],
        ]
        mesh = HalfEdgeMesh(vertices, faces)
        assert not mesh.has_boundary
        with pytest.raises(UnsupportedTopologyError, match="vertex 0"):
            mesh.check_closed_manifold()
