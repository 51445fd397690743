"""Priority queue over the dual graph frontier."""

import heapq
import itertools

import numpy as np

from .mesh import NO_EDGE


class DualFrontierQueue:
    """Min-priority queue of half-edges with lazy invalidation.

    Every push stamps the edge with a fresh generation number. Entries whose
    stamp is no longer the edge's current generation are stale and are skipped
    on pop. Equal priorities pop in insertion order.

    Parameters
    ----------
    n_edges : int
        Size of the half-edge index space.
    """

    def __init__(self, n_edges):
        self._heap = []
        self._generation = [0] * n_edges
        self._valid = [False] * n_edges
        self._counter = itertools.count()

    def __len__(self):
        return sum(self._valid)

    def __bool__(self):
        return any(self._valid)

    def push(self, edge, priority):
        """Insert `edge`, superseding any earlier entry for it."""
        self._generation[edge] += 1
        self._valid[edge] = True
        heapq.heappush(
            self._heap,
            (priority, next(self._counter), edge, self._generation[edge]),
        )

    def invalidate(self, edge):
        """Drop `edge` from the queue without searching the heap."""
        self._valid[edge] = False
        self._generation[edge] += 1

    def is_queued(self, edge):
        return self._valid[edge]

    def pop_valid(self):
        """Return ``(edge, priority)`` of the best current entry.

        Returns ``(NO_EDGE, None)`` once no valid entry remains.
        """
        while self._heap:
            priority, _, edge, generation = heapq.heappop(self._heap)
            if self._valid[edge] and generation == self._generation[edge]:
                self._valid[edge] = False
                return edge, priority
        return NO_EDGE, None


class FrontierState:
    """Scratch state of a single cut search.

    Attributes
    ----------
    mesh : HalfEdgeMesh
        The mesh being cut.
    queue : DualFrontierQueue
        Frontier half-edges, each lying in a visited triangle.
    visited : ndarray of bool, shape (T,)
        Triangles already joined to the spanning tree.
    parent : ndarray of int, shape (T,)
        Half-edge through which each triangle was reached (NO_EDGE for the
        seed and for unvisited triangles).
    current_priority
        Priority of the most recently selected frontier edge.
    """

    def __init__(self, mesh):
        self.mesh = mesh
        self.queue = DualFrontierQueue(mesh.number_of_edges())
        self.visited = np.zeros(mesh.number_of_triangles(), dtype=bool)
        self.parent = np.full(mesh.number_of_triangles(), NO_EDGE, dtype=np.int64)
        self.current_priority = None
