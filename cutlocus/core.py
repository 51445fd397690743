"""Core functions for cutlocus."""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Optional

from .config import CutConfig
from .cutgraph import cut_graph_from_edges, remove_chords
from .diff import CutDiff, cut_diff
from .errors import InvalidSeedError
from .frontier import FrontierState
from .mesh import NO_EDGE, triangle_of
from .policies import HopDistance, get_policy
from .topology import canonical_cut, cut_degrees

logger = logging.getLogger(__name__)


class CutSearch:
    """Grow a spanning tree over the dual graph and collect the cut.

    Starting from a seed triangle, the search repeatedly crosses the frontier
    edge chosen by the policy. Crossing into an unvisited triangle adds a tree
    edge; every dual edge between two triangles that were reached
    independently is a cut edge. Once the frontier is exhausted the cut is
    the complement of the dual spanning tree and cutting along it leaves a
    topological disk.

    Parameters
    ----------
    mesh : HalfEdgeMesh
        Closed manifold triangle mesh.
    policy : EdgeWeightPolicy, optional
        Frontier ordering. Defaults to `HopDistance`.

    Attributes
    ----------
    visit_order : list of int
        Triangles in the order they joined the tree (seed first).
    tree_edges : list of int
        Canonical half-edges of the dual spanning tree.
    priorities : dict
        Priority of the frontier edge through which each triangle was reached.
    """

    def __init__(self, mesh, policy=None):
        self.mesh = mesh
        self.policy = HopDistance() if policy is None else policy
        self.visit_order = []
        self.tree_edges = []
        self.priorities = {}

    def run(self, seed=0):
        """Run the search from triangle `seed` and return the raw cut.

        Returns
        -------
        list of int
            Canonical half-edges of the cut, in discovery order.

        Raises
        ------
        InvalidSeedError
            If `seed` is not a triangle index of the mesh.
        UnsupportedTopologyError
            If the mesh is not a closed manifold.
        """
        mesh = self.mesh
        n_triangles = mesh.number_of_triangles()
        if not 0 <= seed < n_triangles:
            raise InvalidSeedError(
                f"seed triangle {seed} out of range for a mesh with "
                f"{n_triangles} triangles"
            )
        self.visit_order = [seed]
        self.tree_edges = []
        self.priorities = {seed: self.policy.seed_priority(mesh, seed)}

        # A lone triangle is already a disk: all its edges start out visited.
        if n_triangles == 1:
            logger.debug("Single-triangle mesh, nothing to cut")
            return []
        mesh.check_closed_manifold()

        policy = self.policy
        policy.prepare(mesh)
        state = FrontierState(mesh)
        state.visited[seed] = True
        for e in range(3 * seed, 3 * seed + 3):
            state.queue.push(e, self.priorities[seed])

        cut = []
        while True:
            e = policy.select_next(state)
            if e == NO_EDGE:
                break
            f = int(mesh.opposite[e])
            u = triangle_of(f)
            state.visited[u] = True
            state.parent[u] = f
            self.visit_order.append(u)
            self.tree_edges.append(mesh.canonical(e))
            self.priorities[u] = state.current_priority

            for branch, child in (
                ("previous", int(mesh.previous[f])),
                ("next", int(mesh.next[f])),
            ):
                across = int(mesh.opposite[child])
                if state.visited[triangle_of(across)]:
                    state.queue.invalidate(across)
                    cut.append(mesh.canonical(child))
                else:
                    state.queue.push(child, policy.priority(state, e, child, branch))

        logger.debug(
            "%r from triangle %d: %d tree edges, %d cut edges",
            policy,
            seed,
            len(self.tree_edges),
            len(cut),
        )
        return cut


def basic_cut(mesh, seed=0, policy=None):
    """Compute the raw cut of `mesh` grown from triangle `seed`.

    Parameters
    ----------
    mesh : HalfEdgeMesh
        Closed manifold triangle mesh.
    seed : int, optional
        Triangle the search starts from. Default is 0.
    policy : EdgeWeightPolicy or str, optional
        Policy instance or name ('hop', 'geodesic', 'curvature').
        Default is hop distance.

    Returns
    -------
    list of int
        Canonical half-edges of the cut.
    """
    if isinstance(policy, str):
        policy = get_policy(policy)
    return CutSearch(mesh, policy).run(seed)


def trim(mesh, cut):
    """Remove dangling spurs from a cut.

    An edge is a spur if one endpoint touches no other cut edge while the
    other endpoint does. Spurs are peeled off until none remain. An isolated
    edge is never removed, since the last slit is what opens the surface.

    Parameters
    ----------
    mesh : HalfEdgeMesh
        Mesh the cut lives on.
    cut : sequence of int
        Cut edges.

    Returns
    -------
    list of int
        Canonical cut edges that survive, in their original order.
    """
    cut = canonical_cut(mesh, cut)
    if not cut:
        return []

    degrees = cut_degrees(mesh, cut)
    incident = defaultdict(set)
    for e in cut:
        for v in mesh.endpoints(e):
            incident[v].add(e)

    removed = set()
    stack = [v for v in incident if degrees[v] == 1]
    while stack:
        v = stack.pop()
        if degrees[v] != 1:
            continue
        (e,) = incident[v]
        s, t = mesh.endpoints(e)
        w = t if s == v else s
        if degrees[w] < 2:
            continue
        removed.add(e)
        incident[v].discard(e)
        incident[w].discard(e)
        degrees[v] -= 1
        degrees[w] -= 1
        if degrees[w] == 1:
            stack.append(w)

    if removed:
        logger.debug(
            "Trimmed %d spur edges, %d remain", len(removed), len(cut) - len(removed)
        )
    return [e for e in cut if e not in removed]


@dataclass
class CutResult:
    """Cuts produced by each stage of `compute_cut`.

    Attributes
    ----------
    raw : list of int
        Complement of the dual spanning tree.
    trimmed : list of int
        Raw cut with spurs removed.
    reduced : list of int or None
        Trimmed cut with chords removed (None if reduction was disabled).
    diff : CutDiff or None
        Difference between the trimmed and the reduced cut.
    config : CutConfig
        Configuration the cut was computed with.
    """

    raw: list
    trimmed: list
    reduced: Optional[list] = None
    diff: Optional[CutDiff] = None
    config: CutConfig = field(default_factory=CutConfig)

    @property
    def cut(self):
        """The final cut of the pipeline."""
        if self.reduced is not None:
            return self.reduced
        return self.trimmed


def compute_cut(mesh, config=None):
    """Run search, trimming and chord removal as configured.

    Parameters
    ----------
    mesh : HalfEdgeMesh
        Closed manifold triangle mesh.
    config : CutConfig, optional
        Pipeline configuration. Defaults to `CutConfig()`.

    Returns
    -------
    CutResult
    """
    if config is None:
        config = CutConfig()
    policy = config.make_policy()

    raw = CutSearch(mesh, policy).run(config.seed)
    trimmed = trim(mesh, raw) if config.trim else list(raw)
    result = CutResult(raw=raw, trimmed=trimmed, config=config)

    if config.reduce:
        cut_graph = cut_graph_from_edges(mesh, trimmed)
        remove_chords(cut_graph, max_passes=config.max_chord_passes)
        result.reduced = cut_graph.cut_edges()
        result.diff = cut_diff(trimmed, result.reduced)

    if config.verbose:
        logger.info(
            "Cut of %r with %s: %d raw, %d trimmed, %s reduced edges",
            mesh,
            policy,
            len(raw),
            len(trimmed),
            "-" if result.reduced is None else len(result.reduced),
        )
    return result
