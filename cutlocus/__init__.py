"""Cut-locus engine for closed triangle meshes"""

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "unknown"

# Export key functions for programmatic use
from .config import CutConfig
from .core import CutResult, CutSearch, basic_cut, compute_cut, trim
from .cutgraph import CutGraph, cut_graph_from_edges, reduce_cut, remove_chords
from .diff import CutDiff, cut_diff
from .errors import (
    CutLocusError,
    InconsistentVertexCountError,
    InvalidSeedError,
    MalformedCutGraphError,
    UnsupportedTopologyError,
)
from .mesh import NO_EDGE, HalfEdgeMesh
from .policies import CurvatureWeighted, GeodesicDistance, HopDistance, get_policy
from .topology import complement_euler_characteristic, is_disk_cut

__all__ = [
    "__version__",
    "CutConfig",
    "CutResult",
    "CutSearch",
    "basic_cut",
    "compute_cut",
    "trim",
    "CutGraph",
    "cut_graph_from_edges",
    "reduce_cut",
    "remove_chords",
    "CutDiff",
    "cut_diff",
    "CutLocusError",
    "InconsistentVertexCountError",
    "InvalidSeedError",
    "MalformedCutGraphError",
    "UnsupportedTopologyError",
    "NO_EDGE",
    "HalfEdgeMesh",
    "CurvatureWeighted",
    "GeodesicDistance",
    "HopDistance",
    "get_policy",
    "complement_euler_characteristic",
    "is_disk_cut",
]
