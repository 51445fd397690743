"""Exceptions raised by the cut-locus engine."""


class CutLocusError(ValueError):
    """Base class for all errors raised by cutlocus."""


class UnsupportedTopologyError(CutLocusError):
    """The mesh has boundary or non-manifold edges."""


class InvalidSeedError(CutLocusError):
    """The seed triangle index is out of range."""


class InconsistentVertexCountError(CutLocusError):
    """Per-vertex data does not match the number of mesh vertices."""


class MalformedCutGraphError(CutLocusError):
    """Chord removal did not converge to a single disk."""
