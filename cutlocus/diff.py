"""Comparison of two cuts."""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class CutDiff:
    """Edges in exactly one of two cuts.

    Attributes
    ----------
    edges : tuple of int
        Sorted symmetric difference of the two cuts.
    is_new : tuple of bool
        For each edge, True if it belongs to the new cut, False if only the
        old cut has it.
    """

    edges: tuple = ()
    is_new: tuple = ()

    def __len__(self):
        return len(self.edges)

    def __iter__(self):
        return iter(zip(self.edges, self.is_new))

    @property
    def added(self):
        return [e for e, new in self if new]

    @property
    def removed(self):
        return [e for e, new in self if not new]

    def classify(self):
        """Map every differing edge to 'new' or 'old'."""
        return {e: "new" if new else "old" for e, new in self}


def cut_diff(old, new):
    """Compute the symmetric difference between an old and a new cut.

    Parameters
    ----------
    old, new : sequence of int
        Cut edge indices. Duplicates are ignored and order does not matter.

    Returns
    -------
    CutDiff
        Differing edges, each flagged by a binary search in the new cut.
    """
    old = np.unique(np.asarray(old, dtype=np.int64))
    new = np.unique(np.asarray(new, dtype=np.int64))
    edges = np.setxor1d(old, new, assume_unique=True)
    if len(new):
        idx = np.searchsorted(new, edges)
        hit = new[np.minimum(idx, len(new) - 1)] == edges
    else:
        hit = np.zeros(len(edges), dtype=bool)
    return CutDiff(
        edges=tuple(int(e) for e in edges),
        is_new=tuple(bool(h) for h in hit),
    )
