"""Reading meshes and reading/writing cuts."""

import os

import numpy as np

from .mesh import HalfEdgeMesh
from .utils import load_json, save_json

MESH_SUFFIXES = (".off", ".obj", ".ply", ".stl")


def load_surface(path):
    """Load vertex coordinates and faces from a surface file.

    Parameters
    ----------
    path : str
        OFF, OBJ, PLY or STL file (read with libigl), or a FreeSurfer
        geometry file such as ``lh.inflated`` (read with nibabel).

    Returns
    -------
    coords : ndarray
        Array of vertex coordinates with shape (n_vertices, 3)
    faces : ndarray
        Array of face indices with shape (n_faces, 3)
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Surface file {path} not found")
    if path.lower().endswith(MESH_SUFFIXES):
        import igl

        coords, faces = igl.read_triangle_mesh(path)[:2]
    else:
        import nibabel as nib

        coords, faces = nib.freesurfer.read_geometry(path)[:2]
    return np.asarray(coords, dtype=float), np.asarray(faces, dtype=np.int64)


def load_mesh(path):
    """Load a surface file as a `HalfEdgeMesh`."""
    coords, faces = load_surface(path)
    return HalfEdgeMesh(coords, faces)


def save_cut(fn, cut):
    """
    Save a cut as a flat sequence of edge indices.

    ``.json`` files hold a JSON list; any other suffix is written as one
    index per line.
    """
    cut = [int(e) for e in cut]
    if fn.endswith(".json"):
        save_json(fn, cut)
    else:
        np.savetxt(fn, np.asarray(cut, dtype=np.int64), fmt="%d")
    return fn


def load_cut(fn):
    """Load a cut written by `save_cut`."""
    if fn.endswith(".json"):
        data = load_json(fn)
        if not isinstance(data, list):
            raise ValueError(f"{fn} does not contain a list of edge indices")
        return [int(e) for e in data]
    data = np.loadtxt(fn, dtype=np.int64, ndmin=1)
    return data.tolist()
