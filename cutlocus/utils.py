"""Various utils"""
import json

import numpy as np


def _to_builtin(obj):
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def load_json(fn):
    """
    Load a json file and return its content.
    """
    with open(fn, "r") as f:
        data = json.load(f)
    return data


def save_json(fn, data, indent=None):
    """
    Save data to a json file, converting numpy scalars and arrays.
    """
    with open(fn, "w") as f:
        json.dump(data, f, indent=indent, default=_to_builtin)
