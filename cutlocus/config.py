"""Configuration dataclass for the cut pipeline."""

from dataclasses import asdict, dataclass, fields
from typing import Optional
import json

from .policies import POLICIES, get_policy


@dataclass
class CutConfig:
    """Complete configuration of `compute_cut`.

    Attributes
    ----------
    policy : str
        Frontier ordering: 'hop', 'geodesic' or 'curvature'.
    seed : int
        Triangle the search starts from.
    trim : bool
        Whether to remove dangling spurs from the raw cut.
    reduce : bool
        Whether to run chord removal on the trimmed cut.
    symmetric_geodesic : bool
        For the 'geodesic' policy, accumulate the centroid distance on both
        branches. If False, the 'next' branch adds a constant 1.
    max_chord_passes : int or None
        Pass budget for chord removal (None = number of cut edges + 1).
    verbose : bool
        Whether to log a summary of each stage.
    """

    policy: str = "hop"
    seed: int = 0
    trim: bool = True
    reduce: bool = True
    symmetric_geodesic: bool = True
    max_chord_passes: Optional[int] = None
    verbose: bool = False

    def __post_init__(self):
        if self.policy not in POLICIES:
            raise ValueError(
                f"Unknown policy {self.policy!r}; expected one of {sorted(POLICIES)}"
            )

    def make_policy(self):
        """Instantiate the configured policy."""
        if self.policy == "geodesic":
            return get_policy(self.policy, symmetric=self.symmetric_geodesic)
        return get_policy(self.policy)

    def to_dict(self) -> dict:
        """Convert config to dictionary for serialization."""
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        """Serialize config to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> "CutConfig":
        """Create config from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    @classmethod
    def from_json(cls, json_str: str) -> "CutConfig":
        """Create config from JSON string."""
        return cls.from_dict(json.loads(json_str))

    @classmethod
    def from_json_file(cls, path: str) -> "CutConfig":
        """Load config from JSON file."""
        with open(path, "r") as f:
            return cls.from_json(f.read())
