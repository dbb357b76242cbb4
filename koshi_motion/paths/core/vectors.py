"""3D point helpers shared by all motion paths."""

from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

import numpy as np


@dataclass(frozen=True)
class Point3D:
    """Plain 3D vector used for positions and tangents."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> "Point3D":
        if len(values) != 3:
            raise ValueError(f"Point3D needs 3 components, got {len(values)}")
        return cls(float(values[0]), float(values[1]), float(values[2]))

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Point3D":
        return cls(float(array[0]), float(array[1]), float(array[2]))

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z}


ORIGIN = Point3D(0.0, 0.0, 0.0)
DEFAULT_TANGENT = Point3D(0.0, 0.0, 1.0)


def lerp_point(a: Point3D, b: Point3D, t: float) -> Point3D:
    """Linear interpolation between two points."""
    return Point3D(
        a.x + (b.x - a.x) * t,
        a.y + (b.y - a.y) * t,
        a.z + (b.z - a.z) * t,
    )


def distance_point(a: Point3D, b: Point3D) -> float:
    dx = b.x - a.x
    dy = b.y - a.y
    dz = b.z - a.z
    return float(np.sqrt(dx * dx + dy * dy + dz * dz))


def normalize_point(p: Point3D) -> Point3D:
    """Unit vector along p, or DEFAULT_TANGENT for a zero-length vector."""
    length = float(np.sqrt(p.x * p.x + p.y * p.y + p.z * p.z))
    if length == 0.0 or not np.isfinite(length):
        return DEFAULT_TANGENT
    return Point3D(p.x / length, p.y / length, p.z / length)


def add_points(a: Point3D, b: Point3D) -> Point3D:
    return Point3D(a.x + b.x, a.y + b.y, a.z + b.z)


def subtract_points(a: Point3D, b: Point3D) -> Point3D:
    return Point3D(a.x - b.x, a.y - b.y, a.z - b.z)


def scale_point(p: Point3D, s: float) -> Point3D:
    return Point3D(p.x * s, p.y * s, p.z * s)


def points_to_array(points: Sequence[Point3D]) -> np.ndarray:
    """Stack points into an (N, 3) float64 array."""
    if len(points) == 0:
        return np.zeros((0, 3), dtype=np.float64)
    return np.array([p.to_tuple() for p in points], dtype=np.float64)


def polyline_length(samples: np.ndarray) -> float:
    """Summed chord length of an (N, 3) polyline."""
    if len(samples) < 2:
        return 0.0
    return float(np.linalg.norm(np.diff(samples, axis=0), axis=1).sum())


def clamp_progress(progress: float) -> float:
    return float(min(1.0, max(0.0, progress)))


__all__ = [
    "Point3D",
    "ORIGIN",
    "DEFAULT_TANGENT",
    "lerp_point",
    "distance_point",
    "normalize_point",
    "add_points",
    "subtract_points",
    "scale_point",
    "points_to_array",
    "polyline_length",
    "clamp_progress",
]
