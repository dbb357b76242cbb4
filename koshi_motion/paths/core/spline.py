"""Catmull-Rom spline through control points."""

import math
from typing import List, Mapping, Optional, Sequence, Tuple, Union

from .base import ParameterMeta, PathConfig, PathGenerator
from .vectors import DEFAULT_TANGENT, ORIGIN, Point3D, clamp_progress, normalize_point


SPLINE_DEFAULTS = {
    "tension": 0.5,
    "closed": 0.0,
}

SPLINE_CONFIG = PathConfig(
    type="spline",
    name="Catmull-Rom Spline",
    description="Smooth curve through control points",
    default_params=SPLINE_DEFAULTS,
    parameter_meta=(
        ParameterMeta("tension", "Tension", 0.0, 1.0, 0.05, 0.5,
                      "Curve tightness (0=loose, 1=tight)"),
        ParameterMeta("closed", "Closed Loop", 0.0, 1.0, 1.0, 0.0,
                      "1 = loop back to start, 0 = open curve"),
    ),
)

DEFAULT_CONTROL_POINTS = (
    Point3D(-5.0, 0.0, 0.0),
    Point3D(0.0, 5.0, 0.0),
    Point3D(5.0, 0.0, 0.0),
    Point3D(0.0, -5.0, 0.0),
)

PointLike = Union[Point3D, Sequence[float]]


def catmull_rom_basis(t: float, tension: float = 0.5) -> Tuple[float, float, float, float]:
    """Weights of p0..p3 for the tensioned Catmull-Rom segment between p1 and p2."""
    t2 = t * t
    t3 = t2 * t
    s = (1 - tension) / 2

    b0 = -s * t3 + 2 * s * t2 - s * t
    b1 = (2 - s) * t3 + (s - 3) * t2 + 1
    b2 = (s - 2) * t3 + (3 - 2 * s) * t2 + s * t
    b3 = s * t3 - s * t2
    return b0, b1, b2, b3


def catmull_rom_basis_derivative(t: float, tension: float = 0.5) -> Tuple[float, float, float, float]:
    t2 = t * t
    s = (1 - tension) / 2

    db0 = -3 * s * t2 + 4 * s * t - s
    db1 = 3 * (2 - s) * t2 + 2 * (s - 3) * t
    db2 = 3 * (s - 2) * t2 + 2 * (3 - 2 * s) * t + s
    db3 = 3 * s * t2 - 2 * s * t
    return db0, db1, db2, db3


def _weighted(points: Sequence[Point3D], weights: Sequence[float]) -> Point3D:
    x = y = z = 0.0
    for point, weight in zip(points, weights):
        x += weight * point.x
        y += weight * point.y
        z += weight * point.z
    return Point3D(x, y, z)


def _as_point(value: PointLike) -> Point3D:
    if isinstance(value, Point3D):
        return value
    if isinstance(value, Mapping):
        return Point3D(float(value["x"]), float(value["y"]), float(value["z"]))
    return Point3D.from_sequence(value)


class SplinePath(PathGenerator):
    """
    Tensioned Catmull-Rom spline.

    Progress is split evenly across segments: n - 1 segments for an open
    curve, n for a closed one. Open curves reuse the end points as their own
    outer neighbours; closed curves wrap indices.
    """

    CONFIG = SPLINE_CONFIG

    def __init__(
        self,
        control_points: Optional[Sequence[PointLike]] = None,
        params: Optional[Mapping[str, float]] = None,
    ):
        if control_points is None:
            control_points = DEFAULT_CONTROL_POINTS
        self.control_points: List[Point3D] = [_as_point(p) for p in control_points]
        super().__init__(params)

    def set_control_points(self, points: Sequence[PointLike]) -> None:
        self.control_points = [_as_point(p) for p in points]
        self._invalidate()

    def get_control_points(self) -> List[Point3D]:
        return list(self.control_points)

    def add_control_point(self, point: PointLike) -> None:
        self.control_points.append(_as_point(point))
        self._invalidate()

    @property
    def closed(self) -> bool:
        return self.params["closed"] == 1

    def _segment(self, progress: float) -> Tuple[Tuple[Point3D, ...], float]:
        """Control points and local t for the segment containing progress."""
        n = len(self.control_points)
        num_segments = n if self.closed else n - 1

        scaled = clamp_progress(progress) * num_segments
        index = min(int(math.floor(scaled)), num_segments - 1)
        t = scaled - index

        if self.closed:
            indices = ((index - 1) % n, index % n, (index + 1) % n, (index + 2) % n)
        else:
            indices = (max(0, index - 1), index, min(n - 1, index + 1), min(n - 1, index + 2))

        return tuple(self.control_points[i] for i in indices), t

    def get_position_at(self, progress: float) -> Point3D:
        n = len(self.control_points)
        if n < 2:
            return self.control_points[0] if n == 1 else ORIGIN

        points, t = self._segment(progress)
        return _weighted(points, catmull_rom_basis(t, self.params["tension"]))

    def get_tangent_at(self, progress: float) -> Point3D:
        if len(self.control_points) < 2:
            return DEFAULT_TANGENT

        points, t = self._segment(progress)
        derivative = _weighted(points, catmull_rom_basis_derivative(t, self.params["tension"]))
        return normalize_point(derivative)

    def get_length(self) -> float:
        if len(self.control_points) < 2:
            return 0.0
        return super().get_length()


def create_spline_path(
    control_points: Optional[Sequence[PointLike]] = None,
    params: Optional[Mapping[str, float]] = None,
) -> SplinePath:
    return SplinePath(control_points, params)


__all__ = [
    "SplinePath",
    "SPLINE_CONFIG",
    "SPLINE_DEFAULTS",
    "DEFAULT_CONTROL_POINTS",
    "catmull_rom_basis",
    "catmull_rom_basis_derivative",
    "create_spline_path",
]
