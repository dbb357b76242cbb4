"""Straight-line motion between two points."""

from typing import Mapping, Optional

from .base import ParameterMeta, PathConfig, PathGenerator
from .vectors import (
    DEFAULT_TANGENT,
    Point3D,
    clamp_progress,
    distance_point,
    lerp_point,
    normalize_point,
    subtract_points,
)


LINEAR_DEFAULTS = {
    "startX": 0.0,
    "startY": 0.0,
    "startZ": 0.0,
    "endX": 10.0,
    "endY": 0.0,
    "endZ": 0.0,
}


def _axis_meta(key: str, label: str, default: float, description: str) -> ParameterMeta:
    return ParameterMeta(key, label, -100.0, 100.0, 0.5, default, description)


LINEAR_CONFIG = PathConfig(
    type="linear",
    name="Linear Path",
    description="Straight line between two points",
    default_params=LINEAR_DEFAULTS,
    parameter_meta=(
        _axis_meta("startX", "Start X", 0.0, "Starting X position"),
        _axis_meta("startY", "Start Y", 0.0, "Starting Y position"),
        _axis_meta("startZ", "Start Z", 0.0, "Starting Z position"),
        _axis_meta("endX", "End X", 10.0, "Ending X position"),
        _axis_meta("endY", "End Y", 0.0, "Ending Y position"),
        _axis_meta("endZ", "End Z", 0.0, "Ending Z position"),
    ),
)


class LinearPath(PathGenerator):
    """Moves in a straight line from start to end."""

    CONFIG = LINEAR_CONFIG

    def _rebuild(self) -> None:
        p = self.params
        self.start = Point3D(p["startX"], p["startY"], p["startZ"])
        self.end = Point3D(p["endX"], p["endY"], p["endZ"])
        self.length = distance_point(self.start, self.end)

        if self.length > 0:
            self.direction = normalize_point(subtract_points(self.end, self.start))
        else:
            self.direction = DEFAULT_TANGENT

    def get_position_at(self, progress: float) -> Point3D:
        return lerp_point(self.start, self.end, clamp_progress(progress))

    def get_tangent_at(self, progress: float) -> Point3D:
        # Constant along a line
        return self.direction

    def get_length(self) -> float:
        return self.length

    def set_points(self, start: Point3D, end: Point3D) -> None:
        """Set both endpoints at once."""
        self.set_params({
            "startX": start.x,
            "startY": start.y,
            "startZ": start.z,
            "endX": end.x,
            "endY": end.y,
            "endZ": end.z,
        })


def create_linear_path(params: Optional[Mapping[str, float]] = None) -> LinearPath:
    return LinearPath(params)


__all__ = ["LinearPath", "LINEAR_CONFIG", "LINEAR_DEFAULTS", "create_linear_path"]
