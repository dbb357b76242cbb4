"""Circular / elliptical orbit, optionally tilted and with a height wave."""

import math
from typing import Mapping, Optional, Tuple

from .base import ParameterMeta, PathConfig, PathGenerator
from .vectors import Point3D, clamp_progress, normalize_point


CIRCULAR_DEFAULTS = {
    "radiusX": 5.0,
    "radiusY": 5.0,
    "tiltX": 0.0,
    "tiltY": 0.0,
    "centerX": 0.0,
    "centerY": 0.0,
    "centerZ": 0.0,
    "heightAmplitude": 0.0,
    "heightFrequency": 1.0,
    "clockwise": 1.0,
}

CIRCULAR_CONFIG = PathConfig(
    type="circular",
    name="Circular Orbit",
    description="Circular or elliptical orbital motion",
    default_params=CIRCULAR_DEFAULTS,
    parameter_meta=(
        ParameterMeta("radiusX", "Radius X", 0.1, 50.0, 0.5, 5.0,
                      "Radius in X direction (ellipse major/minor)"),
        ParameterMeta("radiusY", "Radius Y", 0.1, 50.0, 0.5, 5.0,
                      "Radius in Y direction (ellipse major/minor)"),
        ParameterMeta("tiltX", "Tilt X", -math.pi / 2, math.pi / 2, 0.05, 0.0,
                      "Tilt the orbit plane around X axis"),
        ParameterMeta("tiltY", "Tilt Y", -math.pi / 2, math.pi / 2, 0.05, 0.0,
                      "Tilt the orbit plane around Y axis"),
        ParameterMeta("centerX", "Center X", -50.0, 50.0, 0.5, 0.0, "Orbit center X position"),
        ParameterMeta("centerY", "Center Y", -50.0, 50.0, 0.5, 0.0, "Orbit center Y position"),
        ParameterMeta("centerZ", "Center Z", -50.0, 50.0, 0.5, 0.0, "Orbit center Z position"),
        ParameterMeta("heightAmplitude", "Height Wave", 0.0, 20.0, 0.5, 0.0,
                      "Vertical oscillation amplitude (0 for flat)"),
        ParameterMeta("heightFrequency", "Height Freq", 0.5, 10.0, 0.5, 1.0,
                      "Vertical oscillation frequency"),
        ParameterMeta("clockwise", "Direction", -1.0, 1.0, 2.0, 1.0,
                      "1 = counter-clockwise, -1 = clockwise"),
    ),
)


def _tilt(x: float, y: float, z: float, tilt_x: float, tilt_y: float) -> Tuple[float, float, float]:
    """Rotate around X by tilt_x, then around Y by tilt_y."""
    if tilt_x != 0:
        cos_x = math.cos(tilt_x)
        sin_x = math.sin(tilt_x)
        y, z = y * cos_x - z * sin_x, y * sin_x + z * cos_x

    if tilt_y != 0:
        cos_y = math.cos(tilt_y)
        sin_y = math.sin(tilt_y)
        x, z = x * cos_y + z * sin_y, -x * sin_y + z * cos_y

    return x, y, z


class CircularPath(PathGenerator):
    """Orbit on the XZ plane; progress 1 is one full revolution."""

    CONFIG = CIRCULAR_CONFIG

    def _direction(self) -> float:
        return self.params["clockwise"] or 1.0

    def get_position_at(self, progress: float) -> Point3D:
        p = self.params
        angle = clamp_progress(progress) * math.pi * 2 * self._direction()

        x = math.cos(angle) * p["radiusX"]
        y = 0.0
        z = math.sin(angle) * p["radiusY"]

        if p["heightAmplitude"] > 0:
            y = math.sin(angle * p["heightFrequency"]) * p["heightAmplitude"]

        x, y, z = _tilt(x, y, z, p["tiltX"], p["tiltY"])

        return Point3D(x + p["centerX"], y + p["centerY"], z + p["centerZ"])

    def get_tangent_at(self, progress: float) -> Point3D:
        p = self.params
        direction = self._direction()
        angle = clamp_progress(progress) * math.pi * 2 * direction

        # d/dangle of the base ellipse, signed by travel direction
        tx = -math.sin(angle) * p["radiusX"] * direction
        ty = 0.0
        tz = math.cos(angle) * p["radiusY"] * direction

        if p["heightAmplitude"] > 0:
            frequency = p["heightFrequency"]
            ty = math.cos(angle * frequency) * p["heightAmplitude"] * frequency * direction

        tx, ty, tz = _tilt(tx, ty, tz, p["tiltX"], p["tiltY"])
        return normalize_point(Point3D(tx, ty, tz))

    def get_length(self) -> float:
        """Ellipse circumference (Ramanujan's second approximation)."""
        a = max(self.params["radiusX"], self.params["radiusY"])
        b = min(self.params["radiusX"], self.params["radiusY"])
        if a + b == 0:
            return 0.0
        h = ((a - b) * (a - b)) / ((a + b) * (a + b))
        return math.pi * (a + b) * (1 + (3 * h) / (10 + math.sqrt(4 - 3 * h)))


def create_circular_path(params: Optional[Mapping[str, float]] = None) -> CircularPath:
    return CircularPath(params)


__all__ = ["CircularPath", "CIRCULAR_CONFIG", "CIRCULAR_DEFAULTS", "create_circular_path"]
