"""
3D Lissajous curve.

    x(t) = Ax * sin(fx * t + phx)
    y(t) = Ay * sin(fy * t + phy)
    z(t) = Az * sin(fz * t + phz)

sampled over one 2*pi cycle. Queries interpolate between baked samples by
index fraction, so traversal speed follows the sampling, not arc length.
"""

import math
from typing import Mapping, Optional

import numpy as np

from .base import ParameterMeta, PathConfig, PathGenerator
from .vectors import DEFAULT_TANGENT, ORIGIN, Point3D, clamp_progress, normalize_point


LISSAJOUS_DEFAULTS = {
    "amplitudeX": 5.0,
    "amplitudeY": 5.0,
    "amplitudeZ": 5.0,
    "freqX": 3.0,
    "freqY": 2.0,
    "freqZ": 1.0,
    "phaseX": math.pi / 2,
    "phaseY": 0.0,
    "phaseZ": 0.0,
    "resolution": 1000.0,
}

LISSAJOUS_CONFIG = PathConfig(
    type="lissajous",
    name="3D Lissajous Curve",
    description="Parametric curves that create intricate 3D patterns",
    default_params=LISSAJOUS_DEFAULTS,
    parameter_meta=(
        ParameterMeta("amplitudeX", "Amplitude X", 0.1, 20.0, 0.5, 5.0, "Size in X direction"),
        ParameterMeta("amplitudeY", "Amplitude Y", 0.1, 20.0, 0.5, 5.0, "Size in Y direction"),
        ParameterMeta("amplitudeZ", "Amplitude Z", 0.1, 20.0, 0.5, 5.0, "Size in Z direction"),
        ParameterMeta("freqX", "Frequency X", 1.0, 10.0, 1.0, 3.0, "Oscillation frequency in X"),
        ParameterMeta("freqY", "Frequency Y", 1.0, 10.0, 1.0, 2.0, "Oscillation frequency in Y"),
        ParameterMeta("freqZ", "Frequency Z", 1.0, 10.0, 1.0, 1.0, "Oscillation frequency in Z"),
        ParameterMeta("phaseX", "Phase X", 0.0, math.pi * 2, 0.1, math.pi / 2, "Phase offset for X"),
        ParameterMeta("phaseY", "Phase Y", 0.0, math.pi * 2, 0.1, 0.0, "Phase offset for Y"),
        ParameterMeta("phaseZ", "Phase Z", 0.0, math.pi * 2, 0.1, 0.0, "Phase offset for Z"),
    ),
)


class Lissajous3DPath(PathGenerator):
    """Baked 3D Lissajous figure."""

    CONFIG = LISSAJOUS_CONFIG

    def _rebuild(self) -> None:
        p = self.params
        resolution = max(1, int(p["resolution"]))
        theta = np.linspace(0.0, math.pi * 2, resolution + 1)

        self.points = np.stack([
            p["amplitudeX"] * np.sin(p["freqX"] * theta + p["phaseX"]),
            p["amplitudeY"] * np.sin(p["freqY"] * theta + p["phaseY"]),
            p["amplitudeZ"] * np.sin(p["freqZ"] * theta + p["phaseZ"]),
        ], axis=-1)
        self.points.flags.writeable = False
        self.total_length = float(np.linalg.norm(np.diff(self.points, axis=0), axis=1).sum())

    def get_position_at(self, progress: float) -> Point3D:
        n = len(self.points)
        if n == 0:
            return ORIGIN

        index = clamp_progress(progress) * (n - 1)
        i0 = int(math.floor(index))
        i1 = min(i0 + 1, n - 1)
        t = index - i0

        p0 = self.points[i0]
        p1 = self.points[i1]
        return Point3D.from_array(p0 + (p1 - p0) * t)

    def get_tangent_at(self, progress: float) -> Point3D:
        n = len(self.points)
        if n < 2:
            return DEFAULT_TANGENT

        index = clamp_progress(progress) * (n - 1)
        i0 = max(0, int(math.floor(index)) - 1)
        i1 = min(i0 + 2, n - 1)
        return normalize_point(Point3D.from_array(self.points[i1] - self.points[i0]))

    def get_length(self) -> float:
        return self.total_length


def create_lissajous_path(params: Optional[Mapping[str, float]] = None) -> Lissajous3DPath:
    return Lissajous3DPath(params)


__all__ = ["Lissajous3DPath", "LISSAJOUS_CONFIG", "LISSAJOUS_DEFAULTS", "create_lissajous_path"]
