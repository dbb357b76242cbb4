"""
Lorenz attractor path.

    dx/dt = sigma * (y - x)
    dy/dt = x * (rho - z) - y
    dz/dt = x * y - beta * z

Integrated once with forward Euler whenever parameters change. Simulation
y and z are swapped on output so the butterfly stands upright.
"""

import math
from typing import List, Mapping, Optional

import numpy as np

from .base import ParameterMeta, PathConfig, PathGenerator
from .vectors import DEFAULT_TANGENT, ORIGIN, Point3D, clamp_progress, normalize_point


LORENZ_DEFAULTS = {
    "sigma": 10.0,
    "rho": 28.0,
    "beta": 8.0 / 3.0,
    "scale": 6.0,
    "dt": 0.005,
    "steps": 8000.0,
    "centerAtOrigin": 1.0,
}

LORENZ_CONFIG = PathConfig(
    type="lorenz",
    name="Lorenz Attractor",
    description="Chaotic butterfly-shaped attractor from the Lorenz system",
    default_params=LORENZ_DEFAULTS,
    parameter_meta=(
        ParameterMeta("sigma", "Sigma (σ)", 0.0, 50.0, 0.5, 10.0, "Rate of rotation in x-y plane"),
        ParameterMeta("rho", "Rho (ρ)", 0.0, 100.0, 1.0, 28.0, "Controls behavior - chaos above 24.74"),
        ParameterMeta("beta", "Beta (β)", 0.0, 10.0, 0.1, 8.0 / 3.0, "Geometric factor of the system"),
        ParameterMeta("scale", "Scale", 0.1, 20.0, 0.1, 6.0, "Overall size of the attractor"),
        ParameterMeta("dt", "Time Step", 0.001, 0.02, 0.001, 0.005,
                      "Integration time step (smaller = more accurate)"),
        ParameterMeta("steps", "Steps", 1000.0, 20000.0, 500.0, 8000.0, "Number of integration steps"),
    ),
)

INITIAL_STATE = (0.1, 0.0, 0.0)


def integrate_lorenz(
    sigma: float,
    rho: float,
    beta: float,
    dt: float,
    steps: int,
    initial=INITIAL_STATE,
) -> np.ndarray:
    """Forward-Euler trajectory, one (x, y, z) row per step after the first update."""
    trajectory = np.empty((max(0, steps), 3), dtype=np.float64)
    x, y, z = initial

    for i in range(steps):
        dx = sigma * (y - x)
        dy = x * (rho - z) - y
        dz = x * y - beta * z

        x += dx * dt
        y += dy * dt
        z += dz * dt
        trajectory[i] = (x, y, z)

    return trajectory


class LorenzPath(PathGenerator):
    """Baked Lorenz trajectory traversed by sample index."""

    CONFIG = LORENZ_CONFIG

    def _rebuild(self) -> None:
        p = self.params
        raw = integrate_lorenz(p["sigma"], p["rho"], p["beta"], p["dt"], int(p["steps"]))

        # (x, y, z) -> (x, z, y)
        points = raw[:, [0, 2, 1]] * p["scale"]

        if p["centerAtOrigin"] and len(points):
            center = (points.min(axis=0) + points.max(axis=0)) / 2
            points = points - center

        self.points = points
        self.points.flags.writeable = False

        segment_lengths = np.linalg.norm(np.diff(points, axis=0), axis=1)
        self.arc_lengths = np.concatenate(([0.0], np.cumsum(segment_lengths)))
        self.total_length = float(self.arc_lengths[-1])

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

    def get_points(self) -> List[Point3D]:
        """Baked integration samples."""
        return [Point3D.from_array(row) for row in self.points]


def create_lorenz_path(params: Optional[Mapping[str, float]] = None) -> LorenzPath:
    return LorenzPath(params)


__all__ = [
    "LorenzPath",
    "LORENZ_CONFIG",
    "LORENZ_DEFAULTS",
    "integrate_lorenz",
    "create_lorenz_path",
]
