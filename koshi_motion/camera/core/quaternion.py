"""Quaternion helpers. Quaternions are (x, y, z, w) tuples."""

import math
from typing import Sequence, Tuple

import numpy as np
from scipy.spatial.transform import Rotation

Quat = Tuple[float, float, float, float]
Vec3 = Tuple[float, float, float]

IDENTITY_QUAT: Quat = (0.0, 0.0, 0.0, 1.0)

# Above this |dot| the slerp denominator sin(theta) is too small to trust
SLERP_LINEAR_THRESHOLD = 0.9995

EULER_ORDER = "XYZ"


def _as_quat(values) -> Quat:
    return (float(values[0]), float(values[1]), float(values[2]), float(values[3]))


def normalize_quat(q: Sequence[float]) -> Quat:
    """Unit quaternion, or identity for a zero-length input."""
    length = math.sqrt(q[0] * q[0] + q[1] * q[1] + q[2] * q[2] + q[3] * q[3])
    if length == 0.0 or not math.isfinite(length):
        return IDENTITY_QUAT
    return (q[0] / length, q[1] / length, q[2] / length, q[3] / length)


def quat_dot(q1: Sequence[float], q2: Sequence[float]) -> float:
    return q1[0] * q2[0] + q1[1] * q2[1] + q1[2] * q2[2] + q1[3] * q2[3]


def slerp(q1: Sequence[float], q2: Sequence[float], t: float) -> Quat:
    """
    Spherical linear interpolation along the shorter arc.

    Nearly identical inputs fall back to lerp + normalize.
    """
    a = np.asarray(q1, dtype=np.float64)
    b = np.asarray(q2, dtype=np.float64)

    dot = float(np.dot(a, b))
    if dot < 0:
        b = -b
        dot = -dot

    if dot > SLERP_LINEAR_THRESHOLD:
        return normalize_quat(_as_quat(a + t * (b - a)))

    theta_0 = math.acos(min(1.0, dot))
    theta = theta_0 * t
    sin_theta = math.sin(theta)
    sin_theta_0 = math.sin(theta_0)

    s0 = math.cos(theta) - dot * sin_theta / sin_theta_0
    s1 = sin_theta / sin_theta_0

    return normalize_quat(_as_quat(s0 * a + s1 * b))


def euler_to_quat(euler: Sequence[float]) -> Quat:
    """Intrinsic XYZ Euler angles (radians) to a quaternion."""
    return normalize_quat(_as_quat(Rotation.from_euler(EULER_ORDER, list(euler)).as_quat()))


def quat_to_euler(q: Sequence[float]) -> Vec3:
    """Quaternion to intrinsic XYZ Euler angles (radians)."""
    angles = Rotation.from_quat(list(normalize_quat(q))).as_euler(EULER_ORDER)
    return (float(angles[0]), float(angles[1]), float(angles[2]))


def look_at_quat(
    eye: Sequence[float],
    target: Sequence[float],
    up: Sequence[float] = (0.0, 1.0, 0.0),
) -> Quat:
    """Orientation of a camera at eye looking at target (camera forward is -Z)."""
    eye_v = np.asarray(eye, dtype=np.float64)
    z_axis = eye_v - np.asarray(target, dtype=np.float64)
    z_len = np.linalg.norm(z_axis)
    if z_len == 0:
        return IDENTITY_QUAT
    z_axis /= z_len

    up_v = np.asarray(up, dtype=np.float64)
    x_axis = np.cross(up_v, z_axis)
    if np.linalg.norm(x_axis) < 1e-9:
        # up parallel to view direction; nudge it
        x_axis = np.cross(up_v + np.array([0.0, 0.0, 1e-4]), z_axis)
        if np.linalg.norm(x_axis) < 1e-9:
            x_axis = np.cross(np.array([1.0, 0.0, 0.0]), z_axis)
    x_axis /= np.linalg.norm(x_axis)
    y_axis = np.cross(z_axis, x_axis)

    matrix = np.stack([x_axis, y_axis, z_axis], axis=1)
    return normalize_quat(_as_quat(Rotation.from_matrix(matrix).as_quat()))


__all__ = [
    "Quat",
    "Vec3",
    "IDENTITY_QUAT",
    "SLERP_LINEAR_THRESHOLD",
    "normalize_quat",
    "quat_dot",
    "slerp",
    "euler_to_quat",
    "quat_to_euler",
    "look_at_quat",
]
