"""
Camera path interpolation.

Catmull-Rom splines for position, SLERP for rotation, linear FOV, plus
offline helpers (RDP simplification, resampling, smoothing) for recorded
keyframe paths. Everything here is a pure function of its arguments.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .quaternion import IDENTITY_QUAT, Quat, Vec3, normalize_quat, slerp


DEFAULT_FOV = 50.0
DEFAULT_TENSION = 0.5
FALLBACK_POSITION: Vec3 = (0.0, 0.0, 10.0)


def _vec3(values: Sequence[float], name: str) -> Vec3:
    if len(values) != 3:
        raise ValueError(f"{name} must have 3 components, got {len(values)}")
    return (float(values[0]), float(values[1]), float(values[2]))


def _quat(values: Sequence[float], name: str) -> Quat:
    if len(values) != 4:
        raise ValueError(f"{name} (quaternion) must have 4 components, got {len(values)}")
    return (float(values[0]), float(values[1]), float(values[2]), float(values[3]))


@dataclass(frozen=True)
class CameraKeyframe:
    """Camera pose at an integer frame. rotation is an (x, y, z, w) quaternion."""
    frame: int
    position: Vec3
    rotation: Quat = IDENTITY_QUAT
    fov: Optional[float] = None

    def __post_init__(self):
        object.__setattr__(self, "position", _vec3(self.position, "position"))
        object.__setattr__(self, "rotation", _quat(self.rotation, "rotation"))
        if self.fov is not None:
            object.__setattr__(self, "fov", float(self.fov))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CameraKeyframe":
        return cls(
            frame=data["frame"],
            position=data["position"],
            rotation=data.get("rotation", IDENTITY_QUAT),
            fov=data.get("fov"),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "frame": self.frame,
            "position": list(self.position),
            "rotation": list(self.rotation),
        }
        if self.fov is not None:
            data["fov"] = self.fov
        return data


@dataclass(frozen=True)
class CameraState:
    position: Vec3
    rotation: Quat
    fov: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "position": list(self.position),
            "rotation": list(self.rotation),
            "fov": self.fov,
        }


# =============================================================================
# CATMULL-ROM
# =============================================================================

def catmull_rom_1d(p0: float, p1: float, p2: float, p3: float, t: float,
                   tension: float = DEFAULT_TENSION) -> float:
    """Tensioned Catmull-Rom between p1 and p2."""
    t2 = t * t
    t3 = t2 * t
    s = (1 - tension) / 2

    b0 = -s * t3 + 2 * s * t2 - s * t
    b1 = (2 - s) * t3 + (s - 3) * t2 + 1
    b2 = (s - 2) * t3 + (3 - 2 * s) * t2 + s * t
    b3 = s * t3 - s * t2

    return b0 * p0 + b1 * p1 + b2 * p2 + b3 * p3


def catmull_rom_vec3(p0: Sequence[float], p1: Sequence[float], p2: Sequence[float],
                     p3: Sequence[float], t: float, tension: float = DEFAULT_TENSION) -> Vec3:
    return (
        catmull_rom_1d(p0[0], p1[0], p2[0], p3[0], t, tension),
        catmull_rom_1d(p0[1], p1[1], p2[1], p3[1], t, tension),
        catmull_rom_1d(p0[2], p1[2], p2[2], p3[2], t, tension),
    )


# =============================================================================
# INTERPOLATION
# =============================================================================

def _segment_index(keyframes: Sequence[CameraKeyframe], frame: float) -> int:
    """Index of the keyframe starting the segment that holds frame."""
    last_segment = len(keyframes) - 2
    for i in range(last_segment + 1):
        if keyframes[i].frame <= frame < keyframes[i + 1].frame:
            return i
    if frame < keyframes[0].frame:
        return 0
    return last_segment


def interpolate_camera_path(
    keyframes: Sequence[CameraKeyframe],
    frame: float,
    default_fov: float = DEFAULT_FOV,
    tension: float = DEFAULT_TENSION,
) -> CameraState:
    """
    Camera state at frame from keyframes sorted by frame.

    No keyframes gives a fixed fallback camera, a single keyframe is
    returned as-is. Frames outside the keyframe range clamp to the ends.
    """
    if len(keyframes) == 0:
        return CameraState(FALLBACK_POSITION, IDENTITY_QUAT, default_fov)

    if len(keyframes) == 1:
        only = keyframes[0]
        return CameraState(
            only.position,
            normalize_quat(only.rotation),
            only.fov if only.fov is not None else default_fov,
        )

    i1 = _segment_index(keyframes, frame)
    i0 = max(0, i1 - 1)
    i2 = min(len(keyframes) - 1, i1 + 1)
    i3 = min(len(keyframes) - 1, i1 + 2)

    k0, k1, k2, k3 = keyframes[i0], keyframes[i1], keyframes[i2], keyframes[i3]

    t = 0.0
    if k2.frame != k1.frame:
        t = (frame - k1.frame) / (k2.frame - k1.frame)
    t = max(0.0, min(1.0, t))

    position = catmull_rom_vec3(k0.position, k1.position, k2.position, k3.position, t, tension)
    rotation = slerp(k1.rotation, k2.rotation, t)

    fov1 = k1.fov if k1.fov is not None else default_fov
    fov2 = k2.fov if k2.fov is not None else default_fov
    fov = fov1 + (fov2 - fov1) * t

    return CameraState(position, rotation, fov)


# =============================================================================
# SIMPLIFICATION (Ramer-Douglas-Peucker)
# =============================================================================

def perpendicular_distance(point: Sequence[float], line_start: Sequence[float],
                           line_end: Sequence[float]) -> float:
    """Distance from point to the segment line_start..line_end."""
    dx = line_end[0] - line_start[0]
    dy = line_end[1] - line_start[1]
    dz = line_end[2] - line_start[2]
    length_sq = dx * dx + dy * dy + dz * dz

    if length_sq == 0:
        return math.sqrt(
            (point[0] - line_start[0]) ** 2
            + (point[1] - line_start[1]) ** 2
            + (point[2] - line_start[2]) ** 2
        )

    t = (
        (point[0] - line_start[0]) * dx
        + (point[1] - line_start[1]) * dy
        + (point[2] - line_start[2]) * dz
    ) / length_sq
    t = max(0.0, min(1.0, t))

    return math.sqrt(
        (point[0] - (line_start[0] + t * dx)) ** 2
        + (point[1] - (line_start[1] + t * dy)) ** 2
        + (point[2] - (line_start[2] + t * dz)) ** 2
    )


def simplify_path(keyframes: Sequence[CameraKeyframe], tolerance: float = 0.1) -> List[CameraKeyframe]:
    """Drop keyframes within tolerance of the chord; endpoints are always kept."""
    if len(keyframes) <= 2:
        return list(keyframes)
    tolerance = max(0.0, tolerance)

    first = keyframes[0]
    last = keyframes[-1]

    max_distance = 0.0
    max_index = 0
    for i in range(1, len(keyframes) - 1):
        distance = perpendicular_distance(keyframes[i].position, first.position, last.position)
        if distance > max_distance:
            max_distance = distance
            max_index = i

    if max_distance > tolerance:
        left = simplify_path(keyframes[:max_index + 1], tolerance)
        right = simplify_path(keyframes[max_index:], tolerance)
        return left[:-1] + right

    return [first, last]


# =============================================================================
# RESAMPLING / SMOOTHING
# =============================================================================

def resample_keyframes(
    keyframes: Sequence[CameraKeyframe],
    interval: int,
    default_fov: float = DEFAULT_FOV,
    tension: float = DEFAULT_TENSION,
) -> List[CameraKeyframe]:
    """Re-evaluate the path every interval frames from the first to the last keyframe."""
    if len(keyframes) < 2 or interval <= 0:
        return list(keyframes)

    start_frame = keyframes[0].frame
    end_frame = keyframes[-1].frame

    result = []
    frame = start_frame
    while frame <= end_frame:
        state = interpolate_camera_path(keyframes, frame, default_fov, tension)
        result.append(CameraKeyframe(frame, state.position, state.rotation, state.fov))
        frame += interval
    return result


def smooth_keyframes(keyframes: Sequence[CameraKeyframe], window_size: int = 3) -> List[CameraKeyframe]:
    """
    Moving average of position over a symmetric window, shrinking at the ends.

    Rotation and FOV pass through; averaging quaternion components is not a
    meaningful rotation average.
    """
    if window_size <= 1 or len(keyframes) < window_size:
        return list(keyframes)

    half_window = window_size // 2
    result = []

    for i, keyframe in enumerate(keyframes):
        start = max(0, i - half_window)
        end = min(len(keyframes) - 1, i + half_window)
        window = keyframes[start:end + 1]
        count = len(window)

        position = (
            sum(k.position[0] for k in window) / count,
            sum(k.position[1] for k in window) / count,
            sum(k.position[2] for k in window) / count,
        )
        result.append(CameraKeyframe(keyframe.frame, position, keyframe.rotation, keyframe.fov))

    return result


def keyframes_from_dicts(items: Sequence[Mapping[str, Any]]) -> List[CameraKeyframe]:
    return [item if isinstance(item, CameraKeyframe) else CameraKeyframe.from_dict(item) for item in items]


__all__ = [
    "DEFAULT_FOV",
    "DEFAULT_TENSION",
    "FALLBACK_POSITION",
    "CameraKeyframe",
    "CameraState",
    "catmull_rom_1d",
    "catmull_rom_vec3",
    "interpolate_camera_path",
    "perpendicular_distance",
    "simplify_path",
    "resample_keyframes",
    "smooth_keyframes",
    "keyframes_from_dicts",
]
