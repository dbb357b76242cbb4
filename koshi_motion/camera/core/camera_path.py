"""Scene-level camera descriptors and their per-frame evaluation."""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .interpolator import (
    DEFAULT_FOV,
    DEFAULT_TENSION,
    FALLBACK_POSITION,
    CameraKeyframe,
    CameraState,
    interpolate_camera_path,
    keyframes_from_dicts,
)
from .quaternion import IDENTITY_QUAT, Vec3, look_at_quat

logger = logging.getLogger(__name__)

CAMERA_PATH_TYPES = ("static", "path", "keyframe")


@dataclass
class CameraPath:
    """Camera animation for a scene: a fixed pose or a keyframed path."""
    type: str = "static"
    fov: float = DEFAULT_FOV
    position: Optional[Vec3] = None
    look_at: Optional[Vec3] = None
    keyframes: List[CameraKeyframe] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CameraPath":
        position = data.get("position")
        look_at = data.get("lookAt")
        return cls(
            type=str(data.get("type", "static")),
            fov=float(data.get("fov", DEFAULT_FOV)),
            position=tuple(float(v) for v in position) if position is not None else None,
            look_at=tuple(float(v) for v in look_at) if look_at is not None else None,
            keyframes=keyframes_from_dicts(data.get("keyframes") or []),
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.type, "fov": self.fov}
        if self.position is not None:
            data["position"] = list(self.position)
        if self.look_at is not None:
            data["lookAt"] = list(self.look_at)
        if self.keyframes:
            data["keyframes"] = [k.to_dict() for k in self.keyframes]
        return data


def resolve_camera_state(
    camera_path: CameraPath,
    frame: float,
    tension: float = DEFAULT_TENSION,
) -> Optional[CameraState]:
    """
    Camera state for a scene camera at frame.

    Returns None when there is nothing to apply (no keyframes or an unknown
    camera type); the host keeps its current camera in that case.
    """
    if camera_path.type == "static":
        position = camera_path.position if camera_path.position is not None else FALLBACK_POSITION
        return CameraState(tuple(position), IDENTITY_QUAT, camera_path.fov)

    if camera_path.type in ("path", "keyframe"):
        if not camera_path.keyframes:
            return None
        return interpolate_camera_path(camera_path.keyframes, frame, camera_path.fov, tension)

    logger.warning("Unknown camera path type %r", camera_path.type)
    return None


def orbit_camera_state(
    frame: float,
    fps: float,
    center: Sequence[float] = (0.0, 0.0, 0.0),
    distance: float = 10.0,
    speed: float = 0.1,
    elevation: float = 0.3,
    offset: float = 0.0,
    fov: float = DEFAULT_FOV,
) -> CameraState:
    """Preview camera circling center at speed revolutions per second."""
    time = frame / fps if fps > 0 else 0.0
    angle = time * speed * math.pi * 2 + offset

    position = (
        center[0] + math.cos(angle) * distance,
        center[1] + math.sin(elevation * math.pi) * distance,
        center[2] + math.sin(angle) * distance,
    )
    return CameraState(position, look_at_quat(position, center), fov)


__all__ = [
    "CAMERA_PATH_TYPES",
    "CameraPath",
    "resolve_camera_state",
    "orbit_camera_state",
]
