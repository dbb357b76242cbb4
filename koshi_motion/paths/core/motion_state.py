"""Motion state, motion configuration and frame -> progress mapping."""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from .vectors import DEFAULT_TANGENT, ORIGIN, Point3D


LOOP_MODES = ("none", "loop", "pingpong")
MODIFIER_TYPES = ("rotation", "wobble", "scalePulse", "lookAt")

ModifierValue = Union[float, int, str, bool]


@dataclass(frozen=True)
class MotionState:
    """Transform delta for one frame. rotation is Euler XYZ in radians."""
    position: Point3D = ORIGIN
    rotation: Point3D = ORIGIN
    scale: Point3D = Point3D(1.0, 1.0, 1.0)
    progress: float = 0.0
    tangent: Point3D = DEFAULT_TANGENT

    def to_dict(self) -> Dict[str, Any]:
        return {
            "position": self.position.to_dict(),
            "rotation": self.rotation.to_dict(),
            "scale": self.scale.to_dict(),
            "progress": self.progress,
            "tangent": self.tangent.to_dict(),
        }


def create_default_motion_state(progress: float = 0.0) -> MotionState:
    """Zero position, zero rotation, unit scale."""
    return MotionState(progress=progress)


@dataclass
class ModifierConfig:
    type: str
    enabled: bool = True
    params: Dict[str, ModifierValue] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ModifierConfig":
        return cls(
            type=str(data["type"]),
            enabled=bool(data.get("enabled", True)),
            params=dict(data.get("params") or {}),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "enabled": self.enabled, "params": dict(self.params)}


@dataclass
class MotionControllerConfig:
    """Serializable description of one object's motion."""
    path_type: str
    path_params: Dict[str, float] = field(default_factory=dict)
    speed: float = 1.0
    progress_offset: float = 0.0
    loop: str = "loop"
    modifiers: List[ModifierConfig] = field(default_factory=list)
    duration: float = 150.0
    start_frame: int = 0
    path_options: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MotionControllerConfig":
        modifiers = [
            m if isinstance(m, ModifierConfig) else ModifierConfig.from_dict(m)
            for m in data.get("modifiers") or []
        ]
        return cls(
            path_type=str(data["pathType"]),
            path_params=dict(data.get("pathParams") or {}),
            speed=float(data.get("speed", 1.0)),
            progress_offset=float(data.get("progressOffset", 0.0)),
            loop=str(data.get("loop", "loop")),
            modifiers=modifiers,
            duration=float(data.get("duration", 150.0)),
            start_frame=int(data.get("startFrame", 0)),
            path_options=dict(data.get("pathOptions") or {}),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "pathType": self.path_type,
            "pathParams": dict(self.path_params),
            "speed": self.speed,
            "progressOffset": self.progress_offset,
            "loop": self.loop,
            "modifiers": [m.to_dict() for m in self.modifiers],
            "duration": self.duration,
            "startFrame": self.start_frame,
        }
        if self.path_options:
            data["pathOptions"] = dict(self.path_options)
        return data


def calculate_progress(
    frame: float,
    start_frame: float,
    duration: float,
    speed: float,
    progress_offset: float,
    loop: str,
) -> float:
    """
    Map a frame number to path progress.

    Before start_frame the motion holds at progress_offset. 'none' clamps to
    [0, 1], 'loop' wraps into [0, 1), 'pingpong' plays odd cycles backwards.
    Unknown loop modes return the raw value; paths clamp it themselves.
    """
    local_frame = frame - start_frame
    if local_frame < 0:
        return progress_offset

    if duration <= 0:
        duration = 1.0

    raw_progress = (local_frame / duration) * speed + progress_offset

    if loop == "none":
        return min(1.0, max(0.0, raw_progress))

    if loop == "loop":
        return raw_progress % 1.0

    if loop == "pingpong":
        cycle = math.floor(raw_progress)
        in_cycle = raw_progress - cycle
        return in_cycle if cycle % 2 == 0 else 1.0 - in_cycle

    return raw_progress


Vec3 = Union[Point3D, Sequence[float]]


def _vec(value: Vec3) -> Point3D:
    return value if isinstance(value, Point3D) else Point3D.from_sequence(value)


def apply_motion_to_transform(
    state: Optional[MotionState],
    position: Vec3,
    rotation: Vec3,
    scale: Vec3,
) -> Tuple[Point3D, Point3D, Point3D]:
    """
    Combine a motion state with an object's base transform.

    Position and rotation are added, scale is multiplied. A missing state
    leaves the base transform untouched.
    """
    position, rotation, scale = _vec(position), _vec(rotation), _vec(scale)
    if state is None:
        return position, rotation, scale

    return (
        Point3D(position.x + state.position.x, position.y + state.position.y, position.z + state.position.z),
        Point3D(rotation.x + state.rotation.x, rotation.y + state.rotation.y, rotation.z + state.rotation.z),
        Point3D(scale.x * state.scale.x, scale.y * state.scale.y, scale.z * state.scale.z),
    )


__all__ = [
    "LOOP_MODES",
    "MODIFIER_TYPES",
    "MotionState",
    "ModifierConfig",
    "MotionControllerConfig",
    "calculate_progress",
    "create_default_motion_state",
    "apply_motion_to_transform",
]
