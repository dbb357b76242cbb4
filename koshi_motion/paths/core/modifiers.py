"""
Motion modifiers.

Each modifier is a pure function (state, time, params) -> state. The motion
controller folds enabled modifiers over the path state in declaration order,
so reordering changes the result.
"""

import math
from dataclasses import replace
from typing import Any, Callable, Dict, Mapping, Optional

from .motion_state import MotionState, ModifierValue
from .vectors import Point3D

ModifierFn = Callable[[MotionState, float, Mapping[str, ModifierValue]], MotionState]

TWO_PI = math.pi * 2


def _number(params: Mapping[str, ModifierValue], key: str, default: float) -> float:
    """Numeric param where 0 and missing both fall back to default."""
    value = params.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value == 0:
        return default
    return float(value)


def _number_or(params: Mapping[str, ModifierValue], key: str, default: float) -> float:
    """Numeric param where only a missing value falls back to default."""
    value = params.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    return float(value)


def apply_rotation(state: MotionState, time: float, params: Mapping[str, ModifierValue]) -> MotionState:
    """Continuous spin; speeds are revolutions per second."""
    rot_x = time * _number(params, "speedX", 0.0) * TWO_PI
    rot_y = time * _number(params, "speedY", 0.0) * TWO_PI
    rot_z = time * _number(params, "speedZ", 0.0) * TWO_PI

    if params.get("additive") is not False:
        rotation = Point3D(state.rotation.x + rot_x, state.rotation.y + rot_y, state.rotation.z + rot_z)
    else:
        rotation = Point3D(rot_x, rot_y, rot_z)
    return replace(state, rotation=rotation)


def apply_wobble(state: MotionState, time: float, params: Mapping[str, ModifierValue]) -> MotionState:
    """Sinusoidal positional offset, skewed per axis."""
    amplitude_x = _number(params, "amplitudeX", 0.0)
    amplitude_y = _number(params, "amplitudeY", 0.0)
    amplitude_z = _number(params, "amplitudeZ", 0.0)
    frequency = _number(params, "frequency", 1.0)
    phase = _number(params, "phase", 0.0)

    t = time * frequency * TWO_PI + phase

    return replace(state, position=Point3D(
        state.position.x + math.sin(t) * amplitude_x,
        state.position.y + math.sin(t * 1.3 + 0.5) * amplitude_y,
        state.position.z + math.sin(t * 0.7 + 1.0) * amplitude_z,
    ))


def apply_scale_pulse(state: MotionState, time: float, params: Mapping[str, ModifierValue]) -> MotionState:
    """Breathing scale between minScale and maxScale."""
    min_scale = _number_or(params, "minScale", 0.9)
    max_scale = _number_or(params, "maxScale", 1.1)
    frequency = _number(params, "frequency", 1.0)
    phase = _number(params, "phase", 0.0)

    t = time * frequency * TWO_PI + phase
    wave = (math.sin(t) + 1) / 2
    mult_x = min_scale + wave * (max_scale - min_scale)

    if params.get("uniform") is not False:
        mult_y = mult_z = mult_x
    else:
        wave_y = (math.sin(t * 1.1 + 0.3) + 1) / 2
        wave_z = (math.sin(t * 0.9 + 0.7) + 1) / 2
        mult_y = min_scale + wave_y * (max_scale - min_scale)
        mult_z = min_scale + wave_z * (max_scale - min_scale)

    return replace(state, scale=Point3D(
        state.scale.x * mult_x,
        state.scale.y * mult_y,
        state.scale.z * mult_z,
    ))


def apply_look_at(state: MotionState, time: float, params: Mapping[str, ModifierValue]) -> MotionState:
    """Aim at a target point, or along the path tangent when followPath is set."""
    if params.get("followPath") is True:
        tangent = state.tangent
        yaw = math.atan2(tangent.x, tangent.z)
        pitch = math.asin(max(-1.0, min(1.0, -tangent.y)))
        return replace(state, rotation=Point3D(pitch, yaw, 0.0))

    dx = _number(params, "targetX", 0.0) - state.position.x
    dy = _number(params, "targetY", 0.0) - state.position.y
    dz = _number(params, "targetZ", 0.0) - state.position.z

    yaw = math.atan2(dx, dz)
    pitch = math.atan2(-dy, math.sqrt(dx * dx + dz * dz))
    return replace(state, rotation=Point3D(pitch, yaw, 0.0))


MODIFIER_FUNCTIONS: Dict[str, ModifierFn] = {
    "rotation": apply_rotation,
    "wobble": apply_wobble,
    "scalePulse": apply_scale_pulse,
    "lookAt": apply_look_at,
}


class MotionModifier:
    """Modifier object attached to a controller at runtime."""

    type: str = ""

    def __init__(self, params: Optional[Mapping[str, ModifierValue]] = None):
        self.params: Dict[str, ModifierValue] = dict(params or {})

    def apply(self, state: MotionState, frame: float, fps: float) -> MotionState:
        time = frame / fps if fps > 0 else 0.0
        return MODIFIER_FUNCTIONS[self.type](state, time, self.params)

    def set_params(self, params: Mapping[str, ModifierValue]) -> None:
        self.params.update(params)

    def get_params(self) -> Dict[str, Any]:
        return dict(self.params)


class RotationModifier(MotionModifier):
    type = "rotation"


class WobbleModifier(MotionModifier):
    type = "wobble"


class ScalePulseModifier(MotionModifier):
    type = "scalePulse"


class LookAtModifier(MotionModifier):
    type = "lookAt"


__all__ = [
    "MODIFIER_FUNCTIONS",
    "apply_rotation",
    "apply_wobble",
    "apply_scale_pulse",
    "apply_look_at",
    "MotionModifier",
    "RotationModifier",
    "WobbleModifier",
    "ScalePulseModifier",
    "LookAtModifier",
]
