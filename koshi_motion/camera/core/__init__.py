"""Core camera path interpolation for Koshi motion paths."""

from .quaternion import (
    IDENTITY_QUAT,
    normalize_quat,
    slerp,
    euler_to_quat,
    quat_to_euler,
    look_at_quat,
)
from .interpolator import (
    DEFAULT_FOV,
    CameraKeyframe,
    CameraState,
    catmull_rom_1d,
    catmull_rom_vec3,
    interpolate_camera_path,
    simplify_path,
    resample_keyframes,
    smooth_keyframes,
    keyframes_from_dicts,
)
from .camera_path import (
    CAMERA_PATH_TYPES,
    CameraPath,
    resolve_camera_state,
    orbit_camera_state,
)

__all__ = [
    # Quaternions
    "IDENTITY_QUAT",
    "normalize_quat",
    "slerp",
    "euler_to_quat",
    "quat_to_euler",
    "look_at_quat",
    # Interpolation
    "DEFAULT_FOV",
    "CameraKeyframe",
    "CameraState",
    "catmull_rom_1d",
    "catmull_rom_vec3",
    "interpolate_camera_path",
    "simplify_path",
    "resample_keyframes",
    "smooth_keyframes",
    "keyframes_from_dicts",
    # Scene cameras
    "CAMERA_PATH_TYPES",
    "CameraPath",
    "resolve_camera_state",
    "orbit_camera_state",
]
