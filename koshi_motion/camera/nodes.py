"""Koshi Camera Path node - interpolate recorded camera keyframes per frame."""

import logging

from ..utils import parse_json_input
from .core import (
    DEFAULT_FOV,
    interpolate_camera_path,
    keyframes_from_dicts,
    resample_keyframes,
    simplify_path,
    smooth_keyframes,
)

logger = logging.getLogger(__name__)


class KoshiCameraPath:
    """Keyframed camera: Catmull-Rom position, SLERP rotation, linear FOV."""
    COLOR = "#1a1a1a"
    BGCOLOR = "#2d2d2d"

    CATEGORY = "Koshi/Motion Paths"
    FUNCTION = "interpolate"
    RETURN_TYPES = ("KOSHI_CAMERA_PATH",)
    RETURN_NAMES = ("camera_path",)

    @classmethod
    def INPUT_TYPES(cls):
        return {
            "required": {
                "keyframes": ("STRING", {
                    "multiline": True,
                    "default": '[{"frame": 0, "position": [0, 0, 10], "rotation": [0, 0, 0, 1]}]'
                }),
                "frames": ("INT", {"default": 60, "min": 1, "max": 10000}),
                "default_fov": ("FLOAT", {"default": DEFAULT_FOV, "min": 1.0, "max": 179.0, "step": 1.0}),
                "tension": ("FLOAT", {"default": 0.5, "min": 0.0, "max": 1.0, "step": 0.05}),
            },
            "optional": {
                "resample_interval": ("INT", {"default": 0, "min": 0, "max": 1000}),
                "smooth_window": ("INT", {"default": 0, "min": 0, "max": 99}),
                "simplify_tolerance": ("FLOAT", {"default": 0.0, "min": 0.0, "max": 100.0, "step": 0.01}),
            }
        }

    def interpolate(
        self,
        keyframes: str,
        frames: int,
        default_fov: float,
        tension: float,
        resample_interval: int = 0,
        smooth_window: int = 0,
        simplify_tolerance: float = 0.0,
    ):
        """Clean up keyframes (resample -> smooth -> simplify), then evaluate every frame."""
        try:
            path = keyframes_from_dicts(parse_json_input(keyframes, [], "camera keyframes"))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("[Koshi] Invalid camera keyframe: %s", e)
            path = []
        path.sort(key=lambda k: k.frame)

        if resample_interval > 0:
            path = resample_keyframes(path, resample_interval, default_fov, tension)
        if smooth_window > 1:
            path = smooth_keyframes(path, smooth_window)
        if simplify_tolerance > 0:
            path = simplify_path(path, simplify_tolerance)

        states = [interpolate_camera_path(path, frame, default_fov, tension) for frame in range(frames)]

        camera_path = {
            "frames": frames,
            "keyframes": [k.to_dict() for k in path],
            "states": states,
        }
        return (camera_path,)


NODE_CLASS_MAPPINGS = {
    "Koshi_CameraPath": KoshiCameraPath,
}

NODE_DISPLAY_NAME_MAPPINGS = {
    "Koshi_CameraPath": "▄▀▄ KN Camera Path",
}
