"""Koshi Motion Path nodes - bake path motion into per-frame transform deltas."""

import json
import logging
from typing import Any, Dict, List, Optional

from ..utils import parse_json_input
from .core import (
    LOOP_MODES,
    MODIFIER_TYPES,
    MotionController,
    MotionControllerConfig,
    ModifierConfig,
    get_path_configs,
    get_path_types,
)

logger = logging.getLogger(__name__)


def _numeric_params(params: Dict[str, Any]) -> Dict[str, float]:
    """Keep numeric path params; anything else is logged and dropped."""
    numeric = {}
    for key, value in params.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            logger.warning("[Koshi] Ignoring non-numeric path param %s=%r", key, value)
            continue
        numeric[key] = value
    return numeric


class KoshiMotionModifier:
    """Append a modifier (rotation, wobble, scalePulse, lookAt) to a modifier chain."""
    COLOR = "#1a1a1a"
    BGCOLOR = "#2d2d2d"

    CATEGORY = "Koshi/Motion Paths"
    FUNCTION = "build"
    RETURN_TYPES = ("KOSHI_MOTION_MODIFIERS",)
    RETURN_NAMES = ("modifiers",)

    @classmethod
    def INPUT_TYPES(cls):
        return {
            "required": {
                "modifier_type": (list(MODIFIER_TYPES),),
                "params": ("STRING", {
                    "multiline": True,
                    "default": '{"speedY": 0.25}'
                }),
                "enabled": ("BOOLEAN", {"default": True}),
            },
            "optional": {
                "modifiers": ("KOSHI_MOTION_MODIFIERS",),
            }
        }

    def build(
        self,
        modifier_type: str,
        params: str,
        enabled: bool = True,
        modifiers: Optional[List[ModifierConfig]] = None,
    ):
        """Chain order is application order."""
        chain = list(modifiers or [])
        chain.append(ModifierConfig(
            type=modifier_type,
            enabled=enabled,
            params=parse_json_input(params, {}, "modifier params"),
        ))
        return (chain,)


class KoshiMotionPath:
    """Evaluate a motion path over a frame range."""
    COLOR = "#1a1a1a"
    BGCOLOR = "#2d2d2d"

    CATEGORY = "Koshi/Motion Paths"
    FUNCTION = "evaluate"
    RETURN_TYPES = ("KOSHI_MOTION_PATH",)
    RETURN_NAMES = ("motion_path",)

    @classmethod
    def INPUT_TYPES(cls):
        return {
            "required": {
                "path_type": (get_path_types(),),
                "path_params": ("STRING", {
                    "multiline": True,
                    "default": "{}"
                }),
                "frames": ("INT", {"default": 60, "min": 1, "max": 10000}),
                "fps": ("FLOAT", {"default": 30.0, "min": 1.0, "max": 240.0, "step": 1.0}),
                "duration": ("INT", {"default": 60, "min": 1, "max": 10000}),
                "speed": ("FLOAT", {"default": 1.0, "min": -10.0, "max": 10.0, "step": 0.05}),
                "progress_offset": ("FLOAT", {"default": 0.0, "min": 0.0, "max": 1.0, "step": 0.01}),
                "loop": (list(LOOP_MODES),),
            },
            "optional": {
                "start_frame": ("INT", {"default": 0, "min": 0, "max": 10000}),
                "modifiers": ("KOSHI_MOTION_MODIFIERS",),
                "control_points": ("STRING", {
                    "multiline": True,
                    "default": ""
                }),
            }
        }

    def evaluate(
        self,
        path_type: str,
        path_params: str,
        frames: int,
        fps: float,
        duration: int,
        speed: float,
        progress_offset: float,
        loop: str,
        start_frame: int = 0,
        modifiers: Optional[List[ModifierConfig]] = None,
        control_points: str = "",
    ):
        """Evaluate the controller at frames 0..frames-1."""
        path_options = {}
        points = parse_json_input(control_points, [], "control points")
        if points:
            path_options["control_points"] = points

        config = MotionControllerConfig(
            path_type=path_type,
            path_params=_numeric_params(parse_json_input(path_params, {}, "path params")),
            speed=speed,
            progress_offset=progress_offset,
            loop=loop,
            modifiers=list(modifiers or []),
            duration=duration,
            start_frame=start_frame,
            path_options=path_options,
        )
        try:
            controller = MotionController(config)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("[Koshi] Invalid control points: %s", e)
            config.path_options = {}
            controller = MotionController(config)

        states = [controller.evaluate(frame, fps) for frame in range(frames)]

        motion_path = {
            "frames": frames,
            "fps": fps,
            "config": config.to_dict(),
            "states": states,
            "positions": [list(s.position.to_tuple()) for s in states],
        }
        return (motion_path,)


class KoshiPathInfo:
    """List registered path types with their parameter metadata."""
    COLOR = "#1a1a1a"
    BGCOLOR = "#2d2d2d"

    CATEGORY = "Koshi/Motion Paths"
    FUNCTION = "describe"
    RETURN_TYPES = ("STRING",)
    RETURN_NAMES = ("path_info",)

    @classmethod
    def INPUT_TYPES(cls):
        return {"required": {}}

    def describe(self):
        configs: List[Dict] = [config.to_dict() for config in get_path_configs()]
        return (json.dumps(configs, indent=2),)


NODE_CLASS_MAPPINGS = {
    "Koshi_MotionModifier": KoshiMotionModifier,
    "Koshi_MotionPath": KoshiMotionPath,
    "Koshi_PathInfo": KoshiPathInfo,
}

NODE_DISPLAY_NAME_MAPPINGS = {
    "Koshi_MotionModifier": "▄▀▄ KN Motion Modifier",
    "Koshi_MotionPath": "▄▀▄ KN Motion Path",
    "Koshi_PathInfo": "▄▀▄ KN Path Info",
}
