"""Motion controller: frame -> MotionState for one animated object."""

import logging
from dataclasses import replace
from typing import Any, List, Mapping, Optional, Union

from .base import PathGenerator
from .modifiers import MODIFIER_FUNCTIONS, MotionModifier
from .motion_state import (
    MotionControllerConfig,
    MotionState,
    calculate_progress,
    create_default_motion_state,
)
from .registry import PATH_REGISTRY, PathRegistry
from .vectors import ORIGIN, Point3D

logger = logging.getLogger(__name__)

_PATH_FIELDS = ("path_type", "path_params", "path_options")


class MotionController:
    """
    Evaluates an object's motion at a given frame.

    Owns one path generator resolved from the registry. An unresolvable path
    type is logged and the controller keeps returning default states so the
    object stays at its base transform.
    """

    def __init__(
        self,
        config: Union[MotionControllerConfig, Mapping[str, Any]],
        registry: Optional[PathRegistry] = None,
    ):
        if not isinstance(config, MotionControllerConfig):
            config = MotionControllerConfig.from_dict(config)
        self.config = config
        self.registry = registry if registry is not None else PATH_REGISTRY
        self.path: Optional[PathGenerator] = None
        self.modifiers: List[MotionModifier] = []
        self._initialize_path()

    def _initialize_path(self) -> None:
        self.path = self.registry.create(
            self.config.path_type,
            self.config.path_params,
            **self.config.path_options,
        )
        if self.path is None:
            logger.warning(
                "MotionController: could not create path of type %r, using default motion",
                self.config.path_type,
            )

    def calculate_progress(self, frame: float) -> float:
        c = self.config
        return calculate_progress(frame, c.start_frame, c.duration, c.speed, c.progress_offset, c.loop)

    def evaluate(self, frame: float, fps: float) -> MotionState:
        progress = self.calculate_progress(frame)

        if self.path is not None:
            state = MotionState(
                position=self.path.get_position_at(progress),
                rotation=ORIGIN,
                scale=Point3D(1.0, 1.0, 1.0),
                progress=progress,
                tangent=self.path.get_tangent_at(progress),
            )
        else:
            state = create_default_motion_state(progress)

        return self._apply_modifiers(state, frame, fps)

    def _apply_modifiers(self, state: MotionState, frame: float, fps: float) -> MotionState:
        time = frame / fps if fps > 0 else 0.0

        for modifier in self.config.modifiers:
            if not modifier.enabled:
                continue
            fn = MODIFIER_FUNCTIONS.get(modifier.type)
            if fn is None:
                logger.debug("MotionController: skipping unknown modifier %r", modifier.type)
                continue
            state = fn(state, time, modifier.params)

        for modifier in self.modifiers:
            state = modifier.apply(state, frame, fps)

        return state

    def add_modifier(self, modifier: MotionModifier) -> None:
        self.modifiers.append(modifier)

    def remove_modifier(self, modifier_type: str) -> bool:
        for i, modifier in enumerate(self.modifiers):
            if modifier.type == modifier_type:
                del self.modifiers[i]
                return True
        return False

    def set_config(self, **changes: Any) -> None:
        """Update config fields; the path is rebuilt only if its definition changed."""
        path_changed = any(
            key in changes and changes[key] != getattr(self.config, key)
            for key in _PATH_FIELDS
        )
        self.config = replace(self.config, **changes)
        if path_changed:
            self._initialize_path()

    def get_config(self) -> MotionControllerConfig:
        return replace(self.config)

    def get_path(self) -> Optional[PathGenerator]:
        return self.path

    def get_path_points(self, resolution: int = 500) -> List[Point3D]:
        """Path samples for visualisation."""
        if self.path is None:
            return []
        return self.path.precompute_path(resolution)


def create_motion_controller(
    config: Union[MotionControllerConfig, Mapping[str, Any]],
    registry: Optional[PathRegistry] = None,
) -> MotionController:
    return MotionController(config, registry)


__all__ = ["MotionController", "create_motion_controller"]
