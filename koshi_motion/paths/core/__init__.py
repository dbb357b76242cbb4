"""Core path generators and motion controller for Koshi motion paths."""

from .vectors import (
    Point3D,
    DEFAULT_TANGENT,
    lerp_point,
    distance_point,
    normalize_point,
)
from .base import (
    ParameterMeta,
    PathConfig,
    PathGenerator,
)
from .linear import LinearPath, create_linear_path
from .circular import CircularPath, create_circular_path
from .lissajous import Lissajous3DPath, create_lissajous_path
from .spline import SplinePath, create_spline_path, catmull_rom_basis
from .lorenz import LorenzPath, create_lorenz_path
from .registry import (
    PathRegistry,
    PATH_REGISTRY,
    create_default_registry,
    create_path,
    get_path_types,
    get_path_configs,
)
from .motion_state import (
    LOOP_MODES,
    MODIFIER_TYPES,
    MotionState,
    ModifierConfig,
    MotionControllerConfig,
    calculate_progress,
    create_default_motion_state,
    apply_motion_to_transform,
)
from .modifiers import (
    MODIFIER_FUNCTIONS,
    MotionModifier,
    RotationModifier,
    WobbleModifier,
    ScalePulseModifier,
    LookAtModifier,
)
from .controller import MotionController, create_motion_controller

__all__ = [
    # Vectors
    "Point3D",
    "DEFAULT_TANGENT",
    "lerp_point",
    "distance_point",
    "normalize_point",
    # Contract
    "ParameterMeta",
    "PathConfig",
    "PathGenerator",
    # Paths
    "LinearPath",
    "CircularPath",
    "Lissajous3DPath",
    "SplinePath",
    "LorenzPath",
    "create_linear_path",
    "create_circular_path",
    "create_lissajous_path",
    "create_spline_path",
    "create_lorenz_path",
    "catmull_rom_basis",
    # Registry
    "PathRegistry",
    "PATH_REGISTRY",
    "create_default_registry",
    "create_path",
    "get_path_types",
    "get_path_configs",
    # Motion
    "LOOP_MODES",
    "MODIFIER_TYPES",
    "MotionState",
    "ModifierConfig",
    "MotionControllerConfig",
    "calculate_progress",
    "create_default_motion_state",
    "apply_motion_to_transform",
    "MODIFIER_FUNCTIONS",
    "MotionModifier",
    "RotationModifier",
    "WobbleModifier",
    "ScalePulseModifier",
    "LookAtModifier",
    "MotionController",
    "create_motion_controller",
]
