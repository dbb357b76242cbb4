"""Shared fixtures for the Koshi motion test suite."""

import sys
import os
import math
import pytest

# Ensure the package root is importable
PACKAGE_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PACKAGE_ROOT not in sys.path:
    sys.path.insert(0, PACKAGE_ROOT)

from koshi_motion.paths.core import (
    MotionControllerConfig,
    ModifierConfig,
    create_default_registry,
)
from koshi_motion.camera.core import CameraKeyframe, euler_to_quat


# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def registry():
    """Fresh registry with the built-in paths, isolated from the default one."""
    return create_default_registry()


@pytest.fixture
def square_points():
    """Four control points on a square in the XZ plane."""
    return [(0.0, 0.0, 0.0), (10.0, 0.0, 0.0), (10.0, 0.0, 10.0), (0.0, 0.0, 10.0)]


@pytest.fixture
def circular_config():
    """One full orbit every 60 frames, looping."""
    return MotionControllerConfig(
        path_type="circular",
        path_params={"radiusX": 5, "radiusY": 5},
        speed=1.0,
        progress_offset=0.0,
        loop="loop",
        modifiers=[],
        duration=60,
        start_frame=0,
    )


@pytest.fixture
def spin_modifier():
    """Half a revolution per second around Y."""
    return ModifierConfig(type="rotation", enabled=True, params={"speedY": 0.5})


# ---------------------------------------------------------------------------
# Camera fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def camera_keyframes():
    """Irregularly spaced camera keyframes turning a quarter turn around Y."""
    return [
        CameraKeyframe(0, (0.0, 0.0, 10.0), euler_to_quat((0.0, 0.0, 0.0)), 50.0),
        CameraKeyframe(10, (5.0, 1.0, 8.0), euler_to_quat((0.0, math.pi / 8, 0.0)), 45.0),
        CameraKeyframe(25, (10.0, 2.0, 0.0), euler_to_quat((0.0, math.pi / 4, 0.0)), None),
        CameraKeyframe(40, (8.0, 1.0, -6.0), euler_to_quat((0.0, math.pi / 2, 0.0)), 60.0),
    ]


@pytest.fixture
def straight_keyframes():
    """Collinear keyframes along X, one every 5 frames."""
    return [CameraKeyframe(i * 5, (float(i), 0.0, 0.0)) for i in range(6)]
