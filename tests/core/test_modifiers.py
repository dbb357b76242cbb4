"""Tests for koshi_motion.paths.core.modifiers."""

import sys
import os
import math

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

import pytest

from koshi_motion.paths.core import (
    Point3D,
    MotionState,
    MODIFIER_FUNCTIONS,
    MODIFIER_TYPES,
    RotationModifier,
    WobbleModifier,
    ScalePulseModifier,
    LookAtModifier,
    create_default_motion_state,
)
from koshi_motion.paths.core.modifiers import (
    apply_rotation,
    apply_wobble,
    apply_scale_pulse,
    apply_look_at,
)


@pytest.fixture
def state():
    return create_default_motion_state(0.5)


def test_every_modifier_type_has_a_function():
    assert set(MODIFIER_FUNCTIONS) == set(MODIFIER_TYPES)


class TestRotation:

    def test_speed_is_revolutions_per_second(self, state):
        result = apply_rotation(state, 1.0, {"speedY": 0.5})
        assert result.rotation.y == pytest.approx(math.pi)
        assert result.rotation.x == 0.0

    def test_additive_by_default(self):
        base = MotionState(rotation=Point3D(0.1, 0, 0))
        result = apply_rotation(base, 0.25, {"speedX": 1})
        assert result.rotation.x == pytest.approx(0.1 + math.pi / 2)

    def test_additive_false_replaces(self):
        base = MotionState(rotation=Point3D(0.1, 0, 0))
        result = apply_rotation(base, 0.25, {"speedX": 1, "additive": False})
        assert result.rotation.x == pytest.approx(math.pi / 2)

    def test_leaves_position_untouched(self, state):
        result = apply_rotation(state, 3.0, {"speedZ": 2})
        assert result.position == state.position
        assert result.scale == state.scale


class TestWobble:

    def test_axis_offsets(self, state):
        params = {"amplitudeX": 2, "amplitudeY": 1, "amplitudeZ": 3, "frequency": 1}
        result = apply_wobble(state, 0.25, params)
        t = math.pi / 2
        assert result.position.x == pytest.approx(2.0)
        assert result.position.y == pytest.approx(math.sin(t * 1.3 + 0.5))
        assert result.position.z == pytest.approx(3 * math.sin(t * 0.7 + 1.0))

    def test_no_amplitude_no_change(self, state):
        assert apply_wobble(state, 0.4, {}).position == Point3D(0, 0, 0)

    def test_zero_frequency_falls_back_to_one(self, state):
        a = apply_wobble(state, 0.3, {"amplitudeX": 1, "frequency": 0})
        b = apply_wobble(state, 0.3, {"amplitudeX": 1, "frequency": 1})
        assert a.position == b.position

    def test_offsets_existing_position(self):
        base = MotionState(position=Point3D(5, 0, 0))
        result = apply_wobble(base, 0.25, {"amplitudeX": 1})
        assert result.position.x == pytest.approx(6.0)


class TestScalePulse:

    @pytest.mark.parametrize("time,expected", [(0.0, 1.0), (0.25, 1.1), (0.75, 0.9)])
    def test_default_range(self, state, time, expected):
        result = apply_scale_pulse(state, time, {})
        assert result.scale.x == pytest.approx(expected)
        assert result.scale.y == pytest.approx(expected)
        assert result.scale.z == pytest.approx(expected)

    def test_zero_min_scale_is_honoured(self, state):
        result = apply_scale_pulse(state, 0.75, {"minScale": 0, "maxScale": 1})
        assert result.scale.x == pytest.approx(0.0)

    def test_non_uniform_axes_differ(self, state):
        result = apply_scale_pulse(state, 0.2, {"uniform": False})
        assert result.scale.x != pytest.approx(result.scale.y)
        assert result.scale.y != pytest.approx(result.scale.z)

    def test_multiplies_existing_scale(self):
        base = MotionState(scale=Point3D(2, 2, 2))
        result = apply_scale_pulse(base, 0.25, {})
        assert result.scale.x == pytest.approx(2.2)


class TestLookAt:

    def test_follow_path_uses_tangent(self):
        base = MotionState(tangent=Point3D(1, 0, 0))
        result = apply_look_at(base, 0.0, {"followPath": True})
        assert result.rotation.y == pytest.approx(math.pi / 2)
        assert result.rotation.x == pytest.approx(0.0)
        assert result.rotation.z == 0.0

    def test_follow_path_pitch(self):
        base = MotionState(tangent=Point3D(0, -1, 0))
        result = apply_look_at(base, 0.0, {"followPath": True})
        assert result.rotation.x == pytest.approx(math.pi / 2)

    def test_target_along_z(self, state):
        result = apply_look_at(state, 0.0, {"targetZ": 10})
        assert result.rotation.x == pytest.approx(0.0)
        assert result.rotation.y == pytest.approx(0.0)

    def test_target_along_x(self, state):
        result = apply_look_at(state, 0.0, {"targetX": 10})
        assert result.rotation.y == pytest.approx(math.pi / 2)

    def test_target_above(self, state):
        result = apply_look_at(state, 0.0, {"targetY": 10, "targetZ": 10})
        assert result.rotation.x == pytest.approx(-math.pi / 4)

    def test_follow_path_requires_true(self):
        base = MotionState(tangent=Point3D(1, 0, 0))
        result = apply_look_at(base, 0.0, {"followPath": "yes", "targetZ": 5})
        assert result.rotation.y == pytest.approx(0.0)

    def test_replaces_rotation(self):
        base = MotionState(rotation=Point3D(1, 1, 1))
        result = apply_look_at(base, 0.0, {"targetZ": 5})
        assert result.rotation.z == 0.0


class TestModifierObjects:

    def test_types(self):
        assert RotationModifier().type == "rotation"
        assert WobbleModifier().type == "wobble"
        assert ScalePulseModifier().type == "scalePulse"
        assert LookAtModifier().type == "lookAt"

    def test_apply_converts_frames_to_seconds(self, state):
        result = RotationModifier({"speedY": 1}).apply(state, 15, 30)
        assert result.rotation.y == pytest.approx(math.pi)

    def test_zero_fps_means_time_zero(self, state):
        result = RotationModifier({"speedY": 1}).apply(state, 15, 0)
        assert result.rotation.y == 0.0

    def test_params_roundtrip(self):
        modifier = WobbleModifier({"amplitudeX": 1})
        modifier.set_params({"frequency": 2})
        params = modifier.get_params()
        assert params == {"amplitudeX": 1, "frequency": 2}
        params["amplitudeX"] = 99
        assert modifier.get_params()["amplitudeX"] == 1

    def test_order_matters(self, state):
        spin = RotationModifier({"speedY": 1})
        aim = LookAtModifier({"targetX": 10})
        spin_then_aim = aim.apply(spin.apply(state, 10, 30), 10, 30)
        aim_then_spin = spin.apply(aim.apply(state, 10, 30), 10, 30)
        assert spin_then_aim.rotation.y != pytest.approx(aim_then_spin.rotation.y)
