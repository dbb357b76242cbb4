"""Tests for koshi_motion.camera.core.interpolator.

Covers:
- CameraKeyframe validation and dict conversion.
- catmull_rom_1d / catmull_rom_vec3 basis behaviour.
- interpolate_camera_path: empty and single keyframe fallbacks, exact hits
  at keyframes, clamping outside the keyframe range, FOV blending, SLERP.
- simplify_path (RDP), resample_keyframes, smooth_keyframes.
"""

import sys
import os
import math

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

import numpy as np
import pytest

from koshi_motion.camera.core import (
    IDENTITY_QUAT,
    CameraKeyframe,
    CameraState,
    catmull_rom_1d,
    catmull_rom_vec3,
    euler_to_quat,
    interpolate_camera_path,
    keyframes_from_dicts,
    resample_keyframes,
    simplify_path,
    smooth_keyframes,
)
from koshi_motion.camera.core.interpolator import perpendicular_distance


def _same_rotation(q1, q2, abs_tol=1e-9):
    a = np.asarray(q1)
    b = np.asarray(q2)
    return np.allclose(a, b, atol=abs_tol) or np.allclose(a, -b, atol=abs_tol)


# =====================================================================
# CameraKeyframe
# =====================================================================

class TestCameraKeyframe:

    def test_coerces_to_float_tuples(self):
        k = CameraKeyframe(3, [1, 2, 3], [0, 0, 0, 1], 40)
        assert k.position == (1.0, 2.0, 3.0)
        assert k.rotation == (0.0, 0.0, 0.0, 1.0)
        assert k.fov == 40.0

    def test_position_needs_three_components(self):
        with pytest.raises(ValueError):
            CameraKeyframe(0, (1, 2))

    def test_rotation_needs_four_components(self):
        with pytest.raises(ValueError):
            CameraKeyframe(0, (1, 2, 3), (0, 0, 0))

    def test_from_dict_defaults(self):
        k = CameraKeyframe.from_dict({"frame": 7, "position": [0, 1, 2]})
        assert k.rotation == IDENTITY_QUAT
        assert k.fov is None

    def test_from_dict_missing_frame(self):
        with pytest.raises(KeyError):
            CameraKeyframe.from_dict({"position": [0, 1, 2]})

    def test_to_dict_omits_missing_fov(self):
        data = CameraKeyframe(1, (0, 0, 0)).to_dict()
        assert data == {"frame": 1, "position": [0.0, 0.0, 0.0], "rotation": [0.0, 0.0, 0.0, 1.0]}

    def test_dict_roundtrip(self):
        k = CameraKeyframe(4, (1, 2, 3), (0, 0.6, 0, 0.8), 35)
        assert CameraKeyframe.from_dict(k.to_dict()) == k

    def test_keyframes_from_dicts_accepts_instances(self):
        k = CameraKeyframe(0, (0, 0, 0))
        result = keyframes_from_dicts([k, {"frame": 5, "position": [1, 1, 1]}])
        assert result[0] is k
        assert result[1].frame == 5


def test_camera_state_to_dict():
    state = CameraState((1.0, 2.0, 3.0), IDENTITY_QUAT, 50.0)
    assert state.to_dict() == {"position": [1.0, 2.0, 3.0], "rotation": [0.0, 0.0, 0.0, 1.0], "fov": 50.0}


# =====================================================================
# Catmull-Rom
# =====================================================================

class TestCatmullRom:

    def test_hits_inner_points(self):
        assert catmull_rom_1d(7, 2, 5, -1, 0.0) == pytest.approx(2.0)
        assert catmull_rom_1d(7, 2, 5, -1, 1.0) == pytest.approx(5.0)

    def test_uniform_midpoint(self):
        assert catmull_rom_1d(0, 1, 2, 3, 0.5) == pytest.approx(1.5)

    @pytest.mark.parametrize("tension", [0.0, 0.5, 1.0])
    def test_constant_data(self, tension):
        for t in (0.0, 0.3, 0.7, 1.0):
            assert catmull_rom_1d(4, 4, 4, 4, t, tension) == pytest.approx(4.0)

    def test_vec3_is_componentwise(self):
        result = catmull_rom_vec3((0, 0, 0), (1, 10, -1), (2, 20, -2), (3, 30, -3), 0.5)
        assert result == pytest.approx((1.5, 15.0, -1.5))


# =====================================================================
# interpolate_camera_path
# =====================================================================

class TestInterpolateCameraPath:

    def test_empty_gives_fallback_camera(self):
        state = interpolate_camera_path([], 12, default_fov=42)
        assert state.position == (0.0, 0.0, 10.0)
        assert state.rotation == IDENTITY_QUAT
        assert state.fov == 42

    def test_single_keyframe(self):
        k = CameraKeyframe(10, (1, 2, 3), (0, 0, 0, 2))
        state = interpolate_camera_path([k], 99, default_fov=33)
        assert state.position == (1.0, 2.0, 3.0)
        assert state.rotation == pytest.approx(IDENTITY_QUAT)
        assert state.fov == 33

    def test_exact_at_keyframes(self, camera_keyframes):
        for k in camera_keyframes:
            state = interpolate_camera_path(camera_keyframes, k.frame)
            assert state.position == pytest.approx(k.position)
            assert _same_rotation(state.rotation, k.rotation)

    def test_clamps_before_first(self, camera_keyframes):
        state = interpolate_camera_path(camera_keyframes, -5)
        assert state.position == pytest.approx(camera_keyframes[0].position)
        assert state.fov == pytest.approx(50.0)

    def test_clamps_after_last(self, camera_keyframes):
        state = interpolate_camera_path(camera_keyframes, 100)
        assert state.position == pytest.approx(camera_keyframes[-1].position)
        assert state.fov == pytest.approx(60.0)

    def test_fov_is_linear(self, camera_keyframes):
        assert interpolate_camera_path(camera_keyframes, 5).fov == pytest.approx(47.5)

    def test_missing_fov_uses_default(self, camera_keyframes):
        assert interpolate_camera_path(camera_keyframes, 17.5, default_fov=70).fov == pytest.approx(57.5)
        assert interpolate_camera_path(camera_keyframes, 25, default_fov=70).fov == pytest.approx(70.0)

    def test_rotation_is_slerped(self, camera_keyframes):
        state = interpolate_camera_path(camera_keyframes, 5)
        assert _same_rotation(state.rotation, euler_to_quat((0.0, math.pi / 16, 0.0)))

    def test_uniform_segment_midpoint(self, straight_keyframes):
        state = interpolate_camera_path(straight_keyframes, 12.5)
        assert state.position == pytest.approx((2.5, 0.0, 0.0))

    def test_continuous_across_keyframes(self, camera_keyframes):
        for k in camera_keyframes[1:-1]:
            before = interpolate_camera_path(camera_keyframes, k.frame - 1e-6)
            after = interpolate_camera_path(camera_keyframes, k.frame)
            np.testing.assert_allclose(before.position, after.position, atol=1e-4)

    def test_duplicate_frames(self):
        keyframes = [CameraKeyframe(0, (0, 0, 0)), CameraKeyframe(0, (1, 0, 0))]
        state = interpolate_camera_path(keyframes, 0)
        assert state.position == pytest.approx((0.0, 0.0, 0.0))


# =====================================================================
# simplify_path
# =====================================================================

class TestSimplifyPath:

    def test_perpendicular_distance(self):
        assert perpendicular_distance((0, 1, 0), (-1, 0, 0), (1, 0, 0)) == pytest.approx(1.0)
        assert perpendicular_distance((3, 0, 0), (-1, 0, 0), (1, 0, 0)) == pytest.approx(2.0)
        assert perpendicular_distance((0, 3, 4), (0, 0, 0), (0, 0, 0)) == pytest.approx(5.0)

    def test_collinear_reduces_to_endpoints(self, straight_keyframes):
        result = simplify_path(straight_keyframes, 0.1)
        assert [k.frame for k in result] == [0, 25]

    def test_keeps_spike(self):
        keyframes = [CameraKeyframe(i * 5, (float(i), 5.0 if i == 2 else 0.0, 0.0)) for i in range(5)]
        frames = [k.frame for k in simplify_path(keyframes, 0.1)]
        assert 10 in frames
        assert frames[0] == 0 and frames[-1] == 20

    def test_large_tolerance(self):
        keyframes = [CameraKeyframe(i * 5, (float(i), 5.0 if i == 2 else 0.0, 0.0)) for i in range(5)]
        assert [k.frame for k in simplify_path(keyframes, 10.0)] == [0, 20]

    def test_negative_tolerance_treated_as_zero(self, straight_keyframes):
        result = simplify_path(straight_keyframes, -0.5)
        assert [k.frame for k in result] == [0, 25]

    def test_short_input_copied(self, straight_keyframes):
        pair = straight_keyframes[:2]
        result = simplify_path(pair)
        assert result == pair
        assert result is not pair


# =====================================================================
# resample_keyframes / smooth_keyframes
# =====================================================================

class TestResampleKeyframes:

    def test_aligned_interval_reproduces_keyframes(self, straight_keyframes):
        result = resample_keyframes(straight_keyframes, 5)
        assert [k.frame for k in result] == [k.frame for k in straight_keyframes]
        for new, old in zip(result, straight_keyframes):
            assert new.position == pytest.approx(old.position)

    def test_interval_stops_at_last_frame(self, straight_keyframes):
        assert [k.frame for k in resample_keyframes(straight_keyframes, 10)] == [0, 10, 20]

    def test_fills_missing_fov(self, camera_keyframes):
        result = resample_keyframes(camera_keyframes, 5, default_fov=50)
        by_frame = {k.frame: k for k in result}
        assert len(result) == 9
        assert by_frame[25].fov == pytest.approx(50.0)
        assert by_frame[25].position == pytest.approx((10.0, 2.0, 0.0))

    @pytest.mark.parametrize("interval", [0, -3])
    def test_non_positive_interval(self, straight_keyframes, interval):
        result = resample_keyframes(straight_keyframes, interval)
        assert result == straight_keyframes
        assert result is not straight_keyframes


class TestSmoothKeyframes:

    def test_linear_interior_unchanged(self, straight_keyframes):
        result = smooth_keyframes(straight_keyframes, 3)
        assert [k.position[0] for k in result] == pytest.approx([0.5, 1, 2, 3, 4, 4.5])

    def test_flattens_spike(self):
        keyframes = [CameraKeyframe(i, (0.0, 3.0 if i == 2 else 0.0, 0.0)) for i in range(5)]
        ys = [k.position[1] for k in smooth_keyframes(keyframes, 3)]
        assert ys == pytest.approx([0.0, 1.0, 1.0, 1.0, 0.0])

    def test_preserves_rotation_and_fov(self, camera_keyframes):
        result = smooth_keyframes(camera_keyframes, 3)
        for new, old in zip(result, camera_keyframes):
            assert new.frame == old.frame
            assert new.rotation == old.rotation
            assert new.fov == old.fov

    @pytest.mark.parametrize("window_size", [-1, 0, 1])
    def test_non_positive_window_unchanged(self, straight_keyframes, window_size):
        assert smooth_keyframes(straight_keyframes, window_size) == straight_keyframes

    def test_short_input_unchanged(self, straight_keyframes):
        pair = straight_keyframes[:2]
        assert smooth_keyframes(pair, 3) == pair
