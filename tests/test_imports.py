"""Verify all modules import correctly."""

import sys
import os
import importlib.util

# Ensure package is importable
PACKAGE_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PACKAGE_ROOT)


class TestCoreImports:
    """Core algorithm modules import with only numpy + scipy."""

    def test_import_paths_core(self):
        from koshi_motion.paths.core import (
            PathGenerator, PathRegistry, MotionController, calculate_progress, PATH_REGISTRY
        )
        assert callable(calculate_progress)
        assert issubclass(PathRegistry, object)

    def test_import_camera_core(self):
        from koshi_motion.camera.core import (
            slerp, interpolate_camera_path, simplify_path, resample_keyframes, smooth_keyframes
        )
        assert callable(slerp)
        assert callable(interpolate_camera_path)

    def test_import_utils(self):
        from koshi_motion.utils import parse_json_input
        assert callable(parse_json_input)

    def test_version(self):
        import koshi_motion
        assert koshi_motion.__version__ == "0.1.0"


class TestCategoryImports:
    """Each node category exposes its mappings."""

    def test_import_paths(self):
        from koshi_motion.paths import NODE_CLASS_MAPPINGS
        assert isinstance(NODE_CLASS_MAPPINGS, dict)
        assert NODE_CLASS_MAPPINGS

    def test_import_camera(self):
        from koshi_motion.camera import NODE_CLASS_MAPPINGS
        assert isinstance(NODE_CLASS_MAPPINGS, dict)
        assert NODE_CLASS_MAPPINGS


class TestCustomNodeEntryPoint:
    """The root __init__ loads as a ComfyUI custom node package."""

    def _load_root(self):
        name = "koshi_custom_node_root"
        spec = importlib.util.spec_from_file_location(
            name,
            os.path.join(PACKAGE_ROOT, "__init__.py"),
            submodule_search_locations=[PACKAGE_ROOT],
        )
        module = importlib.util.module_from_spec(spec)
        sys.modules[name] = module
        spec.loader.exec_module(module)
        return module

    def test_root_collects_all_categories(self):
        root = self._load_root()
        assert set(root.NODE_CLASS_MAPPINGS) == {
            "Koshi_MotionModifier", "Koshi_MotionPath", "Koshi_PathInfo", "Koshi_CameraPath",
        }
        assert set(root.NODE_DISPLAY_NAME_MAPPINGS) == set(root.NODE_CLASS_MAPPINGS)
