"""
ComfyUI-Koshi-Motion
Mathematical motion paths and camera path interpolation for 3D animation.
"""

import importlib
import logging

logger = logging.getLogger("Koshi")

NODE_CLASS_MAPPINGS = {}
NODE_DISPLAY_NAME_MAPPINGS = {}

NODE_CATEGORIES = [
    "koshi_motion.paths",
    "koshi_motion.camera",
]


def load_nodes():
    """Import every node category relative to this custom-node package and merge its mappings."""
    for category in NODE_CATEGORIES:
        try:
            if __package__:
                module = importlib.import_module(f".{category}", __package__)
            else:
                module = importlib.import_module(category)

            if hasattr(module, "NODE_CLASS_MAPPINGS"):
                NODE_CLASS_MAPPINGS.update(module.NODE_CLASS_MAPPINGS)
            if hasattr(module, "NODE_DISPLAY_NAME_MAPPINGS"):
                NODE_DISPLAY_NAME_MAPPINGS.update(module.NODE_DISPLAY_NAME_MAPPINGS)

        except Exception as e:
            logger.warning("Error loading %s: %s", category, e)


load_nodes()

__all__ = ["NODE_CLASS_MAPPINGS", "NODE_DISPLAY_NAME_MAPPINGS"]
