"""Koshi Camera Path nodes - Keyframed camera interpolation."""

import logging

logger = logging.getLogger("koshi.motion")

NODE_CLASS_MAPPINGS = {}
NODE_DISPLAY_NAME_MAPPINGS = {}

try:
    from .nodes import NODE_CLASS_MAPPINGS as camera_nodes
    from .nodes import NODE_DISPLAY_NAME_MAPPINGS as camera_names
    NODE_CLASS_MAPPINGS.update(camera_nodes)
    NODE_DISPLAY_NAME_MAPPINGS.update(camera_names)
except ImportError as e:
    logger.debug("Failed to load camera path nodes: %s", e)

__all__ = ["NODE_CLASS_MAPPINGS", "NODE_DISPLAY_NAME_MAPPINGS"]
