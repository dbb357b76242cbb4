"""Koshi Motion Path nodes - Mathematical motion paths for 3D objects."""

import logging

logger = logging.getLogger("koshi.motion")

NODE_CLASS_MAPPINGS = {}
NODE_DISPLAY_NAME_MAPPINGS = {}

try:
    from .nodes import NODE_CLASS_MAPPINGS as path_nodes
    from .nodes import NODE_DISPLAY_NAME_MAPPINGS as path_names
    NODE_CLASS_MAPPINGS.update(path_nodes)
    NODE_DISPLAY_NAME_MAPPINGS.update(path_names)
except ImportError as e:
    logger.debug("Failed to load motion path nodes: %s", e)

__all__ = ["NODE_CLASS_MAPPINGS", "NODE_DISPLAY_NAME_MAPPINGS"]
