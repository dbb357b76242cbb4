"""Shared helpers for Koshi motion nodes."""

import json
import logging
from typing import Any

logger = logging.getLogger(__name__)


def parse_json_input(text: str, default: Any, label: str = "input") -> Any:
    """Parse a JSON widget value, falling back to default on empty or malformed text."""
    if text is None or not str(text).strip():
        return default
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        logger.warning("[Koshi] Invalid JSON for %s: %s", label, e)
        return default
    if default is not None and not isinstance(value, type(default)):
        logger.warning("[Koshi] Expected %s for %s, got %s", type(default).__name__, label, type(value).__name__)
        return default
    return value


__all__ = ["parse_json_input"]
