"""Path generator contract and shared caching behaviour."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

import numpy as np

from .vectors import Point3D, points_to_array, polyline_length


@dataclass(frozen=True)
class ParameterMeta:
    """UI / validation metadata for one path parameter."""
    key: str
    label: str
    min: float
    max: float
    step: float
    default: float
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "key": self.key,
            "label": self.label,
            "min": self.min,
            "max": self.max,
            "step": self.step,
            "default": self.default,
        }
        if self.description is not None:
            data["description"] = self.description
        return data


@dataclass(frozen=True)
class PathConfig:
    """Static description of a path type, shared by all its instances."""
    type: str
    name: str
    description: str
    default_params: Mapping[str, float] = field(default_factory=dict)
    parameter_meta: Tuple[ParameterMeta, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "name": self.name,
            "description": self.description,
            "defaultParams": dict(self.default_params),
            "parameterMeta": [meta.to_dict() for meta in self.parameter_meta],
        }


def merge_params(
    defaults: Mapping[str, float],
    params: Optional[Mapping[str, Optional[float]]] = None,
) -> Dict[str, float]:
    """Overlay params on defaults, skipping None values."""
    merged = dict(defaults)
    if params:
        for key, value in params.items():
            if value is not None:
                merged[key] = value
    return merged


class PathGenerator(ABC):
    """
    Base class for all motion paths.

    A path maps progress in [0, 1] to a 3D point and unit tangent. Subclasses
    set CONFIG and implement get_position_at / get_tangent_at. Paths that bake
    samples from their parameters override _rebuild(), which runs on
    construction and after every parameter write that changes a value.
    """

    CONFIG: PathConfig

    def __init__(self, params: Optional[Mapping[str, Optional[float]]] = None):
        self.params: Dict[str, float] = merge_params(self.CONFIG.default_params, params)
        self._version = 0
        # (version, resolution, samples) of the most recent precompute
        self._sample_cache: Optional[Tuple[int, int, np.ndarray]] = None
        self._rebuild()

    @abstractmethod
    def get_position_at(self, progress: float) -> Point3D:
        """Position at progress, clamped to [0, 1]."""

    @abstractmethod
    def get_tangent_at(self, progress: float) -> Point3D:
        """Unit direction of travel at progress."""

    def get_config(self) -> PathConfig:
        return self.CONFIG

    @property
    def version(self) -> int:
        """Incremented whenever cached samples become stale."""
        return self._version

    def precompute_path(self, resolution: int) -> List[Point3D]:
        """Sample resolution + 1 points at evenly spaced progress; resolution 0 gives the start point."""
        samples = self._sample_array(resolution)
        return [Point3D.from_array(row) for row in samples]

    def get_length(self) -> float:
        return polyline_length(self._sample_array(100))

    def set_params(self, params: Mapping[str, Optional[float]]) -> None:
        changed = any(
            value is not None and self.params.get(key) != value
            for key, value in params.items()
        )
        if not changed:
            return
        self.params = merge_params(self.params, params)
        self._invalidate()

    def get_params(self) -> Dict[str, float]:
        return dict(self.params)

    def _invalidate(self) -> None:
        self._version += 1
        self._sample_cache = None
        self._rebuild()

    def _rebuild(self) -> None:
        """Recompute baked state from self.params."""

    def _sample_array(self, resolution: int) -> np.ndarray:
        resolution = max(0, int(resolution))
        cached = self._sample_cache
        if cached is not None and cached[:2] == (self._version, resolution):
            return cached[2]

        if resolution == 0:
            samples = points_to_array([self.get_position_at(0.0)])
        else:
            samples = points_to_array(
                [self.get_position_at(i / resolution) for i in range(resolution + 1)]
            )
        samples.flags.writeable = False
        self._sample_cache = (self._version, resolution, samples)
        return samples


__all__ = [
    "ParameterMeta",
    "PathConfig",
    "PathGenerator",
    "merge_params",
]
