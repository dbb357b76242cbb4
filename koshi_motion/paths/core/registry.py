"""Name -> factory lookup for path generators."""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional

from .base import PathConfig, PathGenerator
from .circular import CIRCULAR_CONFIG, CircularPath
from .linear import LINEAR_CONFIG, LinearPath
from .lissajous import LISSAJOUS_CONFIG, Lissajous3DPath
from .lorenz import LORENZ_CONFIG, LorenzPath
from .spline import SPLINE_CONFIG, SplinePath

logger = logging.getLogger(__name__)

PathFactory = Callable[..., PathGenerator]


@dataclass(frozen=True)
class PathRegistryEntry:
    type: str
    factory: PathFactory
    get_config: Callable[[], PathConfig]


class PathRegistry:
    """
    Registry of available path types.

    Factories are called as factory(params, **options); options carry
    non-numeric construction data such as spline control points.
    """

    def __init__(self):
        self._paths: Dict[str, PathRegistryEntry] = {}

    def register(
        self,
        path_type: str,
        factory: PathFactory,
        get_config: Optional[Callable[[], PathConfig]] = None,
    ) -> None:
        if get_config is None:
            get_config = lambda: factory(None).get_config()
        self._paths[path_type] = PathRegistryEntry(path_type, factory, get_config)

    def unregister(self, path_type: str) -> bool:
        return self._paths.pop(path_type, None) is not None

    def has(self, path_type: str) -> bool:
        return path_type in self._paths

    def get(self, path_type: str) -> Optional[PathRegistryEntry]:
        return self._paths.get(path_type)

    def create(
        self,
        path_type: str,
        params: Optional[Mapping[str, float]] = None,
        **options: Any,
    ) -> Optional[PathGenerator]:
        entry = self._paths.get(path_type)
        if entry is None:
            logger.warning("PathRegistry: unknown path type %r", path_type)
            return None
        return entry.factory(params, **options)

    def get_config(self, path_type: str) -> Optional[PathConfig]:
        entry = self._paths.get(path_type)
        if entry is None:
            return None
        return entry.get_config()

    def get_types(self) -> List[str]:
        return list(self._paths.keys())

    def get_all_configs(self) -> List[PathConfig]:
        return [entry.get_config() for entry in self._paths.values()]

    def __contains__(self, path_type: str) -> bool:
        return self.has(path_type)

    def __len__(self) -> int:
        return len(self._paths)


def _spline_factory(params=None, control_points=None, **_options) -> SplinePath:
    return SplinePath(control_points, params)


def register_builtin_paths(registry: PathRegistry) -> PathRegistry:
    """Add the five built-in path families to a registry."""
    registry.register("lorenz", lambda params=None, **_: LorenzPath(params), lambda: LORENZ_CONFIG)
    registry.register("lissajous", lambda params=None, **_: Lissajous3DPath(params), lambda: LISSAJOUS_CONFIG)
    registry.register("circular", lambda params=None, **_: CircularPath(params), lambda: CIRCULAR_CONFIG)
    registry.register("spline", _spline_factory, lambda: SPLINE_CONFIG)
    registry.register("linear", lambda params=None, **_: LinearPath(params), lambda: LINEAR_CONFIG)
    return registry


def create_default_registry() -> PathRegistry:
    return register_builtin_paths(PathRegistry())


PATH_REGISTRY = create_default_registry()


def create_path(
    path_type: str,
    params: Optional[Mapping[str, float]] = None,
    **options: Any,
) -> Optional[PathGenerator]:
    """Create a path from the default registry."""
    return PATH_REGISTRY.create(path_type, params, **options)


def get_path_types() -> List[str]:
    return PATH_REGISTRY.get_types()


def get_path_configs() -> List[PathConfig]:
    return PATH_REGISTRY.get_all_configs()


__all__ = [
    "PathRegistry",
    "PathRegistryEntry",
    "PATH_REGISTRY",
    "register_builtin_paths",
    "create_default_registry",
    "create_path",
    "get_path_types",
    "get_path_configs",
]
