"""Scene auto-discovery.

Imports every public module in ray_tracer/scenes/ and collects the ones
that define a `scene` object of type Scene, keyed by scene name. Two
modules claiming the same name is an error.
"""

import importlib
import pkgutil

from ray_tracer.core.types import Scene

_registry: dict[str, Scene] = {}


def discover() -> dict[str, Scene]:
    """Import all scene modules once and return the registry."""
    if _registry:
        return _registry

    import ray_tracer.scenes as pkg

    for module_info in pkgutil.iter_modules(pkg.__path__):
        if module_info.name.startswith('_'):
            continue
        module = importlib.import_module(f'{pkg.__name__}.{module_info.name}')
        scene = getattr(module, 'scene', None)
        if not isinstance(scene, Scene):
            continue
        if scene.name in _registry:
            raise RuntimeError(f'Scene {scene.name!r} defined twice (second in {module.__name__})')
        _registry[scene.name] = scene

    return _registry


def get(name: str) -> Scene:
    """Get a scene by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown scene: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_scenes() -> dict[str, Scene]:
    return discover()
