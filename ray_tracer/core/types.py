"""Shared types for ray-tracer: Scene, RenderReport."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from ray_tracer.core.canvas import Canvas


class Scene:
    """A self-registering demo scene.

    Usage in a scene module:

        scene = Scene(name='projectile', help='Plot a projectile trajectory')

        @scene.render
        def render(args):
            canvas = Canvas(args.width, args.height)
            ...
            return canvas
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._render_fn: Callable[[Any], Canvas] | None = None

    def render(self, fn: Callable[[Any], Canvas]) -> Callable[[Any], Canvas]:
        """Decorator to register the render function."""
        self._render_fn = fn
        return fn

    def execute(self, args: Any) -> Canvas:
        """Run the scene's render function and return its canvas."""
        if self._render_fn is None:
            raise RuntimeError(f'Scene {self.name} has no render function')
        return self._render_fn(args)


@dataclass
class RenderReport:
    """What a render produced, for text/JSON output."""

    scene: str = ''
    width: int = 0
    height: int = 0
    outputs: dict[str, str] = field(default_factory=dict)  # format -> path
    lit_pixels: int = 0  # pixels that serialize to something other than 0 0 0

    def add_output(self, fmt: str, path: str) -> None:
        self.outputs[fmt] = path

    @classmethod
    def from_canvas(cls, scene: str, canvas: Canvas) -> RenderReport:
        channels = canvas.channels()
        lit = int((channels.reshape(-1, 3).max(axis=1) > 0).sum())
        return cls(scene=scene, width=canvas.width, height=canvas.height, lit_pixels=lit)
