"""ray-tracer — foundational types for a software ray tracer.

Points and vectors (ray_tracer.core.tuples), colours (ray_tracer.core.color)
and a pixel canvas with plain PPM export (ray_tracer.core.canvas,
ray_tracer.core.ppm).
"""

from ray_tracer.core.canvas import Canvas
from ray_tracer.core.color import BLACK, BLUE, GREEN, RED, WHITE, Color
from ray_tracer.core.ppm import PPMError, canvas_to_ppm, parse_ppm, read_ppm, save_png, write_ppm
from ray_tracer.core.tuples import EPSILON, Tuple, cross, dot, magnitude, normalize, point, vector

__all__ = [
    'BLACK',
    'BLUE',
    'Canvas',
    'Color',
    'EPSILON',
    'GREEN',
    'PPMError',
    'RED',
    'Tuple',
    'WHITE',
    'canvas_to_ppm',
    'cross',
    'dot',
    'magnitude',
    'normalize',
    'parse_ppm',
    'point',
    'read_ppm',
    'save_png',
    'vector',
    'write_ppm',
]
