"""Rays of unit direction vectors fanning out from the canvas centre.

For each of RAYS evenly spaced angles, builds vector(cos a, sin a, 0),
scales it to an arbitrary length and normalizes it back, then steps along
the unit direction from the centre to the edge. Ray brightness falls off
with distance. The centre is a point; centre + direction * t is a point.

Example:
    ray-tracer starburst ./out -W 200 -H 200
"""

import math

from ray_tracer.core.canvas import Canvas
from ray_tracer.core.color import Color
from ray_tracer.core.tuples import Tuple, point, vector
from ray_tracer.core.types import Scene

scene = Scene(
    name='starburst',
    help='Draw normalized direction vectors radiating from the centre.',
)

RAYS = 24
RAY_COLOUR = Color(1.0, 0.9, 0.4)


def directions(count: int = RAYS) -> list[Tuple]:
    """Unit vectors at evenly spaced angles in the xy plane."""
    result = []
    for i in range(count):
        angle = 2 * math.pi * i / count
        raw = vector(math.cos(angle), math.sin(angle), 0) * (i + 1)
        result.append(raw.normalize())
    return result


@scene.render
def render(args) -> Canvas:
    canvas = Canvas(args.width, args.height)
    centre = point(canvas.width / 2, canvas.height / 2, 0)
    reach = (centre - point(0, 0, 0)).magnitude()
    for direction in directions():
        for step in range(int(reach)):
            pos = centre + direction * step
            x, y = int(pos.x), int(pos.y)
            if not (0 <= x < canvas.width and 0 <= y < canvas.height):
                break
            canvas.write_pixel(x, y, RAY_COLOUR * (1.0 - step / reach))
    return canvas
