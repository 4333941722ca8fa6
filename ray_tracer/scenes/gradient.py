"""Horizontal colour blend, tinted by a vertical Hadamard product.

Each column blends linearly from LEFT to RIGHT:

  c(t) = LEFT * (1 - t) + RIGHT * t,   t = x / (width - 1)

and each row multiplies that colour component-wise by a tint fading from
white (top) to TINT (bottom). Exercises Color add, scalar mul and
Color * Color blending.

Example:
    ray-tracer gradient ./out -W 256 -H 128 --png
"""

from ray_tracer.core.canvas import Canvas
from ray_tracer.core.color import WHITE, Color
from ray_tracer.core.types import Scene

scene = Scene(
    name='gradient',
    help='Blend two colours across the canvas (colour arithmetic demo).',
)

LEFT = Color(1.0, 0.2, 0.0)
RIGHT = Color(0.0, 0.4, 1.0)
TINT = Color(0.2, 0.2, 0.2)


def lerp(a: Color, b: Color, t: float) -> Color:
    return a * (1.0 - t) + b * t


@scene.render
def render(args) -> Canvas:
    canvas = Canvas(args.width, args.height)
    x_span = max(canvas.width - 1, 1)
    y_span = max(canvas.height - 1, 1)
    for y in range(canvas.height):
        tint = lerp(WHITE, TINT, y / y_span)
        for x in range(canvas.width):
            canvas.write_pixel(x, y, lerp(LEFT, RIGHT, x / x_span) * tint)
    return canvas
