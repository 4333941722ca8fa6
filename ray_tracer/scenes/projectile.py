"""Plot the trajectory of a projectile under gravity and wind.

Starts a projectile at point(0, 1, 0) with velocity
normalize(vector(1, 1.8, 0)) * 11.25, in an environment with gravity
vector(0, -0.1, 0) and wind vector(-0.01, 0, 0). Each tick adds the
velocity to the position and the environment to the velocity. Every
position is plotted in red until the projectile drops below y = 0.

The y axis is flipped so the ground is the bottom row. Positions outside
the canvas are skipped. The default velocity is tuned for a 900×550 canvas.

Example:
    ray-tracer projectile ./out -W 900 -H 550
"""

from dataclasses import dataclass

from ray_tracer.core.canvas import Canvas
from ray_tracer.core.color import RED
from ray_tracer.core.tuples import Tuple, point, vector
from ray_tracer.core.types import Scene

scene = Scene(
    name='projectile',
    help='Plot a projectile trajectory (points and vectors in action).',
)

MAX_TICKS = 10_000


@dataclass(frozen=True)
class Projectile:
    position: Tuple  # point
    velocity: Tuple  # vector


@dataclass(frozen=True)
class Environment:
    gravity: Tuple  # vector
    wind: Tuple  # vector


def tick(env: Environment, proj: Projectile) -> Projectile:
    """Advance the projectile by one time step."""
    position = proj.position + proj.velocity
    velocity = proj.velocity + env.gravity + env.wind
    return Projectile(position, velocity)


def trajectory(env: Environment, proj: Projectile) -> list[Tuple]:
    """Positions from launch until the projectile falls below the ground."""
    positions = []
    for _ in range(MAX_TICKS):
        if proj.position.y < 0:
            break
        positions.append(proj.position)
        proj = tick(env, proj)
    return positions


def plot(canvas: Canvas, positions: list[Tuple]) -> int:
    """Mark each position on the canvas. Returns how many were on-canvas."""
    plotted = 0
    for pos in positions:
        x = int(round(pos.x))
        y = canvas.height - 1 - int(round(pos.y))
        if 0 <= x < canvas.width and 0 <= y < canvas.height:
            canvas.write_pixel(x, y, RED)
            plotted += 1
    return plotted


@scene.render
def render(args) -> Canvas:
    canvas = Canvas(args.width, args.height)
    proj = Projectile(point(0, 1, 0), vector(1, 1.8, 0).normalize() * 11.25)
    env = Environment(vector(0, -0.1, 0), vector(-0.01, 0, 0))
    positions = trajectory(env, proj)
    plot(canvas, positions)
    return canvas
