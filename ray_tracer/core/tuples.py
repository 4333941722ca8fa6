"""Homogeneous 4-component tuples: points (w=1) and vectors (w=0).

Every operation returns a new Tuple. Point/vector bookkeeping is never
enforced; it falls out of component-wise arithmetic on w:

  point  - point  -> vector   (1 - 1 = 0)
  point  - vector -> point    (1 - 0 = 1)
  point  + vector -> point
  vector - vector -> vector

Degenerate input is not guarded: dividing by zero or normalizing a
zero-length vector yields inf/nan, normalizing a point corrupts w, and
crossing points silently ignores their w.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

EPSILON = 1e-5


def _safe_div(a: float, b: float) -> float:
    """IEEE division: x/0 and overflow give inf or nan, silently."""
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        return float(np.float64(a) / np.float64(b))


@dataclass(frozen=True)
class Tuple:
    """A point or vector in homogeneous coordinates."""

    x: float
    y: float
    z: float
    w: float

    def __post_init__(self) -> None:
        for name in ('x', 'y', 'z', 'w'):
            object.__setattr__(self, name, float(getattr(self, name)))

    def is_point(self) -> bool:
        return self.w == 1.0

    def is_vector(self) -> bool:
        return self.w == 0.0

    def add(self, other: Tuple) -> Tuple:
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def sub(self, other: Tuple) -> Tuple:
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def neg(self) -> Tuple:
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def mul(self, scalar: float) -> Tuple:
        return Tuple(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    def div(self, scalar: float) -> Tuple:
        return Tuple(
            _safe_div(self.x, scalar),
            _safe_div(self.y, scalar),
            _safe_div(self.z, scalar),
            _safe_div(self.w, scalar),
        )

    def magnitude(self) -> float:
        """Euclidean length of (x, y, z). w does not contribute."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Tuple:
        """Divide all four components by magnitude(). Meant for vectors only."""
        return self.div(self.magnitude())

    def dot(self, other: Tuple) -> float:
        """4-component dot product, w*w included."""
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: Tuple) -> Tuple:
        """3D cross product of the xyz parts. Always returns a vector."""
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def approx_eq(self, other: Tuple, epsilon: float = EPSILON) -> bool:
        return (
            abs(self.x - other.x) < epsilon
            and abs(self.y - other.y) < epsilon
            and abs(self.z - other.z) < epsilon
            and abs(self.w - other.w) < epsilon
        )

    def __add__(self, other: Tuple) -> Tuple:
        return self.add(other)

    def __sub__(self, other: Tuple) -> Tuple:
        return self.sub(other)

    def __neg__(self) -> Tuple:
        return self.neg()

    def __mul__(self, scalar: float) -> Tuple:
        return self.mul(scalar)

    def __rmul__(self, scalar: float) -> Tuple:
        return self.mul(scalar)

    def __truediv__(self, scalar: float) -> Tuple:
        return self.div(scalar)


def point(x: float, y: float, z: float) -> Tuple:
    return Tuple(x, y, z, 1.0)


def vector(x: float, y: float, z: float) -> Tuple:
    return Tuple(x, y, z, 0.0)


def magnitude(t: Tuple) -> float:
    return t.magnitude()


def normalize(t: Tuple) -> Tuple:
    return t.normalize()


def dot(a: Tuple, b: Tuple) -> float:
    return a.dot(b)


def cross(a: Tuple, b: Tuple) -> Tuple:
    return a.cross(b)
