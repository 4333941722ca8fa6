"""RGB colour values with linear blending and 8-bit channel mapping.

Channels are unconstrained floats; blending may push them below 0 or
above 1. Only the channel mapping clamps:

  clamp(v, 0.0, 1.0) -> floor(v * 255 + 0.5)

Clamping happens before scaling, so -999 maps to 0 and 999 to 255.
Rounding is half-up on the clamped value: 0.5 -> 127.5 -> 128.
NaN channels (from degenerate arithmetic) map to 0.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

MAX_CHANNEL = 255


def channel_value(value: float) -> int:
    """Map one float channel to an int in [0, 255]."""
    if math.isnan(value):
        return 0
    clamped = min(max(value, 0.0), 1.0)
    return int(math.floor(clamped * MAX_CHANNEL + 0.5))


@dataclass(frozen=True)
class Color:
    red: float
    green: float
    blue: float

    def __post_init__(self) -> None:
        for name in ('red', 'green', 'blue'):
            object.__setattr__(self, name, float(getattr(self, name)))

    def add(self, other: Color) -> Color:
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def sub(self, other: Color) -> Color:
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def hadamard(self, other: Color) -> Color:
        """Component-wise product (colour blending, not a dot product)."""
        return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)

    def mul(self, other: Color | float) -> Color:
        """Scale by a number, or blend with another Color."""
        if isinstance(other, Color):
            return self.hadamard(other)
        return Color(self.red * other, self.green * other, self.blue * other)

    def to_channel_triple(self) -> tuple[int, int, int]:
        return (channel_value(self.red), channel_value(self.green), channel_value(self.blue))

    def to_text(self) -> str:
        r, g, b = self.to_channel_triple()
        return f'{r} {g} {b}'

    def to_hex(self) -> str:
        r, g, b = self.to_channel_triple()
        return f'#{r:02x}{g:02x}{b:02x}'

    def approx_eq(self, other: Color, epsilon: float = 1e-5) -> bool:
        return (
            abs(self.red - other.red) < epsilon
            and abs(self.green - other.green) < epsilon
            and abs(self.blue - other.blue) < epsilon
        )

    def __add__(self, other: Color) -> Color:
        return self.add(other)

    def __sub__(self, other: Color) -> Color:
        return self.sub(other)

    def __mul__(self, other: Color | float) -> Color:
        return self.mul(other)

    def __rmul__(self, other: float) -> Color:
        return self.mul(other)


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
RED = Color(1.0, 0.0, 0.0)
GREEN = Color(0.0, 1.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)
