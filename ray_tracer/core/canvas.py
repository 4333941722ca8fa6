"""Fixed-size grid of colours backed by a numpy array.

Storage is float64 with shape (height, width, 3): row index is y, column
index is x. Pixels start black. write_pixel mutates in place; pixel_at
returns exactly the last value written to that cell.
"""

from __future__ import annotations

import numbers
from collections.abc import Iterator

import numpy as np
from PIL import Image

from ray_tracer.core.color import BLACK, MAX_CHANNEL, Color


def channel_array(values: np.ndarray) -> np.ndarray:
    """Vectorised clamp-round mapping, identical to color.channel_value."""
    clean = np.nan_to_num(values, nan=0.0, posinf=1.0, neginf=0.0)
    clamped = np.clip(clean, 0.0, 1.0)
    return np.floor(clamped * MAX_CHANNEL + 0.5).astype(np.uint8)


class Canvas:
    def __init__(self, width: int, height: int):
        if not isinstance(width, numbers.Integral) or not isinstance(height, numbers.Integral):
            raise TypeError(f'Canvas dimensions must be integers, got {width!r}x{height!r}')
        if width <= 0 or height <= 0:
            raise ValueError(f'Canvas dimensions must be positive, got {width}x{height}')
        self.width = int(width)
        self.height = int(height)
        self._grid = np.zeros((self.height, self.width, 3), dtype=np.float64)

    def __repr__(self) -> str:
        return f'Canvas({self.width}, {self.height})'

    def _check_bounds(self, x: int, y: int) -> None:
        # numpy would silently wrap negative indices
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f'Pixel ({x}, {y}) outside {self.width}x{self.height} canvas')

    def pixel_at(self, x: int, y: int) -> Color:
        self._check_bounds(x, y)
        r, g, b = self._grid[y, x]
        return Color(float(r), float(g), float(b))

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        self._check_bounds(x, y)
        self._grid[y, x] = (color.red, color.green, color.blue)

    def fill(self, color: Color = BLACK) -> None:
        self._grid[:, :] = (color.red, color.green, color.blue)

    def pixels(self) -> Iterator[tuple[int, int, Color]]:
        """Yield (x, y, colour) row by row, top to bottom."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y, self.pixel_at(x, y)

    def channels(self) -> np.ndarray:
        """8-bit channel values, shape (height, width, 3)."""
        return channel_array(self._grid)

    def to_ppm(self, max_line_length: int | None = None) -> str:
        from ray_tracer.core.ppm import canvas_to_ppm

        return canvas_to_ppm(self, max_line_length=max_line_length)

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.channels())
