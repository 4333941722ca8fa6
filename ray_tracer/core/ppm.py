"""Plain PPM (P3) serialization, persistence and parsing.

Output layout, byte for byte:

  P3
  <width> <height>
  255
  <row 0: "r g b" triples, space-joined, x ascending>
  ...
  <row height-1>

followed by a trailing newline. Rows are not wrapped unless
max_line_length is given; PPM readers conventionally expect lines of at
most 70 characters (PPM_LINE_LIMIT). Wrapping breaks at spaces only and
never changes the sequence of numbers.
"""

from __future__ import annotations

import os
from pathlib import Path

from ray_tracer.core.canvas import Canvas
from ray_tracer.core.color import MAX_CHANNEL, Color

MAGIC = 'P3'
PPM_LINE_LIMIT = 70


class PPMError(ValueError):
    """Raised when P3 text cannot be parsed into a canvas."""


def _wrap_tokens(tokens: list[str], limit: int) -> list[str]:
    """Greedily pack tokens into space-joined lines no longer than limit."""
    lines = []
    current = ''
    for tok in tokens:
        if not current:
            current = tok
        elif len(current) + 1 + len(tok) <= limit:
            current += ' ' + tok
        else:
            lines.append(current)
            current = tok
    lines.append(current)
    return lines


def ppm_header(width: int, height: int) -> str:
    return f'{MAGIC}\n{width} {height}\n{MAX_CHANNEL}\n'


def canvas_to_ppm(canvas: Canvas, max_line_length: int | None = None) -> str:
    """Serialize a canvas to P3 text."""
    if max_line_length is not None and max_line_length < 3:
        # a single "255" sample must still fit on a line
        raise ValueError(f'max_line_length too small: {max_line_length}')

    channels = canvas.channels()
    body = []
    for y in range(canvas.height):
        tokens = [str(v) for v in channels[y].ravel().tolist()]
        if max_line_length is None:
            body.append(' '.join(tokens))
        else:
            body.extend(_wrap_tokens(tokens, max_line_length))

    return ppm_header(canvas.width, canvas.height) + '\n'.join(body) + '\n'


def write_ppm(canvas: Canvas, path: str | os.PathLike, max_line_length: int | None = None) -> Path:
    """Persist the exact canvas_to_ppm text. OSError propagates."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(canvas_to_ppm(canvas, max_line_length=max_line_length).encode('ascii'))
    return out


def save_png(canvas: Canvas, path: str | os.PathLike) -> Path:
    """Save the canvas as an 8-bit PNG through Pillow."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    canvas.to_image().save(out, format='PNG')
    return out


def _tokenize(text: str) -> list[str]:
    tokens = []
    for line in text.splitlines():
        line, _, _comment = line.partition('#')
        tokens.extend(line.split())
    return tokens


def _to_int(token: str, what: str) -> int:
    # plain ASCII digits only; int() would also take '1_0', '+5' and non-ASCII digits
    if not (token.isascii() and token.isdigit()):
        raise PPMError(f'Expected integer {what}, got {token!r}')
    return int(token)


def parse_ppm(text: str) -> Canvas:
    """Parse P3 text back into a canvas. Channels are scaled by 1/maxval."""
    tokens = _tokenize(text)
    if len(tokens) < 4:
        raise PPMError('Truncated PPM header')
    if tokens[0] != MAGIC:
        raise PPMError(f'Not a plain PPM file: magic {tokens[0]!r}')

    width = _to_int(tokens[1], 'width')
    height = _to_int(tokens[2], 'height')
    max_value = _to_int(tokens[3], 'max value')
    if width <= 0 or height <= 0:
        raise PPMError(f'Invalid dimensions {width}x{height}')
    if not 1 <= max_value <= 65535:
        raise PPMError(f'Max value out of range: {max_value}')

    samples = tokens[4:]
    expected = width * height * 3
    if len(samples) != expected:
        raise PPMError(f'Expected {expected} samples, got {len(samples)}')

    canvas = Canvas(width, height)
    values = [_to_int(s, 'sample') for s in samples]
    for i in range(0, expected, 3):
        r, g, b = values[i], values[i + 1], values[i + 2]
        if max(r, g, b) > max_value:
            raise PPMError(f'Sample out of range 0..{max_value}: {r} {g} {b}')
        pixel = i // 3
        canvas.write_pixel(
            pixel % width,
            pixel // width,
            Color(r / max_value, g / max_value, b / max_value),
        )
    return canvas


def read_ppm(path: str | os.PathLike) -> Canvas:
    """Read a P3 file. OSError propagates; bad content raises PPMError."""
    data = Path(path).read_bytes()
    try:
        text = data.decode('ascii')
    except UnicodeDecodeError as e:
        raise PPMError(f'Non-ASCII byte at offset {e.start} in {path}') from None
    return parse_ppm(text)
