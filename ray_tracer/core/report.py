"""Report builder — text and JSON output for ray-tracer renders."""

import json
from typing import Any

from ray_tracer.core.types import RenderReport


def format_text(report: RenderReport) -> str:
    """Format report as human-readable text."""
    total = report.width * report.height
    lines = [f'ray-tracer: {report.scene} ({report.width}×{report.height})', '']

    for fmt, path in sorted(report.outputs.items()):
        lines.append(f'  {fmt}: {path}')

    pct = report.lit_pixels / total * 100 if total else 0.0
    lines.append(f'  lit: {report.lit_pixels}/{total} pixels ({pct:.1f}%)')

    return '\n'.join(lines)


def format_json(report: RenderReport) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'scene': report.scene,
        'dimensions': {'width': report.width, 'height': report.height},
        'outputs': dict(report.outputs),
        'lit_pixels': report.lit_pixels,
    }
    return json.dumps(obj, indent=2)
