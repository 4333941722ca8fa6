"""ray-tracer — Render demo scenes to plain PPM (P3) images.

Usage: ray-tracer <scene> <out_dir> [options]

Scenes are auto-discovered from ray_tracer/scenes/.
Each scene module's docstring is its documentation.
Run `ray-tracer help <scene>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, ray-tracer looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
  RAY_TRACER_WIDTH / RAY_TRACER_HEIGHT / RAY_TRACER_OUT_NAME / RAY_TRACER_WRAP
  set defaults that command-line flags override.
"""

import argparse
import importlib
import os
import sys

from ray_tracer import registry
from ray_tracer.core.env import Settings, load_env, load_settings
from ray_tracer.core.ppm import PPM_LINE_LIMIT, save_png, write_ppm
from ray_tracer.core.report import format_json, format_text
from ray_tracer.core.types import RenderReport


def _load_scene_module(name: str) -> object:
    """Load the raw module for a scene (for docstring access)."""
    return importlib.import_module(f'ray_tracer.scenes.{name}')


def _short_help(name: str, fallback: str) -> str:
    doc = (_load_scene_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    scenes = registry.all_scenes()

    epilog = (
        'Examples:\n'
        '  ray-tracer projectile ./out -W 900 -H 550\n'
        '  ray-tracer gradient ./out --png\n'
        '  ray-tracer starburst ./out -o burst --wrap --json\n'
        '  ray-tracer help projectile\n'
    )
    parser = argparse.ArgumentParser(
        prog='ray-tracer',
        description='Render demo scenes to plain PPM (P3) images.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='scene', help='Scene to render')

    for name, scene in sorted(scenes.items()):
        p = sub.add_parser(name, help=_short_help(name, scene.help))
        p.add_argument('out_dir', help='Directory for rendered images')
        p.add_argument('-W', '--width', type=int, default=None, help='Canvas width in pixels')
        p.add_argument('-H', '--height', type=int, default=None, help='Canvas height in pixels')
        p.add_argument('-o', '--output', default=None, help='Output file stem (default: scene name)')
        p.add_argument(
            '--wrap',
            action=argparse.BooleanOptionalAction,
            default=None,
            help=f'Wrap PPM pixel rows at {PPM_LINE_LIMIT} characters (default: RAY_TRACER_WRAP)',
        )
        p.add_argument('--png', action='store_true', help='Also save a PNG next to the PPM')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')

    help_parser = sub.add_parser('help', help='Print full docs for a scene')
    help_parser.add_argument('command', nargs='?', help='Scene name')

    return parser


def _print_help(command: str | None) -> None:
    """Print full module docstring for a scene."""
    scenes = registry.all_scenes()

    if command is None:
        print('Available scenes:\n')
        for name, scene in sorted(scenes.items()):
            print(f'  {name:<14} {_short_help(name, scene.help)}')
        print('\nRun: ray-tracer help <scene> for full docs.')
        return

    if command not in scenes:
        print(f'Unknown scene: {command}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(scenes))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_scene_module(command).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {command!r})')
        return
    print(doc)


def _apply_settings(args: argparse.Namespace, settings: Settings) -> None:
    """Fill unset flags from settings. Flags always win."""
    if args.width is None:
        args.width = settings.width
    if args.height is None:
        args.height = settings.height
    if args.output is None:
        args.output = settings.out_name or args.scene
    if args.wrap is None:
        args.wrap = settings.wrap


def _render(args: argparse.Namespace) -> RenderReport:
    scene = registry.get(args.scene)
    canvas = scene.execute(args)
    report = RenderReport.from_canvas(scene.name, canvas)

    max_line = PPM_LINE_LIMIT if args.wrap else None
    ppm_path = write_ppm(canvas, os.path.join(args.out_dir, f'{args.output}.ppm'), max_line_length=max_line)
    print(f'ray-tracer: wrote {ppm_path}', file=sys.stderr)
    report.add_output('ppm', str(ppm_path))

    if args.png:
        png_path = save_png(canvas, os.path.join(args.out_dir, f'{args.output}.png'))
        print(f'ray-tracer: wrote {png_path}', file=sys.stderr)
        report.add_output('png', str(png_path))
    return report


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'ray-tracer: loaded {env_path}', file=sys.stderr)

    if not args.scene:
        parser.print_help()
        sys.exit(1)

    if args.scene == 'help':
        _print_help(getattr(args, 'command', None))
        return

    try:
        _apply_settings(args, load_settings())
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    if args.width <= 0 or args.height <= 0:
        print(f'Error: canvas size must be positive, got {args.width}x{args.height}', file=sys.stderr)
        sys.exit(1)

    try:
        report = _render(args)
    except OSError as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))


if __name__ == '__main__':
    main()
