"""Render settings from the environment and an optional .env file.

Load order (first wins):
  1. Existing OS environment variables — never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables:
  RAY_TRACER_WIDTH     default canvas width  (int, > 0)
  RAY_TRACER_HEIGHT    default canvas height (int, > 0)
  RAY_TRACER_OUT_NAME  output file stem (defaults to the scene name)
  RAY_TRACER_WRAP      wrap PPM rows at 70 chars (1/true/yes/on)

Only the CLI reads settings. The core value types take no configuration.
"""

import os
from dataclasses import dataclass
from pathlib import Path

PREFIX = 'RAY_TRACER_'
_TRUTHY = {'1', 'true', 'yes', 'on'}


@dataclass
class Settings:
    width: int = 100
    height: int = 50
    out_name: str | None = None
    wrap: bool = False


def find_dotenv(start: Path) -> Path | None:
    """Return the nearest .env at or above start, without crossing a .git boundary."""
    for directory in (start.resolve(), *start.resolve().parents):
        if (directory / '.env').is_file():
            return directory / '.env'
        # .git is a dir in a normal clone, a file in a worktree
        if (directory / '.git').exists():
            return None
    return None


def read_dotenv(path: Path) -> dict[str, str]:
    """KEY=value pairs from a .env file. Quotes around values are stripped."""
    pairs: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            pairs[key] = value.strip().strip('"').strip("'")
    return pairs


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env entries into os.environ where not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path: Path | None = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in read_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def _positive_int(name: str, default: int) -> int:
    raw = os.environ.get(PREFIX + name)
    if raw is None or raw.strip() == '':
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f'{PREFIX}{name} must be an integer, got {raw!r}') from None
    if value <= 0:
        raise ValueError(f'{PREFIX}{name} must be positive, got {value}')
    return value


def load_settings() -> Settings:
    """Build Settings from RAY_TRACER_* variables in os.environ."""
    defaults = Settings()
    return Settings(
        width=_positive_int('WIDTH', defaults.width),
        height=_positive_int('HEIGHT', defaults.height),
        out_name=os.environ.get(PREFIX + 'OUT_NAME') or None,
        wrap=os.environ.get(PREFIX + 'WRAP', '').strip().lower() in _TRUTHY,
    )
