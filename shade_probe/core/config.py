"""Settings for shade-probe, read from the environment and .env files.

Lookup order for each variable (first wins):
  1. Existing OS environment variables, never overwritten.
  2. A .env file given with --env-file.
  3. The first .env found walking up from cwd, stopping at .git.

Variables:
  SHADE_PROBE_DISPLAY  X display name (falls back to DISPLAY)
  SHADE_PROBE_WINDOW   default window id, decimal or 0x-prefixed hex
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


def find_dotenv(start: Path) -> Path | None:
    """Return the nearest .env at or above start, without crossing a .git boundary."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        # .git is a directory in a clone and a file in a worktree
        if (directory / '.git').exists():
            return None
    return None


def parse_dotenv(path: Path) -> dict[str, str]:
    """KEY=value lines; quotes stripped, comments and junk lines skipped."""
    values: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            values[key] = value.strip().strip('"').strip("'")
    return values


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env values into os.environ for keys not already set.

    Returns the file used, or None.
    """
    path = Path(env_file) if env_file else find_dotenv(Path.cwd())
    if path is None or not path.is_file():
        return None
    for key, value in parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def parse_window(text: str) -> int:
    """Window ids are printed in hex by xwininfo/xdotool; accept both."""
    return int(text.strip(), 0)


@dataclass
class Settings:
    display: str | None = None
    window: int | None = None

    @classmethod
    def from_env(cls) -> Settings:
        window = os.environ.get('SHADE_PROBE_WINDOW')
        return cls(
            display=os.environ.get('SHADE_PROBE_DISPLAY') or os.environ.get('DISPLAY'),
            window=parse_window(window) if window else None,
        )
