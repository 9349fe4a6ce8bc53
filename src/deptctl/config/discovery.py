"""Locating and reading ``deptctl.toml``.

Resolution order for the config file:
  1. ``--config PATH`` (ignored if PATH is not a file)
  2. ``DEPTCTL_CONFIG`` env var (ignored if it names a missing file)
  3. Nearest ``deptctl.toml`` walking up from the start directory

Only the first source that is set is consulted.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "deptctl.toml"
CONFIG_ENV_VAR = "DEPTCTL_CONFIG"


def _walk_up(start: Path) -> Path | None:
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def find_config(explicit: str | None = None, start: Path | None = None) -> Path | None:
    """Return the config file to load, or None when there is none."""
    if explicit:
        path = Path(explicit)
        return path if path.is_file() else None

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = Path(env_path)
        return path if path.is_file() else None

    return _walk_up((start or Path.cwd()).resolve())


def read_config(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML.

    Raises:
        click.ClickException: If the file is not valid TOML, so the CLI
            reports it as a usage problem rather than a traceback.
    """
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc
