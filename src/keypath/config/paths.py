"""Locate the keypath configuration file.

Lookup order: an explicit path, then ``KEYPATH_CONFIG``, then
``<project_root>/config/keypath.toml``. No log location is implied; a debug
log is written only when one is requested.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final


ENV_CONFIG_PATH: Final[str] = "KEYPATH_CONFIG"
_PROJECT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def _detect_repo_root(start: Path | None = None) -> Path:
    """Return the nearest ancestor holding a project marker, else the working directory."""

    origin = (start or Path(__file__).resolve()).parent
    for candidate in (origin, *origin.parents):
        if any((candidate / marker).exists() for marker in _PROJECT_MARKERS):
            return candidate
    return Path.cwd()


def default_config_path() -> Path:
    """Config file used when nothing overrides it."""

    return (_detect_repo_root() / "config" / "keypath.toml").resolve()


def resolve_config_path(
    explicit_path: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> Path:
    """Pick the config file to read.

    Args:
        explicit_path: Path given on the command line; always wins.
        env: Environment to read ``KEYPATH_CONFIG`` from. Defaults to ``os.environ``.

    Returns:
        Path: Absolute config path. A blank ``KEYPATH_CONFIG`` counts as unset.
    """
    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    from_env = (env if env is not None else os.environ).get(ENV_CONFIG_PATH, "").strip()
    if from_env:
        return Path(from_env).expanduser().resolve()

    return default_config_path()


__all__ = [
    "ENV_CONFIG_PATH",
    "default_config_path",
    "resolve_config_path",
]
