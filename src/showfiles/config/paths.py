"""Shared path utilities for configuration locations.

Policy:
- Config: ``$SHOWFILES_CONFIG`` when set, otherwise
  ``$XDG_CONFIG_HOME/showfiles/config.toml`` (``~/.config`` when
  ``XDG_CONFIG_HOME`` is unset).
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Final

_ENV_CONFIG_FILE: Final[str] = "SHOWFILES_CONFIG"
_ENV_XDG_CONFIG_HOME: Final[str] = "XDG_CONFIG_HOME"
APP_DIR_NAME: Final[str] = "showfiles"
CONFIG_FILE_NAME: Final[str] = "config.toml"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def default_config_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get the per-user configuration directory."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_XDG_CONFIG_HOME,
        default_factory=lambda: Path.home() / ".config",
    ) / APP_DIR_NAME


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path of the TOML config file."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_CONFIG_FILE,
        default_factory=lambda: default_config_dir(env) / CONFIG_FILE_NAME,
    )


__all__ = [
    "APP_DIR_NAME",
    "CONFIG_FILE_NAME",
    "default_config_dir",
    "default_config_path",
    "resolve_overridable_path",
]
