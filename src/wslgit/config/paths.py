"""Shared path utilities for configuration locations.

Policy:
- Config: ``$WSLGIT_CONFIG`` when set, else ``~/.config/wslgit/config.toml``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final


ENV_CONFIG_PATH: Final[str] = "WSLGIT_CONFIG"


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


def _default_config_dir() -> Path:
    """Return the per-user configuration directory."""

    return Path.home() / ".config" / "wslgit"


def default_config_path(
    explicit_path: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> Path:
    """Get the path to the TOML config file.

    Args:
        explicit_path: Path given on the command line or by a caller; wins
            over ``$WSLGIT_CONFIG`` and the per-user default.
        env: Environment to consult instead of ``os.environ``.
    """

    return resolve_overridable_path(
        explicit_path=explicit_path,
        env=env,
        env_var=ENV_CONFIG_PATH,
        default_factory=lambda: _default_config_dir() / "config.toml",
    )


__all__ = ["ENV_CONFIG_PATH", "default_config_path", "resolve_overridable_path"]
