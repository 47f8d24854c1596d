"""Configuration management for wslgit."""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from wslgit.config.file_ops import write_text_file
from wslgit.config.paths import default_config_path
from wslgit.platform.logging import logger


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion."""

    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Program used to enter the POSIX environment
    wsl_executable: str = "wsl"

    # Leading token of the forwarded argv
    target_program: str = "git"

    # Root under which drives are mounted (``/mnt/c``)
    mount_root: str = "/mnt"

    # Subcommands whose stdout is translated back to drive paths
    translated_subcommands: list[str] = field(
        default_factory=lambda: ["rev-parse", "remote"]
    )

    # Environment variable holding the compound editor command
    editor_variable: str = "GIT_EDITOR"

    # Extension candidates tried when resolving the editor executable
    executable_extensions: list[str] = field(
        default_factory=lambda: ["", "CMD", "EXE"]
    )

    # Log file path (optional)
    log_file: Path | None = _path_field()

    # Console log threshold
    log_level: str = "WARNING"

    STRING_FIELDS: ClassVar[frozenset[str]] = frozenset(
        {"wsl_executable", "target_program", "mount_root", "editor_variable", "log_file", "log_level"}
    )
    STRING_LIST_FIELDS: ClassVar[frozenset[str]] = frozenset(
        {"translated_subcommands", "executable_extensions"}
    )

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    def save(self, target: Path | None = None) -> Path:
        """Save configuration to file.

        Returns:
            Path: Location written.
        """
        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = default_config_path(target)
        try:
            write_text_file(target, self._render_toml(config_dict))
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        logger.info("Configuration saved to %s", target)
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# wslgit Configuration File")
        lines.append("")

        lines.append("# Program used to run commands inside WSL")
        lines.append(f"wsl_executable = {self._format_toml_value(config['wsl_executable'])}")
        lines.append("")

        lines.append("# Program invoked inside WSL with the translated arguments")
        lines.append(f"target_program = {self._format_toml_value(config['target_program'])}")
        lines.append("")

        lines.append("# Directory under which Windows drives are mounted")
        lines.append('# Example: mount_root = "/mnt"  ->  C:\\ is /mnt/c')
        lines.append(f"mount_root = {self._format_toml_value(config['mount_root'])}")
        lines.append("")

        lines.append("# Subcommands whose output paths are translated back to Windows form")
        lines.append(
            "translated_subcommands = "
            f"{self._format_toml_value(config['translated_subcommands'])}"
        )
        lines.append("")

        lines.append("# Environment variable holding the editor command line")
        lines.append(f"editor_variable = {self._format_toml_value(config['editor_variable'])}")
        lines.append("")

        lines.append("# Extensions tried, in order, when locating the editor executable")
        lines.append(
            "executable_extensions = "
            f"{self._format_toml_value(config['executable_extensions'])}"
        )
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "C:/Users/me/wslgit.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Console log level: DEBUG, INFO, WARNING or ERROR")
        lines.append(f"log_level = {self._format_toml_value(config['log_level'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""

        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        if isinstance(value, list):
            return "[" + ", ".join(self._format_toml_value(item) for item in value) + "]"
        return str(value)

    @classmethod
    def from_dict(cls, values: dict[str, Any]) -> "Config":
        """Build a configuration, ignoring unknown keys and mistyped values.

        A value of the wrong type is dropped with a warning so the field keeps
        its default.
        """

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

        accepted: dict[str, Any] = {}
        for key, value in values.items():
            if key not in known:
                continue
            if not cls._has_valid_type(key, value):
                logger.warning("Ignoring invalid value for %s: %r (using default)", key, value)
                continue
            accepted[key] = value
        return cls(**accepted)

    @classmethod
    def _has_valid_type(cls, key: str, value: Any) -> bool:
        """Check a raw TOML value against the type its field expects."""

        if key in cls.STRING_LIST_FIELDS:
            return isinstance(value, list) and all(isinstance(item, str) for item in value)
        if key in cls.STRING_FIELDS:
            return isinstance(value, str)
        return True

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file, falling back to defaults.

        A missing file is not created here; use :meth:`save` for that.

        Raises:
            tomllib.TOMLDecodeError: If the file exists but is not valid TOML.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path(config_file)

        if config_file.exists():
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration from %s: %s", config_file, e)
                raise
            instance = cls.from_dict(config_dict)
            logger.debug("Configuration loaded from %s", config_file)
        else:
            instance = cls()

        cls._instance = instance
        cls._loaded_from = config_file
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next load re-reads the file."""

        cls._instance = None
        cls._loaded_from = None


__all__ = ["Config"]
