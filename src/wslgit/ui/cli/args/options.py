"""Command line argument options for ``wslgit-path``."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class ToPosixArgs:
    """Arguments for the ``to-posix`` subcommand."""

    command: Literal["to-posix"]
    arguments: list[str]


@final
@dataclass(slots=True)
class ToHostArgs:
    """Arguments for the ``to-host`` subcommand."""

    command: Literal["to-host"]


@final
@dataclass(slots=True)
class EditorArgs:
    """Arguments for the ``editor`` subcommand."""

    command: Literal["editor"]
    value: str


@final
@dataclass(slots=True)
class InitConfigArgs:
    """Arguments for the ``init-config`` subcommand."""

    command: Literal["init-config"]
    path: Path | None
    force: bool


CLIArgs = ToPosixArgs | ToHostArgs | EditorArgs | InitConfigArgs

__all__ = ["CLIArgs", "EditorArgs", "InitConfigArgs", "ToHostArgs", "ToPosixArgs"]
