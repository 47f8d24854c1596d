# Path: `src/wslgit/features/dispatch/__init__.py`
# Summary: Export dispatcher, runner port, and subprocess adapter.
# Why: Let the CLI wire the forwarding pipeline from one import.

from .adapters import SubprocessRunner
from .domain import DEFAULT_TRANSLATED_SUBCOMMANDS, ProcessLaunchError, SubcommandAllowList
from .usecases import (
    DEFAULT_EDITOR_VARIABLE,
    DEFAULT_LAUNCHER,
    DEFAULT_TARGET_PROGRAM,
    Dispatcher,
    ProcessOutcome,
    ProcessRunner,
)

__all__ = [
    "DEFAULT_EDITOR_VARIABLE",
    "DEFAULT_LAUNCHER",
    "DEFAULT_TARGET_PROGRAM",
    "DEFAULT_TRANSLATED_SUBCOMMANDS",
    "Dispatcher",
    "ProcessLaunchError",
    "ProcessOutcome",
    "ProcessRunner",
    "SubcommandAllowList",
    "SubprocessRunner",
]
