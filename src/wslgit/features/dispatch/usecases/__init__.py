from .dispatcher import (
    DEFAULT_EDITOR_VARIABLE,
    DEFAULT_LAUNCHER,
    DEFAULT_TARGET_PROGRAM,
    Dispatcher,
)
from .ports import ProcessOutcome, ProcessRunner

__all__ = [
    "DEFAULT_EDITOR_VARIABLE",
    "DEFAULT_LAUNCHER",
    "DEFAULT_TARGET_PROGRAM",
    "Dispatcher",
    "ProcessOutcome",
    "ProcessRunner",
]
