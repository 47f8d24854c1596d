"""Ports for dispatch use cases.

Where: features/dispatch/usecases.
What: Protocol and record describing the process launcher the dispatcher drives.
Why: Keep OS process plumbing out of argument and output translation.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(slots=True, frozen=True)
class ProcessOutcome:
    """Exit status and optionally captured stdout of a finished subprocess."""

    returncode: int
    stdout: bytes | None = None

    @property
    def exit_code(self) -> int | None:
        """Exit code, or None when the process was terminated by a signal."""

        return self.returncode if self.returncode >= 0 else None

    @property
    def signal(self) -> int | None:
        """Terminating signal number, if any."""

        return -self.returncode if self.returncode < 0 else None


@runtime_checkable
class ProcessRunner(Protocol):
    """Run a command to completion with inherited stdin and stderr."""

    def run(
        self,
        argv: Sequence[str],
        env: Mapping[str, str],
        capture_stdout: bool,
    ) -> ProcessOutcome:
        """Run ``argv`` and wait for it.

        Raises:
            OSError: If the process cannot be started or waited on.
        """
        ...


__all__ = ["ProcessOutcome", "ProcessRunner"]
