"""
Summary: Failures raised while forwarding an invocation to the subprocess.
Why: Report the composed command line instead of a bare OS error.
"""

from __future__ import annotations


class ProcessLaunchError(Exception):
    """Raised when the subprocess cannot be launched or waited on."""

    command_line: str

    def __init__(self, command_line: str, reason: BaseException | str) -> None:
        super().__init__(f"Failed to execute command '{command_line}': {reason}")
        self.command_line = command_line


__all__ = ["ProcessLaunchError"]
