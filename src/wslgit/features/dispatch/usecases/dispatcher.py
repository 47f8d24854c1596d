"""src/wslgit/features/dispatch/usecases/dispatcher.py
What: Forward a host invocation to the POSIX-side program with translated paths.
Why: Make the wrapper transparent to callers: same arguments, output, exit code.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import BinaryIO, final

from wslgit.features.translation import (
    EditorTranslator,
    ForwardTranslator,
    ReverseTranslator,
    escape,
)
from wslgit.platform.logging import logger

from ..domain import ProcessLaunchError, SubcommandAllowList
from .ports import ProcessOutcome, ProcessRunner


DEFAULT_LAUNCHER: str = "wsl"
DEFAULT_TARGET_PROGRAM: str = "git"
DEFAULT_EDITOR_VARIABLE: str = "GIT_EDITOR"


@final
class Dispatcher:
    """Compose argv and environment, run the subprocess, relay its output."""

    forward: ForwardTranslator
    reverse: ReverseTranslator
    editor: EditorTranslator
    runner: ProcessRunner
    translate_output: Callable[[Iterable[str]], bool]
    launcher: str
    target_program: str
    editor_variable: str

    def __init__(
        self,
        forward: ForwardTranslator,
        reverse: ReverseTranslator,
        editor: EditorTranslator,
        runner: ProcessRunner,
        *,
        translate_output: Callable[[Iterable[str]], bool] | None = None,
        launcher: str = DEFAULT_LAUNCHER,
        target_program: str = DEFAULT_TARGET_PROGRAM,
        editor_variable: str = DEFAULT_EDITOR_VARIABLE,
    ) -> None:
        self.forward = forward
        self.reverse = reverse
        self.editor = editor
        self.runner = runner
        self.translate_output = translate_output or SubcommandAllowList()
        self.launcher = launcher
        self.target_program = target_program
        self.editor_variable = editor_variable

    def build_argv(self, args: Sequence[str]) -> list[str]:
        """Return the launcher argv with every argument translated."""

        return [
            self.launcher,
            self.target_program,
            *(self.forward.to_posix(arg) for arg in args),
        ]

    def build_env(self, environ: Mapping[str, str]) -> dict[str, str]:
        """Copy ``environ`` replacing only the editor value, when present."""

        env = dict(environ)
        editor_value = env.get(self.editor_variable)
        if editor_value is not None:
            env[self.editor_variable] = self.editor.translate_editor(editor_value)
            logger.debug(
                "Translated %s %r -> %r",
                self.editor_variable,
                editor_value,
                env[self.editor_variable],
            )
        return env

    def dispatch(
        self,
        args: Sequence[str],
        environ: Mapping[str, str],
        stdout: BinaryIO | None = None,
    ) -> ProcessOutcome:
        """Run one forwarded invocation.

        Args:
            args: Invocation arguments, without the program name.
            environ: Environment of the wrapper process.
            stdout: Destination for translated output; defaults to the
                binary stdout of this process.

        Returns:
            ProcessOutcome: Outcome of the subprocess.

        Raises:
            TranslationError: If an argument or editor path is unsupported.
            ProcessLaunchError: If the subprocess cannot be run.
        """
        argv = self.build_argv(args)
        env = self.build_env(environ)
        capture = self.translate_output(args)
        command_line = " ".join(escape(token) for token in argv)
        logger.debug("Running %s (capture output: %s)", command_line, capture)

        try:
            outcome = self.runner.run(argv, env, capture)
        except OSError as e:
            raise ProcessLaunchError(command_line, e) from e

        if capture and outcome.stdout is not None:
            sink = stdout if stdout is not None else sys.stdout.buffer
            _ = sink.write(self.reverse.to_host(outcome.stdout))
            sink.flush()

        return outcome


__all__ = [
    "DEFAULT_EDITOR_VARIABLE",
    "DEFAULT_LAUNCHER",
    "DEFAULT_TARGET_PROGRAM",
    "Dispatcher",
]
