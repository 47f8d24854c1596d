"""Process runner adapter built on :mod:`subprocess`."""

from __future__ import annotations

import subprocess
from collections.abc import Mapping, Sequence
from typing import final

from ..usecases.ports import ProcessOutcome


@final
class SubprocessRunner:
    """Run commands with inherited stdin/stderr and optionally piped stdout."""

    def run(
        self,
        argv: Sequence[str],
        env: Mapping[str, str],
        capture_stdout: bool,
    ) -> ProcessOutcome:
        completed = subprocess.run(
            list(argv),
            env=dict(env),
            stdout=subprocess.PIPE if capture_stdout else None,
            check=False,
        )
        return ProcessOutcome(returncode=completed.returncode, stdout=completed.stdout)


__all__ = ["SubprocessRunner"]
