"""Forwarding command line interface for wslgit."""

import os
import sys
import tomllib
from collections.abc import Mapping, Sequence
from typing import final

from wslgit.application.services import build_dispatcher
from wslgit.config import Config
from wslgit.features.dispatch import ProcessLaunchError
from wslgit.features.translation import TranslationError
from wslgit.platform.logging import logger, parse_level, setup_logger


EXIT_FAILURE: int = 1
EXIT_INTERRUPTED: int = 130
EXIT_SIGNAL_BASE: int = 128


@final
class CommandProcessor:
    """Run one forwarded invocation and compute the wrapper's exit code."""

    @staticmethod
    def process_command(
        args_list: Sequence[str] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> int:
        """Forward arguments to the POSIX-side program.

        Args:
            args_list: Arguments without the program name (for testing).
            environ: Environment to forward (for testing).

        Returns:
            int: The subprocess exit code, or a wrapper failure code.
        """
        args = list(sys.argv[1:] if args_list is None else args_list)
        environ = os.environ if environ is None else environ

        try:
            configuration = Config.load()
        except (OSError, tomllib.TOMLDecodeError):
            return EXIT_FAILURE

        _ = setup_logger(
            log_file=configuration.log_file,
            console_level=parse_level(configuration.log_level),
        )

        try:
            outcome = build_dispatcher(configuration).dispatch(args, environ)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return EXIT_INTERRUPTED
        except TranslationError as e:
            logger.error("%s", e)
            return EXIT_FAILURE
        except ProcessLaunchError as e:
            logger.error("%s", e)
            return EXIT_FAILURE

        if outcome.exit_code is not None:
            return outcome.exit_code

        logger.warning("%s terminated by signal %s", configuration.target_program, outcome.signal)
        return EXIT_SIGNAL_BASE + (outcome.signal or 0)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code, mirroring the forwarded program's.
    """
    return CommandProcessor.process_command()
