"""Inspection command line interface (``wslgit-path``)."""

import sys
import tomllib
from collections.abc import Sequence
from typing import BinaryIO, TextIO, final

from wslgit.application.services import build_services
from wslgit.config import Config, default_config_path
from wslgit.features.translation import TranslationError
from wslgit.platform.logging import logger
from wslgit.ui.cli.args import (
    ArgumentParser,
    EditorArgs,
    InitConfigArgs,
    ToHostArgs,
    ToPosixArgs,
)


@final
class PathCommandProcessor:
    """Execute ``wslgit-path`` subcommands against the configured translators."""

    @staticmethod
    def process_command(
        args_list: Sequence[str] | None = None,
        stdin: BinaryIO | None = None,
        stdout: TextIO | None = None,
    ) -> int:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
            stdin: Binary input for ``to-host`` (defaults to process stdin).
            stdout: Text output (defaults to process stdout).

        Returns:
            int: Exit code.
        """
        out = stdout if stdout is not None else sys.stdout
        try:
            args = ArgumentParser.process_args(args_list)

            if isinstance(args, InitConfigArgs):
                return PathCommandProcessor._init_config(args)

            services = build_services(Config.load())

            if isinstance(args, ToPosixArgs):
                for argument in args.arguments:
                    _ = out.write(services.forward.to_posix(argument) + "\n")
                return 0

            if isinstance(args, EditorArgs):
                _ = out.write(services.editor.translate_editor(args.value) + "\n")
                return 0

            assert isinstance(args, ToHostArgs)
            source = stdin if stdin is not None else sys.stdin.buffer
            translated = services.reverse.to_host(source.read())
            out.flush()
            sink = getattr(out, "buffer", None)
            if sink is not None:
                _ = sink.write(translated)
                sink.flush()
            else:
                _ = out.write(translated.decode("utf-8", errors="surrogateescape"))
            return 0

        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130
        except TranslationError as e:
            logger.error("%s", e)
            return 1
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.error("An unexpected error occurred: %s", e)
            return 1

    @staticmethod
    def _init_config(args: InitConfigArgs) -> int:
        """Write a default configuration unless one already exists."""

        target = default_config_path(args.path)
        if target.exists() and not args.force:
            logger.error("Configuration already exists at %s (use --force)", target)
            return 1
        _ = Config().save(target)
        return 0


def main() -> int:
    """Entry point for ``wslgit-path``."""

    return PathCommandProcessor.process_command()
