"""Command line argument parser for ``wslgit-path``."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from wslgit.config import Config
from wslgit.platform.logging import logger, parse_level, setup_logger
from wslgit.ui.cli.args.options import (
    CLIArgs,
    EditorArgs,
    InitConfigArgs,
    ToHostArgs,
    ToPosixArgs,
)


GLOBAL_FLAGS: frozenset[str] = frozenset({"--verbose", "--quiet"})


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="wslgit-path",
            description="Translate paths between Windows and WSL conventions.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug output on stderr",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        to_posix_parser = subparsers.add_parser(
            "to-posix",
            help="Translate Windows paths or --name=path arguments to WSL form",
        )
        _ = to_posix_parser.add_argument(
            "arguments",
            nargs="*",
            help="Arguments to translate, one result per line; taken verbatim",
            metavar="ARG",
        )

        _ = subparsers.add_parser(
            "to-host",
            help="Rewrite /mnt/<drive>/ paths read from stdin to Windows form",
        )

        editor_parser = subparsers.add_parser(
            "editor",
            help="Translate an editor command line such as GIT_EDITOR",
        )
        _ = editor_parser.add_argument(
            "value",
            type=str,
            help="Editor command followed by its arguments",
            metavar="VALUE",
        )

        init_parser = subparsers.add_parser(
            "init-config",
            help="Write a default configuration file",
        )
        _ = init_parser.add_argument(
            "--path",
            type=str,
            help="Destination file (defaults to the active configuration path)",
            metavar="CONFIG_PATH",
        )
        _ = init_parser.add_argument(
            "--force",
            action="store_true",
            help="Overwrite an existing configuration file",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.
        """
        parser = ArgumentParser.create_parser()
        raw_args = list(sys.argv[1:] if args_list is None else args_list)
        head, to_posix_arguments = ArgumentParser._split_to_posix(raw_args)
        parsed_args = parser.parse_args(head)
        if parsed_args.command == "to-posix":
            if not to_posix_arguments:
                parser.error("to-posix requires at least one ARG")
            parsed_args.arguments = to_posix_arguments

        configuration = Config.load()
        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = parse_level(configuration.log_level)
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        command: str = parsed_args.command

        if command == "to-posix":
            return ToPosixArgs(command="to-posix", arguments=list(parsed_args.arguments))

        if command == "to-host":
            return ToHostArgs(command="to-host")

        if command == "editor":
            return EditorArgs(command="editor", value=parsed_args.value)

        if command == "init-config":
            return InitConfigArgs(
                command="init-config",
                path=Path(parsed_args.path) if parsed_args.path else None,
                force=bool(parsed_args.force),
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _split_to_posix(args: list[str]) -> tuple[list[str], list[str]]:
        """Separate the verbatim operands of ``to-posix`` from the rest.

        Operands such as ``--file=C:\\x`` look like options to argparse, so
        everything after the subcommand name bypasses parsing.
        """
        for index, token in enumerate(args):
            if token in GLOBAL_FLAGS:
                continue
            if token == "to-posix":
                return args[: index + 1], args[index + 1 :]
            break
        return args, []
