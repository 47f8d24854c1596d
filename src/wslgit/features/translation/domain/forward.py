"""
Summary: Translate host drive-letter paths into mount-prefixed POSIX paths.
Why: Arguments handed to the POSIX-side program must name the same files.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from pathlib import PureWindowsPath
from typing import ClassVar, final

from wslgit.platform.logging import logger

from .drive_mapper import DriveMapper
from .errors import PathEncodingError


@final
class ForwardTranslator:
    """Rewrite single command-line arguments from host to POSIX form.

    Arguments that are neither absolute nor present on disk are treated as
    ordinary text (branch names, commit messages) and returned untouched.
    """

    LEADING_CURDIR: ClassVar[re.Pattern[str]] = re.compile(r"\.(?:[\\/]|$)")

    exists: Callable[[str], bool]
    drive_mapper: DriveMapper

    def __init__(
        self,
        exists: Callable[[str], bool],
        drive_mapper: DriveMapper | None = None,
    ) -> None:
        """Initialize the translator.

        Args:
            exists: Filesystem check used to recognise relative paths.
            drive_mapper: Drive letter to mount prefix mapping.
        """
        self.exists = exists
        self.drive_mapper = drive_mapper or DriveMapper()

    @staticmethod
    def split_flag(argument: str) -> tuple[str, str]:
        """Split a ``--name=value`` argument into ``("--name=", "value")``.

        Any other argument yields an empty prefix and the argument itself.
        """
        if argument.startswith("--") and "=" in argument:
            name, value = argument.split("=", 1)
            return f"{name}=", value
        return "", argument

    def to_posix(self, argument: str) -> str:
        """Translate one argument, keeping any ``--name=`` prefix intact.

        Raises:
            UnsupportedPathError: If the path uses a UNC or other non-disk prefix.
            PathEncodingError: If a path segment cannot be represented as text.
        """
        flag_prefix, value = self.split_flag(argument)
        if not PureWindowsPath(value).is_absolute() and not self.exists(value):
            return argument

        translated = flag_prefix + self.translate_path(value)
        logger.debug("Translated argument %r -> %r", argument, translated)
        return translated

    def translate_path(self, value: str) -> str:
        """Convert a host path to POSIX form without touching the filesystem."""

        host_path = PureWindowsPath(value)
        accumulator = ""
        if host_path.drive:
            letter = DriveMapper.drive_letter(host_path.drive, value)
            accumulator = self.drive_mapper.prefix_for(letter)

        for segment in self._segments(value, host_path):
            try:
                _ = segment.encode("utf-8")
            except UnicodeEncodeError as e:
                raise PathEncodingError(value, segment) from e
            if accumulator and not accumulator.endswith("/"):
                accumulator += "/"
            accumulator += segment
        return accumulator

    @classmethod
    def _segments(cls, value: str, host_path: PureWindowsPath) -> list[str]:
        """Return name segments in traversal order, dropping drive and root."""

        parts = list(host_path.parts)
        if host_path.drive or host_path.root:
            return parts[1:]
        # pathlib collapses a leading "." but it is kept as a literal segment
        if cls.LEADING_CURDIR.match(value):
            return [".", *parts]
        return parts


__all__ = ["ForwardTranslator"]
