"""
Summary: Resolve a bare host command to an existing executable on disk.
Why: Editor settings often omit the extension Windows requires.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import PureWindowsPath
from typing import final

from wslgit.platform.logging import logger

from .ports import FileSystemPort


DEFAULT_EXECUTABLE_EXTENSIONS: tuple[str, ...] = ("", "CMD", "EXE")


@final
class PathResolver:
    """Try extension candidates in order and return the first existing one."""

    filesystem: FileSystemPort
    extensions: tuple[str, ...]

    def __init__(
        self,
        filesystem: FileSystemPort,
        extensions: Sequence[str] = DEFAULT_EXECUTABLE_EXTENSIONS,
    ) -> None:
        self.filesystem = filesystem
        self.extensions = tuple(extensions)

    def candidates(self, host_path: str) -> list[str]:
        """List candidate paths, replacing any existing extension.

        An empty extension strips the current one, so ``vim.exe`` is tried
        as ``vim``, ``vim.CMD`` and ``vim.EXE``.
        """
        path = PureWindowsPath(host_path)
        if not path.name:
            return []
        candidates: list[str] = []
        for extension in self.extensions:
            try:
                candidate = path.with_suffix(f".{extension}" if extension else "")
            except ValueError:
                continue
            candidates.append(str(candidate))
        return candidates

    def resolve_executable(self, host_path: str) -> str | None:
        """Return the canonical path of the first existing candidate.

        Returns:
            str | None: Canonical path, or None when no candidate exists,
            canonicalization fails, or the result is not representable as text.
        """
        for candidate in self.candidates(host_path):
            logger.debug("Trying executable candidate %s", candidate)
            if not self.filesystem.exists(candidate):
                continue
            try:
                resolved = self.filesystem.canonicalize(candidate)
                _ = resolved.encode("utf-8")
            except (OSError, UnicodeEncodeError) as e:
                logger.debug("Cannot canonicalize %s: %s", candidate, e)
                return None
            return resolved
        return None


__all__ = ["DEFAULT_EXECUTABLE_EXTENSIONS", "PathResolver"]
