"""
Summary: Map drive letters to their mount-point prefix on the POSIX side.
Why: Keep mount lookup behind a protocol so translation logic never changes.
"""

from __future__ import annotations

import re
from typing import ClassVar, Protocol, final, runtime_checkable

from .errors import UnsupportedPathError


DEFAULT_MOUNT_ROOT: str = "/mnt"


@runtime_checkable
class MountTable(Protocol):
    """Lookup of the POSIX-side mount prefix for a drive letter."""

    def prefix_for(self, drive: str) -> str:
        """Return the mount prefix for a lowercase drive letter."""
        ...


@final
class TemplateMountTable:
    """Mount table that places every drive directly under a fixed root."""

    root: str

    def __init__(self, root: str = DEFAULT_MOUNT_ROOT) -> None:
        self.root = root.rstrip("/")

    def prefix_for(self, drive: str) -> str:
        # TODO: consult /etc/wsl.conf automount root and fstab entries.
        return f"{self.root}/{drive}"


@final
class DriveMapper:
    """Resolve host drive prefixes (``C:``, ``\\\\?\\C:``) to mount prefixes."""

    DRIVE_PREFIX: ClassVar[re.Pattern[str]] = re.compile(r"(?:\\\\\?\\)?([A-Za-z]):")

    mount_table: MountTable

    def __init__(self, mount_table: MountTable | None = None) -> None:
        self.mount_table = mount_table or TemplateMountTable()

    @classmethod
    def drive_letter(cls, drive: str, path: str) -> str:
        """Extract the lowercase drive letter from a path's drive component.

        Args:
            drive: Drive component as split off by ``PureWindowsPath``.
            path: Whole path, reported on failure.

        Returns:
            str: Single lowercase ASCII letter.

        Raises:
            UnsupportedPathError: If the drive is a UNC share or any other
                non-disk prefix.
        """
        match = cls.DRIVE_PREFIX.fullmatch(drive.replace("/", "\\"))
        if match is None:
            raise UnsupportedPathError(path)
        return match.group(1).lower()

    def prefix_for(self, drive: str) -> str:
        """Return the mount prefix for a drive letter in either case."""

        return self.mount_table.prefix_for(drive.lower())


__all__ = ["DEFAULT_MOUNT_ROOT", "DriveMapper", "MountTable", "TemplateMountTable"]
