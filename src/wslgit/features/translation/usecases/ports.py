"""
Summary: Filesystem port consumed by path translation use cases.
Why: Keep existence and canonicalization checks swappable in tests.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystemPort(Protocol):
    """Read-only filesystem queries on host-side paths."""

    def exists(self, path: str) -> bool:
        """Return True when ``path`` names an existing file or directory."""
        ...

    def canonicalize(self, path: str) -> str:
        """Return the absolute, symlink-free form of ``path``.

        Raises:
            OSError: If the path cannot be resolved.
        """
        ...


__all__ = ["FileSystemPort"]
