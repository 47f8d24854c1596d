"""
Summary: Typed failures raised while translating host paths.
Why: Let callers tell unsupported path forms apart from encoding failures.
"""

from __future__ import annotations


class TranslationError(Exception):
    """Base class for path translation failures."""

    path: str

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class UnsupportedPathError(TranslationError):
    """Raised when a path prefix is not a plain or verbatim disk drive."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Cannot handle path {path!r}", path)


class PathEncodingError(TranslationError):
    """Raised when a path segment cannot be represented as text."""

    segment: str

    def __init__(self, path: str, segment: str) -> None:
        super().__init__(f"Cannot represent path {path!r}", path)
        self.segment = segment


__all__ = ["PathEncodingError", "TranslationError", "UnsupportedPathError"]
