"""
Summary: Translate a compound editor setting (command plus trailing args).
Why: The POSIX-side program launches the editor by its translated path.
"""

from __future__ import annotations

import re
from typing import ClassVar, final

from wslgit.features.translation.domain import ForwardTranslator, unquote
from wslgit.platform.logging import logger

from .path_resolver import PathResolver


@final
class EditorTranslator:
    """Rewrite only the editor binary of ``<path> <args...>``; args pass through."""

    FIRST_WHITESPACE_RUN: ClassVar[re.Pattern[str]] = re.compile(r"\s+")

    resolver: PathResolver
    forward: ForwardTranslator

    def __init__(self, resolver: PathResolver, forward: ForwardTranslator) -> None:
        self.resolver = resolver
        self.forward = forward

    @classmethod
    def split(cls, value: str) -> tuple[str, str | None]:
        """Split ``value`` on its first whitespace run.

        Returns:
            tuple[str, str | None]: Command token and trailing arguments, the
            latter None when the value holds no whitespace.
        """
        parts = cls.FIRST_WHITESPACE_RUN.split(value, maxsplit=1)
        if len(parts) == 1:
            return parts[0], None
        return parts[0], parts[1]

    def translate_editor(self, value: str) -> str:
        """Translate the editor command, falling back to the token as written."""

        command, trailing = self.split(value)
        resolved = self.resolver.resolve_executable(unquote(command))
        if resolved is None:
            logger.debug("Editor %r not found on disk; passing through", command)
            translated = command
        else:
            translated = self.forward.to_posix(resolved)

        if trailing is None:
            return translated
        return f"{translated} {trailing}"


__all__ = ["EditorTranslator"]
