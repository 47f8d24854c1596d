"""
Summary: Decide which invocations need their output translated back.
Why: Only a few subcommands print paths the host side consumes.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import final


DEFAULT_TRANSLATED_SUBCOMMANDS: tuple[str, ...] = ("rev-parse", "remote")


@final
class SubcommandAllowList:
    """Membership predicate matched against every argument token.

    The match is exact and not positional: ``git log remote`` qualifies just
    like ``git remote -v``.
    """

    names: frozenset[str]

    def __init__(self, names: Iterable[str] = DEFAULT_TRANSLATED_SUBCOMMANDS) -> None:
        self.names = frozenset(names)

    def __call__(self, args: Iterable[str]) -> bool:
        return any(arg in self.names for arg in args)


__all__ = ["DEFAULT_TRANSLATED_SUBCOMMANDS", "SubcommandAllowList"]
