"""
Summary: Minimal quoting helpers for composed command lines.
Why: Render argv for messages and strip quotes from editor settings.
"""

from __future__ import annotations


ANSI_C_NEWLINE: str = "$'\\n'"


def escape(arg: str) -> str:
    """Quote an argument for display in a POSIX-side command line.

    Arguments containing a space are wrapped in double quotes; embedded
    quotes are not escaped. Every newline becomes ``$'\\n'`` whether or not
    the argument was quoted.
    """
    if " " in arg:
        arg = f'"{arg}"'
    return arg.replace("\n", ANSI_C_NEWLINE)


def unquote(s: str) -> str:
    """Drop the first and last character of a double-quoted token.

    The closing character is assumed, not checked, to be a quote.
    """
    if s.startswith('"') and len(s) >= 2:
        return s[1:-1]
    return s


__all__ = ["ANSI_C_NEWLINE", "escape", "unquote"]
