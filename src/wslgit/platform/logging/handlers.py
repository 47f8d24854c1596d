"""Rich console handler used by the wrapper.

Where: platform/logging/handlers.py
What: Render log records as compact ``wslgit: level: message`` lines.
Why: Keep diagnostics on stderr and visually apart from forwarded git output.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class WrapperRichHandler(RichHandler):
    """Rich handler that prefixes messages with the program name and level."""

    PROGRAM: ClassVar[str] = "wslgit"

    LEVEL_STYLES: ClassVar[dict[int, Style]] = {
        logging.DEBUG: Style(color="bright_black"),
        logging.INFO: Style(color="blue"),
        logging.WARNING: Style(color="yellow", bold=True),
        logging.ERROR: Style(color="red", bold=True),
        logging.CRITICAL: Style(color="red", bold=True, reverse=True),
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["markup"] = False
        kwargs["rich_tracebacks"] = True
        super().__init__(*args, **kwargs)

    def render_message(self, record: logging.LogRecord, message: str) -> Text:
        """Render ``message`` behind a styled ``wslgit: <level>:`` prefix."""

        style = self.LEVEL_STYLES.get(record.levelno, Style())
        text = Text()
        _ = text.append(f"{self.PROGRAM}: ", style=Style(bold=True))
        _ = text.append(f"{record.levelname.lower()}: ", style=style)
        _ = text.append(message)
        return text


__all__ = ["WrapperRichHandler"]
