"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Configure the shared ``wslgit`` logger and its handlers.
Why: Diagnostics must never reach stdout, which carries the forwarded output.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Final

from rich.console import Console

from .handlers import WrapperRichHandler


DEFAULT_CONSOLE_LEVEL: Final[int] = logging.WARNING


def setup_logger(
    log_file: Path | None = None,
    console_level: int = DEFAULT_CONSOLE_LEVEL,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """Set up and configure the application logger."""

    logger = logging.getLogger("wslgit")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    console = Console(stderr=True, soft_wrap=True)
    console_handler = WrapperRichHandler(console=console)
    console_handler.setLevel(console_level)
    logger.addHandler(console_handler)

    if log_file is not None:
        resolved_log_file = Path(log_file).expanduser().resolve()
        os.makedirs(resolved_log_file.parent, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            resolved_log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


def parse_level(name: str | None, default: int = DEFAULT_CONSOLE_LEVEL) -> int:
    """Translate a level name such as ``"debug"`` into its numeric value."""

    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


logger: Final[logging.Logger] = setup_logger()


__all__ = ["DEFAULT_CONSOLE_LEVEL", "logger", "parse_level", "setup_logger"]
