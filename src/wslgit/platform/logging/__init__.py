"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the configured logger, setup helpers, and the Rich handler.
Why: Provide a single canonical import path for every feature.
"""

from __future__ import annotations

from .config import DEFAULT_CONSOLE_LEVEL, logger, parse_level, setup_logger
from .handlers import WrapperRichHandler

__all__ = [
    "DEFAULT_CONSOLE_LEVEL",
    "WrapperRichHandler",
    "logger",
    "parse_level",
    "setup_logger",
]
