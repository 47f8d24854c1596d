"""Local filesystem adapter backing the translation ports."""

from __future__ import annotations

import os
from pathlib import Path
from typing import final


@final
class LocalFileSystem:
    """Answer filesystem queries against the real host filesystem."""

    def exists(self, path: str) -> bool:
        return bool(path) and os.path.exists(path)

    def canonicalize(self, path: str) -> str:
        return str(Path(path).resolve(strict=True))


__all__ = ["LocalFileSystem"]
