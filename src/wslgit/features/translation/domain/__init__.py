"""
Summary: Pure path translation primitives shared by use cases.
Why: Keep filesystem and process concerns out of the translation rules.
"""

from .drive_mapper import DEFAULT_MOUNT_ROOT, DriveMapper, MountTable, TemplateMountTable
from .errors import PathEncodingError, TranslationError, UnsupportedPathError
from .forward import ForwardTranslator
from .quoting import escape, unquote
from .reverse import ReverseTranslator

__all__ = [
    "DEFAULT_MOUNT_ROOT",
    "DriveMapper",
    "ForwardTranslator",
    "MountTable",
    "PathEncodingError",
    "ReverseTranslator",
    "TemplateMountTable",
    "TranslationError",
    "UnsupportedPathError",
    "escape",
    "unquote",
]
