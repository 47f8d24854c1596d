# Path: `src/wslgit/features/translation/__init__.py`
# Summary: Export path translation domain, use case, and adapter symbols.
# Why: Provide a stable import surface for the dispatcher, CLI, and tests.

from .adapters import LocalFileSystem
from .domain import (
    DEFAULT_MOUNT_ROOT,
    DriveMapper,
    ForwardTranslator,
    MountTable,
    PathEncodingError,
    ReverseTranslator,
    TemplateMountTable,
    TranslationError,
    UnsupportedPathError,
    escape,
    unquote,
)
from .usecases import (
    DEFAULT_EXECUTABLE_EXTENSIONS,
    EditorTranslator,
    FileSystemPort,
    PathResolver,
)

__all__ = [
    "DEFAULT_EXECUTABLE_EXTENSIONS",
    "DEFAULT_MOUNT_ROOT",
    "DriveMapper",
    "EditorTranslator",
    "FileSystemPort",
    "ForwardTranslator",
    "LocalFileSystem",
    "MountTable",
    "PathEncodingError",
    "PathResolver",
    "ReverseTranslator",
    "TemplateMountTable",
    "TranslationError",
    "UnsupportedPathError",
    "escape",
    "unquote",
]
