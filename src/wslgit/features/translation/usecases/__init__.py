"""
Summary: Use cases composing translation rules with filesystem lookups.
Why: Provide a stable import surface for the CLI and dispatcher.
"""

from .editor import EditorTranslator
from .path_resolver import DEFAULT_EXECUTABLE_EXTENSIONS, PathResolver
from .ports import FileSystemPort

__all__ = [
    "DEFAULT_EXECUTABLE_EXTENSIONS",
    "EditorTranslator",
    "FileSystemPort",
    "PathResolver",
]
