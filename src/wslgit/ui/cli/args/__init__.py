from .options import CLIArgs, EditorArgs, InitConfigArgs, ToHostArgs, ToPosixArgs
from .parser import ArgumentParser

__all__ = [
    "ArgumentParser",
    "CLIArgs",
    "EditorArgs",
    "InitConfigArgs",
    "ToHostArgs",
    "ToPosixArgs",
]
