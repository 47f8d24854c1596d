from .filesystem_adapter import LocalFileSystem

__all__ = ["LocalFileSystem"]
