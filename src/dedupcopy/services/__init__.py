from .filesystem import OsFileSystem

__all__ = ["OsFileSystem"]
