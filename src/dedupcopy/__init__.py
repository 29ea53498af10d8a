"""
dedupcopy — copy a directory tree keeping exactly one file per distinct content.

Core features:
- Streaming content hashing (xxHash3-128 by default, SHA-256 optional)
- First-seen-wins duplicate index, one per run
- Durable copy: destination directories are recreated and every file is fsync'ed
- Fail-fast: the first I/O error aborts the run
- CLI interface: dedupcopy --in SRC --out DST [-v]
"""

# Get version
from importlib.metadata import version as _version, PackageNotFoundError

try:
    __version__ = _version("dedupcopy")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Public API — only what users should import directly
from dedupcopy.commands import DeduplicationCommand
from dedupcopy.core import (
    DeduplicationParams, HashAlgorithmName, RunStats, FileEntry, DuplicateIndex, DedupError)
from dedupcopy.services import OsFileSystem
from dedupcopy.utils.convert_utils import ConvertUtils

__all__ = [
    "DeduplicationCommand",
    "DeduplicationParams",
    "HashAlgorithmName",
    "RunStats",
    "FileEntry",
    "DuplicateIndex",
    "DedupError",
    "OsFileSystem",
    "ConvertUtils",
    "__version__",
]
