"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/exceptions.py
Stage-specific errors raised by the copy-deduplication pipeline.

Every error here aborts the whole run at its first occurrence. A failure to
close a destination handle after sync is only logged (see materializer.py).
The low-level OSError is always chained as __cause__.
"""


class DedupError(RuntimeError):
    """Base class for all pipeline failures."""


class TraversalError(DedupError):
    """The walk could not enumerate an entry (permission, I/O, broken link)."""


class OpenError(DedupError):
    """A source file could not be opened."""


class ReadError(DedupError):
    """A source file could not be fully read for hashing."""


class SeekError(DedupError):
    """A source stream could not be rewound between hashing and copying."""


class DirectoryCreateError(DedupError):
    """The destination directory hierarchy could not be created."""


class FileCreateError(DedupError):
    """The destination file could not be created."""


class CopyError(DedupError):
    """Bytes could not be transferred from source to destination."""


class SyncError(DedupError):
    """Destination data could not be forced to durable storage."""

