"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the copy-deduplication system.
These protocols enforce structural typing using Python's `typing.Protocol`, so the
core never depends on a concrete filesystem or hash implementation.

Key Components:
---------------
- FileSystem: The capability set the core needs from storage (walk, open, create, mkdir, sync).
- HashAlgorithm: Factory for streaming hash states (xxHash, SHA-256, ...).
- Hasher: Interface for computing a content digest from a byte stream.
- TreeWalker: Interface for enumerating eligible files under the source root.
- Materializer: Interface for writing one kept file into the destination tree.
- Deduplicator: Interface for the engine coordinating all of the above.
"""

from typing import Protocol, BinaryIO, Iterator, Optional, Callable
from dedupcopy.core.models import WalkEntry, FileEntry, RunStats
from dedupcopy.core.index import DuplicateIndex


# ===== Interfaces =====

class FileSystem(Protocol):
    """
    Storage primitives consumed by the core.

    Implementations raise OSError on failure; the core wraps those errors
    into stage-specific DedupError subclasses. Handles returned by
    open_read() and create() are released with their own close().
    """

    def walk(self, root: str) -> Iterator[WalkEntry]:
        """Yield every entry under root (root itself included), depth-first."""
        ...

    def open_read(self, path: str) -> BinaryIO: ...

    def create(self, path: str) -> BinaryIO:
        """Create (or truncate) a file for writing."""
        ...

    def makedirs(self, path: str, mode: int) -> None:
        """Create path and its parents; no error if it already exists."""
        ...

    def sync(self, handle: BinaryIO) -> None:
        """Force written data of handle to durable storage."""
        ...


class HashState(Protocol):
    def update(self, data: bytes) -> None: ...
    def hexdigest(self) -> str: ...


class HashAlgorithm(Protocol):
    """
    Interface for streaming hash algorithms.

    Allows plugging in different hashing functions like xxHash or SHA-256
    without affecting the rest of the deduplication logic.
    """

    @staticmethod
    def new() -> HashState:
        """Returns a fresh hash state."""
        ...


class Hasher(Protocol):
    """Interface for hashing the full content of a byte stream."""
    def reset(self) -> None: ...
    def compute_digest(self, stream: BinaryIO) -> str: ...


class TreeWalker(Protocol):
    def walk(self) -> Iterator[FileEntry]:
        """Start a fresh traversal and lazily yield eligible files."""
        ...


class Materializer(Protocol):
    def materialize(self, entry: FileEntry, source: BinaryIO) -> int:
        """Write source into the destination tree at entry.relative_path."""
        ...


class Deduplicator(Protocol):
    """
    Interface for the main deduplication engine.
    """

    def run(
        self,
        index: Optional[DuplicateIndex] = None,
        progress_callback: Optional[Callable[[str, str], None]] = None
    ) -> RunStats:
        """
        Walk the source tree once, copying first occurrences and skipping duplicates.

        Args:
            index: Index to fill; a fresh one is created when omitted.
            progress_callback: Called with (relative_path, action) per file.

        Returns:
            RunStats with copied and skipped byte totals.
        """
        ...
