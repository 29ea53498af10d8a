"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

deduplicator.py
Implements the single-pass copy deduplication engine.

For every file the walker yields:
    open → hash → index lookup → skip, or record → rewind → materialize
The first file with a given content wins; later copies are only counted.
"""
import logging
from typing import Optional, Callable, Set

from dedupcopy.core.models import FileEntry, RunStats, CopyAction
from dedupcopy.core.index import DuplicateIndex
from dedupcopy.core.interfaces import Deduplicator, FileSystem, Hasher, Materializer, TreeWalker
from dedupcopy.core.exceptions import OpenError, ReadError, SeekError
from dedupcopy.core.scanner import TreeWalkerImpl
from dedupcopy.core.materializer import MaterializerImpl

logger = logging.getLogger(__name__)


# =============================
# Main Deduplicator Class
# =============================
class DeduplicatorImpl(Deduplicator):
    """
    Copies one file per distinct content from source_dir into destination_dir.
    Strictly sequential: the hasher is reset and reused for every file.
    Relative paths already handled in the current run are remembered so a
    repeated entry is never counted twice.
    """
    def __init__(
        self,
        fs: FileSystem,
        source_dir: str,
        destination_dir: str,
        hasher: Hasher,
        walker: Optional[TreeWalker] = None,
        materializer: Optional[Materializer] = None
    ):
        self.fs = fs
        self.source_dir = source_dir
        self.destination_dir = destination_dir
        self.hasher = hasher
        self.walker = walker or TreeWalkerImpl(fs, source_dir)
        self.materializer = materializer or MaterializerImpl(fs, destination_dir)
        self._processed: Set[str] = set()

    def run(
        self,
        index: Optional[DuplicateIndex] = None,
        progress_callback: Optional[Callable[[str, str], None]] = None
    ) -> RunStats:
        """
        Main pipeline. Aborts on the first DedupError, leaving files copied so far in place.
        Args:
            index: Index for this run; a fresh one is created when omitted
            progress_callback: Receives (relative_path, "copying" | "skip") per file
        Returns:
            RunStats
        """
        if index is None:
            index = DuplicateIndex()
        stats = RunStats()
        self._processed = set()

        logger.debug(f"Deduplicating {self.source_dir} into {self.destination_dir}")
        for entry in self.walker.walk():
            self.process_entry(entry, index, stats, progress_callback)

        logger.debug(
            f"Run finished: {stats.copied_files} copied, {stats.skipped_files} skipped, "
            f"{len(index)} distinct contents"
        )
        return stats

    def process_entry(
        self,
        entry: FileEntry,
        index: DuplicateIndex,
        stats: RunStats,
        progress_callback: Optional[Callable[[str, str], None]] = None
    ) -> Optional[CopyAction]:
        """
        Hash one file and either skip it or copy it.
        Returns the action taken, or None when this very entry was already processed.
        """
        if entry.relative_path in self._processed:
            logger.debug(f"Already processed: {entry.relative_path}")
            return None
        self._processed.add(entry.relative_path)

        try:
            source = self.fs.open_read(entry.source_path)
        except OSError as e:
            raise OpenError(f"failed to open source file: {e}") from e

        with source:
            self.hasher.reset()
            try:
                digest = self.hasher.compute_digest(source)
            except OSError as e:
                raise ReadError(f"failed to read/hash file: {e}") from e

            first_path = index.lookup(digest)
            if first_path is not None:
                logger.debug(f"Duplicate of {first_path}: {entry.relative_path}")
                stats.add_skipped(entry.size)
                DeduplicatorImpl._report(progress_callback, entry, CopyAction.SKIP)
                return CopyAction.SKIP

            index.record(digest, entry.relative_path)

            try:
                source.seek(0)
            except OSError as e:
                raise SeekError(f"failed to seek source file: {e}") from e

            DeduplicatorImpl._report(progress_callback, entry, CopyAction.COPYING)
            self.materializer.materialize(entry, source)
            stats.add_copied(entry.size)
            return CopyAction.COPYING

    @staticmethod
    def _report(
        progress_callback: Optional[Callable[[str, str], None]],
        entry: FileEntry,
        action: CopyAction
    ) -> None:
        if progress_callback:
            progress_callback(entry.relative_path, action.value)
