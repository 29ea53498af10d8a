"""
Unified command orchestrator for copy deduplication.
This is the SINGLE source of truth for wiring the pipeline — used by the CLI and by library callers.
"""
import logging
from typing import Optional, Callable

from dedupcopy.core.models import DeduplicationParams, RunStats
from dedupcopy.core.index import DuplicateIndex
from dedupcopy.core.interfaces import FileSystem
from dedupcopy.core.hasher import HasherImpl
from dedupcopy.core.materializer import MaterializerImpl
from dedupcopy.core.deduplicator import DeduplicatorImpl
from dedupcopy.services.filesystem import OsFileSystem

logger = logging.getLogger(__name__)


class DeduplicationCommand:
    """
    Orchestrates one copy-deduplication run:
    1. Build hasher, materializer and engine from params
    2. Create a fresh DuplicateIndex for the run
    3. Walk the source tree once and return RunStats

    Usage:
        params = DeduplicationParams(source_dir="~/photos", destination_dir="/mnt/backup")
        command = DeduplicationCommand()
        stats = command.execute(params, progress_callback=print_progress)
    """

    def __init__(self, fs: Optional[FileSystem] = None):
        self.fs: FileSystem = fs or OsFileSystem()
        self.index: Optional[DuplicateIndex] = None

    def execute(
            self,
            params: DeduplicationParams,
            progress_callback: Optional[Callable[[str, str], None]] = None
    ) -> RunStats:
        """
        Execute deduplication with given parameters.

        Args:
            params: Validated parameters with absolute source/destination roots
            progress_callback: (relative_path: str, action: str) -> None

        Returns:
            RunStats for the run

        Raises:
            DedupError: On the first traversal, read or write failure
        """
        hasher = HasherImpl.for_name(params.algorithm, params.chunk_size)
        materializer = MaterializerImpl(self.fs, params.destination_dir, chunk_size=params.chunk_size)
        deduplicator = DeduplicatorImpl(
            self.fs,
            params.source_dir,
            params.destination_dir,
            hasher,
            materializer=materializer
        )

        logger.debug(f"Hash algorithm: {params.algorithm.display_name}, chunk size: {params.chunk_size}")
        self.index = DuplicateIndex()
        return deduplicator.run(index=self.index, progress_callback=progress_callback)

    def get_index(self) -> DuplicateIndex:
        """Get the index of the last run (for advanced use cases)."""
        if self.index is None:
            raise RuntimeError("Command not executed yet")
        return self.index
