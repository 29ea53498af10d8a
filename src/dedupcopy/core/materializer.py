"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/materializer.py
Writes kept files into the destination tree, mirroring their relative paths.

Each file goes through four fatal stages (mkdir, create, copy, sync) and a
final close that is only logged on failure, since the data is already durable.
"""

import os
import logging
from typing import BinaryIO

from dedupcopy.core.models import FileEntry, DeduplicationConfig
from dedupcopy.core.interfaces import FileSystem, Materializer
from dedupcopy.core.exceptions import (
    DirectoryCreateError, FileCreateError, CopyError, SyncError)

logger = logging.getLogger(__name__)


class MaterializerImpl(Materializer):
    """Recreates the directory hierarchy and durably copies one file at a time."""

    def __init__(
        self,
        fs: FileSystem,
        destination_dir: str,
        chunk_size: int = DeduplicationConfig.CHUNK_SIZE,
        directory_mode: int = DeduplicationConfig.DIRECTORY_MODE
    ):
        self.fs = fs
        self.destination_dir = destination_dir
        self.chunk_size = chunk_size
        self.directory_mode = directory_mode

    def target_path(self, entry: FileEntry) -> str:
        return os.path.join(self.destination_dir, entry.relative_path)

    def materialize(self, entry: FileEntry, source: BinaryIO) -> int:
        """
        Copies source (already rewound to offset 0) to destination_dir/relative_path.

        Args:
            entry: File being kept
            source: Open, readable source stream

        Returns:
            Number of bytes written

        Raises:
            DirectoryCreateError, FileCreateError, CopyError, SyncError
        """
        target_dir = os.path.join(self.destination_dir, os.path.dirname(entry.relative_path))
        try:
            self.fs.makedirs(target_dir, self.directory_mode)
        except OSError as e:
            raise DirectoryCreateError(f"failed to create directory hierarchy: {e}") from e

        target = self.target_path(entry)
        try:
            out = self.fs.create(target)
        except OSError as e:
            raise FileCreateError(f"failed to create output file: {e}") from e

        try:
            try:
                written = self._copy(source, out)
            except OSError as e:
                raise CopyError(f"failed to copy file contents: {e}") from e

            try:
                self.fs.sync(out)
            except OSError as e:
                raise SyncError(f"failed to sync file contents: {e}") from e
        finally:
            self._close(out, target)

        logger.debug(f"Wrote {written} bytes to {target}")
        return written

    def _copy(self, source: BinaryIO, out: BinaryIO) -> int:
        written = 0
        while True:
            chunk = source.read(self.chunk_size)
            if not chunk:
                break
            out.write(chunk)
            written += len(chunk)
        return written

    @staticmethod
    def _close(out: BinaryIO, target: str) -> None:
        try:
            out.close()
        except OSError as e:
            # Data was synced before close, so the run goes on
            logger.warning(f"Failed to close file {target!r}: {e}")
