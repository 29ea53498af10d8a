"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Implements the source tree walker.
Features:
- Lazy: files are yielded one at a time while the walk is in progress
- Skips directories, zero-byte files and OS-generated sidecar metadata
- Fail-fast: any traversal error, or a root that is not a directory, ends the walk with TraversalError
"""

import os
import logging
from typing import Iterator, Optional

logger = logging.getLogger(__name__)

# Local imports
from dedupcopy.core.models import FileEntry, WalkEntry, DeduplicationConfig
from dedupcopy.core.interfaces import FileSystem, TreeWalker
from dedupcopy.core.exceptions import TraversalError


class TreeWalkerImpl(TreeWalker):
    """
    Enumerates eligible files below a source root through a FileSystem.

    Order is whatever the FileSystem yields. Each call to walk() starts a new
    traversal; a generator that was already consumed cannot be replayed.

    Attributes:
        fs: Storage backend to walk
        root_dir: Absolute source root
    """

    def __init__(self, fs: FileSystem, root_dir: str):
        self.fs = fs
        self.root_dir = root_dir

    def walk(self) -> Iterator[FileEntry]:
        logger.debug(f"Starting walk of {self.root_dir}")
        accepted = 0

        entries = self.fs.walk(self.root_dir)
        while True:
            try:
                item = next(entries)
            except StopIteration:
                break
            except OSError as e:
                logger.error(f"Walk of {self.root_dir} failed: {e}")
                raise TraversalError(f"error during filesystem walk: {e}") from e

            if item.path == self.root_dir and not item.is_dir:
                logger.error(f"Walk root is not a directory: {self.root_dir}")
                raise TraversalError(f"error during filesystem walk: not a directory: {self.root_dir}")

            entry = self._process_entry(item)
            if entry:
                accepted += 1
                yield entry

        logger.debug(f"Walk completed. Found {accepted} eligible files.")

    def _process_entry(self, item: WalkEntry) -> Optional[FileEntry]:
        """
        Turn a raw walk entry into a FileEntry if it passes all filters.
        Returns None for directories, empty files and ignorable names.
        """
        if item.is_dir:
            return None

        name = os.path.basename(item.path)
        if DeduplicationConfig.is_ignored_name(name):
            logger.debug(f"Skipping metadata file: {item.path}")
            return None

        if item.size == 0:
            logger.debug(f"Skipping zero-byte file: {item.path}")
            return None

        return FileEntry(
            source_path=item.path,
            relative_path=os.path.relpath(item.path, self.root_dir),
            size=item.size
        )
