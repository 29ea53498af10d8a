"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/filesystem.py
FileSystem implementation backed by the local disk.
"""
import os
import stat
import logging
from typing import BinaryIO, Iterator

from dedupcopy.core.interfaces import FileSystem
from dedupcopy.core.models import WalkEntry

logger = logging.getLogger(__name__)


class OsFileSystem(FileSystem):
    """
    Local disk operations for the deduplication core.

    walk() is depth-first and visits the entries of each directory in lexical
    name order, so "first occurrence" is reproducible across runs and platforms.
    Symlinks are followed for files but never descended into for directories.
    Errors are raised as OSError and never skipped.
    """

    def walk(self, root: str) -> Iterator[WalkEntry]:
        st = os.stat(root)
        if not stat.S_ISDIR(st.st_mode):
            yield WalkEntry(path=root, is_dir=False, size=st.st_size)
            return
        yield WalkEntry(path=root, is_dir=True, size=0)
        yield from self._walk_dir(root)

    def _walk_dir(self, path: str) -> Iterator[WalkEntry]:
        with os.scandir(path) as it:
            entries = sorted(it, key=lambda e: e.name)

        for entry in entries:
            st = entry.stat()  # follows symlinks; a broken link raises here
            if stat.S_ISDIR(st.st_mode):
                yield WalkEntry(path=entry.path, is_dir=True, size=0)
                if entry.is_symlink():
                    logger.debug(f"Not descending into symlinked directory: {entry.path}")
                    continue
                yield from self._walk_dir(entry.path)
            elif stat.S_ISREG(st.st_mode):
                yield WalkEntry(path=entry.path, is_dir=False, size=st.st_size)
            else:
                logger.debug(f"Skipping special file: {entry.path}")

    def open_read(self, path: str) -> BinaryIO:
        return open(path, "rb")

    def create(self, path: str) -> BinaryIO:
        return open(path, "wb")

    def makedirs(self, path: str, mode: int) -> None:
        os.makedirs(path, mode=mode, exist_ok=True)

    def sync(self, handle: BinaryIO) -> None:
        handle.flush()
        os.fsync(handle.fileno())
