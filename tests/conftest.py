"""
Shared fixtures for copy-deduplication tests.
Provides an in-memory FileSystem with failure injection and on-disk test trees.
"""
import io
import os
import pytest
import tempfile
from pathlib import Path
from typing import Dict, Iterator, Optional, Set, Tuple
import sys

# Add src/ to sys.path so 'dedupcopy' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from dedupcopy.core.models import WalkEntry


class MemoryFile(io.BytesIO):
    """Handle returned by MemoryFileSystem; consults the fs for injected failures."""

    def __init__(self, fs: "MemoryFileSystem", path: str, data: bytes = b"", for_write: bool = False):
        super().__init__(data)
        self.fs = fs
        self.path = path
        self.for_write = for_write
        fs.open_handles += 1

    def read(self, size=-1):
        self.fs.raise_if_failing("read", self.path)
        return super().read(size)

    def write(self, data):
        self.fs.raise_if_failing("write", self.path)
        return super().write(data)

    def seek(self, pos, whence=0):
        self.fs.raise_if_failing("seek", self.path)
        return super().seek(pos, whence)

    def close(self):
        if self.closed:
            return
        if self.for_write:
            self.fs.files[self.path] = self.getvalue()
        self.fs.open_handles -= 1
        super().close()
        self.fs.raise_if_failing("close", self.path)


class MemoryFileSystem:
    """
    In-memory FileSystem for core tests.
    Paths are absolute POSIX-style strings; walk() visits children in lexical order.
    """

    def __init__(self):
        self.files: Dict[str, bytes] = {}
        self.dirs: Set[str] = {"/"}
        self.dir_modes: Dict[str, int] = {}
        self.synced: Set[str] = set()
        self.open_handles = 0
        self.opened_for_read = []
        self._failures: Dict[Tuple[str, str], OSError] = {}

    # ----- test helpers -----
    def write_file(self, path: str, data) -> None:
        if isinstance(data, str):
            data = data.encode()
        self._add_dirs(os.path.dirname(path))
        self.files[path] = data

    def read_file(self, path: str) -> bytes:
        return self.files[path]

    def fail(self, operation: str, path: str, error: Optional[OSError] = None) -> None:
        """Make `operation` on `path` raise `error` (default: a generic OSError)."""
        self._failures[(operation, path)] = error or OSError(5, f"injected {operation} failure", path)

    def raise_if_failing(self, operation: str, path: str) -> None:
        error = self._failures.get((operation, path))
        if error is not None:
            raise error

    def files_under(self, root: str):
        prefix = root.rstrip("/") + "/"
        return {p[len(prefix):]: data for p, data in self.files.items() if p.startswith(prefix)}

    def _add_dirs(self, path: str) -> None:
        path = os.path.normpath(path)
        while path not in self.dirs:
            self.dirs.add(path)
            path = os.path.dirname(path)

    # ----- FileSystem protocol -----
    def walk(self, root: str) -> Iterator[WalkEntry]:
        if root in self.files:
            yield WalkEntry(path=root, is_dir=False, size=len(self.files[root]))
            return
        if root not in self.dirs:
            raise FileNotFoundError(2, "No such file or directory", root)
        yield WalkEntry(path=root, is_dir=True, size=0)
        yield from self._walk_dir(root)

    def _walk_dir(self, path: str) -> Iterator[WalkEntry]:
        self.raise_if_failing("walk", path)
        children = sorted(
            p for p in set(self.files) | self.dirs
            if p != "/" and os.path.dirname(p) == path
        )
        for child in children:
            if child in self.dirs:
                yield WalkEntry(path=child, is_dir=True, size=0)
                yield from self._walk_dir(child)
            else:
                yield WalkEntry(path=child, is_dir=False, size=len(self.files[child]))

    def open_read(self, path: str) -> MemoryFile:
        self.raise_if_failing("open", path)
        if path not in self.files:
            raise FileNotFoundError(2, "No such file or directory", path)
        self.opened_for_read.append(path)
        return MemoryFile(self, path, self.files[path])

    def create(self, path: str) -> MemoryFile:
        self.raise_if_failing("create", path)
        if path in self.dirs:
            raise IsADirectoryError(21, "Is a directory", path)
        if os.path.dirname(path) not in self.dirs:
            raise FileNotFoundError(2, "No such file or directory", path)
        self.files[path] = b""
        return MemoryFile(self, path, for_write=True)

    def makedirs(self, path: str, mode: int) -> None:
        path = os.path.normpath(path)
        self.raise_if_failing("makedirs", path)
        if path in self.files:
            raise FileExistsError(17, "File exists", path)
        self._add_dirs(path)
        self.dir_modes.setdefault(path, mode)

    def sync(self, handle: MemoryFile) -> None:
        self.raise_if_failing("sync", handle.path)
        self.synced.add(handle.path)


@pytest.fixture
def memory_fs() -> MemoryFileSystem:
    return MemoryFileSystem()


@pytest.fixture
def produce_tree(memory_fs) -> MemoryFileSystem:
    """
    The reference scenario:
    - dir1/apple.txt and dir2/apple.txt share content (second one is a duplicate)
    - dir2/empty.txt is empty (filtered by the walker)
    - two macOS metadata files (filtered by the walker)
    """
    memory_fs.write_file("/src/dir1/apple.txt", "apple")
    memory_fs.write_file("/src/dir1/banana.txt", "banana")
    memory_fs.write_file("/src/dir2/apple.txt", "apple")
    memory_fs.write_file("/src/dir2/carrot.txt", "carrot")
    memory_fs.write_file("/src/dir2/empty.txt", "")
    memory_fs.write_file("/src/dir2/.DS_Store", "ds store")
    memory_fs.write_file("/src/dir2/._.DS_Store", "more ds store")
    return memory_fs


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates a controlled source tree on disk under temp_dir/src:
    - 2 identical files in different directories (1KB of 'A')
    - 2 identical files with different names (2KB of 'B')
    - 2 unique files
    - 1 empty file and 1 Thumbs.db (both filtered by the walker)
    """
    src = temp_dir / "src"
    (src / "photos" / "2023").mkdir(parents=True)
    (src / "backup").mkdir()
    files = {}

    content_a = b"A" * 1024
    files["dup1_a"] = src / "photos" / "2023" / "a.jpg"
    files["dup1_b"] = src / "backup" / "a.jpg"
    files["dup1_a"].write_bytes(content_a)
    files["dup1_b"].write_bytes(content_a)

    content_b = b"B" * 2048
    files["dup2_a"] = src / "photos" / "b.jpg"
    files["dup2_b"] = src / "photos" / "b copy.jpg"
    files["dup2_a"].write_bytes(content_b)
    files["dup2_b"].write_bytes(content_b)

    files["unique1"] = src / "notes.txt"
    files["unique1"].write_bytes(b"C" * 1500)
    files["unique2"] = src / "backup" / "notes.txt"
    files["unique2"].write_bytes(b"D" * 2500)

    files["empty"] = src / "empty.txt"
    files["empty"].write_bytes(b"")
    files["thumbs"] = src / "photos" / "Thumbs.db"
    files["thumbs"].write_bytes(b"E" * 64)

    return files
