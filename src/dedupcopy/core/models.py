"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models and run configuration for content-based copy deduplication.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Tuple


# =============================
# Enums
# =============================

class HashAlgorithmName(Enum):
    """
    Content hash used as the identity key for duplicates.
    """
    XXH3 = "xxh3"
    SHA256 = "sha256"

    @property
    def display_name(self) -> str:
        """Human-readable name for help text."""
        mapping = {
            HashAlgorithmName.XXH3: "xxHash3-128",
            HashAlgorithmName.SHA256: "SHA-256",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


class CopyAction(str, Enum):
    COPYING = "copying"
    SKIP = "skip"


# =============================
# Config
# =============================

class DeduplicationConfig:
    CHUNK_SIZE = 64 * 1024  # Bytes read per hash/copy step
    DIRECTORY_MODE = 0o770  # Mode for recreated destination directories

    # OS-generated sidecar metadata, never processed or counted
    IGNORED_NAME_SUFFIXES: Tuple[str, ...] = (".DS_Store",)
    IGNORED_NAMES: FrozenSet[str] = frozenset({"Thumbs.db", "desktop.ini"})

    @staticmethod
    def is_ignored_name(name: str) -> bool:
        if name in DeduplicationConfig.IGNORED_NAMES:
            return True
        return name.endswith(DeduplicationConfig.IGNORED_NAME_SUFFIXES)


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class WalkEntry:
    """Raw metadata for one filesystem entry, as yielded by FileSystem.walk()."""
    path: str
    is_dir: bool
    size: int


@dataclass(frozen=True)
class FileEntry:
    """
    A regular, non-empty, non-ignorable file found under the source root.
    Lives only while that one file is being processed.
    """
    source_path: str
    relative_path: str
    size: int  # in bytes

    @property
    def name(self) -> str:
        return os.path.basename(self.relative_path)

    def __repr__(self):
        return f"<FileEntry path={self.relative_path}, size={self.size}>"


@dataclass
class RunStats:
    """
    Byte and file totals collected during one run.
    Each FileEntry is counted once, either as copied or as skipped.
    """
    copied_bytes: int = 0
    skipped_bytes: int = 0
    copied_files: int = 0
    skipped_files: int = 0

    def add_copied(self, size: int) -> None:
        self.copied_bytes += size
        self.copied_files += 1

    def add_skipped(self, size: int) -> None:
        self.skipped_bytes += size
        self.skipped_files += 1

    @property
    def total_bytes(self) -> int:
        return self.copied_bytes + self.skipped_bytes

    @property
    def copied_ratio(self) -> float:
        """Share of copied bytes among all processed bytes, as a fraction (0..1)."""
        if self.total_bytes == 0:
            return 0.0
        return self.copied_bytes / self.total_bytes

    @property
    def is_noop(self) -> bool:
        """True when nothing was copied: the run had nothing to do."""
        return self.copied_bytes == 0

    def summary(self) -> str:
        # "MB" over a /1024 division and the bare ratio before "%" are the historical output format
        return (
            f"Copied {self.copied_bytes // 1024} MB, "
            f"skipped {self.skipped_bytes // 1024} MB "
            f"({self.copied_ratio:.2f}%)"
        )


"""
DTO for deduplication parameters with built-in validation.
Interface-agnostic — used by the CLI and by library callers.
"""

@dataclass
class DeduplicationParams:
    """Parameters for one copy-deduplication run with validation."""
    source_dir: str
    destination_dir: str
    algorithm: HashAlgorithmName = HashAlgorithmName.XXH3
    chunk_size: int = DeduplicationConfig.CHUNK_SIZE

    def __post_init__(self):
        """Validate and resolve parameters immediately after creation."""
        if not self.source_dir:
            raise ValueError("Source directory cannot be empty")
        if not self.destination_dir:
            raise ValueError("Destination directory cannot be empty")
        if self.chunk_size <= 0:
            raise ValueError("Chunk size must be positive")

        for label, path in (("Source", self.source_dir), ("Destination", self.destination_dir)):
            if "\x00" in path:
                raise ValueError(f"{label} directory contains a NUL byte: {path!r}")

        # Both roots are made absolute up front so the run does not depend on cwd
        self.source_dir = os.path.abspath(self.source_dir)
        self.destination_dir = os.path.abspath(self.destination_dir)
