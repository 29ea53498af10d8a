"""
Core deduplication engine — walker, hasher, index, materializer and pipeline orchestrator.

This package contains the whole copy-deduplication pipeline:
- TreeWalkerImpl: lazy traversal with empty/metadata file filters
- HasherImpl + XXHashAlgorithmImpl: streaming content hashing
- DuplicateIndex: first-seen-wins digest → relative path map
- MaterializerImpl: directory recreation and durable file copy
- DeduplicatorImpl: single-pass engine tying the above together
- Models: FileEntry, RunStats, and configuration objects

Storage is reached only through the FileSystem protocol, so the core runs
against the real disk or an in-memory fake.
"""

from .models import (
    FileEntry, WalkEntry, RunStats, CopyAction, HashAlgorithmName,
    DeduplicationConfig, DeduplicationParams)
from .index import DuplicateIndex
from .interfaces import FileSystem, Hasher, HashAlgorithm, TreeWalker, Materializer, Deduplicator
from .hasher import HasherImpl, XXHashAlgorithmImpl, Sha256AlgorithmImpl
from .scanner import TreeWalkerImpl
from .materializer import MaterializerImpl
from .deduplicator import DeduplicatorImpl
from .exceptions import (
    DedupError, TraversalError, OpenError, ReadError, SeekError,
    DirectoryCreateError, FileCreateError, CopyError, SyncError)

__all__ = [
    "FileEntry",
    "WalkEntry",
    "RunStats",
    "CopyAction",
    "HashAlgorithmName",
    "DeduplicationConfig",
    "DeduplicationParams",
    "DuplicateIndex",
    "FileSystem",
    "Hasher",
    "HashAlgorithm",
    "TreeWalker",
    "Materializer",
    "Deduplicator",
    "HasherImpl",
    "XXHashAlgorithmImpl",
    "Sha256AlgorithmImpl",
    "TreeWalkerImpl",
    "MaterializerImpl",
    "DeduplicatorImpl",
    "DedupError",
    "TraversalError",
    "OpenError",
    "ReadError",
    "SeekError",
    "DirectoryCreateError",
    "FileCreateError",
    "CopyError",
    "SyncError",
]
