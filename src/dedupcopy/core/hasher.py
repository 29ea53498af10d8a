"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements streaming content hashing with pluggable hash algorithms.

HasherImpl reads a stream in bounded chunks, so memory use does not depend on
file size, and produces a hex digest of the complete content.
"""

import hashlib
from typing import BinaryIO, Dict, Type

import xxhash

from dedupcopy.core.models import DeduplicationConfig, HashAlgorithmName
from dedupcopy.core.interfaces import Hasher, HashAlgorithm, HashState


# Use the same way to implement and use any other hashing algorithm
class XXHashAlgorithmImpl(HashAlgorithm):
    @staticmethod
    def new() -> HashState:
        return xxhash.xxh3_128()


class Sha256AlgorithmImpl(HashAlgorithm):
    @staticmethod
    def new() -> HashState:
        return hashlib.sha256()


ALGORITHMS: Dict[HashAlgorithmName, Type[HashAlgorithm]] = {
    HashAlgorithmName.XXH3: XXHashAlgorithmImpl,
    HashAlgorithmName.SHA256: Sha256AlgorithmImpl,
}


class HasherImpl(Hasher):
    """
    A hasher implementation that supports any algorithm via the HashAlgorithm interface.

    The instance keeps one hash state and is meant to be owned by a single
    sequential engine: call reset() before each file. Never share one instance
    between threads.
    """

    def __init__(self, algorithm: HashAlgorithm, chunk_size: int = DeduplicationConfig.CHUNK_SIZE):
        if chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
        self.algorithm = algorithm
        self.chunk_size = chunk_size
        self._state = algorithm.new()

    @classmethod
    def for_name(cls, name: HashAlgorithmName, chunk_size: int = DeduplicationConfig.CHUNK_SIZE) -> "HasherImpl":
        return cls(ALGORITHMS[name](), chunk_size)

    def reset(self) -> None:
        """Drops everything hashed so far."""
        self._state = self.algorithm.new()

    def compute_digest(self, stream: BinaryIO) -> str:
        """
        Feeds the rest of stream into the current state and returns the hex digest.
        Read errors (OSError) propagate to the caller.
        """
        while True:
            chunk = stream.read(self.chunk_size)
            if not chunk:
                break
            self._state.update(chunk)
        return self._state.hexdigest()
