"""
Unit tests for HasherImpl with XXHashAlgorithmImpl and Sha256AlgorithmImpl.
Verifies streaming digests are independent of chunk size and carry no residue between files.
"""
import hashlib
import io
import pytest
import xxhash
from dedupcopy.core.hasher import HasherImpl, XXHashAlgorithmImpl, Sha256AlgorithmImpl
from dedupcopy.core.models import HashAlgorithmName


class TestHasherImpl:
    """Test streaming content digests."""

    def test_same_content_produces_same_digest(self):
        """Identical bytes must produce identical hex digests."""
        content = b"test content " * 1000
        hasher = HasherImpl(XXHashAlgorithmImpl())

        digest1 = hasher.compute_digest(io.BytesIO(content))
        hasher.reset()
        digest2 = hasher.compute_digest(io.BytesIO(content))

        assert digest1 == digest2
        assert isinstance(digest1, str)
        assert len(digest1) == 32  # xxHash3-128 = 16 bytes = 32 hex chars

    def test_different_content_produces_different_digests(self):
        hasher = HasherImpl(XXHashAlgorithmImpl())

        digest_a = hasher.compute_digest(io.BytesIO(b"A" * 1024))
        hasher.reset()
        digest_b = hasher.compute_digest(io.BytesIO(b"B" * 1024))

        assert digest_a != digest_b

    @pytest.mark.parametrize("chunk_size", [1, 7, 4096, 1024 * 1024])
    def test_digest_independent_of_chunk_size(self, chunk_size):
        """Chunk boundaries must never change the digest."""
        content = bytes(range(256)) * 300
        expected = xxhash.xxh3_128(content).hexdigest()

        hasher = HasherImpl(XXHashAlgorithmImpl(), chunk_size=chunk_size)
        assert hasher.compute_digest(io.BytesIO(content)) == expected

    def test_reset_removes_residue_from_previous_file(self):
        """After reset(), a digest depends only on the new stream."""
        hasher = HasherImpl(XXHashAlgorithmImpl())
        hasher.compute_digest(io.BytesIO(b"previous file"))
        hasher.reset()

        assert hasher.compute_digest(io.BytesIO(b"apple")) == xxhash.xxh3_128(b"apple").hexdigest()

    def test_without_reset_state_accumulates(self):
        """Documents why the engine resets before every file."""
        hasher = HasherImpl(XXHashAlgorithmImpl())
        hasher.compute_digest(io.BytesIO(b"previous file"))

        assert hasher.compute_digest(io.BytesIO(b"apple")) != xxhash.xxh3_128(b"apple").hexdigest()

    def test_sha256_matches_hashlib(self):
        content = b"banana" * 50000
        hasher = HasherImpl(Sha256AlgorithmImpl(), chunk_size=1000)

        digest = hasher.compute_digest(io.BytesIO(content))

        assert digest == hashlib.sha256(content).hexdigest()
        assert len(digest) == 64

    def test_for_name_selects_algorithm(self):
        assert isinstance(HasherImpl.for_name(HashAlgorithmName.XXH3).algorithm, XXHashAlgorithmImpl)
        assert isinstance(HasherImpl.for_name(HashAlgorithmName.SHA256).algorithm, Sha256AlgorithmImpl)

    def test_reads_in_bounded_chunks(self):
        """The stream must never be read in one unbounded call."""
        sizes = []

        class RecordingStream(io.BytesIO):
            def read(self, size=-1):
                sizes.append(size)
                return super().read(size)

        hasher = HasherImpl(XXHashAlgorithmImpl(), chunk_size=100)
        hasher.compute_digest(RecordingStream(b"x" * 1000))

        assert sizes and all(size == 100 for size in sizes)

    def test_read_error_propagates(self):
        """An OSError while reading must reach the caller unchanged."""
        class BrokenStream(io.BytesIO):
            def read(self, size=-1):
                raise OSError("disk on fire")

        hasher = HasherImpl(XXHashAlgorithmImpl())
        with pytest.raises(OSError, match="disk on fire"):
            hasher.compute_digest(BrokenStream(b"data"))

    def test_rejects_non_positive_chunk_size(self):
        with pytest.raises(ValueError):
            HasherImpl(XXHashAlgorithmImpl(), chunk_size=0)
