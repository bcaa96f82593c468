"""Tests for core.hasher module."""

import hashlib
import io

import pytest

from dupectl.core import hasher
from dupectl.core.hasher import CHUNK_SIZE, hash_file, supported_algorithms
from dupectl.core.models import FsOp


def test_hash_file_identical_files(scan_dir):
    """Test that identical files produce identical hashes."""
    file1 = scan_dir / "file1.txt"
    file2 = scan_dir / "nested_name_differs.dat"

    content = b"Hello, World!" * 1000
    file1.write_bytes(content)
    file2.write_bytes(content)

    assert hash_file(file1).digest == hash_file(file2).digest


def test_hash_file_different_files(scan_dir):
    """Test that different files produce different hashes."""
    file1 = scan_dir / "file1.txt"
    file2 = scan_dir / "file2.txt"

    file1.write_bytes(b"Content A")
    file2.write_bytes(b"Content B")

    assert hash_file(file1).digest != hash_file(file2).digest


def test_hash_file_default_algorithm(scan_dir):
    """Test that default algorithm is SHA256."""
    file = scan_dir / "file.txt"
    content = b"Test content"
    file.write_bytes(content)

    digest = hash_file(file).digest

    assert len(digest) == 64
    assert digest == hashlib.sha256(content).hexdigest()


def test_hash_file_custom_algorithm(scan_dir):
    """Test using a different hash algorithm."""
    file = scan_dir / "file.txt"
    content = b"Test content"
    file.write_bytes(content)

    assert hash_file(file, algorithm="md5").digest == hashlib.md5(content).hexdigest()


def test_hash_file_includes_short_final_chunk(scan_dir):
    """A file one byte longer than the chunk size hashes like a single read."""
    file = scan_dir / "odd.bin"
    content = bytes(range(256)) * (CHUNK_SIZE // 256) + b"Z"
    assert len(content) == CHUNK_SIZE + 1
    file.write_bytes(content)

    result = hash_file(file)

    assert result.ok
    assert result.digest == hashlib.sha256(content).hexdigest()


def test_hash_file_last_byte_matters(scan_dir):
    """Files differing only in the byte past the last full chunk get different digests."""
    body = b"\xab" * CHUNK_SIZE
    file1 = scan_dir / "tail_a.bin"
    file2 = scan_dir / "tail_b.bin"
    file1.write_bytes(body + b"A")
    file2.write_bytes(body + b"B")

    assert hash_file(file1).digest != hash_file(file2).digest


@pytest.mark.parametrize("chunk_size", [1, 7, 4096])
def test_hash_file_independent_of_chunk_size(scan_dir, chunk_size):
    """Digest does not depend on how the file is split into reads."""
    file = scan_dir / "data.bin"
    content = b"abcdefghij" * 1001
    file.write_bytes(content)

    assert hash_file(file, chunk_size=chunk_size).digest == hashlib.sha256(content).hexdigest()


def test_hash_file_empty_file(scan_dir):
    """Test hashing an empty file."""
    file = scan_dir / "empty.bin"
    file.write_bytes(b"")

    result = hash_file(file)

    assert result.ok
    assert result.digest == hashlib.sha256(b"").hexdigest()


def test_hash_file_missing_file(scan_dir):
    """An unopenable file yields an empty digest and an open error."""
    missing = scan_dir / "gone.txt"

    result = hash_file(missing)

    assert not result.ok
    assert result.digest == ""
    assert result.error.op == FsOp.OPEN
    assert result.error.path == missing


def test_hash_file_read_error(scan_dir, monkeypatch):
    """A read failure mid-stream discards the partial digest."""
    file = scan_dir / "flaky.bin"
    file.write_bytes(b"data" * 100)

    class FlakyStream(io.BytesIO):
        def __init__(self):
            super().__init__(b"first chunk")
            self.reads = 0

        def read(self, size=-1):
            self.reads += 1
            if self.reads > 1:
                raise OSError(5, "Input/output error")
            return super().read(size)

    monkeypatch.setattr(hasher, "open", lambda path, mode: FlakyStream(), raising=False)

    result = hash_file(file, chunk_size=4)

    assert not result.ok
    assert result.digest == ""
    assert result.error.op == FsOp.READ
    assert result.error.message == "Input/output error"


def test_supported_algorithms():
    algorithms = supported_algorithms()

    assert "sha256" in algorithms
    assert "md5" in algorithms
    assert not any(a.startswith("shake_") for a in algorithms)


def test_chunk_size_constant():
    """Test that CHUNK_SIZE is 128 KiB."""
    assert CHUNK_SIZE == 131072
