"""File hashing for duplicate detection."""

import hashlib
from pathlib import Path

from dupectl.core.models import FsError, FsOp, HashResult

CHUNK_SIZE = 128 * 1024
DEFAULT_ALGORITHM = "sha256"


def supported_algorithms() -> list[str]:
    """Hash algorithms with a fixed-length hex digest."""
    return sorted(a for a in hashlib.algorithms_guaranteed if not a.startswith("shake_"))


def hash_file(path: Path, algorithm: str = DEFAULT_ALGORITHM, chunk_size: int = CHUNK_SIZE) -> HashResult:
    """Compute hash of a file's contents, reading it in chunks.

    A file that cannot be opened, or fails mid-read, gets an empty digest and
    the error instead of raising, so the caller can leave it out of grouping.
    """
    result = HashResult(path=path)
    h = hashlib.new(algorithm)

    try:
        f = open(path, "rb")
    except OSError as e:
        result.error = FsError.from_os_error(FsOp.OPEN, path, e)
        return result

    with f:
        try:
            while chunk := f.read(chunk_size):
                h.update(chunk)
        except OSError as e:
            result.error = FsError.from_os_error(FsOp.READ, path, e)
            return result

    result.digest = h.hexdigest()
    return result
