"""Directory walker and digest grouping."""

import os
from collections import defaultdict
from collections.abc import Callable, Iterator
from pathlib import Path

from dupectl.core.hasher import CHUNK_SIZE, DEFAULT_ALGORITHM, hash_file
from dupectl.core.models import FsError, FsOp, ScanResult

ProgressCallback = Callable[[Path], None]


class TraversalError(Exception):
    """A directory could not be read during the walk. Aborts the scan."""

    def __init__(self, error: FsError):
        super().__init__(str(error))
        self.error = error


def validate_root(path: Path) -> str | None:
    """Return an error message if path is not an existing directory."""
    if not path.exists():
        return f"Directory does not exist: {path}"
    if not path.is_dir():
        return f"Path is not a directory: {path}"
    return None


def _raise_traversal_error(exc: OSError) -> None:
    path = Path(exc.filename) if exc.filename else Path()
    raise TraversalError(FsError.from_os_error(FsOp.ITERATE, path, exc))


def walk_files(root: Path) -> Iterator[Path]:
    """Yield every regular file under root, recursively.

    Symbolic links are skipped, both to files and to directories. Entries are
    visited in sorted order within each directory.
    """
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_traversal_error):
        dirnames.sort()
        for name in sorted(filenames):
            path = Path(dirpath) / name
            if path.is_symlink():
                continue
            if path.is_file():
                yield path


def scan(
    root: Path,
    progress: ProgressCallback | None = None,
    algorithm: str = DEFAULT_ALGORITHM,
    chunk_size: int = CHUNK_SIZE,
) -> ScanResult:
    """Hash every file under root and group the paths by digest.

    Files that fail to hash are left out of the mapping. A traversal failure
    ends the scan and is returned in ``ScanResult.error`` with an empty mapping.
    """
    result = ScanResult(root=root)
    digests: dict[str, list[Path]] = defaultdict(list)

    try:
        for path in walk_files(root):
            if progress is not None:
                progress(path)

            result.files_scanned += 1
            hashed = hash_file(path, algorithm=algorithm, chunk_size=chunk_size)
            if hashed.ok:
                digests[hashed.digest].append(path)
            elif hashed.error is not None:
                result.hash_errors.append(hashed.error)
    except TraversalError as e:
        result.error = e.error
        return result

    result.digests = dict(digests)
    return result
