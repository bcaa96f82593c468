"""Batch removal of duplicate files."""

from collections.abc import Callable, Iterable
from pathlib import Path

from dupectl.core.models import DeletionOutcome, DeletionResult, FsError, FsOp


def remove_file(path: Path) -> FsError | None:
    """Delete a single file, returning the error instead of raising it."""
    try:
        path.unlink()
    except OSError as e:
        return FsError.from_os_error(FsOp.REMOVE, path, e)
    return None


def delete_files(
    paths: Iterable[Path],
    on_result: Callable[[DeletionOutcome], None] | None = None,
) -> DeletionResult:
    """Delete every path one at a time. A failure never stops the remaining deletions."""
    result = DeletionResult()
    for path in paths:
        outcome = DeletionOutcome(path=path, error=remove_file(path))
        result.outcomes.append(outcome)
        if on_result is not None:
            on_result(outcome)
    return result
