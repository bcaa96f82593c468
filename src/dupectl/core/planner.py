"""Duplicate grouping and deletion planning."""

from pathlib import Path

from dupectl.core.models import DeletionPlan, DuplicateGroup, FileRecord, FsError, FsOp


def find_duplicate_groups(digests: dict[str, list[Path]]) -> list[DuplicateGroup]:
    """Build a group for every digest shared by more than one path, ordered by digest."""
    return [
        DuplicateGroup(digest=digest, paths=list(paths))
        for digest, paths in sorted(digests.items())
        if len(paths) > 1
    ]


def file_size(path: Path) -> tuple[int | None, FsError | None]:
    """Return (size, None), or (None, error) if the file cannot be stat'ed."""
    try:
        return path.stat().st_size, None
    except OSError as e:
        return None, FsError.from_os_error(FsOp.STAT, path, e)


def build_plan(groups: list[DuplicateGroup]) -> DeletionPlan:
    """Nominate every non-keeper path for deletion and measure its size.

    A file whose size cannot be read is still nominated; it counts as 0 bytes
    towards the reclaimable total.
    """
    plan = DeletionPlan(groups=groups)
    for group in groups:
        for path in group.duplicates:
            size, error = file_size(path)
            plan.records.append(FileRecord(path=path, digest=group.digest, size=size, error=error))
    return plan
