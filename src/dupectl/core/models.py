"""Data types shared by the scan, plan and delete phases."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class FsOp(str, Enum):
    """Filesystem operation that produced an error."""

    OPEN = "open"
    READ = "read"
    STAT = "stat"
    REMOVE = "remove"
    ITERATE = "iterate"


@dataclass(frozen=True)
class FsError:
    """A failed filesystem call, returned as a value instead of raised."""

    op: FsOp
    path: Path
    message: str

    @classmethod
    def from_os_error(cls, op: FsOp, path: Path, exc: OSError) -> "FsError":
        return cls(op=op, path=path, message=exc.strerror or str(exc))

    def __str__(self) -> str:
        return f"cannot {self.op.value} {self.path}: {self.message}"


@dataclass
class FileRecord:
    """A discovered file, its digest and (once measured) its size."""

    path: Path
    digest: str = ""
    size: int | None = None
    error: FsError | None = None


@dataclass
class HashResult:
    """Outcome of hashing one file. An empty digest means the file is excluded."""

    path: Path
    digest: str = ""
    error: FsError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and bool(self.digest)


@dataclass
class ScanResult:
    """Digest to paths mapping produced by one scan."""

    root: Path
    digests: dict[str, list[Path]] = field(default_factory=dict)
    files_scanned: int = 0
    hash_errors: list[FsError] = field(default_factory=list)
    error: FsError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class DuplicateGroup:
    """Paths sharing one digest, in discovery order. The first one is kept."""

    digest: str
    paths: list[Path]

    @property
    def keeper(self) -> Path:
        return self.paths[0]

    @property
    def duplicates(self) -> list[Path]:
        return self.paths[1:]


@dataclass
class DeletionPlan:
    """Every non-keeper path across all groups, with measured sizes."""

    groups: list[DuplicateGroup] = field(default_factory=list)
    records: list[FileRecord] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)

    @property
    def paths(self) -> list[Path]:
        return [record.path for record in self.records]

    @property
    def total_size(self) -> int:
        """Reclaimable bytes. Files whose size could not be read count as 0."""
        return sum(record.size or 0 for record in self.records)

    @property
    def size_errors(self) -> list[FsError]:
        return [record.error for record in self.records if record.error is not None]


@dataclass
class DeletionOutcome:
    path: Path
    error: FsError | None = None

    @property
    def deleted(self) -> bool:
        return self.error is None


@dataclass
class DeletionResult:
    """Per-file outcomes of a batch deletion."""

    outcomes: list[DeletionOutcome] = field(default_factory=list)

    @property
    def deleted(self) -> list[Path]:
        return [o.path for o in self.outcomes if o.deleted]

    @property
    def failed(self) -> list[FsError]:
        return [o.error for o in self.outcomes if o.error is not None]

    @property
    def deleted_count(self) -> int:
        return len(self.deleted)
