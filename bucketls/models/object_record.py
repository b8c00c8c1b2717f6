"""Object listing data models."""

from dataclasses import dataclass, field
from datetime import datetime

DEFAULT_STORAGE_CLASS = "STANDARD"


@dataclass(frozen=True)
class ObjectRecord:
    """A single object from a bucket listing page."""

    key: str
    size: int  # bytes
    last_modified: datetime
    storage_class: str = DEFAULT_STORAGE_CLASS

    @classmethod
    def from_s3(cls, obj: dict) -> "ObjectRecord":
        """Build a record from a list_objects_v2 ``Contents`` entry."""
        return cls(
            key=obj["Key"],
            size=obj.get("Size", 0),
            last_modified=obj["LastModified"],
            # Some S3-compatible providers omit the storage class
            storage_class=obj.get("StorageClass") or DEFAULT_STORAGE_CLASS,
        )


@dataclass(frozen=True)
class DeletionBatch:
    """Keys from one listing page, deleted with a single request."""

    keys: tuple[str, ...]
    size: int = 0

    @classmethod
    def from_records(cls, records: list[ObjectRecord]) -> "DeletionBatch":
        """Collect the keys and total size of one listing page."""
        return cls(
            keys=tuple(record.key for record in records),
            size=sum(record.size for record in records),
        )

    def __len__(self) -> int:
        return len(self.keys)


@dataclass
class DeletionTotals:
    """Running totals across all deleted pages."""

    count: int = 0
    size: int = 0
    failed_keys: list[str] = field(default_factory=list)

    def add(self, batch: DeletionBatch) -> None:
        self.count += len(batch)
        self.size += batch.size
