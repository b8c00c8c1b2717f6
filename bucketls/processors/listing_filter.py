"""Key and size filtering for object listings."""

from typing import Iterable, Iterator

from ..config import SizeRange
from ..models import ObjectRecord


def matches(record: ObjectRecord, key_filter: str, size_range: SizeRange) -> bool:
    """Check whether a record passes the key substring and size filters.

    An empty key filter matches every key. Size bounds are inclusive, and
    a range with min > max matches nothing.
    """
    if key_filter not in record.key:
        return False
    if size_range.min is not None and record.size < size_range.min:
        return False
    if size_range.max is not None and record.size > size_range.max:
        return False
    return True


def filter_records(
    records: Iterable[ObjectRecord], key_filter: str, size_range: SizeRange
) -> Iterator[ObjectRecord]:
    """Lazily yield the records that pass the filters."""
    for record in records:
        if matches(record, key_filter, size_range):
            yield record
