"""Size formatting and terminal color helpers."""

from ..config import MAX_OBJECT_SIZE_LIMIT, MIN_OBJECT_SIZE_LIMIT
from ..models import DARK_RED, RESET, WHITE, Color, DeletionTotals, ObjectRecord

UNIT = 1024
UNIT_PREFIXES = "KMGTPE"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_size(size: int) -> str:
    """Format a byte count as a human-readable string.

    Scaling is 1024-based but units are labelled KB, MB, GB, ... Sizes past
    the exabyte range stay in EB.

    Examples:
        1023 -> "1023 B"
        1024 -> "1.0 KB"
        1048576 -> "1.0 MB"
    """
    if size < UNIT:
        return f"{size} B"

    div, exp = UNIT, 0
    n = size // UNIT
    while n >= UNIT and exp < len(UNIT_PREFIXES) - 1:
        div *= UNIT
        exp += 1
        n //= UNIT
    return f"{size / div:.1f} {UNIT_PREFIXES[exp]}B"


def interpolate_color(factor: float, start: Color, end: Color) -> Color:
    """Linearly interpolate between two color stops.

    The factor is not clamped, so values outside [0, 1] extrapolate past
    the stops. Channels are truncated toward zero.
    """
    return Color(
        r=int(start.r * (1 - factor) + end.r * factor),
        g=int(start.g * (1 - factor) + end.g * factor),
        b=int(start.b * (1 - factor) + end.b * factor),
    )


def color_for_size(
    size: int,
    min_threshold: int = MIN_OBJECT_SIZE_LIMIT,
    max_threshold: int = MAX_OBJECT_SIZE_LIMIT,
    low: Color = WHITE,
    high: Color = DARK_RED,
) -> Color:
    """Pick a display color for an object size."""
    if size <= min_threshold:
        return low
    if size >= max_threshold:
        return high
    return interpolate_color(size / max_threshold, low, high)


def full_object_path(bucket: str, key: str, scheme: str = "s3") -> str:
    """Build the ``s3://bucket/key`` form of an object key."""
    return f"{scheme}://{bucket}/{key}"


def format_object_line(
    record: ObjectRecord, key: str | None = None, color: Color | None = None
) -> str:
    """Render one inventory line.

    Args:
        record: The listed object
        key: Key to display, defaults to the record key
        color: Wrap the line in this color when given
    """
    line = (
        f"{format_size(record.size):>9} "
        f"{record.last_modified.strftime(TIMESTAMP_FORMAT)} "
        f"{record.storage_class} {key if key is not None else record.key}"
    )
    if color is None:
        return line
    return f"{color.escape}{line}{RESET}"


def format_progress(totals: DeletionTotals) -> str:
    """Render the running deletion totals as a single progress line."""
    return f"Deleted {totals.count} objects / {format_size(totals.size)}"
