"""Configuration management for the bucket listing tool."""

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv


# Object sizes used for the color gradient
MIN_OBJECT_SIZE_LIMIT = 1024 * 1024  # 1MB
MAX_OBJECT_SIZE_LIMIT = 400 * 1024 * 1024  # 400MB

# S3 DeleteObjects accepts at most this many keys per request
MAX_DELETE_KEYS = 1000

_SIZE_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*([A-Za-z]*)\s*$")
_SIZE_UNITS = {
    "": 1,
    "B": 1,
    "K": 1024,
    "M": 1024**2,
    "G": 1024**3,
    "T": 1024**4,
    "P": 1024**5,
    "E": 1024**6,
}


def parse_size(value: str) -> int:
    """Parse a human-readable size string like '10MB' into bytes.

    Units are binary: "10K", "10KB" and "10KiB" all mean 10 * 1024 bytes.
    A bare number is a byte count.

    Raises:
        ValueError: If the string is not a recognized size.
    """
    match = _SIZE_PATTERN.match(value)
    if not match:
        raise ValueError(f"Invalid size: {value!r}")

    number, unit = match.groups()
    unit = unit.upper()
    if len(unit) == 3 and unit.endswith("IB"):
        unit = unit[:-2]
    elif len(unit) == 2 and unit.endswith("B"):
        unit = unit[:-1]

    if unit not in _SIZE_UNITS:
        raise ValueError(f"Invalid size unit in {value!r}")

    return int(float(number) * _SIZE_UNITS[unit])


def _optional_size(value: str | None) -> int | None:
    if not value:
        return None
    return parse_size(value) or None


@dataclass(frozen=True)
class SizeRange:
    """Inclusive object size bounds. ``None`` means unbounded."""

    min: int | None = None
    max: int | None = None

    @classmethod
    def from_strings(cls, min_size: str | None, max_size: str | None) -> "SizeRange":
        """Build a range from size strings, treating empty or zero sizes as unset."""
        return cls(min=_optional_size(min_size), max=_optional_size(max_size))

    @property
    def is_set(self) -> bool:
        return self.min is not None or self.max is not None


@dataclass(frozen=True)
class StorageConfig:
    """S3 connection settings."""

    bucket: str
    region: str | None = None  # resolved from the bucket when unset
    endpoint: str | None = None


@dataclass(frozen=True)
class ListingConfig:
    """Main configuration container, built once at startup."""

    storage: StorageConfig
    prefix: str = ""
    key_filter: str = ""
    size_range: SizeRange = field(default_factory=SizeRange)
    full_path: bool = False
    delete: bool = False
    interactive: bool = False

    @classmethod
    def from_environment(
        cls,
        bucket: str,
        endpoint: str | None = None,
        env_path: Path | None = None,
        **options,
    ) -> "ListingConfig":
        """Load connection settings from environment variables.

        ``options`` are passed through to the listing fields.
        """
        if env_path:
            load_dotenv(env_path)
        else:
            load_dotenv()

        if not bucket:
            raise ValueError("A bucket name is required")

        return cls(
            storage=StorageConfig(
                bucket=bucket,
                region=os.getenv("BUCKETLS_REGION") or None,
                endpoint=endpoint or os.getenv("BUCKETLS_ENDPOINT_URL") or None,
            ),
            **options,
        )

    @property
    def has_filters(self) -> bool:
        """Whether any key or size filter was requested."""
        return bool(self.key_filter) or self.size_range.is_set


def configure_logging(verbose: bool = False) -> None:
    """Configure logging for the application."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
