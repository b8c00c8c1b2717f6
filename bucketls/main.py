#!/usr/bin/env python3
"""
Bucket listing script for S3-compatible storage

Lists the objects in a bucket with sizes colored by magnitude, optionally
filtered by key and size, or deletes every object under a prefix.
"""

import argparse
import logging
import sys

from botocore.exceptions import BotoCoreError, ClientError
from tqdm import tqdm

from .config import ListingConfig, SizeRange, configure_logging, parse_size
from .models import DeletionBatch, DeletionTotals
from .processors.listing_filter import filter_records
from .services.storage import StorageService
from .utils.formatting import (
    color_for_size,
    format_object_line,
    format_progress,
    full_object_path,
)

logger = logging.getLogger(__name__)


class BucketLister:
    """Orchestrates listing and deleting bucket objects."""

    def __init__(self, config: ListingConfig, storage: StorageService | None = None) -> None:
        self._config = config
        self._storage = storage or StorageService(config.storage)

    def run(self) -> DeletionTotals | None:
        """Run the configured mode."""
        if self._config.delete:
            return self.delete_all()
        self.list_objects()
        return None

    def list_objects(self) -> int:
        """Print one line per matching object.

        Returns the number of lines printed.
        """
        config = self._config
        printed = 0
        for page in self._storage.iter_pages(config.prefix):
            for record in filter_records(page, config.key_filter, config.size_range):
                key = record.key
                if config.full_path:
                    key = full_object_path(config.storage.bucket, key)
                color = color_for_size(record.size) if config.interactive else None
                print(format_object_line(record, key, color))
                printed += 1

        logger.debug(f"Listed {printed} objects")
        return printed

    def delete_all(self) -> DeletionTotals:
        """Delete every object under the prefix, one request per page.

        Key and size filters do not apply in this mode.
        """
        if self._config.has_filters:
            logger.warning("Key and size filters are ignored when deleting")

        totals = DeletionTotals()
        with tqdm(file=sys.stdout, bar_format="{desc}") as progress:
            for page in self._storage.iter_pages(self._config.prefix):
                batch = DeletionBatch.from_records(page)
                totals.failed_keys.extend(self._storage.delete_batch(batch))
                totals.add(batch)
                progress.set_description_str(format_progress(totals))

        if totals.failed_keys:
            logger.warning(f"{len(totals.failed_keys)} objects could not be deleted")
        return totals


def _size_arg(value: str) -> str:
    """Validate a size flag at parse time, keeping the original string."""
    try:
        parse_size(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e
    return value


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="List, filter and delete objects in an S3 bucket"
    )
    parser.add_argument(
        "--bucket",
        required=True,
        help="S3 bucket name",
    )
    parser.add_argument(
        "--prefix",
        default="",
        help="S3 objects prefix",
    )
    parser.add_argument(
        "--filter",
        "-f",
        dest="key_filter",
        default="",
        help="Filter object key",
    )
    parser.add_argument(
        "--minsize",
        type=_size_arg,
        help="Minimum object size (e.g. 10MB)",
    )
    parser.add_argument(
        "--maxsize",
        type=_size_arg,
        help="Maximum object size (e.g. 1GB)",
    )
    parser.add_argument(
        "--full",
        action="store_true",
        help="Print the full object path",
    )
    parser.add_argument(
        "--delete",
        action="store_true",
        help="Delete all objects under the prefix",
    )
    parser.add_argument(
        "--endpoint-url",
        help="S3-compatible endpoint URL (default: $BUCKETLS_ENDPOINT_URL)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )
    args = parser.parse_args(argv)
    if not args.bucket:
        parser.error("--bucket must not be empty")
    return args


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    configure_logging(verbose=args.verbose)

    try:
        config = ListingConfig.from_environment(
            bucket=args.bucket,
            endpoint=args.endpoint_url,
            prefix=args.prefix,
            key_filter=args.key_filter,
            size_range=SizeRange.from_strings(args.minsize, args.maxsize),
            full_path=args.full,
            delete=args.delete,
            interactive=sys.stdout.isatty(),
        )
    except ValueError as e:
        logger.error(f"Error: {e}")
        sys.exit(2)

    storage = StorageService(config.storage)
    try:
        storage.resolve_region()
    except (ClientError, BotoCoreError) as e:
        logger.error(f"Failed to get bucket location: {e}")
        sys.exit(1)

    lister = BucketLister(config, storage)
    try:
        lister.run()
    except (ClientError, BotoCoreError) as e:
        logger.error(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
