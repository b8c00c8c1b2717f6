"""S3 storage service."""

import logging
from typing import Iterator

import boto3
from botocore.config import Config as BotoConfig

from ..config import MAX_DELETE_KEYS, StorageConfig
from ..models import DeletionBatch, ObjectRecord

logger = logging.getLogger(__name__)

# GetBucketLocation returns legacy names for some regions
LEGACY_REGIONS = {
    None: "us-east-1",
    "": "us-east-1",
    "EU": "eu-west-1",
}


class StorageService:
    """Service for listing and deleting objects in an S3 bucket."""

    def __init__(self, config: StorageConfig) -> None:
        self._config = config
        self._region = config.region
        self._client = None

    @property
    def bucket(self) -> str:
        return self._config.bucket

    @property
    def region(self) -> str | None:
        return self._region

    @property
    def client(self):
        """Lazy-initialize the S3 client."""
        if self._client is None:
            boto_config = BotoConfig(
                connect_timeout=60,
                read_timeout=300,
            )
            self._client = boto3.client(
                "s3",
                region_name=self._region,
                endpoint_url=self._config.endpoint,
                config=boto_config,
            )
        return self._client

    def resolve_region(self) -> str:
        """Look up the bucket region and rebuild the client for it.

        Skipped when a region was configured explicitly.

        Raises:
            botocore.exceptions.ClientError: If the lookup fails.
        """
        if self._region:
            logger.debug(f"Using configured region {self._region}")
            return self._region

        response = self.client.get_bucket_location(Bucket=self.bucket)
        constraint = response.get("LocationConstraint")
        region = LEGACY_REGIONS.get(constraint, constraint)
        logger.debug(f"Bucket {self.bucket} is in {region}")

        self._region = region
        self._client = None
        return region

    def iter_pages(self, prefix: str = "") -> Iterator[list[ObjectRecord]]:
        """Yield each page of the listing as a list of records.

        Raises:
            botocore.exceptions.ClientError: If a page cannot be retrieved.
        """
        paginator = self.client.get_paginator("list_objects_v2")
        for page in paginator.paginate(Bucket=self.bucket, Prefix=prefix):
            yield [ObjectRecord.from_s3(obj) for obj in page.get("Contents", [])]

    def delete_batch(self, batch: DeletionBatch) -> list[str]:
        """Delete every key in the batch.

        Returns:
            Keys the server reported as not deleted.
        """
        failed: list[str] = []
        keys = list(batch.keys)
        # Pages are normally within the limit, but custom page sizes may not be
        for i in range(0, len(keys), MAX_DELETE_KEYS):
            chunk = keys[i:i + MAX_DELETE_KEYS]
            response = self.client.delete_objects(
                Bucket=self.bucket,
                Delete={
                    "Objects": [{"Key": key} for key in chunk],
                    "Quiet": True,
                },
            )
            for error in response.get("Errors", []):
                logger.warning(
                    f"Could not delete {error.get('Key')}: "
                    f"{error.get('Code')} {error.get('Message', '')}".rstrip()
                )
                failed.append(error.get("Key"))
        return failed
