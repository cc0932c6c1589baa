"""
S3 service for template image storage using aioboto3.
"""
from typing import List, Optional

from botocore.exceptions import BotoCoreError, ClientError

from facecompare.core.config import settings
from facecompare.core.exceptions import StorageError
from facecompare.core.logging import get_logger
from facecompare.domain.interfaces.storage.object_store import ObjectStore
from facecompare.services.aws.base import AWSService

logger = get_logger(__name__)


class S3Service(AWSService, ObjectStore):
    """Service for interacting with AWS S3 using aioboto3."""

    service_name = "s3"

    def __init__(self, max_keys: Optional[int] = None, **kwargs):
        """
        Args:
            max_keys: Upper bound on keys returned by :meth:`list_keys`,
                None for no bound
            **kwargs: Region, credentials and session, see :class:`AWSService`
        """
        super().__init__(**kwargs)
        self.max_keys = max_keys if max_keys is not None else settings.LIST_MAX_KEYS

    async def put_object(self, bucket: str, key: str, body: bytes) -> None:
        """
        Upload bytes to S3 asynchronously.

        Args:
            bucket: S3 bucket name
            key: S3 object key
            body: Object contents

        Raises:
            StorageError: If the upload fails
        """
        try:
            async with self._get_client() as s3:
                await s3.put_object(Bucket=bucket, Key=key, Body=body)
            logger.info("Successfully uploaded object to S3",
                        key=key, bucket=bucket, size=len(body))
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code")
            logger.error("Failed to upload object to S3 due to client error",
                         key=key, bucket=bucket, error_code=error_code, error=str(e))
            raise StorageError(
                f"Failed to upload object '{key}' to S3: {e}",
                details={"bucket": bucket, "key": key, "code": error_code}) from e
        except BotoCoreError as e:
            logger.error("Unexpected error uploading object to S3",
                         key=key, bucket=bucket, error=str(e), exc_info=True)
            raise StorageError(
                f"Unexpected error uploading object '{key}': {e}",
                details={"bucket": bucket, "key": key}) from e

    async def list_keys(self, bucket: str) -> List[str]:
        """
        List object keys asynchronously using paginator.

        Args:
            bucket: S3 bucket name

        Returns:
            Object keys in the order S3 returns them. When ``max_keys`` is
            set, at most that many are returned and a warning is logged
            if the bucket holds more.

        Raises:
            StorageError: If the listing fails
        """
        keys: List[str] = []
        try:
            async with self._get_client() as s3:
                paginator = s3.get_paginator("list_objects_v2")
                truncated = False
                async for page in paginator.paginate(Bucket=bucket):
                    for obj in page.get("Contents", []):
                        if self.max_keys is not None and len(keys) >= self.max_keys:
                            truncated = True
                            break
                        keys.append(obj["Key"])
                    if truncated:
                        break

            if truncated:
                logger.warning("Object listing truncated at max_keys",
                               bucket=bucket, max_keys=self.max_keys)
            logger.debug("Listed objects", bucket=bucket, count=len(keys))
            return keys
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code")
            logger.error("Failed to list objects in S3 due to client error",
                         bucket=bucket, error_code=error_code, error=str(e))
            raise StorageError(
                f"Failed to list objects in bucket '{bucket}': {e}",
                details={"bucket": bucket, "code": error_code}) from e
        except BotoCoreError as e:
            logger.error("Unexpected error listing objects in S3",
                         bucket=bucket, error=str(e), exc_info=True)
            raise StorageError(
                f"Unexpected error listing objects in bucket '{bucket}': {e}",
                details={"bucket": bucket}) from e
