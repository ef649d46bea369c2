"""S3 client wrapper for AWS operations."""

import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from document_translator.models.capabilities import (
    JSON_CONTENT_TYPE,
    DocumentFetcher,
    DocumentWriter,
)
from document_translator.models.result import ErrorKind, Result

logger = logging.getLogger(__name__)

NOT_FOUND_CODES = {"NoSuchKey", "NoSuchBucket", "404", "NotFound"}
ACCESS_DENIED_CODES = {"AccessDenied", "403", "Forbidden"}


def classify_client_error(error: ClientError) -> str:
    """Classify a read failure as not-found, access-denied or transient."""
    code = str(error.response.get("Error", {}).get("Code", ""))
    if code in NOT_FOUND_CODES:
        return "not-found"
    if code in ACCESS_DENIED_CODES:
        return "access-denied"
    return "transient"


class S3Client(DocumentFetcher, DocumentWriter):
    """Handles S3 operations."""

    def __init__(self, client: Any):
        """
        Initialize S3 client wrapper.

        Args:
            client: boto3 S3 client instance.
        """
        self._client = client

    def fetch(self, bucket: str, key: str) -> Result[bytes]:
        """Get object content as bytes."""
        try:
            response = self._client.get_object(Bucket=bucket, Key=key)
            content = response["Body"].read()
            logger.info("Read %d bytes from s3://%s/%s", len(content), bucket, key)
            return Result.success(content)
        except ClientError as e:
            reason = classify_client_error(e)
            logger.error("Failed to get object s3://%s/%s (%s): %s", bucket, key, reason, e)
            return Result.failure(
                ErrorKind.FETCH,
                "fetch",
                f"Failed to read s3://{bucket}/{key} ({reason}): {e}",
            )
        except BotoCoreError as e:
            logger.error("Failed to get object s3://%s/%s (transient): %s", bucket, key, e)
            return Result.failure(
                ErrorKind.FETCH,
                "fetch",
                f"Failed to read s3://{bucket}/{key} (transient): {e}",
            )

    def write(
        self,
        bucket: str,
        key: str,
        body: bytes,
        content_type: str = JSON_CONTENT_TYPE,
    ) -> Result[None]:
        """Upload bytes to S3 in a single attempt."""
        try:
            self._client.put_object(
                Bucket=bucket,
                Key=key,
                Body=body,
                ContentType=content_type,
            )
            logger.info("Uploaded %d bytes to s3://%s/%s", len(body), bucket, key)
            return Result.success()
        except (ClientError, BotoCoreError) as e:
            logger.error("Failed to upload to s3://%s/%s: %s", bucket, key, e)
            return Result.failure(
                ErrorKind.WRITE,
                "write",
                f"Failed to write s3://{bucket}/{key}: {e}",
            )
