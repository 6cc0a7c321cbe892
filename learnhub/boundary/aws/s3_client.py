"""
S3 client for generated artifact storage.

Uploads generated media (videos, images) and issues presigned download URLs
so browsers can fetch artifacts directly from the bucket.

Dependencies: boto3
System role: Artifact persistence for generation results
"""

import asyncio
import logging
from datetime import datetime, timedelta, timezone

import boto3
from botocore.exceptions import ClientError

logger = logging.getLogger(__name__)


class S3ArtifactStorage:
    """S3 client for artifact bucket operations."""

    def __init__(self, bucket: str, region: str = "us-east-1", s3_client=None) -> None:
        """
        Initialize S3 client for the artifact bucket.

        Args:
            bucket: S3 bucket name for artifact storage
            region: AWS region for S3 bucket
            s3_client: Optional pre-built boto3 S3 client

        Raises:
            ValueError: If bucket is not provided
        """
        if not bucket:
            raise ValueError("bucket is required")
        self._bucket = bucket
        self._region = region
        self._s3_client = s3_client or boto3.client("s3", region_name=region)

    @property
    def bucket(self) -> str:
        return self._bucket

    async def upload_bytes(
        self,
        s3_key: str,
        data: bytes,
        content_type: str = "application/octet-stream",
    ) -> str:
        """
        Upload raw bytes to S3.

        Args:
            s3_key: S3 object key (path in bucket)
            data: Object content
            content_type: MIME type of the object

        Returns:
            str: The S3 key written

        Raises:
            ClientError: If the upload fails
        """
        logger.debug(
            f"{__name__}:upload_bytes - Uploading to S3 "
            f"s3_key={s3_key}, size={len(data)} bytes"
        )
        try:
            await asyncio.to_thread(
                self._s3_client.put_object,
                Bucket=self._bucket,
                Key=s3_key,
                Body=data,
                ContentType=content_type,
            )
        except ClientError as e:
            logger.error(
                f"{__name__}:upload_bytes - {type(e).__name__}: {e}",
                exc_info=True,
            )
            raise
        logger.info(f"{__name__}:upload_bytes - Successfully uploaded s3_key={s3_key}")
        return s3_key

    def generate_presigned_download_url(
        self,
        s3_key: str,
        expires_in: int = 3600,
    ) -> tuple[str, datetime]:
        """
        Generate presigned URL for downloading/viewing an S3 object.

        Args:
            s3_key: S3 object key (path in bucket)
            expires_in: URL expiry in seconds (default 1 hour)

        Returns:
            tuple[str, datetime]: (presigned_url, expires_at)

        Raises:
            ClientError: If presigned URL generation fails
        """
        presigned_url = self._s3_client.generate_presigned_url(
            ClientMethod="get_object",
            Params={
                "Bucket": self._bucket,
                "Key": s3_key,
            },
            ExpiresIn=expires_in,
        )
        expires_at = datetime.now(timezone.utc) + timedelta(seconds=expires_in)
        return presigned_url, expires_at

    async def copy_object(self, source_key: str, dest_key: str) -> str:
        """
        Copy an object within the artifact bucket.

        Args:
            source_key: Existing object key
            dest_key: Key to write

        Returns:
            str: The destination key

        Raises:
            ClientError: If the copy fails
        """
        try:
            await asyncio.to_thread(
                self._s3_client.copy_object,
                Bucket=self._bucket,
                CopySource={"Bucket": self._bucket, "Key": source_key},
                Key=dest_key,
            )
        except ClientError as e:
            logger.error(
                f"{__name__}:copy_object - {type(e).__name__}: {e}",
                exc_info=True,
            )
            raise
        logger.info(f"{__name__}:copy_object - Copied {source_key} to {dest_key}")
        return dest_key
