"""
Test suite for S3ArtifactStorage.

System role: Verification of artifact bucket operations against a stubbed boto3 client
"""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from learnhub.boundary.aws.s3_client import S3ArtifactStorage


@pytest.fixture
def s3_client() -> MagicMock:
    return MagicMock()


@pytest.fixture
def storage(s3_client: MagicMock) -> S3ArtifactStorage:
    return S3ArtifactStorage(bucket="learnhub-artifacts", s3_client=s3_client)


def test_bucket_is_required() -> None:
    with pytest.raises(ValueError):
        S3ArtifactStorage(bucket="", s3_client=MagicMock())


@pytest.mark.asyncio
async def test_upload_bytes_should_put_object(
    storage: S3ArtifactStorage, s3_client: MagicMock
) -> None:
    key = await storage.upload_bytes("learning-videos/m-1.mp4", b"mp4", "video/mp4")

    assert key == "learning-videos/m-1.mp4"
    s3_client.put_object.assert_called_once_with(
        Bucket="learnhub-artifacts",
        Key="learning-videos/m-1.mp4",
        Body=b"mp4",
        ContentType="video/mp4",
    )


@pytest.mark.asyncio
async def test_copy_object_should_copy_within_bucket(
    storage: S3ArtifactStorage, s3_client: MagicMock
) -> None:
    key = await storage.copy_object("generated-videos/abc.mp4", "learning-videos/m-1-1.mp4")

    assert key == "learning-videos/m-1-1.mp4"
    s3_client.copy_object.assert_called_once_with(
        Bucket="learnhub-artifacts",
        CopySource={"Bucket": "learnhub-artifacts", "Key": "generated-videos/abc.mp4"},
        Key="learning-videos/m-1-1.mp4",
    )


@pytest.mark.asyncio
async def test_copy_object_should_propagate_client_error(
    storage: S3ArtifactStorage, s3_client: MagicMock
) -> None:
    s3_client.copy_object.side_effect = ClientError(
        {"Error": {"Code": "NoSuchKey", "Message": "missing"}}, "CopyObject"
    )

    with pytest.raises(ClientError):
        await storage.copy_object("generated-videos/gone.mp4", "learning-videos/m-1.mp4")


def test_presigned_url_should_report_expiry(
    storage: S3ArtifactStorage, s3_client: MagicMock
) -> None:
    s3_client.generate_presigned_url.return_value = "https://signed"

    url, expires_at = storage.generate_presigned_download_url("learning-videos/m-1.mp4", 60)

    assert url == "https://signed"
    assert expires_at.tzinfo is not None
    s3_client.generate_presigned_url.assert_called_once_with(
        ClientMethod="get_object",
        Params={"Bucket": "learnhub-artifacts", "Key": "learning-videos/m-1.mp4"},
        ExpiresIn=60,
    )
