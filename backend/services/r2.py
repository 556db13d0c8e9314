"""Cloudflare R2 object storage service."""

from __future__ import annotations

import logging
from typing import Protocol

import aioboto3
from botocore.exceptions import BotoCoreError, ClientError

from backend.config import settings
from backend.errors import UploadError

logger = logging.getLogger(__name__)


class ObjectStore(Protocol):
    """The operations components need from the binary object store."""

    async def upload(self, bucket: str, path: str, data: bytes, content_type: str | None = None) -> None: ...

    def get_public_url(self, bucket: str, path: str) -> str: ...


class R2Service:
    """Cloudflare R2 storage service using S3-compatible API."""

    def __init__(self) -> None:
        """Initialize R2 service with credentials from settings."""
        self.session = aioboto3.Session()
        self.endpoint = settings.R2_ENDPOINT
        self.access_key = settings.R2_ACCESS_KEY
        self.secret_key = settings.R2_SECRET_KEY
        self.public_url = settings.R2_PUBLIC_URL

    async def upload(self, bucket: str, path: str, data: bytes, content_type: str | None = None) -> None:
        """
        Store a binary object. No retries; a failed upload is reported once.

        Args:
            bucket: Bucket name
            path: Object key within the bucket
            data: Object body
            content_type: MIME type, defaults to application/octet-stream

        Raises:
            UploadError: if R2 rejects or fails the upload
        """
        try:
            async with self.session.client(
                "s3",
                endpoint_url=self.endpoint,
                aws_access_key_id=self.access_key,
                aws_secret_access_key=self.secret_key,
            ) as s3:
                await s3.put_object(
                    Bucket=bucket,
                    Key=path,
                    Body=data,
                    ContentType=content_type or "application/octet-stream",
                )
        except (ClientError, BotoCoreError) as e:
            logger.warning("R2 upload of %s/%s failed: %s", bucket, path, e)
            raise UploadError(f"Failed to upload {path}") from e

    def get_public_url(self, bucket: str, path: str) -> str:
        """
        Derive the public URL of an object.

        Pure string derivation. Does not check that the object exists.
        """
        return f"{self.public_url.rstrip('/')}/{bucket}/{path.lstrip('/')}"


# Singleton instance
r2_service = R2Service()
