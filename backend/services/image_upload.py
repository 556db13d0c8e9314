"""Store uploaded images under random names and hand back their public URL."""

from __future__ import annotations

import logging
import mimetypes
from uuid import uuid4

from backend.services.r2 import ObjectStore

logger = logging.getLogger(__name__)


def random_object_name(filename: str) -> str:
    """
    Random object key that keeps the original extension.

    "photo.png" -> "3f2c...e1.png". Collisions are not checked for.
    """
    stem = uuid4().hex
    _, dot, ext = filename.rpartition(".")
    if not dot or not ext:
        return stem
    return f"{stem}.{ext.lower()}"


class ImageUploader:
    """Uploads images into one bucket of an object store."""

    def __init__(self, objects: ObjectStore, bucket: str):
        self.objects = objects
        self.bucket = bucket

    async def upload(self, filename: str, data: bytes, content_type: str | None = None) -> str:
        """
        Upload an image.

        Args:
            filename: Client-side file name, used only for its extension
            data: File contents
            content_type: MIME type; guessed from the file name when missing

        Returns:
            Publicly resolvable URL of the stored object

        Raises:
            UploadError: if the object store fails the upload
        """
        path = random_object_name(filename)
        content_type = content_type or mimetypes.guess_type(filename)[0]
        await self.objects.upload(self.bucket, path, data, content_type)
        logger.info("uploaded %s (%d bytes) to %s/%s", filename, len(data), self.bucket, path)
        return self.objects.get_public_url(self.bucket, path)
