"""Image upload and deletion against the backend ``/file`` endpoints."""

from __future__ import annotations

import logging
from posixpath import basename
from urllib.parse import urlparse

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from blog_blocks.config import BlogApiConfig
from blog_blocks.editor.sequence import BlockSequence
from blog_blocks.models.blocks import BlockType

logger = logging.getLogger(__name__)

UPLOAD_DESCRIPTION = "Blog image upload"


class ImageUploadError(RuntimeError):
    """Raised when an image cannot be uploaded or deleted."""


class ImageValidationError(ImageUploadError):
    """Raised when a file is rejected before any request is sent."""


class UploadedImage(BaseModel):
    url: str = Field(min_length=1)
    public_id: str | None = Field(default=None, alias="publicId")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


def public_key_from_url(url: str) -> str | None:
    """Public key for a stored file: the last path segment of its URL."""
    return basename(urlparse(url).path) or None


class ImageUploader:
    """Uploads images and keeps image blocks in a :class:`BlockSequence` in step."""

    def __init__(self, client: httpx.Client, config: BlogApiConfig | None = None):
        self._client = client
        self._config = config or BlogApiConfig()

    def validate(self, filename: str, data: bytes, content_type: str | None) -> None:
        if not content_type or not content_type.startswith("image/"):
            raise ImageValidationError("Please select an image file")
        if len(data) > self._config.max_upload_bytes:
            limit_mb = self._config.max_upload_bytes / (1024 * 1024)
            raise ImageValidationError(f"File size must be less than {limit_mb:g}MB")
        if not filename:
            raise ImageValidationError("A file name is required")

    def upload(self, filename: str, data: bytes, content_type: str | None) -> UploadedImage:
        self.validate(filename, data, content_type)
        try:
            response = self._client.post(
                self._config.upload_path,
                files={"file": (filename, data, content_type)},
                data={"description": UPLOAD_DESCRIPTION},
            )
        except httpx.HTTPError as exc:
            logger.warning("Image upload for %s failed: %s", filename, exc)
            raise ImageUploadError("Failed to upload image. Please try again.") from exc
        if response.is_error:
            logger.warning("Image upload for %s returned %s", filename, response.status_code)
            raise ImageUploadError("Failed to upload image. Please try again.")
        try:
            return UploadedImage.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise ImageUploadError("Upload response did not include an image URL.") from exc

    def delete(self, public_key: str) -> None:
        try:
            response = self._client.post(self._config.delete_path, params={"publicKey": public_key})
        except httpx.HTTPError as exc:
            raise ImageUploadError("Failed to delete image.") from exc
        if response.is_error:
            logger.warning("Image delete for %s returned %s", public_key, response.status_code)
            raise ImageUploadError("Failed to delete image.")

    def attach(
        self,
        sequence: BlockSequence,
        block_id: str,
        filename: str,
        data: bytes,
        content_type: str | None,
    ) -> UploadedImage:
        """Upload a file and write its URL into the image block ``block_id``.

        The block is looked up again once the upload finishes, so reorders
        made meanwhile do not misplace the URL. A block removed in the
        meantime receives nothing.
        """
        uploaded = self.upload(filename, data, content_type)
        index = sequence.index_of(block_id)
        if index is None:
            logger.warning("Image block %s disappeared before upload completed", block_id)
            return uploaded
        if sequence[index].type is not BlockType.IMAGE:
            raise ImageUploadError(f"Block {block_id} is not an image block.")
        sequence.update_block_content(index, uploaded.url)
        return uploaded

    def remove(self, sequence: BlockSequence, block_id: str, *, public_key: str | None = None) -> None:
        """Delete the stored file behind an image block, then remove the block."""
        index = sequence.index_of(block_id)
        if index is None:
            return
        url = sequence[index].content.strip()
        key = public_key or (public_key_from_url(url) if url else None)
        if key:
            self.delete(key)
        # Re-resolve; the sequence may have changed while the delete was in flight.
        index = sequence.index_of(block_id)
        if index is not None:
            sequence.remove_block(index)


__all__ = [
    "ImageUploadError",
    "ImageUploader",
    "ImageValidationError",
    "UploadedImage",
    "public_key_from_url",
]
