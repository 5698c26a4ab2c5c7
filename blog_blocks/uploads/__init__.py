"""Image upload helpers."""

from .images import (
    ImageUploadError,
    ImageUploader,
    ImageValidationError,
    UploadedImage,
    public_key_from_url,
)

__all__ = [
    "ImageUploadError",
    "ImageUploader",
    "ImageValidationError",
    "UploadedImage",
    "public_key_from_url",
]
