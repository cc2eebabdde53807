"""Meal photo uploads to object storage."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import PurePosixPath
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.entries import StoredImage
from calorie_tracker.domain.errors import ValidationError

logger = logging.getLogger(__name__)

IMAGE_REQUIRED = "Image file is required"
NOT_AN_IMAGE = "File must be an image"
IMAGE_TOO_LARGE = "Image is too large"


class ImageStorage(Protocol):
    """Interface for a public object storage bucket."""

    def upload(self, path: str, content: bytes, content_type: str) -> None:
        """Store content at path."""

    def public_url(self, path: str) -> str:
        """Return the public URL for a stored object."""


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class ImageUploadService:
    """Stores meal photos under a per-user path and issues their public URL."""

    storage: ImageStorage
    max_bytes: int
    clock: Callable[[], datetime] = field(default=_utc_now)

    def upload(
        self,
        user_id: UUID,
        file_name: str | None,
        content: bytes,
        content_type: str | None,
    ) -> StoredImage:
        """Upload a photo to ``<user_id>/<epoch millis>.<ext>``."""
        if not content:
            raise ValidationError(IMAGE_REQUIRED)
        if not content_type or not content_type.startswith("image/"):
            raise ValidationError(NOT_AN_IMAGE)
        if len(content) > self.max_bytes:
            raise ValidationError(IMAGE_TOO_LARGE)

        millis = int(self.clock().timestamp() * 1000)
        path = f"{user_id}/{millis}.{image_extension(file_name, content_type)}"
        self.storage.upload(path, content, content_type)
        logger.info(
            "Stored meal photo",
            extra={"user_id": str(user_id), "path": path, "size": len(content)},
        )
        return StoredImage(path=path, public_url=self.storage.public_url(path))


def image_extension(file_name: str | None, content_type: str) -> str:
    """Return the file extension, falling back to the MIME subtype."""
    suffix = PurePosixPath(file_name or "").suffix.lstrip(".").lower()
    if suffix:
        return suffix
    return content_type.split("/", 1)[1].split(";", 1)[0].strip().lower() or "jpg"
