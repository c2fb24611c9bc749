"""
Image upload storage.

Uploaded images are written to the uploads directory and served back as
static files under ``/uploads``.
"""

from __future__ import annotations

import secrets
import time
from pathlib import Path
from typing import Optional

from stay_with_friends.core.errors import PayloadTooLargeError, ValidationError
from stay_with_friends.core.logging_config import get_logger
from stay_with_friends.core.monitoring import log_domain_event
from stay_with_friends.server.core.config import settings
from stay_with_friends.server.core.constant import UPLOADS_ROUTE

logger = get_logger(__name__)

CONTENT_TYPE_EXTENSIONS = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
}


def build_filename(content_type: str) -> str:
    """Name a stored upload ``image-<epoch-ms>-<random><ext>``.

    The extension is derived from the content type alone; the static mount
    picks the served media type from it.

    Raises:
        ValidationError: If the type has no known image extension
    """
    ext = CONTENT_TYPE_EXTENSIONS.get(content_type)
    if ext is None:
        raise ValidationError("Unsupported image type, use JPEG, PNG, GIF or WebP")
    return f"image-{int(time.time() * 1000)}-{secrets.randbelow(10**9)}{ext}"


class UploadService:
    """Validates and stores uploaded images."""

    def __init__(self, uploads_dir: Optional[Path] = None, max_bytes: Optional[int] = None) -> None:
        self.uploads_dir = Path(uploads_dir or settings.uploads.dir)
        self.max_bytes = max_bytes if max_bytes is not None else settings.uploads.max_bytes

    def store_image(self, content: bytes, content_type: Optional[str], original_name: Optional[str]) -> str:
        """Write an image to the uploads directory.

        Args:
            content: Raw file bytes
            content_type: MIME type sent by the client
            original_name: File name sent by the client

        Returns:
            The stored file name

        Raises:
            ValidationError: If the file is empty, not an image or an image
                type without a known extension
            PayloadTooLargeError: If the file exceeds the size limit
        """
        content_type = (content_type or "").split(";", 1)[0].strip().lower()
        if not content_type.startswith("image/"):
            raise ValidationError("Only image files are allowed")
        if not content:
            raise ValidationError("No file uploaded")
        if len(content) > self.max_bytes:
            raise PayloadTooLargeError(f"File too large, the limit is {self.max_bytes} bytes")

        name = build_filename(content_type)
        self.uploads_dir.mkdir(parents=True, exist_ok=True)
        (self.uploads_dir / name).write_bytes(content)
        log_domain_event("upload.stored", filename=name, original_name=original_name, size=len(content))
        return name

    def clear(self) -> int:
        """Delete every stored upload and return how many files were removed."""
        if not self.uploads_dir.exists():
            return 0
        removed = 0
        for path in self.uploads_dir.iterdir():
            if path.is_file() and path.name.startswith("image-"):
                path.unlink()
                removed += 1
        logger.info(f"Removed {removed} uploaded files from {self.uploads_dir}")
        return removed


def public_url(name: str, base_url: str) -> str:
    base = (settings.uploads.public_base_url or base_url).rstrip("/")
    return f"{base}{UPLOADS_ROUTE}/{name}"
