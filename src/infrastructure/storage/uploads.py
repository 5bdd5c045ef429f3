# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Image upload storage on the local filesystem.

Files are saved as ``<epoch-millis>-<random><ext>`` in the upload
directory and referenced by their public path ``/uploads/<name>``, which
the application serves as static files.

Example:
    storage = UploadStorage.from_settings(settings.uploads)
    path = await storage.save(upload)  # "/uploads/1700000000000-42.png"
"""

import asyncio
import logging
import secrets
from pathlib import Path
from typing import TYPE_CHECKING

from fastapi import UploadFile

from src.core.exceptions import ValidationError
from src.utils.datetime import epoch_millis

if TYPE_CHECKING:
    from src.core.config.settings import UploadSettings

logger = logging.getLogger(__name__)

UPLOAD_URL_PREFIX = "/uploads"

_EXTENSIONS = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
}
_IMAGE_SUFFIXES = frozenset({".jpg", ".jpeg", ".png"})

_CHUNK_SIZE = 64 * 1024


class UploadStorage:
    """Validates and stores uploaded images.

    Attributes:
        directory: Where files are written.
        max_bytes: Largest accepted file.
        allowed_types: Accepted MIME types.
    """

    def __init__(
        self,
        directory: str | Path,
        max_bytes: int = 5 * 1024 * 1024,
        allowed_types: list[str] | None = None,
    ) -> None:
        self.directory = Path(directory)
        self.max_bytes = max_bytes
        self.allowed_types = frozenset(allowed_types or _EXTENSIONS)

    @classmethod
    def from_settings(cls, settings: "UploadSettings") -> "UploadStorage":
        return cls(settings.directory, settings.max_bytes, settings.allowed_types)

    def build_filename(self, original: str | None, content_type: str) -> str:
        """Unique file name keeping the original image extension when present."""
        suffix = Path(original or "").suffix.lower()
        if suffix not in _IMAGE_SUFFIXES:
            suffix = _EXTENSIONS.get(content_type, "")
        return f"{epoch_millis()}-{secrets.randbelow(10**9)}{suffix}"

    async def save(self, upload: UploadFile | None) -> str | None:
        """Store an uploaded image.

        Args:
            upload: The multipart file, or None when the field was omitted.

        Returns:
            Public path of the stored file, or None if nothing was uploaded.

        Raises:
            ValidationError: If the file is not a JPEG/PNG or is too large.
        """
        if upload is None or not upload.filename:
            return None

        if upload.content_type not in self.allowed_types:
            raise ValidationError("Only JPEG and PNG images are allowed")

        content = bytearray()
        while chunk := await upload.read(_CHUNK_SIZE):
            content.extend(chunk)
            if len(content) > self.max_bytes:
                raise ValidationError(
                    f"File too large, maximum size is {self.max_bytes // (1024 * 1024)} MB"
                )

        filename = self.build_filename(upload.filename, upload.content_type)
        await asyncio.to_thread(self._write, filename, bytes(content))

        logger.info("Stored upload %s (%d bytes)", filename, len(content))

        return f"{UPLOAD_URL_PREFIX}/{filename}"

    def _write(self, filename: str, content: bytes) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        (self.directory / filename).write_bytes(content)
