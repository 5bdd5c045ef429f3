# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Local file storage for uploaded images."""

from src.infrastructure.storage.uploads import UPLOAD_URL_PREFIX, UploadStorage

__all__ = [
    "UPLOAD_URL_PREFIX",
    "UploadStorage",
]
