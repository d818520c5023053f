"""Use cases storing and serving the cover images of trips."""

from __future__ import annotations

import logging
from pathlib import Path

from moptabi.domain.exceptions import NotFoundError, ValidationError
from moptabi.infrastructure.image_storage import image_path, save_image

logger = logging.getLogger(__name__)

IMAGE_FILE_REQUIRED = "An image file is required"
IMAGE_NOT_FOUND = "Image not found"


def upload_trip_image(file_bytes: bytes, filename: str) -> str:
    """Store an uploaded image and return the generated file name."""

    name = Path(filename).name.strip()
    if not name or not file_bytes:
        raise ValidationError(IMAGE_FILE_REQUIRED)
    file_name = save_image(file_bytes, name)
    logger.info("Stored trip image %s (%d bytes)", file_name, len(file_bytes))
    return file_name


def get_trip_image_path(file_name: str) -> Path:
    path = image_path(file_name)
    if path is None:
        raise NotFoundError(IMAGE_NOT_FOUND)
    return path
