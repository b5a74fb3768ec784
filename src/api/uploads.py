"""Multipart image upload handling for the analyze endpoint."""

import logging

from fastapi import UploadFile

from src.config.constants import ALLOWED_IMAGE_TYPES
from src.config.personas import Persona
from src.config.settings import Settings
from src.services.verdict.errors import InvalidInput
from src.services.verdict.models import ImageAttachment

logger = logging.getLogger(__name__)


def _is_empty_part(upload: UploadFile) -> bool:
    # Browsers send an unnamed, empty part when no file was chosen
    return not upload.filename and not upload.size


async def read_images(
    uploads: list[UploadFile],
    persona: Persona,
    settings: Settings,
) -> tuple[ImageAttachment, ...]:
    """
    Validate uploads and load them into memory.

    Raises:
        InvalidInput: too many files, a non-image media type, or a file
            larger than ``settings.max_image_bytes``.
    """
    files = [upload for upload in uploads if not _is_empty_part(upload)]
    if len(files) > persona.max_images:
        raise InvalidInput(f"At most {persona.max_images} photos are allowed")

    images = []
    for upload in files:
        media_type = (upload.content_type or "").split(";")[0].strip().lower()
        if media_type not in ALLOWED_IMAGE_TYPES:
            raise InvalidInput(
                f"'{upload.filename}' is not a supported image type ({media_type or 'unknown'})"
            )
        # At most one byte past the limit is read
        data = await upload.read(settings.max_image_bytes + 1)
        if len(data) > settings.max_image_bytes:
            raise InvalidInput(
                f"'{upload.filename}' exceeds the {settings.max_image_bytes}-byte limit"
            )
        if not data:
            raise InvalidInput(f"'{upload.filename}' is empty")
        images.append(ImageAttachment(data=data, media_type=media_type))

    logger.debug("Accepted %d image(s) for %s", len(images), persona.name)
    return tuple(images)


async def release_uploads(uploads: list[UploadFile]) -> None:
    """Close every upload's spooled temp file."""
    for upload in uploads:
        try:
            await upload.close()
        except OSError as e:
            logger.warning("Failed to release upload %s: %s", upload.filename, e)
