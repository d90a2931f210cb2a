"""
Upload validation utilities.

Enforces the image upload limits before anything reaches the analysis
service.

Dependencies: fastapi, inverselens.core.exceptions
System role: Upload validation for the analysis endpoint
"""

import re

from fastapi import UploadFile

from inverselens.core.exceptions import ValidationError

MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
ALLOWED_MIME_PREFIX = "image/"

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


async def read_image_upload(upload: UploadFile) -> bytes:
    """
    Validate an uploaded image and return its content.

    Reads at most MAX_FILE_SIZE + 1 bytes so oversize uploads are rejected
    without buffering the whole body.

    Args:
        upload: Multipart file from the request

    Returns:
        bytes: Image content

    Raises:
        ValidationError: If the file is not an image, is empty, or exceeds MAX_FILE_SIZE
    """
    content_type = upload.content_type or ""
    if not content_type.startswith(ALLOWED_MIME_PREFIX):
        raise ValidationError(
            "Only image files are allowed",
            field="image",
            details={"content_type": content_type},
        )

    content = await upload.read(MAX_FILE_SIZE + 1)
    if len(content) > MAX_FILE_SIZE:
        raise ValidationError(
            "Image exceeds the 10MB upload limit",
            field="image",
            details={"max_bytes": MAX_FILE_SIZE},
        )
    if not content:
        raise ValidationError("Image file is empty", field="image")

    return content


def parse_limit(raw: str | None) -> int | None:
    """
    Parse the ``limit`` query parameter leniently.

    Only the leading integer is read, so "5abc" and "2.7" give 5 and 2.

    Returns:
        int | None: Parsed value, or None when absent or not starting with digits
    """
    if raw is None:
        return None
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # more digits than int() accepts from a string
        return None
