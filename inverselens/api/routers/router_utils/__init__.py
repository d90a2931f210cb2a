"""Router utility functions."""

from .error_handling import handle_analysis_errors
from .upload_utils import ALLOWED_MIME_PREFIX, MAX_FILE_SIZE, parse_limit, read_image_upload

__all__ = [
    "ALLOWED_MIME_PREFIX",
    "MAX_FILE_SIZE",
    "handle_analysis_errors",
    "parse_limit",
    "read_image_upload",
]
