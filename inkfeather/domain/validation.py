"""Candidate file validation.

Rules are evaluated in order and the first failure wins:

1. the declared MIME type must start with ``image/``;
2. the size must not exceed the configured limit (10 MiB by default).
"""

from __future__ import annotations

import logging

from inkfeather.core.config import MAX_UPLOAD_BYTES
from inkfeather.domain.errors import FileTooLargeError, NotAnImageError
from inkfeather.domain.models import SelectedFile

logger = logging.getLogger(__name__)


def validate_file(file: SelectedFile, max_bytes: int = MAX_UPLOAD_BYTES) -> SelectedFile:
    """Validate a candidate file and return it unchanged when accepted.

    Args:
        file: Candidate file from the picker or the drop zone
        max_bytes: Largest accepted size in bytes (inclusive)

    Returns:
        The accepted file

    Raises:
        NotAnImageError: If the MIME type is not an image type
        FileTooLargeError: If the file exceeds ``max_bytes``
    """
    if not file.content_type.startswith("image/"):
        raise NotAnImageError(content_type=file.content_type)

    if file.size > max_bytes:
        raise FileTooLargeError(max_bytes=max_bytes, actual_bytes=file.size)

    logger.info(
        "File validated: name=%s size=%d content_type=%s",
        file.name,
        file.size,
        file.content_type,
    )
    return file
