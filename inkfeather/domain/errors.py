"""Exception hierarchy for the upload form.

Every failure the form can report inherits from ``FormError`` and carries a
human-readable ``message`` that the UI shows verbatim, plus structured fields
(``error_code``, ``category``, ``details``) for the diagnostic log.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class ErrorCategory(str, Enum):
    """Error categories for classification in logs."""

    CLIENT_ERROR = "client_error"
    VALIDATION = "validation"
    EXTERNAL_SERVICE = "external_service"


class RejectionReason(str, Enum):
    """Why a candidate file was not accepted."""

    NOT_AN_IMAGE = "not an image"
    FILE_TOO_LARGE = "file too large"


class FormError(Exception):
    """Base exception for all upload form errors.

    Attributes:
        message: Human-readable error message shown to the user
        error_code: Application-specific error code
        category: Error category for classification
        details: Additional context (dict)
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        category: ErrorCategory,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.category = category
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.error_code,
            "message": self.message,
            "category": self.category.value,
            "details": self.details,
        }


class ValidationError(FormError):
    """A candidate file failed validation.

    Args:
        message: Validation error description
        reason: Which rule rejected the file
        details: Additional validation context
    """

    def __init__(self, message: str, reason: RejectionReason, **kwargs):
        self.reason = reason
        super().__init__(
            message=message,
            error_code=kwargs.pop("error_code", "VALIDATION_ERROR"),
            category=ErrorCategory.VALIDATION,
            **kwargs,
        )


class NotAnImageError(ValidationError):
    def __init__(self, content_type: str):
        super().__init__(
            message="Please select an image file",
            reason=RejectionReason.NOT_AN_IMAGE,
            error_code="NOT_AN_IMAGE",
            details={"content_type": content_type},
        )


def _format_limit(max_bytes: int) -> str:
    """Render a byte limit as ``10MB``, ``1.5MB``, ``512KB`` or ``100 bytes``."""
    mb = max_bytes / (1024 * 1024)
    if mb >= 1:
        return f"{mb:.2f}".rstrip("0").rstrip(".") + "MB"
    if max_bytes >= 1024:
        return f"{max_bytes / 1024:.2f}".rstrip("0").rstrip(".") + "KB"
    return f"{max_bytes} bytes"


class FileTooLargeError(ValidationError):
    """File exceeds the upload size limit.

    Args:
        max_bytes: Maximum allowed size in bytes
        actual_bytes: Actual file size in bytes
    """

    def __init__(self, max_bytes: int, actual_bytes: int):
        super().__init__(
            message=f"File size must be less than {_format_limit(max_bytes)}",
            reason=RejectionReason.FILE_TOO_LARGE,
            error_code="FILE_TOO_LARGE",
            details={"max_bytes": max_bytes, "actual_bytes": actual_bytes},
        )


class PreconditionError(FormError):
    """Submission was refused before any network activity."""

    def __init__(self, message: str, error_code: str, **kwargs):
        super().__init__(
            message=message,
            error_code=error_code,
            category=ErrorCategory.CLIENT_ERROR,
            **kwargs,
        )


class NoFileSelectedError(PreconditionError):
    def __init__(self):
        super().__init__("Please select a file first", "NO_FILE_SELECTED")


class EmailRequiredError(PreconditionError):
    def __init__(self):
        super().__init__("Please enter your email address", "EMAIL_REQUIRED")


class SubmissionInProgressError(PreconditionError):
    def __init__(self):
        super().__init__(
            "A submission is already in progress", "SUBMISSION_IN_PROGRESS"
        )


class TransportError(FormError):
    """The request to the processing service could not be completed.

    Args:
        reason: Raw description of the underlying failure
    """

    def __init__(self, reason: str, **kwargs):
        super().__init__(
            message=reason,
            error_code="TRANSPORT_ERROR",
            category=ErrorCategory.EXTERNAL_SERVICE,
            **kwargs,
        )


class ProtocolError(FormError):
    """The processing service answered with a non-success status.

    Args:
        status_code: HTTP status code received
        body: Raw response body, kept for diagnostics only
    """

    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        super().__init__(
            message=f"HTTP error! status: {status_code}",
            error_code="PROTOCOL_ERROR",
            category=ErrorCategory.EXTERNAL_SERVICE,
            details={"status_code": status_code, "body": body[:500]},
        )
