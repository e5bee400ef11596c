"""Unit tests for exception hierarchy."""

from inkfeather.domain.errors import (
    EmailRequiredError,
    ErrorCategory,
    FileTooLargeError,
    FormError,
    NoFileSelectedError,
    NotAnImageError,
    PreconditionError,
    ProtocolError,
    RejectionReason,
    SubmissionInProgressError,
    TransportError,
    ValidationError,
)


class TestFormError:
    """Tests for FormError base class."""

    def test_creation(self):
        """Test FormError keeps message and structured fields."""
        error = FormError(
            message="Test error",
            error_code="TEST_ERROR",
            category=ErrorCategory.CLIENT_ERROR,
            details={"field": "email"},
        )

        assert str(error) == "Test error"
        assert error.message == "Test error"
        assert error.error_code == "TEST_ERROR"
        assert error.details == {"field": "email"}

    def test_to_dict(self):
        """Test FormError serializes for the diagnostic log."""
        error = FormError("Test", "TEST", ErrorCategory.EXTERNAL_SERVICE)

        assert error.to_dict() == {
            "code": "TEST",
            "message": "Test",
            "category": "external_service",
            "details": {},
        }


class TestValidationErrors:
    """Tests for file rejection errors."""

    def test_not_an_image(self):
        error = NotAnImageError(content_type="application/pdf")

        assert isinstance(error, ValidationError)
        assert error.reason == RejectionReason.NOT_AN_IMAGE
        assert error.category == ErrorCategory.VALIDATION
        assert error.details == {"content_type": "application/pdf"}

    def test_file_too_large(self):
        error = FileTooLargeError(max_bytes=10 * 1024 * 1024, actual_bytes=11 * 1024 * 1024)

        assert error.reason == RejectionReason.FILE_TOO_LARGE
        assert error.error_code == "FILE_TOO_LARGE"
        assert error.message == "File size must be less than 10MB"

    def test_file_too_large_small_limits(self):
        """Test limits below 1 MiB never render as 0MB."""
        assert FileTooLargeError(512 * 1024, 600 * 1024).message == "File size must be less than 512KB"
        assert FileTooLargeError(1536 * 1024, 2 * 1024 * 1024).message == "File size must be less than 1.5MB"
        assert FileTooLargeError(100, 200).message == "File size must be less than 100 bytes"


class TestPreconditionErrors:
    """Tests for submit-time refusals."""

    def test_messages(self):
        assert NoFileSelectedError().message == "Please select a file first"
        assert EmailRequiredError().message == "Please enter your email address"
        assert SubmissionInProgressError().error_code == "SUBMISSION_IN_PROGRESS"

    def test_hierarchy(self):
        for error in (NoFileSelectedError(), EmailRequiredError(), SubmissionInProgressError()):
            assert isinstance(error, PreconditionError)
            assert error.category == ErrorCategory.CLIENT_ERROR


class TestServiceErrors:
    """Tests for transport and protocol errors."""

    def test_transport_error_keeps_raw_text(self):
        error = TransportError("All connection attempts failed")

        assert error.message == "All connection attempts failed"
        assert error.category == ErrorCategory.EXTERNAL_SERVICE

    def test_protocol_error_includes_status(self):
        error = ProtocolError(status_code=404, body="x" * 1000)

        assert error.status_code == 404
        assert "404" in error.message
        assert len(error.details["body"]) == 500
