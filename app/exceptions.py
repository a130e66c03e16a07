"""
Typed failures raised by the services and translated to JSON at the
application boundary (see ``app.main``).
"""
from typing import Optional


class EnrollmentAPIError(Exception):
    """Base error carrying the HTTP status it maps to."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class UploadValidationError(EnrollmentAPIError):
    """Upload rejected before anything was stored."""
    status_code = 400
    default_message = "Invalid upload"


class UnsupportedUpload(UploadValidationError):
    default_message = "Only image uploads allowed"


class UnexpectedUpload(UploadValidationError):
    """More than one file, or a file under a field other than ``image``."""
    default_message = "Unexpected field"


class UploadTooLarge(UploadValidationError):
    status_code = 413
    default_message = "File too large"


class StorageError(EnrollmentAPIError):
    """Database or filesystem write/read failure."""
    status_code = 500
    default_message = "Storage failure"


class AuthError(EnrollmentAPIError):
    status_code = 401
    default_message = "Unauthorized"
