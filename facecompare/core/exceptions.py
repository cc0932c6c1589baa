"""Custom exceptions for the face template comparison service."""
from typing import Optional


class FaceCompareError(Exception):
    """Base exception for face template comparison operations."""

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize face compare error.

        Args:
            message: Error description
            details: Additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidInputError(FaceCompareError):
    """Raised when a required request field is missing or malformed.

    The message is returned verbatim to the caller.
    """
    pass


class InvalidTemplateError(InvalidInputError):
    """Raised when an encoded template cannot be decoded."""
    pass


class ExternalServiceError(FaceCompareError):
    """Base exception for failures of AWS calls."""
    pass


class StorageError(ExternalServiceError):
    """Raised when an S3 operation fails."""
    pass


class ComparatorError(ExternalServiceError):
    """Raised when a Rekognition face comparison fails."""
    pass


class ServiceNotInitializedError(FaceCompareError):
    """Raised when a service is requested before the container is initialized."""
    pass
