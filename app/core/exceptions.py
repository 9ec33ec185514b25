"""Custom exceptions for the face match service."""
from typing import Optional


class FaceMatchError(Exception):
    """Base exception for face match operations."""

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize face match error.

        Args:
            message: Error description
            details: Additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class RemoteServiceError(FaceMatchError):
    """Raised when the Rekognition CompareFaces call fails.

    Covers network and authentication failures, undecodable images, throttling
    and missing S3 objects. The underlying message is kept as-is.
    """
    pass


class FetchError(FaceMatchError):
    """Raised when an image cannot be downloaded from its URL."""
    pass


class ConfigurationError(FaceMatchError):
    """Raised at construction time when required configuration is absent or invalid."""
    pass


class InvalidImageReferenceError(FaceMatchError):
    """Raised when an image URL does not point to an S3 object key."""
    pass


class ServiceNotInitializedError(FaceMatchError):
    """Raised when a service is requested before the container was initialized."""
    pass
