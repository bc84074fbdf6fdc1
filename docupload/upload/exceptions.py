class UploadError(Exception):
    """Base exception for upload pipeline errors."""


class InvalidUploadError(UploadError):
    """Raised when a file is rejected before any work is done."""


class StorageError(UploadError):
    """Raised when file bytes cannot be written to storage."""
