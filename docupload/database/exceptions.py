class DocumentNotFoundError(Exception):
    """Raised when a document record cannot be found for the caller."""
