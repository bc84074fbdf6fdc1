from docupload.config.settings import Settings
from docupload.extraction.format_detector import DocumentFormat, file_extension
from docupload.extraction.models import UploadedFile
from docupload.upload.exceptions import InvalidUploadError

_BYTES_PER_MB = 1024 * 1024


class UploadValidator:
    """Extension, content type and size checks done before storing a file."""

    def __init__(self, max_size_bytes: int, allowed_mime_types: list[str]) -> None:
        self._max_size_bytes = max_size_bytes
        self._allowed_mime_types = frozenset(allowed_mime_types)

    @classmethod
    def from_settings(cls, settings: Settings) -> "UploadValidator":
        return cls(settings.max_upload_size_bytes, settings.allowed_mime_types)

    def validate(self, file: UploadedFile) -> None:
        """Raises InvalidUploadError with a message fit for the end user."""
        allowed_extensions = {document_format.value for document_format in DocumentFormat}
        if "." not in file.name or file_extension(file.name) not in allowed_extensions:
            raise InvalidUploadError("Only PDF and DOCX files are allowed")

        if file.content_type not in self._allowed_mime_types:
            raise InvalidUploadError("Invalid file type")

        if max(file.size, len(file.data)) > self._max_size_bytes:
            raise InvalidUploadError(
                f"File size must be less than {self._max_size_bytes // _BYTES_PER_MB}MB"
            )
