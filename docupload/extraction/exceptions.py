class TextExtractionError(Exception):
    """Base exception for all text extraction errors."""


class UnsupportedFormatError(TextExtractionError):
    """Raised when a file's extension has no matching extractor."""


class PdfParseError(TextExtractionError):
    """Raised when the PDF binary structure cannot be parsed."""


class DocxExtractionError(TextExtractionError):
    """Raised when either DOCX extraction pass fails unexpectedly."""
