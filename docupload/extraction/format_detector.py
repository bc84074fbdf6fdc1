from enum import Enum

from docupload.extraction.exceptions import UnsupportedFormatError


class DocumentFormat(str, Enum):
    PDF = "pdf"
    DOCX = "docx"


def file_extension(filename: str) -> str:
    """Lower-cased text after the last dot, or the whole name when there is none."""
    return filename.rsplit(".", 1)[-1].lower()


def detect_format(filename: str) -> DocumentFormat:
    """Pick the extraction format from the filename alone; content is never sniffed.

    Raises:
        UnsupportedFormatError: if the extension is not pdf or docx.
    """
    extension = file_extension(filename)
    try:
        return DocumentFormat(extension)
    except ValueError:
        raise UnsupportedFormatError(f"Unsupported file type: {extension}") from None
