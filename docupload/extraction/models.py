import mimetypes
from dataclasses import dataclass
from pathlib import Path

from docupload.config.settings import DOCX_MIME_TYPE, PDF_MIME_TYPE

_KNOWN_CONTENT_TYPES = {
    ".pdf": PDF_MIME_TYPE,
    ".docx": DOCX_MIME_TYPE,
}


@dataclass(frozen=True)
class UploadedFile:
    """A file as submitted by a client. Lives for one request only."""

    name: str
    data: bytes
    size: int
    content_type: str = "application/octet-stream"

    @classmethod
    def from_path(cls, path: Path) -> "UploadedFile":
        """Read a local file, declaring its size and a content type guessed by suffix."""
        data = path.read_bytes()
        content_type = _KNOWN_CONTENT_TYPES.get(path.suffix.lower())
        if content_type is None:
            content_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        return cls(name=path.name, data=data, size=len(data), content_type=content_type)
