from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class DocumentRecord:
    """Represents a row from the documents table.

    file_path is the storage key; original_filename is the unsanitized name
    shown to the user and used for downloads.
    """

    id: str
    user_id: str
    file_path: str
    original_filename: str
    extracted_text: str | None = None
    uploaded_at: datetime | None = None
    created_at: datetime | None = None
