from docupload.database.exceptions import DocumentNotFoundError
from docupload.database.models import DocumentRecord
from docupload.database.repositories.documents_repository import DocumentsRepository
from docupload.storage.local_storage import LocalFileStorage


class DocumentService:
    """Read access to a user's uploaded documents."""

    def __init__(self, doc_repo: DocumentsRepository, storage: LocalFileStorage) -> None:
        self._doc_repo = doc_repo
        self._storage = storage

    def list_documents(self, user_id: str) -> list[DocumentRecord]:
        return self._doc_repo.list_for_user(user_id)

    def get_owned(self, user_id: str, document_id: str) -> DocumentRecord:
        """Fetch a record, treating other users' documents as missing.

        Raises:
            DocumentNotFoundError: if the document does not exist or is not owned
                by user_id.
        """
        record = self._doc_repo.find_by_id(document_id)
        if record.user_id != user_id:
            raise DocumentNotFoundError(f"Document {document_id} not found")
        return record

    def download(self, user_id: str, document_id: str) -> tuple[str, bytes]:
        """Return (original filename, stored bytes) for a download."""
        record = self.get_owned(user_id, document_id)
        return record.original_filename, self._storage.load(record.file_path)

    def extracted_text(self, user_id: str, document_id: str) -> str | None:
        """Stored text of a document; None when nothing could be extracted."""
        return self.get_owned(user_id, document_id).extracted_text
