from typing import Any

from psycopg.rows import dict_row

from docupload.database.connection import get_connection
from docupload.database.exceptions import DocumentNotFoundError
from docupload.database.models import DocumentRecord
from docupload.sanitize.filename import is_uuid

_COLUMNS = "id, user_id, file_path, original_filename, extracted_text, uploaded_at, created_at"


def _to_record(row: dict[str, Any]) -> DocumentRecord:
    return DocumentRecord(
        id=str(row["id"]),
        user_id=row["user_id"],
        file_path=row["file_path"],
        original_filename=row["original_filename"],
        extracted_text=row["extracted_text"],
        uploaded_at=row["uploaded_at"],
        created_at=row["created_at"],
    )


class DocumentsRepository:
    """Database operations for the documents table."""

    def insert(
        self,
        user_id: str,
        file_path: str,
        original_filename: str,
        extracted_text: str | None,
    ) -> DocumentRecord:
        """Insert one row per uploaded document and return it.

        Empty extracted text is stored as NULL.
        """
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"""
                    INSERT INTO documents
                    (user_id, file_path, original_filename, extracted_text)
                    VALUES (%s, %s, %s, %s)
                    RETURNING {_COLUMNS}
                    """,
                    (user_id, file_path, original_filename, extracted_text or None),
                )
                row = cur.fetchone()
            conn.commit()

        if row is None:
            raise RuntimeError(f"Insert of document {file_path} returned no row")
        return _to_record(row)

    def find_by_id(self, document_id: str) -> DocumentRecord:
        """Find a document by ID.

        Raises:
            DocumentNotFoundError: if no document with this ID exists.
        """
        if not is_uuid(document_id):
            raise DocumentNotFoundError(f"Document {document_id} not found")
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"SELECT {_COLUMNS} FROM documents WHERE id = %s",
                    (document_id,),
                )
                row = cur.fetchone()

        if row is None:
            raise DocumentNotFoundError(f"Document {document_id} not found")
        return _to_record(row)

    def list_for_user(self, user_id: str) -> list[DocumentRecord]:
        """All documents owned by user_id, newest upload first."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"""
                    SELECT {_COLUMNS}
                    FROM documents
                    WHERE user_id = %s
                    ORDER BY uploaded_at DESC
                    """,
                    (user_id,),
                )
                rows = cur.fetchall()

        return [_to_record(row) for row in rows]
