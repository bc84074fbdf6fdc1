from datetime import datetime, timezone
from unittest.mock import MagicMock, patch
from uuid import UUID

import pytest

from docupload.database.exceptions import DocumentNotFoundError
from docupload.database.models import DocumentRecord
from docupload.database.repositories.documents_repository import DocumentsRepository

DOCUMENT_ID = "0d5a3a86-6f2c-4c5b-9d0e-8b7f2a1c4e11"
OWNER_ID = "3fa85f64-5717-4562-b3fc-2c963f66afa6"
UPLOADED_AT = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


def _make_row(**overrides: object) -> dict:
    row = {
        "id": UUID(DOCUMENT_ID),
        "user_id": OWNER_ID,
        "file_path": f"{OWNER_ID}/1700000000000-report.pdf",
        "original_filename": "Report.pdf",
        "extracted_text": "Quarterly report",
        "uploaded_at": UPLOADED_AT,
        "created_at": UPLOADED_AT,
    }
    row.update(overrides)
    return row


def _mock_connection(mock_get_conn: MagicMock) -> tuple[MagicMock, MagicMock]:
    """Wire up a mock connection + cursor and return (mock_conn, mock_cursor)."""
    mock_cursor = MagicMock()
    mock_conn = MagicMock()
    mock_conn.cursor.return_value.__enter__ = MagicMock(return_value=mock_cursor)
    mock_conn.cursor.return_value.__exit__ = MagicMock(return_value=False)
    mock_get_conn.return_value.__enter__ = MagicMock(return_value=mock_conn)
    mock_get_conn.return_value.__exit__ = MagicMock(return_value=False)
    return mock_conn, mock_cursor


class TestInsert:
    @patch("docupload.database.repositories.documents_repository.get_connection")
    def test_inserts_and_returns_record(self, mock_get_conn: MagicMock) -> None:
        mock_conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.fetchone.return_value = _make_row()

        record = DocumentsRepository().insert(
            user_id=OWNER_ID,
            file_path=f"{OWNER_ID}/1700000000000-report.pdf",
            original_filename="Report.pdf",
            extracted_text="Quarterly report",
        )

        assert isinstance(record, DocumentRecord)
        assert record.id == DOCUMENT_ID
        assert record.original_filename == "Report.pdf"
        assert record.uploaded_at == UPLOADED_AT
        params = mock_cursor.execute.call_args.args[1]
        assert params == (
            OWNER_ID,
            f"{OWNER_ID}/1700000000000-report.pdf",
            "Report.pdf",
            "Quarterly report",
        )
        mock_conn.commit.assert_called_once()

    @patch("docupload.database.repositories.documents_repository.get_connection")
    def test_empty_text_is_stored_as_null(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.fetchone.return_value = _make_row(extracted_text=None)

        record = DocumentsRepository().insert(OWNER_ID, "p/a.pdf", "a.pdf", "")

        assert mock_cursor.execute.call_args.args[1][3] is None
        assert record.extracted_text is None


class TestFindById:
    @patch("docupload.database.repositories.documents_repository.get_connection")
    def test_returns_record_when_found(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.fetchone.return_value = _make_row()

        record = DocumentsRepository().find_by_id(DOCUMENT_ID)

        assert record.id == DOCUMENT_ID
        assert record.user_id == OWNER_ID
        assert mock_cursor.execute.call_args.args[1] == (DOCUMENT_ID,)

    @patch("docupload.database.repositories.documents_repository.get_connection")
    def test_raises_document_not_found_when_missing(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.fetchone.return_value = None

        with pytest.raises(DocumentNotFoundError, match=f"Document {DOCUMENT_ID} not found"):
            DocumentsRepository().find_by_id(DOCUMENT_ID)

    @patch("docupload.database.repositories.documents_repository.get_connection")
    def test_non_uuid_id_is_not_queried(self, mock_get_conn: MagicMock) -> None:
        with pytest.raises(DocumentNotFoundError, match="Document 42 not found"):
            DocumentsRepository().find_by_id("42")

        mock_get_conn.assert_not_called()


class TestListForUser:
    @patch("docupload.database.repositories.documents_repository.get_connection")
    def test_returns_records_in_query_order(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        newer = _make_row(original_filename="newer.pdf")
        older = _make_row(id=UUID("11111111-2222-3333-4444-555555555555"), original_filename="older.docx")
        mock_cursor.fetchall.return_value = [newer, older]

        records = DocumentsRepository().list_for_user(OWNER_ID)

        assert [r.original_filename for r in records] == ["newer.pdf", "older.docx"]
        assert "ORDER BY uploaded_at DESC" in mock_cursor.execute.call_args.args[0]

    @patch("docupload.database.repositories.documents_repository.get_connection")
    def test_returns_empty_list_for_user_without_documents(
        self, mock_get_conn: MagicMock
    ) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.fetchall.return_value = []

        assert DocumentsRepository().list_for_user("nobody") == []
