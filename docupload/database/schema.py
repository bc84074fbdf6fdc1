"""DDL for the documents record store. Applied by `docupload init-db`."""

from typing import Any

import psycopg

DOCUMENTS_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS documents (
    id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
    user_id TEXT NOT NULL,
    file_path TEXT NOT NULL UNIQUE,
    original_filename TEXT NOT NULL,
    extracted_text TEXT,
    uploaded_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
    created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
);
CREATE INDEX IF NOT EXISTS documents_user_id_uploaded_at_idx
    ON documents (user_id, uploaded_at DESC);
"""


def create_schema(conn: psycopg.Connection[Any]) -> None:
    """Create the documents table and its index if they do not exist."""
    conn.execute(DOCUMENTS_TABLE_SQL)
    conn.commit()
