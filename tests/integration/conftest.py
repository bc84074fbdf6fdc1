import os
import uuid
from collections.abc import Generator
from pathlib import Path
from typing import Any

import psycopg
import pytest

from docupload.config.settings import Settings
from docupload.database.connection import close_pool, get_connection, init_pool
from docupload.database.schema import create_schema


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "docupload_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        with get_connection() as conn:
            create_schema(conn)
    except Exception as e:
        close_pool()
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def user_id() -> str:
    return str(uuid.uuid4())


@pytest.fixture
def integration_cleanup(
    integration_pool: None, user_id: str
) -> Generator[None, None, None]:
    yield
    with get_connection() as conn:
        conn.execute("DELETE FROM documents WHERE user_id = %s", (user_id,))
        conn.commit()


@pytest.fixture
def files_root(tmp_path: Path) -> Path:
    return tmp_path
