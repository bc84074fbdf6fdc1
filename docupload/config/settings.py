from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "docupload"
    db_username: str = "docupload"
    db_password: str = "secret"

    pdf_engine: str = "pdfplumber"
    pdf_percent_decode: bool = True

    files_root: Path = Path("/app/files")
    max_upload_size_bytes: int = 10 * 1024 * 1024
    allowed_mime_types: list[str] = [PDF_MIME_TYPE, DOCX_MIME_TYPE]

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"
