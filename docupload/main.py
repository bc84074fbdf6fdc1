import argparse
import asyncio
import sys
from pathlib import Path

from docupload.config.settings import Settings
from docupload.database.connection import close_pool, get_connection, init_pool
from docupload.database.exceptions import DocumentNotFoundError
from docupload.database.repositories.documents_repository import DocumentsRepository
from docupload.database.schema import create_schema
from docupload.documents.service import DocumentService
from docupload.extraction.exceptions import TextExtractionError
from docupload.extraction.models import UploadedFile
from docupload.extraction.text_extractor import build_text_extractor
from docupload.logging.logger import Log
from docupload.storage.local_storage import LocalFileStorage
from docupload.upload.exceptions import UploadError
from docupload.upload.processor import build_upload_processor

# Errors whose message is safe to show to the user as is.
USER_FACING_ERRORS = (TextExtractionError, UploadError, DocumentNotFoundError, FileNotFoundError)
NO_TEXT_MESSAGE = "No extracted text available for this document"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docupload", description="Upload PDF/DOCX files and extract their text."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    extract = commands.add_parser("extract", help="print the text extracted from a file")
    extract.add_argument("file", type=Path)

    upload = commands.add_parser("upload", help="store a file and its text for a user")
    upload.add_argument("user_id")
    upload.add_argument("file", type=Path)

    listing = commands.add_parser("list", help="list a user's documents, newest first")
    listing.add_argument("user_id")

    download = commands.add_parser("download", help="write a stored document to a directory")
    download.add_argument("user_id")
    download.add_argument("document_id")
    download.add_argument("output_dir", type=Path)

    text = commands.add_parser("text", help="print the text stored for a document")
    text.add_argument("user_id")
    text.add_argument("document_id")

    commands.add_parser("init-db", help="create the documents table")
    return parser


def run_extract(settings: Settings, args: argparse.Namespace) -> None:
    text = asyncio.run(
        build_text_extractor(settings).extract_text(UploadedFile.from_path(args.file))
    )
    print(text)


def run_upload(settings: Settings, args: argparse.Namespace) -> None:
    processor = build_upload_processor(settings)
    record = asyncio.run(processor.process(args.user_id, UploadedFile.from_path(args.file)))
    print(f"{record.id}\t{record.file_path}")


def run_list(settings: Settings, args: argparse.Namespace) -> None:
    service = DocumentService(DocumentsRepository(), LocalFileStorage(settings.files_root))
    for record in service.list_documents(args.user_id):
        has_text = "text" if record.extracted_text else "no text"
        print(f"{record.id}\t{record.uploaded_at}\t{record.original_filename}\t{has_text}")


def run_download(settings: Settings, args: argparse.Namespace) -> None:
    service = DocumentService(DocumentsRepository(), LocalFileStorage(settings.files_root))
    filename, data = service.download(args.user_id, args.document_id)
    # The display name is user-supplied; only its final component is used locally.
    target = args.output_dir / Path(filename).name
    target.write_bytes(data)
    print(target)


def run_text(settings: Settings, args: argparse.Namespace) -> None:
    service = DocumentService(DocumentsRepository(), LocalFileStorage(settings.files_root))
    text = service.extracted_text(args.user_id, args.document_id)
    print(text if text is not None else NO_TEXT_MESSAGE)


def run_init_db(settings: Settings, args: argparse.Namespace) -> None:
    _ = settings, args
    with get_connection() as conn:
        create_schema(conn)
    Log.info("Documents table is ready")


COMMANDS = {
    "extract": run_extract,
    "upload": run_upload,
    "list": run_list,
    "download": run_download,
    "text": run_text,
    "init-db": run_init_db,
}


def main(argv: list[str] | None = None) -> int:
    """Entry point: parse args -> configure logging -> run one command."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level, include_traces=not settings.is_production)

    needs_db = args.command != "extract"
    try:
        if needs_db:
            init_pool(settings)
        COMMANDS[args.command](settings, args)
    except USER_FACING_ERRORS as exc:
        Log.failure(f"Command '{args.command}' failed", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:
        Log.failure(f"Command '{args.command}' failed unexpectedly", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    finally:
        if needs_db:
            close_pool()
    return 0


if __name__ == "__main__":
    sys.exit(main())
