from collections.abc import Callable

from docupload.database.repositories.documents_repository import DocumentsRepository
from docupload.extraction.text_extractor import TextExtractor
from docupload.logging.logger import Log
from docupload.storage.local_storage import LocalFileStorage
from docupload.upload.pipeline import PipelineStep, UploadContext
from docupload.upload.storage_path import build_storage_path
from docupload.upload.validator import UploadValidator


class ValidateUploadStep(PipelineStep):
    def __init__(self, validator: UploadValidator) -> None:
        self._validator = validator

    async def run(self, context: UploadContext) -> UploadContext:
        self._validator.validate(context.file)
        return context


class StoreFileStep(PipelineStep):
    def __init__(
        self,
        storage: LocalFileStorage,
        path_builder: Callable[[str, str], str] = build_storage_path,
    ) -> None:
        self._storage = storage
        self._path_builder = path_builder

    async def run(self, context: UploadContext) -> UploadContext:
        context.storage_path = self._path_builder(context.user_id, context.file.name)
        self._storage.save(context.storage_path, context.file.data)
        context.stored = True
        Log.info(f"Stored {len(context.file.data)} bytes at {context.storage_path}")
        return context


class ExtractTextStep(PipelineStep):
    def __init__(self, text_extractor: TextExtractor) -> None:
        self._text_extractor = text_extractor

    async def run(self, context: UploadContext) -> UploadContext:
        context.extracted_text = await self._text_extractor.extract_text(context.file)
        return context


class PersistDocumentStep(PipelineStep):
    def __init__(self, doc_repo: DocumentsRepository) -> None:
        self._doc_repo = doc_repo

    async def run(self, context: UploadContext) -> UploadContext:
        if not context.storage_path:
            raise ValueError("UploadContext.storage_path must be set before persist")
        context.record = self._doc_repo.insert(
            user_id=context.user_id,
            file_path=context.storage_path,
            original_filename=context.file.name,
            extracted_text=context.extracted_text,
        )
        Log.info(f"Saved document {context.record.id} for user {context.user_id}")
        return context


class RemoveStoredFileStep(PipelineStep):
    """Failure handler: drop bytes stored by an upload that did not complete."""

    def __init__(self, storage: LocalFileStorage) -> None:
        self._storage = storage

    async def run(self, context: UploadContext) -> UploadContext:
        if context.stored:
            self._storage.delete(context.storage_path)
            context.stored = False
            Log.warning(
                f"Removed {context.storage_path} after failed upload: {context.error_message}"
            )
        return context
