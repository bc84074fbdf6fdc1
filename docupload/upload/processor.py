from pathlib import Path

from docupload.config.settings import Settings
from docupload.database.models import DocumentRecord
from docupload.database.repositories.documents_repository import DocumentsRepository
from docupload.extraction.models import UploadedFile
from docupload.extraction.text_extractor import build_text_extractor
from docupload.logging.logger import Log
from docupload.storage.local_storage import LocalFileStorage
from docupload.upload.pipeline import PipelineStep, UploadContext
from docupload.upload.steps import (
    ExtractTextStep,
    PersistDocumentStep,
    RemoveStoredFileStep,
    StoreFileStep,
    ValidateUploadStep,
)
from docupload.upload.validator import UploadValidator


class UploadProcessor:
    """Runs one upload through its steps.

    Pipeline: validate -> store bytes -> extract text -> persist record.
    When any step fails, failed_step cleans up and the error is re-raised.
    """

    def __init__(self, steps: list[PipelineStep], failed_step: PipelineStep) -> None:
        self._steps = steps
        self._failed_step = failed_step

    async def process(self, user_id: str, file: UploadedFile) -> DocumentRecord:
        Log.info(f"Processing upload {file.name} for user {user_id}")
        context = UploadContext(user_id=user_id, file=file)
        try:
            for step in self._steps:
                context = await step.run(context)
        except Exception as exc:
            context.error_message = str(exc)
            Log.error(f"Upload of {file.name} failed: {exc}")
            try:
                await self._failed_step.run(context)
            except Exception as cleanup_exc:
                Log.failure(f"Cleanup after failed upload of {file.name} failed", cleanup_exc)
            raise

        if context.record is None:
            raise RuntimeError(f"Upload of {file.name} finished without a document record")
        return context.record


def build_upload_processor(
    settings: Settings,
    files_root: Path | None = None,
) -> UploadProcessor:
    """Build an UploadProcessor with all required adapters."""
    storage = LocalFileStorage(
        files_root=files_root if files_root is not None else settings.files_root
    )
    steps: list[PipelineStep] = [
        ValidateUploadStep(UploadValidator.from_settings(settings)),
        StoreFileStep(storage),
        ExtractTextStep(build_text_extractor(settings)),
        PersistDocumentStep(DocumentsRepository()),
    ]
    return UploadProcessor(steps=steps, failed_step=RemoveStoredFileStep(storage))
