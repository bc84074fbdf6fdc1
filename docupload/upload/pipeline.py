from abc import ABC, abstractmethod
from dataclasses import dataclass

from docupload.database.models import DocumentRecord
from docupload.extraction.models import UploadedFile


@dataclass(slots=True)
class UploadContext:
    user_id: str
    file: UploadedFile
    storage_path: str = ""
    stored: bool = False
    extracted_text: str = ""
    record: DocumentRecord | None = None
    error_message: str = ""


class PipelineStep(ABC):
    @abstractmethod
    async def run(self, context: UploadContext) -> UploadContext:
        raise NotImplementedError
