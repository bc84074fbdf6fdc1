from docupload.config.settings import Settings
from docupload.docx.base import BaseDocxExtractor
from docupload.docx.mammoth_adapter import MammothDocxAdapter
from docupload.extraction.format_detector import DocumentFormat, detect_format
from docupload.extraction.models import UploadedFile
from docupload.logging.logger import Log
from docupload.pdf.base import BasePdfExtractor
from docupload.pdf.factory import PdfExtractorFactory


class TextExtractor:
    """Dispatches an uploaded file to the extractor matching its extension."""

    def __init__(
        self,
        pdf_extractor: BasePdfExtractor,
        docx_extractor: BaseDocxExtractor,
    ) -> None:
        self._extractors: dict[DocumentFormat, BasePdfExtractor | BaseDocxExtractor] = {
            DocumentFormat.PDF: pdf_extractor,
            DocumentFormat.DOCX: docx_extractor,
        }

    async def extract_text(self, file: UploadedFile) -> str:
        """Extract plain text from an uploaded file.

        An empty string is a successful result, not a failure.

        Raises:
            UnsupportedFormatError: if the extension is not pdf or docx. No
                extractor is invoked in that case.
            PdfParseError: if a PDF cannot be parsed.
            DocxExtractionError: if a DOCX cannot be read.
        """
        document_format = detect_format(file.name)
        Log.info(
            f"Extracting text from {file.name} ({document_format.value}, {file.size} bytes)"
        )
        text = await self._extractors[document_format].extract(file.data)
        if not text.strip():
            Log.warning(f"Extracted text is empty for {file.name}")
        else:
            Log.info(f"Extracted {len(text)} chars from {file.name}")
        return text


def build_text_extractor(settings: Settings) -> TextExtractor:
    """Build a TextExtractor with the configured PDF engine."""
    return TextExtractor(
        pdf_extractor=PdfExtractorFactory.create(settings),
        docx_extractor=MammothDocxAdapter(),
    )
