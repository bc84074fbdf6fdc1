from abc import ABC, abstractmethod


class BaseDocxExtractor(ABC):
    """Contract for DOCX text extraction adapters."""

    @abstractmethod
    async def extract(self, docx_bytes: bytes) -> str:
        """Extract plain text from DOCX bytes.

        Returns:
            Extracted text; an empty string when the document has no text.

        Raises:
            DocxExtractionError: if extraction fails for any other reason.
        """
