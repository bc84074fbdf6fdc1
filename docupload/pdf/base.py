import asyncio
from abc import ABC, abstractmethod
from urllib.parse import unquote

from docupload.extraction.exceptions import PdfParseError
from docupload.pdf.models import PdfDocument


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters.

    Adapters only implement parse(); extract() runs it off the event loop and
    flattens the resulting page tree into plain text.
    """

    def __init__(self, percent_decode: bool = True) -> None:
        self._percent_decode = percent_decode

    @abstractmethod
    def parse(self, pdf_bytes: bytes) -> PdfDocument:
        """Parse PDF bytes into a page tree.

        Args:
            pdf_bytes: Raw PDF file content. Never modified.

        Returns:
            PdfDocument with pages, text elements, runs and fragments.

        Raises:
            Exception: any parser failure; extract() converts it to PdfParseError.
        """

    async def extract(self, pdf_bytes: bytes) -> str:
        """Extract plain text from PDF bytes.

        Every fragment is appended followed by a single space and the result is
        trimmed. Empty text is a valid result.

        Raises:
            PdfParseError: if the PDF structure cannot be parsed. No partial text
                is returned.
        """
        try:
            document = await asyncio.to_thread(self.parse, pdf_bytes)
        except PdfParseError:
            raise
        except Exception as exc:
            raise PdfParseError(f"PDF parsing error: {exc}") from exc
        return self.join_fragments(document)

    def join_fragments(self, document: PdfDocument) -> str:
        text = ""
        for fragment in document.fragments():
            if self._percent_decode:
                fragment = unquote(fragment)
            text += fragment + " "
        return text.strip()
