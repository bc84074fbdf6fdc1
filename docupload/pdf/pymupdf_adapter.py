from typing import Any

import pymupdf

from docupload.pdf.base import BasePdfExtractor
from docupload.pdf.models import PdfDocument, PdfPage, PdfTextElement, PdfTextRun

_TEXT_BLOCK = 0


class PyMuPdfAdapter(BasePdfExtractor):
    """Parses PDF with PyMuPDF: text blocks become elements, lines become runs."""

    def parse(self, pdf_bytes: bytes) -> PdfDocument:
        with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
            pages = [self._parse_page(page.get_text("dict")) for page in doc]
        return PdfDocument(pages=pages)

    def _parse_page(self, page_dict: dict[str, Any]) -> PdfPage:
        elements = []
        for block in page_dict.get("blocks", []):
            if block.get("type") != _TEXT_BLOCK:
                continue
            runs = [
                PdfTextRun(fragments=[span["text"] for span in line.get("spans", [])])
                for line in block.get("lines", [])
            ]
            elements.append(PdfTextElement(runs=runs))
        return PdfPage(texts=elements)
