import io

import pdfplumber
from pdfplumber.page import Page

from docupload.pdf.base import BasePdfExtractor
from docupload.pdf.models import PdfDocument, PdfPage, PdfTextElement, PdfTextRun


class PdfPlumberAdapter(BasePdfExtractor):
    """Parses PDF with pdfplumber: one element per text line, one run per word."""

    def parse(self, pdf_bytes: bytes) -> PdfDocument:
        with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
            pages = [self._parse_page(page) for page in pdf.pages]
        return PdfDocument(pages=pages)

    def _parse_page(self, page: Page) -> PdfPage:
        elements = []
        for line in page.extract_text_lines(return_chars=False):
            runs = [PdfTextRun(fragments=[word]) for word in line["text"].split()]
            elements.append(PdfTextElement(runs=runs))
        return PdfPage(texts=elements)
