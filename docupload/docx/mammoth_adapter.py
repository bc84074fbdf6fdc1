import asyncio
import io
import re

import mammoth

from docupload.docx.base import BaseDocxExtractor
from docupload.extraction.exceptions import DocxExtractionError
from docupload.logging.logger import Log

_TAG_RE = re.compile(r"<[^>]*>")
_ENTITY_RE = re.compile(r"&(?:[a-zA-Z][a-zA-Z0-9]*|#[0-9]+|#[xX][0-9a-fA-F]+);")
_WHITESPACE_RE = re.compile(r"\s+")


def html_to_text(html: str) -> str:
    """Best-effort tag and entity stripping; not a real HTML parser.

    Tags are replaced by a space so adjacent paragraphs stay separated.
    """
    text = _TAG_RE.sub(" ", html)
    text = _ENTITY_RE.sub(" ", text)
    return _WHITESPACE_RE.sub(" ", text).strip()


class MammothDocxAdapter(BaseDocxExtractor):
    """Extracts DOCX text with mammoth, falling back to its HTML conversion."""

    async def extract(self, docx_bytes: bytes) -> str:
        try:
            return await asyncio.to_thread(self._extract, docx_bytes)
        except DocxExtractionError:
            raise
        except Exception as exc:
            raise DocxExtractionError(f"DOCX extraction failed: {exc}") from exc

    def _extract(self, docx_bytes: bytes) -> str:
        raw_text = mammoth.extract_raw_text(io.BytesIO(docx_bytes)).value
        if raw_text.strip():
            return raw_text

        Log.debug("Raw DOCX text is empty, falling back to HTML conversion")
        html = mammoth.convert_to_html(io.BytesIO(docx_bytes)).value
        return html_to_text(html)
