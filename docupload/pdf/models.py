from dataclasses import dataclass, field


@dataclass
class PdfTextRun:
    """One styled run inside a text element; holds raw text fragments."""

    fragments: list[str] = field(default_factory=list)


@dataclass
class PdfTextElement:
    """A positioned block of text on a page, in emission order."""

    runs: list[PdfTextRun] = field(default_factory=list)


@dataclass
class PdfPage:
    texts: list[PdfTextElement] = field(default_factory=list)


@dataclass
class PdfDocument:
    """Parsed page tree. Layout and font information is not kept."""

    pages: list[PdfPage] = field(default_factory=list)

    def fragments(self) -> list[str]:
        """All non-empty fragments in reading order: page, element, run, fragment."""
        return [
            fragment
            for page in self.pages
            for element in page.texts
            for run in element.runs
            for fragment in run.fragments
            if fragment
        ]
