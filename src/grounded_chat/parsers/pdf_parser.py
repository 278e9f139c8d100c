# parsers/pdf_parser.py

import logging
from pathlib import Path
from time import monotonic
from typing import Any, BinaryIO, cast

import pdfplumber

from grounded_chat.observability import names
from grounded_chat.observability.base import MetricsHook, NoOpMetricsHook

from .base import DocumentParser
from .config import PdfParserConfig
from .models import ParsedDocument, ParsedPage

logger = logging.getLogger(__name__)


class PdfParser(DocumentParser):
    """
    Deterministic PDF text extractor.
    - Uses page order
    - Joins the text lines of a page with single spaces
    - Empty pages are kept as empty text
    """

    def __init__(
        self,
        config: PdfParserConfig = PdfParserConfig(),
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._config = config
        self.metrics_hook = metrics_hook

    def parse(self, source: str | Path | BinaryIO) -> ParsedDocument:
        start = monotonic()
        pages: list[ParsedPage] = []
        title = "Untitled Document"

        # pdfplumber.open accepts path-like or buffer objects; cast to Any
        with pdfplumber.open(cast(Any, source), password=self._config.password) as pdf:
            for page_number, page in enumerate(pdf.pages, start=1):
                lines = self._page_lines(page)
                if page_number == 1 and lines:
                    title = lines[0]
                pages.append(
                    ParsedPage(page_number=page_number, text=" ".join(lines))
                )

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.PARSING_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.PARSING_PAGES_TOTAL, len(pages))
        logger.info(
            "Parsed PDF '%s': pages=%d, latency=%.0fms", title, len(pages), elapsed_ms
        )

        return ParsedDocument(
            title=title,
            metadata={"source_type": "pdf", "page_count": len(pages)},
            pages=pages,
        )

    def _page_lines(self, page: Any) -> list[str]:
        """Non-blank, stripped text lines of a page in reading order."""
        text = (
            page.extract_text(
                x_tolerance=self._config.x_tolerance,
                y_tolerance=self._config.y_tolerance,
            )
            or ""
        )
        return [line.strip() for line in text.splitlines() if line.strip()]
