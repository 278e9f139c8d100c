# parsers/config.py

from dataclasses import dataclass


@dataclass(frozen=True)
class PdfParserConfig:
    """Configuration for PDF text extraction.

    Scoped to the parser instance. Nothing is set process-wide.
    """

    password: str | None = None
    # pdfplumber character grouping tolerances, in points
    x_tolerance: float = 3.0
    y_tolerance: float = 3.0
