from .base import DocumentParser
from .config import PdfParserConfig
from .models import ParsedDocument, ParsedPage
from .pdf_parser import PdfParser

__all__ = [
    "DocumentParser",
    "ParsedDocument",
    "ParsedPage",
    "PdfParser",
    "PdfParserConfig",
]
