# parsers/base.py

from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO

from .models import ParsedDocument


class DocumentParser(ABC):
    @abstractmethod
    def parse(self, source: str | Path | BinaryIO) -> ParsedDocument:
        """
        Extract plain text per page and return it in page order.

        Requirements:
        - Deterministic output for same input
        - One ParsedPage per source page, numbered from 1
        - Page text carries no structure (no paragraphs or tables)
        """
        raise NotImplementedError
