from pathlib import Path

import pytest
from reportlab.lib.pagesizes import LETTER
from reportlab.pdfgen import canvas

from grounded_chat.parsers.models import ParsedDocument
from grounded_chat.parsers.pdf_parser import PdfParser


def _write_pages(path: Path, pages: list[list[str]]) -> None:
    """Creates a deterministic PDF with one text block per page."""
    c = canvas.Canvas(str(path), pagesize=LETTER)
    width, height = LETTER

    for lines in pages:
        text = c.beginText(40, height - 50)
        for line in lines:
            text.textLine(line)
        c.drawText(text)
        c.showPage()

    c.save()


@pytest.fixture(scope="module")
def pdf_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Create all test PDFs once per module."""
    dir_path: Path = tmp_path_factory.mktemp("pdfs")

    _write_pages(
        dir_path / "report.pdf",
        [
            [
                "QUARTERLY REPORT",
                "",
                "Revenue grew in 2024.",
                "Margins improved to 18%.",
            ],
            [
                "Outlook",
                "Management expects steady demand.",
            ],
        ],
    )
    _write_pages(dir_path / "blank_first.pdf", [[], ["Content starts here."]])

    return dir_path


@pytest.fixture(scope="module")
def parsed_report(pdf_dir: Path) -> ParsedDocument:
    """Parse the report PDF once, reuse across tests."""
    parser = PdfParser()
    with open(pdf_dir / "report.pdf", "rb") as f:
        return parser.parse(f)
