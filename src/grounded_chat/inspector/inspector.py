# src/grounded_chat/inspector/inspector.py

"""Read-only views over a loaded chunk set.

Everything here works on immutable chunk snapshots and never mutates them.
"""

import re
from collections import Counter
from collections.abc import Iterable, Sequence

from grounded_chat.chunking.models import DocumentChunk

_PAGE_TERM = re.compile(r"^p(\d+)$")

_YEAR = re.compile(r"\b(?:19|20)\d{2}\b")
_PERCENT = re.compile(r"\b\d+(?:\.\d+)?%")
_ORGANIZATION = re.compile(r"\b[A-Z][a-z]+ (?:Inc|Corp|LLC|Ltd|Group)\b")


def filter_chunks(
    chunks: Sequence[DocumentChunk],
    search_term: str = "",
    tags: Iterable[str] = (),
) -> list[DocumentChunk]:
    """Filter chunks by a search term and entity tags.

    A term of the form ``p<N>`` selects page N; any other term matches
    chunk text case-insensitively. Tags are matched case-sensitively and a
    chunk is kept if it contains at least one of them.
    """
    result = list(chunks)

    term = search_term.strip().lower()
    if term:
        page_match = _PAGE_TERM.match(term)
        if page_match:
            page_number = int(page_match.group(1))
            result = [c for c in result if c.page_number == page_number]
        else:
            result = [c for c in result if term in c.text.lower()]

    tag_list = [tag for tag in tags if tag]
    if tag_list:
        result = [c for c in result if any(tag in c.text for tag in tag_list)]

    return result


def extract_entities(
    chunks: Sequence[DocumentChunk],
    *,
    scan_limit: int = 50,
    max_entities: int = 6,
) -> list[str]:
    """Years, percentages and company names found near the document start.

    Only the first ``scan_limit`` chunks are scanned. Entities are unique and
    returned in first-seen order.
    """
    found: list[str] = []
    for chunk in chunks[:scan_limit]:
        for pattern in (_YEAR, _PERCENT, _ORGANIZATION):
            for match in pattern.findall(chunk.text):
                if match not in found:
                    found.append(match)
    return found[:max_entities]


def page_chunk_counts(chunks: Sequence[DocumentChunk]) -> list[tuple[int, int]]:
    """(page_number, chunk_count) pairs in first-seen page order."""
    counts = Counter(chunk.page_number for chunk in chunks)
    return list(counts.items())


def find_chunk(
    chunks: Sequence[DocumentChunk], chunk_id: str
) -> DocumentChunk | None:
    return next((chunk for chunk in chunks if chunk.id == chunk_id), None)
