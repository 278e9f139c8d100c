from collections.abc import Sequence
from time import monotonic

from grounded_chat.observability import names
from grounded_chat.observability.base import MetricsHook, NoOpMetricsHook

from .models import ChunkMetadata, DocumentChunk, chunk_id


def _validate(chunk_size: int, overlap: int) -> None:
    if chunk_size <= 0:
        raise ValueError("chunk_size must be > 0")
    if overlap < 0:
        raise ValueError("overlap must be >= 0")
    if overlap >= chunk_size:
        raise ValueError("overlap must be < chunk_size")


def _windows(text_len: int, chunk_size: int, overlap: int) -> list[tuple[int, int]]:
    windows = []
    step = chunk_size - overlap

    for start in range(0, text_len, step):
        end = min(start + chunk_size, text_len)
        windows.append((start, end))
        if end == text_len:
            break

    return windows


def chunk_page(
    page_number: int,
    page_text: str,
    *,
    chunk_size: int,
    overlap: int,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[DocumentChunk]:
    """Split one page into overlapping character windows.

    Windows are cut on raw characters, so a split may land mid-word.
    An empty page yields no chunks.
    """
    start = monotonic()
    _validate(chunk_size, overlap)
    if page_number < 1:
        raise ValueError("page_number must be >= 1")

    windows = _windows(len(page_text), chunk_size, overlap)
    chunks = [
        DocumentChunk(
            id=chunk_id(page_number, index),
            text=page_text[offset_start:offset_end],
            page_number=page_number,
            offset_start=offset_start,
            offset_end=offset_end,
            metadata=ChunkMetadata(chunk_index=index, total_chunks=len(windows)),
        )
        for index, (offset_start, offset_end) in enumerate(windows)
    ]

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.CHUNKING_DURATION, elapsed_ms)
    metrics_hook.increment(names.CHUNKING_CHUNKS_CREATED, len(chunks))
    return chunks


def chunk_pages(
    pages: Sequence[str],
    *,
    chunk_size: int,
    overlap: int,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[DocumentChunk]:
    """Chunk every page of a document, pages numbered from 1 in order."""
    _validate(chunk_size, overlap)

    chunks: list[DocumentChunk] = []
    for page_number, page_text in enumerate(pages, start=1):
        chunks.extend(
            chunk_page(
                page_number,
                page_text,
                chunk_size=chunk_size,
                overlap=overlap,
                metrics_hook=metrics_hook,
            )
        )
    return chunks
