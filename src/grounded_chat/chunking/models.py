from dataclasses import dataclass


@dataclass(frozen=True)
class ChunkMetadata:
    chunk_index: int
    # Back-filled per page; not authoritative for callers.
    total_chunks: int = 0


@dataclass(frozen=True)
class DocumentChunk:
    """A bounded window of one page's text. Immutable once created."""

    id: str
    text: str
    page_number: int
    offset_start: int
    offset_end: int
    metadata: ChunkMetadata


def chunk_id(page_number: int, chunk_index: int) -> str:
    return f"p{page_number}-c{chunk_index}"
