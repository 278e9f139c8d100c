from .inspector import extract_entities, filter_chunks, find_chunk, page_chunk_counts

__all__ = [
    "extract_entities",
    "filter_chunks",
    "find_chunk",
    "page_chunk_counts",
]
