from .chunking import chunk_page, chunk_pages
from .config import ChunkingConfig
from .models import ChunkMetadata, DocumentChunk

__all__ = [
    "ChunkMetadata",
    "ChunkingConfig",
    "DocumentChunk",
    "chunk_page",
    "chunk_pages",
]
