# src/grounded_chat/chunking/config.py

from dataclasses import dataclass


@dataclass(frozen=True)
class ChunkingConfig:
    """Sliding window parameters, in characters."""

    chunk_size: int = 800
    overlap: int = 150

    def __post_init__(self) -> None:
        if self.chunk_size <= 0:
            raise ValueError("chunk_size must be > 0")
        if self.overlap < 0:
            raise ValueError("overlap must be >= 0")
        if self.overlap >= self.chunk_size:
            raise ValueError("overlap must be < chunk_size")
