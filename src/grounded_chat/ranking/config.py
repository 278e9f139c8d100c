# src/grounded_chat/ranking/config.py

from dataclasses import dataclass


@dataclass(frozen=True)
class RankingConfig:
    top_k: int = 5
    # Query tokens shorter than this are treated as stop words
    min_token_length: int = 4

    def __post_init__(self) -> None:
        if self.top_k < 0:
            raise ValueError("top_k must be >= 0")
        if self.min_token_length < 1:
            raise ValueError("min_token_length must be >= 1")
