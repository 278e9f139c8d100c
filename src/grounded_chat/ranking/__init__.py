from .config import RankingConfig
from .ranker import ScoredChunk, rank_chunks, score_chunk, score_chunks, tokenize_query

__all__ = [
    "RankingConfig",
    "ScoredChunk",
    "rank_chunks",
    "score_chunk",
    "score_chunks",
    "tokenize_query",
]
