# src/grounded_chat/ranking/ranker.py

"""Lexical relevance ranking of document chunks.

A cheap keyword filter, not semantic search: no embeddings, no stemming.
Given identical inputs the output is identical.
"""

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from time import monotonic

from grounded_chat.chunking.models import DocumentChunk
from grounded_chat.observability import names
from grounded_chat.observability.base import MetricsHook, NoOpMetricsHook

logger = logging.getLogger(__name__)

_NON_WORD = re.compile(r"\W+")

FIRST_HIT_WEIGHT = 1.0
REPEAT_HIT_WEIGHT = 0.1


@dataclass(frozen=True)
class ScoredChunk:
    chunk: DocumentChunk
    score: float


def tokenize_query(query: str, min_token_length: int = 4) -> list[str]:
    """Lower-cased query terms, short tokens dropped, first-seen order kept.

    Tokens shorter than ``min_token_length`` stand in for stop words.
    """
    terms: list[str] = []
    for token in _NON_WORD.split(query.lower()):
        if len(token) >= min_token_length and token not in terms:
            terms.append(token)
    return terms


def score_chunk(terms: Sequence[str], chunk: DocumentChunk) -> float:
    text = chunk.text.lower()
    score = 0.0
    for term in terms:
        # str.count counts non-overlapping substring matches
        occurrences = text.count(term)
        if occurrences:
            score += FIRST_HIT_WEIGHT + REPEAT_HIT_WEIGHT * (occurrences - 1)
    return score


def score_chunks(
    query: str,
    chunks: Sequence[DocumentChunk],
    min_token_length: int = 4,
) -> list[ScoredChunk]:
    """Score every chunk against the query, in input order."""
    terms = tokenize_query(query, min_token_length)
    if not terms:
        return [ScoredChunk(chunk=chunk, score=0.0) for chunk in chunks]
    return [
        ScoredChunk(chunk=chunk, score=score_chunk(terms, chunk)) for chunk in chunks
    ]


def rank_chunks(
    query: str,
    chunks: Sequence[DocumentChunk],
    top_k: int = 5,
    *,
    min_token_length: int = 4,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[DocumentChunk]:
    """Return up to ``top_k`` chunks matching the query, most relevant first.

    Chunks with no matching term are dropped. Equal scores keep their input
    order, so earlier document positions win ties. An empty result means no
    grounding evidence was found; it is not an error.

    Raises:
        ValueError: If ``top_k`` is negative.
    """
    if top_k < 0:
        raise ValueError("top_k must be >= 0")

    start = monotonic()
    scored = score_chunks(query, chunks, min_token_length)

    # sorted() is stable
    ranked = sorted(scored, key=lambda item: item.score, reverse=True)
    matches = [item for item in ranked if item.score > 0]
    result = [item.chunk for item in matches[:top_k]]

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.RANKING_DURATION, elapsed_ms)
    metrics_hook.increment(names.RANKING_CANDIDATES_TOTAL, len(chunks))
    metrics_hook.increment(names.RANKING_MATCHES_TOTAL, len(matches))

    logger.debug(
        "Ranked %d chunks: matches=%d, returned=%d, latency=%.1fms",
        len(chunks),
        len(matches),
        len(result),
        elapsed_ms,
    )
    return result
