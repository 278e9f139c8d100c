# Chunking
from .chunking import (
    ChunkingConfig,
    ChunkMetadata,
    DocumentChunk,
    chunk_page,
    chunk_pages,
)

# Generation
from .generation import AnswerGenerationError, GroundedAnswerGenerator, HistoryTurn

# Inspector
from .inspector import extract_entities, filter_chunks, find_chunk, page_chunk_counts

# LLMs
from .llms import LLMClient, LLMConfig, create_llm_client

# Observability
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import ParsedDocument, ParsedPage, PdfParser, PdfParserConfig

# Prompts
from .prompts import Prompt, PromptsLibrary

# Ranking
from .ranking import RankingConfig, rank_chunks

# Session
from .session import ChatMessage, ChatSession, ProcessingState, ProcessingStatus

__all__ = [
    # Chunking
    "ChunkMetadata",
    "ChunkingConfig",
    "DocumentChunk",
    "chunk_page",
    "chunk_pages",
    # Generation
    "AnswerGenerationError",
    "GroundedAnswerGenerator",
    "HistoryTurn",
    # Inspector
    "extract_entities",
    "filter_chunks",
    "find_chunk",
    "page_chunk_counts",
    # LLMs
    "LLMClient",
    "LLMConfig",
    "create_llm_client",
    # Observability
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "ParsedDocument",
    "ParsedPage",
    "PdfParser",
    "PdfParserConfig",
    # Prompts
    "Prompt",
    "PromptsLibrary",
    # Ranking
    "RankingConfig",
    "rank_chunks",
    # Session
    "ChatMessage",
    "ChatSession",
    "ProcessingState",
    "ProcessingStatus",
]
