from .answer import (
    FALLBACK_ANSWER,
    AnswerGenerationError,
    GroundedAnswerGenerator,
    HistoryTurn,
    build_context,
)

__all__ = [
    "FALLBACK_ANSWER",
    "AnswerGenerationError",
    "GroundedAnswerGenerator",
    "HistoryTurn",
    "build_context",
]
