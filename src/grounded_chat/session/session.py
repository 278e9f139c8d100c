# src/grounded_chat/session/session.py

import logging
import uuid
from collections.abc import Sequence
from pathlib import Path
from typing import BinaryIO

from grounded_chat.chunking.chunking import chunk_pages
from grounded_chat.chunking.config import ChunkingConfig
from grounded_chat.chunking.models import DocumentChunk
from grounded_chat.generation.answer import (
    AnswerGenerationError,
    GroundedAnswerGenerator,
    HistoryTurn,
)
from grounded_chat.observability.base import MetricsHook, NoOpMetricsHook
from grounded_chat.parsers.base import DocumentParser
from grounded_chat.parsers.pdf_parser import PdfParser
from grounded_chat.ranking.config import RankingConfig
from grounded_chat.ranking.ranker import rank_chunks

from .models import ChatMessage, ProcessingState, ProcessingStatus

logger = logging.getLogger(__name__)

GREETING_MESSAGE_ID = "greeting"

RETRY_MESSAGE = "Network interruption or API quota reached. Please retry."

_IDLE = ProcessingState(status=ProcessingStatus.IDLE, progress=0)


class ChatSession:
    """Conversation over a single loaded document.

    Owns the chunk set and the transcript. Both are replaced wholesale on
    load or reset and exposed only as tuple snapshots.
    """

    def __init__(
        self,
        generator: GroundedAnswerGenerator,
        *,
        parser: DocumentParser | None = None,
        chunking: ChunkingConfig = ChunkingConfig(),
        ranking: RankingConfig = RankingConfig(),
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._generator = generator
        self._parser = parser or PdfParser(metrics_hook=metrics_hook)
        self._chunking = chunking
        self._ranking = ranking
        self.metrics_hook = metrics_hook

        self._chunks: tuple[DocumentChunk, ...] = ()
        self._messages: tuple[ChatMessage, ...] = ()
        self._document_name: str | None = None
        self._state = _IDLE
        # Bumped whenever the document is replaced or discarded
        self._epoch = 0

    @property
    def chunks(self) -> tuple[DocumentChunk, ...]:
        return self._chunks

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        return self._messages

    @property
    def state(self) -> ProcessingState:
        return self._state

    @property
    def document_name(self) -> str | None:
        return self._document_name

    def load_document(self, source: str | Path | BinaryIO, name: str) -> None:
        """Parse and chunk a PDF, replacing any previously loaded document."""
        self.reset()
        self._document_name = name
        self._state = ProcessingState(
            status=ProcessingStatus.PARSING,
            progress=20,
            message="Ingesting subject data...",
        )
        try:
            document = self._parser.parse(source)
        except Exception:
            self._fail(name)
            raise

        self._load(document.page_texts, name)

    def load_pages(self, pages: Sequence[str], name: str) -> None:
        """Load already-extracted page texts, page 1 first."""
        self.reset()
        self._document_name = name
        self._load(pages, name)

    def _load(self, pages: Sequence[str], name: str) -> None:
        self._state = ProcessingState(
            status=ProcessingStatus.CHUNKING,
            progress=60,
            message="Mapping document structure...",
        )
        try:
            chunks = chunk_pages(
                pages,
                chunk_size=self._chunking.chunk_size,
                overlap=self._chunking.overlap,
                metrics_hook=self.metrics_hook,
            )
        except Exception:
            self._fail(name)
            raise

        self._chunks = tuple(chunks)
        self._state = ProcessingState(
            status=ProcessingStatus.READY,
            progress=100,
            message="Synthesis Engine Active",
        )
        self._messages = (
            ChatMessage(
                id=GREETING_MESSAGE_ID,
                role="assistant",
                content=(
                    f"Got it. I've finished mapping **{name}**.\n\n"
                    f"I've indexed about **{len(chunks)} specific nodes** across "
                    "the document. I'm ready to look this over and help you figure "
                    "out how it stacks up against current industry standards. "
                    "What's on your mind?"
                ),
            ),
        )
        logger.info(
            "Loaded document '%s': pages=%d, chunks=%d", name, len(pages), len(chunks)
        )

    def _fail(self, name: str) -> None:
        logger.exception("Failed to load document '%s'", name)
        self._chunks = ()
        self._state = ProcessingState(
            status=ProcessingStatus.ERROR,
            progress=0,
            message="Ingestion failure.",
        )

    async def ask(self, text: str) -> ChatMessage:
        """Answer a question about the loaded document.

        The returned assistant message is also appended to the transcript.
        A failed model call yields a retry notice instead of raising.

        Raises:
            RuntimeError: If no document is ready.
            ValueError: If ``text`` is blank. Nothing is recorded.
        """
        if self._state.status != ProcessingStatus.READY:
            raise RuntimeError("No document loaded; call load_document() first")
        if not text.strip():
            raise ValueError("question must not be blank")

        history = [
            HistoryTurn(role=m.role, content=m.content)
            for m in self._messages
            if m.id != GREETING_MESSAGE_ID
        ]

        epoch = self._epoch
        relevant = rank_chunks(
            text,
            self._chunks,
            self._ranking.top_k,
            min_token_length=self._ranking.min_token_length,
            metrics_hook=self.metrics_hook,
        )
        self._append(ChatMessage(id=uuid.uuid4().hex, role="user", content=text))
        if not relevant:
            logger.info("No grounding evidence found for query")

        try:
            answer = await self._generator.generate(text, relevant, history)
        except AnswerGenerationError:
            logger.warning("Answer generation failed, posting retry notice")
            reply = ChatMessage(
                id=uuid.uuid4().hex, role="assistant", content=RETRY_MESSAGE
            )
        else:
            reply = ChatMessage(
                id=uuid.uuid4().hex,
                role="assistant",
                content=answer,
                sources=tuple(relevant),
            )

        # Drop the reply if the document was reset or replaced meanwhile
        if self._epoch == epoch:
            self._append(reply)
        return reply

    def _append(self, message: ChatMessage) -> None:
        self._messages = self._messages + (message,)

    def reset(self) -> None:
        """Discard the document, its chunks and the transcript."""
        self._epoch += 1
        self._chunks = ()
        self._messages = ()
        self._document_name = None
        self._state = _IDLE
