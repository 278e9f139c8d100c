# src/grounded_chat/generation/answer.py

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from time import monotonic
from typing import Literal

from grounded_chat.chunking.models import DocumentChunk
from grounded_chat.llms.base import LLMClient, Message, Role
from grounded_chat.observability import names
from grounded_chat.observability.base import MetricsHook, NoOpMetricsHook
from grounded_chat.prompts.prompt import Prompt
from grounded_chat.prompts.prompts_library import PromptsLibrary

logger = logging.getLogger(__name__)

DEFAULT_PROMPT_NAME = "grounded_analyst"
DEFAULT_PROMPT_VERSION = "1.0"

CONTEXT_SEPARATOR = "\n\n---\n\n"

FALLBACK_ANSWER = (
    "I'm having trouble synthesizing that right now. "
    "Could you rephrase the question?"
)


class AnswerGenerationError(RuntimeError):
    """The model could not be reached or refused the request."""


@dataclass(frozen=True)
class HistoryTurn:
    role: Literal["user", "assistant"]
    content: str


def build_context(chunks: Sequence[DocumentChunk]) -> str:
    """Render retrieved chunks as page-tagged passages for the prompt."""
    return CONTEXT_SEPARATOR.join(
        f"[Source Page {chunk.page_number}]: {chunk.text}" for chunk in chunks
    )


class GroundedAnswerGenerator:
    """Answers a query from ranked chunks plus conversation history.

    Stateless between calls. The caller owns the history.
    """

    def __init__(
        self,
        llm: LLMClient,
        prompt: Prompt | None = None,
        *,
        temperature: float = 0.3,
        max_tokens: int | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._llm = llm
        self._prompt = prompt or PromptsLibrary.default().get(
            DEFAULT_PROMPT_NAME, DEFAULT_PROMPT_VERSION
        )
        self._temperature = temperature
        self._max_tokens = max_tokens
        self.metrics_hook = metrics_hook

    def build_messages(
        self,
        query: str,
        context_chunks: Sequence[DocumentChunk],
        history: Sequence[HistoryTurn],
    ) -> list[Message]:
        system = self._prompt.render(context=build_context(context_chunks))
        messages = [Message(role=Role.SYSTEM, content=system)]
        messages.extend(
            Message(
                role=Role.USER if turn.role == "user" else Role.ASSISTANT,
                content=turn.content,
            )
            for turn in history
        )
        messages.append(Message(role=Role.USER, content=query))
        return messages

    async def generate(
        self,
        query: str,
        context_chunks: Sequence[DocumentChunk],
        history: Sequence[HistoryTurn] = (),
    ) -> str:
        """Generate an answer grounded in ``context_chunks``.

        Returns:
            The model's text, or a fixed fallback sentence when the model
            returns no text.

        Raises:
            AnswerGenerationError: When the LLM call fails after retries.
        """
        start = monotonic()
        messages = self.build_messages(query, context_chunks, history)

        logger.debug(
            "Generating answer: context_chunks=%d, history=%d",
            len(context_chunks),
            len(history),
        )
        self.metrics_hook.increment(names.GENERATION_REQUESTS_TOTAL)

        try:
            response = await self._llm.complete(
                messages=messages,
                temperature=self._temperature,
                max_tokens=self._max_tokens,
            )
        except Exception as e:
            self.metrics_hook.increment(names.GENERATION_ERRORS_TOTAL)
            logger.exception("Answer generation failed")
            raise AnswerGenerationError("Failed to get response from the model") from e

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.GENERATION_DURATION, elapsed_ms)

        if not response.content:
            logger.warning(
                "Model returned no text (finish=%s), using fallback answer",
                response.finish_reason,
            )
            return FALLBACK_ANSWER
        return response.content
