from unittest.mock import AsyncMock, MagicMock

import pytest

from grounded_chat.chunking.models import ChunkMetadata, DocumentChunk
from grounded_chat.generation.answer import (
    FALLBACK_ANSWER,
    AnswerGenerationError,
    GroundedAnswerGenerator,
    HistoryTurn,
    build_context,
)
from grounded_chat.llms.base import LLMResponse, Role, Usage
from grounded_chat.prompts.prompt import Prompt


def _chunk(page_number: int, text: str) -> DocumentChunk:
    return DocumentChunk(
        id=f"p{page_number}-c0",
        text=text,
        page_number=page_number,
        offset_start=0,
        offset_end=len(text),
        metadata=ChunkMetadata(chunk_index=0, total_chunks=1),
    )


def _response(content: str | None) -> LLMResponse:
    return LLMResponse(
        content=content,
        finish_reason="stop",
        usage=Usage(prompt_tokens=5, completion_tokens=5, total_tokens=10),
        latency_ms=12.0,
    )


@pytest.fixture
def llm() -> MagicMock:
    client = MagicMock()
    client.complete = AsyncMock(return_value=_response("Revenue doubled (page 2)."))
    return client


@pytest.fixture
def prompt() -> Prompt:
    return Prompt(
        name="test",
        version="1.0",
        description="test prompt",
        inputs={"context": "passages"},
        template="CONTEXT:\n{{ context }}",
    )


class TestBuildContext:
    def test_tags_passages_with_source_page(self) -> None:
        context = build_context(
            [_chunk(2, "Revenue doubled."), _chunk(5, "Costs fell.")]
        )

        assert context == (
            "[Source Page 2]: Revenue doubled.\n\n---\n\n[Source Page 5]: Costs fell."
        )

    def test_no_chunks_yields_empty_context(self) -> None:
        assert build_context([]) == ""


class TestGroundedAnswerGenerator:
    def test_build_messages_orders_system_history_query(
        self, llm: MagicMock, prompt: Prompt
    ) -> None:
        generator = GroundedAnswerGenerator(llm, prompt)

        messages = generator.build_messages(
            "And costs?",
            [_chunk(5, "Costs fell.")],
            [
                HistoryTurn(role="user", content="How was revenue?"),
                HistoryTurn(role="assistant", content="It doubled."),
            ],
        )

        assert [m.role for m in messages] == [
            Role.SYSTEM,
            Role.USER,
            Role.ASSISTANT,
            Role.USER,
        ]
        assert messages[0].content == "CONTEXT:\n[Source Page 5]: Costs fell."
        assert messages[-1].content == "And costs?"

    @pytest.mark.asyncio
    async def test_generate_returns_model_text(
        self, llm: MagicMock, prompt: Prompt
    ) -> None:
        generator = GroundedAnswerGenerator(llm, prompt)

        answer = await generator.generate("Revenue?", [_chunk(2, "Revenue doubled.")])

        assert answer == "Revenue doubled (page 2)."
        kwargs = llm.complete.await_args.kwargs
        assert kwargs["temperature"] == 0.3
        assert kwargs["max_tokens"] is None
        assert len(kwargs["messages"]) == 2

    @pytest.mark.asyncio
    async def test_empty_model_text_falls_back(
        self, llm: MagicMock, prompt: Prompt
    ) -> None:
        llm.complete.return_value = _response("")
        generator = GroundedAnswerGenerator(llm, prompt)

        assert await generator.generate("Revenue?", []) == FALLBACK_ANSWER

    @pytest.mark.asyncio
    async def test_client_failure_raises_generation_error(
        self, llm: MagicMock, prompt: Prompt
    ) -> None:
        cause = ConnectionError("network down")
        llm.complete.side_effect = cause
        metrics_hook = MagicMock()
        generator = GroundedAnswerGenerator(llm, prompt, metrics_hook=metrics_hook)

        with pytest.raises(AnswerGenerationError) as excinfo:
            await generator.generate("Revenue?", [])

        assert excinfo.value.__cause__ is cause
        metrics_hook.increment.assert_any_call("generation_errors_total")

    @pytest.mark.asyncio
    async def test_default_prompt_is_grounded_analyst(self, llm: MagicMock) -> None:
        generator = GroundedAnswerGenerator(llm, temperature=0.0, max_tokens=512)

        await generator.generate("Revenue?", [_chunk(3, "Revenue doubled.")])

        kwargs = llm.complete.await_args.kwargs
        system = kwargs["messages"][0].content
        assert "Strategic Analyst" in system
        assert "[Source Page 3]: Revenue doubled." in system
        assert kwargs["temperature"] == 0.0
        assert kwargs["max_tokens"] == 512
