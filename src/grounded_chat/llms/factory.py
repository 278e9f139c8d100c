# src/grounded_chat/llms/factory.py

from grounded_chat.observability.base import MetricsHook, NoOpMetricsHook

from .base import LLMClient
from .config import LLMConfig


def create_llm_client(
    config: LLMConfig,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> LLMClient:
    """Create the answer-generation transport from config.

    Provider SDKs are imported lazily, so only the selected one is loaded.

    Raises:
        ValueError: If provider is unknown.

    Example:
        >>> config = LLMConfig(provider="anthropic", model="claude-sonnet-4-20250514")
        >>> client = create_llm_client(config)
        >>> generator = GroundedAnswerGenerator(client)
    """
    if config.provider == "openai":
        from .openai import OpenAILLMClient

        return OpenAILLMClient(
            api_key=config.api_key,
            model=config.model,
            timeout=config.timeout,
            max_retries=config.max_retries,
            metrics_hook=metrics_hook,
        )

    if config.provider == "anthropic":
        from .anthropic import AnthropicLLMClient

        return AnthropicLLMClient(
            api_key=config.api_key,
            model=config.model,
            timeout=config.timeout,
            max_retries=config.max_retries,
            metrics_hook=metrics_hook,
        )

    raise ValueError(f"Unknown LLM provider: {config.provider}")
