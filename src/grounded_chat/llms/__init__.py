# src/grounded_chat/llms/__init__.py

"""LLM transport for grounded answers.

A thin, stateless abstraction over the OpenAI and Anthropic SDKs. The
answer generator builds the messages; clients here only send them.

Example:
    >>> from grounded_chat.llms import create_llm_client, LLMConfig, Message, Role
    >>>
    >>> client = create_llm_client(LLMConfig(provider="openai", model="gpt-4o"))
    >>> response = await client.complete(
    ...     messages=[Message(role=Role.USER, content="Hello!")]
    ... )
    >>> print(response.content)
"""

from .base import LLMClient, LLMResponse, Message, Role, Usage
from .config import LLMConfig
from .factory import create_llm_client

__all__ = [
    # Factory
    "create_llm_client",
    # Protocol
    "LLMClient",
    # Config
    "LLMConfig",
    # Types
    "Message",
    "Role",
    "LLMResponse",
    "Usage",
]
