from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Literal

from grounded_chat.chunking.models import DocumentChunk


class ProcessingStatus(str, Enum):
    """Lifecycle of the document loaded into a session."""

    IDLE = "idle"
    PARSING = "parsing"
    CHUNKING = "chunking"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class ProcessingState:
    status: ProcessingStatus
    progress: int
    message: str | None = None


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ChatMessage:
    """One entry of the session transcript.

    Assistant answers carry the chunks they were grounded on in ``sources``.
    """

    id: str
    role: Literal["user", "assistant"]
    content: str
    sources: tuple[DocumentChunk, ...] = ()
    timestamp: datetime = field(default_factory=_now)
