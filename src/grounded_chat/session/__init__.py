from .models import ChatMessage, ProcessingState, ProcessingStatus
from .session import GREETING_MESSAGE_ID, RETRY_MESSAGE, ChatSession

__all__ = [
    "GREETING_MESSAGE_ID",
    "RETRY_MESSAGE",
    "ChatMessage",
    "ChatSession",
    "ProcessingState",
    "ProcessingStatus",
]
