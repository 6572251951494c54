# Scripted clarifying-question assistant used before the final generation.
# The transcript it builds is what ends up as `chatContext` in /api/generate-docs.

from __future__ import annotations
from typing import List, Optional, Sequence

from docgen.generate.types import ChatMessage

OPENING = (
    "I've reviewed your OpenAPI specification and meeting notes. "
    "Let me ask a few questions to better understand your documentation needs:\n\n"
    "1. What's the primary audience for this documentation?\n"
    "2. Are there specific endpoints that need detailed explanation?\n"
    "3. Would you like to include code examples in specific languages?"
)

FOLLOW_UP = (
    "Thank you for that information. A few more questions:\n\n"
    "1. Should we include authentication examples?\n"
    "2. Are there any specific error scenarios that need detailed documentation?"
)

READY = (
    "I understand. Feel free to ask any other questions, "
    "or click 'Generate Documentation' when you're ready to proceed."
)

DEFAULT_REPLY = (
    "I understand. Let me know if you have any other questions, "
    "or click 'Generate Documentation' when you're ready to proceed."
)


def opening_message() -> ChatMessage:
    return ChatMessage(role="assistant", content=OPENING)


def _last_assistant(history: Sequence[ChatMessage]) -> Optional[ChatMessage]:
    for msg in reversed(history):
        if msg.role == "assistant":
            return msg
    return None


def reply_to(history: Sequence[ChatMessage]) -> ChatMessage:
    """Next assistant turn, keyed on what the assistant asked last."""
    last = _last_assistant(history)
    if last and "primary audience" in last.content:
        return ChatMessage(role="assistant", content=FOLLOW_UP)
    if last and "authentication examples" in last.content:
        return ChatMessage(role="assistant", content=READY)
    return ChatMessage(role="assistant", content=DEFAULT_REPLY)


def extend_transcript(message: str, history: Sequence[ChatMessage]) -> List[ChatMessage]:
    """history + the user's message + the assistant's reply."""
    reply = reply_to(history)
    return [*history, ChatMessage(role="user", content=message), reply]
