"""Chat request entities -- typed replacement for the raw JSON payload."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class ChatMessage(BaseModel):
    """A single message in an LLM conversation."""

    role: Literal['system', 'user', 'assistant']
    content: str


class ChatPayload(BaseModel):
    """Request body for a chat-completion call."""

    model: str
    messages: list[ChatMessage]
