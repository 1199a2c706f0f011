"""Port: LLM chat-completion client."""

from __future__ import annotations

from typing import Protocol

from code_convert.l1_entities.chat_message import ChatPayload


class LLMClient(Protocol):
    """Abstract LLM client. Zero framework types leak through."""

    def complete_raw(self, payload: ChatPayload, credential: str) -> str:
        """Send one chat-completion request. Returns the raw response body, error bodies included."""
        ...
