"""Chat-completion response models -- parsed from the raw response body."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CompletionMessage(BaseModel):
    content: str | None = None


class CompletionChoice(BaseModel):
    message: CompletionMessage | None = None


class CompletionError(BaseModel):
    message: str = ''


class ChatCompletion(BaseModel):
    """Subset of the chat-completion response this tool reads. Extra keys are ignored."""

    choices: list[CompletionChoice] = Field(default_factory=list)
    error: CompletionError | None = None

    def first_content(self) -> str:
        """Content of the first choice, or '' when any step of the path is missing."""
        if not self.choices:
            return ''
        message = self.choices[0].message
        if message is None or message.content is None:
            return ''
        return message.content
