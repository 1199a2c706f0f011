"""Pure functions for building the chat request from instructions and source."""

from __future__ import annotations

from code_convert.l1_entities.chat_message import ChatMessage, ChatPayload

INSTRUCTIONS_HEADING = '# Custom Copilot Instructions'


def code_only_directive(target_language: str) -> str:
    return f'Return only the updated {target_language.lower()} code, no additional comments or explanations'


def default_instructions(source_language: str = 'JavaScript', target_language: str = 'TypeScript') -> str:
    """Fallback system prompt used when no sidecar document is available."""
    return (
        f'Convert this {source_language} to {target_language} with appropriate type annotations. '
        f'Follow modern {target_language} best practices.\n'
        '- Use explicit return types for functions\n'
        '- Add proper parameter typing\n'
        '- Use interfaces for complex objects\n'
        '- Add JSDoc comments\n'
        f'- Return only the updated {target_language.lower()} code'
    )


def resolve_instructions(document: str, target_language: str = 'TypeScript') -> str:
    """Turn a sidecar document into the system prompt.

    A leading ``# Custom Copilot Instructions`` line is dropped, the rest is
    trimmed, and the code-only directive is appended as a final bullet.
    """
    text = document
    if text.startswith(INSTRUCTIONS_HEADING):
        first_line, _, rest = text.partition('\n')
        if first_line.rstrip() == INSTRUCTIONS_HEADING:
            text = rest
    return f'{text.strip()}\n- {code_only_directive(target_language)}'


def build_payload(model: str, instructions: str, source: str) -> ChatPayload:
    """System message carries the instructions, user message the untouched source."""
    return ChatPayload(
        model=model,
        messages=[
            ChatMessage(role='system', content=instructions),
            ChatMessage(role='user', content=source),
        ],
    )
