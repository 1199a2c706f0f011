"""Pure functions for pulling code out of a model reply."""

from __future__ import annotations

import re

FENCE_LANGUAGES = ('typescript', 'ts', 'javascript', 'js')

_OPENING_FENCE = re.compile(r'\A```(?:' + '|'.join(FENCE_LANGUAGES) + r')?[ \t]*(?:\r?\n|\Z)')
_CLOSING_FENCE = re.compile(r'(?:\r?\n)?```\Z')


def strip_code_fences(content: str) -> str:
    """Remove one leading fence opener and one trailing fence, then trim.

    Prefix/suffix match only: fences inside the body are left alone, and text
    without fences comes back trimmed and otherwise unchanged.
    """
    text = content.strip()
    text = _OPENING_FENCE.sub('', text, count=1)
    text = _CLOSING_FENCE.sub('', text, count=1)
    return text.strip()


def preview_lines(content: str, limit: int = 10) -> list[str]:
    return content.split('\n')[:limit]
