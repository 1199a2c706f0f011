"""Port: sidecar instruction document loader."""

from __future__ import annotations

from typing import Protocol


class InstructionsLoader(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Abstract loader for the optional system-prompt document."""

    def load(self) -> str | None:
        """Return the document text, or None when it is absent or unreadable."""
        ...
