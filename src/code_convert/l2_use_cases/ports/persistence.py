"""Port: persistence gateway for the files a run reads and writes."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class PersistenceGateway(Protocol):
    """Abstract file access for input, output, and the diagnostic response."""

    def read_source(self, path: Path) -> str:
        """Read the input file as text."""
        ...

    def save_output(self, path: Path, content: str) -> Path:
        """Write the converted code."""
        ...

    def save_raw_response(self, raw: str) -> Path:
        """Keep the raw response body for inspection."""
        ...

    def file_size(self, path: Path) -> int:
        """Size of *path* in bytes."""
        ...
