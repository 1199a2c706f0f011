"""Conversion request and result entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class ConversionRequest:
    input_path: Path
    output_path: Path
    credential: str | None = None


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of a successful run, used for the summary report."""

    input_path: Path
    output_path: Path
    response_path: Path | None
    input_size: int
    output_size: int
    preview: list[str] = field(default_factory=list)
    used_default_instructions: bool = False
