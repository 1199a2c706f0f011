"""Gateway: file-based persistence -- implements PersistenceGateway port."""

from __future__ import annotations

import logging
from pathlib import Path

log = logging.getLogger('cc.persist')


class FilePersistenceGateway:
    """Reads the input and writes the output and diagnostic response to the filesystem."""

    def __init__(self, response_path: Path) -> None:
        self._response_path = response_path

    @property
    def response_path(self) -> Path:
        return self._response_path

    def read_source(self, path: Path) -> str:
        text = path.read_text(encoding='utf-8')
        log.debug('Read %d chars from %s', len(text), path)
        return text

    def save_output(self, path: Path, content: str) -> Path:
        path.write_text(content, encoding='utf-8')
        log.debug('Wrote %d chars to %s', len(content), path)
        return path

    def save_raw_response(self, raw: str) -> Path:
        self._response_path.write_text(raw, encoding='utf-8')
        log.debug('Saved raw response to %s', self._response_path)
        return self._response_path

    def file_size(self, path: Path) -> int:
        return path.stat().st_size
