"""Gateway: sidecar instruction document loader -- implements InstructionsLoader port."""

from __future__ import annotations

import logging
from pathlib import Path

log = logging.getLogger('cc.persist')


class SidecarInstructionsLoader:
    """Reads the optional system-prompt document from a fixed path."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> str | None:
        try:
            return self._path.read_text(encoding='utf-8-sig')
        except (OSError, UnicodeDecodeError) as e:
            log.warning('Instructions unavailable at %s: %s', self._path, e)
            return None
