"""
adapters/file_writer.py
──────────────────────────────────────────────────────────────────────────────
Implements WriterPort on the local filesystem.

Every write replaces the whole file (UTF-8, "\n" line endings on every
platform).  Missing parent directories are an error unless
CREATE_PARENT_DIRS=true.
"""
from __future__ import annotations

import logging
from pathlib import Path

from taxonomy_codegen.domain.exceptions import WriteError

logger = logging.getLogger(__name__)


class LocalFileWriter:
    """Create-or-replace text writer."""

    def __init__(self, create_parent_dirs: bool = False) -> None:
        self._create_parent_dirs = create_parent_dirs

    def write(self, path: Path, content: str) -> None:
        path = Path(path)
        try:
            if self._create_parent_dirs:
                path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8", newline="\n") as fh:
                fh.write(content)
        except OSError as exc:
            raise WriteError(path, exc.strerror or str(exc)) from exc
        logger.debug("Wrote %d chars to %s", len(content), path)
