"""
ports/writer_port.py
──────────────────────────────────────────────────────────────────────────────
Abstract interface for persisting generated modules.

Current implementation: LocalFileWriter (plain filesystem writes)
"""
from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class WriterPort(Protocol):
    """Contract for a full-replace text sink."""

    def write(self, path: Path, content: str) -> None:
        """Replace the entire contents of ``path`` with ``content``.

        Creates the file if it does not exist.  Never appends or merges.

        Raises:
            WriteError: If the underlying storage operation fails.
        """
        ...
