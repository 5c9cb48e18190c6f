"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class SourceTransformer(Protocol):
    """Rewrite one file's text."""

    def transform(self, text: str) -> str:
        """Return rewritten text."""


class FileSystem(Protocol):
    """File operations the orchestrator performs."""

    def exists(self, path: Path) -> bool:
        """Return whether ``path`` exists."""

    def read_text(self, path: Path) -> str:
        """Read UTF-8 text."""

    def write_text(self, path: Path, text: str) -> None:
        """Write UTF-8 text, creating parent directories."""

    def copy_file(self, source: Path, destination: Path) -> None:
        """Copy bytes verbatim, creating parent directories."""

    def copy_tree(self, source: Path, destination: Path) -> None:
        """Recursively copy a directory, merging into ``destination``."""
