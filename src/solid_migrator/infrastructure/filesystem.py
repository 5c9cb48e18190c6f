"""Local filesystem adapter implementation."""

from __future__ import annotations

import shutil
from pathlib import Path


class LocalFileSystem:
    """Default ``FileSystem`` implementation backed by ``pathlib``/``shutil``."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def write_text(self, path: Path, text: str) -> None:
        """Write UTF-8 text, creating parent directories as needed.

        Parameters
        ----------
        path : Path
            Destination file.
        text : str
            Content to write.
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")

    def copy_file(self, source: Path, destination: Path) -> None:
        """Copy ``source`` byte-for-byte to ``destination``."""
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, destination)

    def copy_tree(self, source: Path, destination: Path) -> None:
        """Recursively copy ``source`` into ``destination``, merging existing dirs."""
        shutil.copytree(source, destination, dirs_exist_ok=True)
