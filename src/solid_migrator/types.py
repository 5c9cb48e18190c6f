"""Shared enums and type aliases for migration modules."""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum


class FileCategory(StrEnum):
    """Closed set of labels the classifier can assign to a source path."""

    COMPONENTS = "components"
    HOOKS = "hooks"
    UTILS = "utils"
    PAGES = "pages"
    DEFAULT = "default"

    @property
    def bucket(self) -> FileCategory:
        """Return the project-structure bucket this label is filed under.

        Unmatched paths are filed with components.
        """
        if self is FileCategory.DEFAULT:
            return FileCategory.COMPONENTS
        return self


type TextTransform = Callable[[str], str]
type RelativePath = str
