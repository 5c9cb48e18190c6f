"""Path-based categorisation and content-based eligibility for source files."""

from __future__ import annotations

from dataclasses import dataclass

from solid_migrator.types import FileCategory

# First match wins; a path under both hooks/ and utils/ is a hook.
_CATEGORY_MARKERS: tuple[tuple[FileCategory, tuple[str, ...]], ...] = (
    (FileCategory.COMPONENTS, ("/components/",)),
    (FileCategory.HOOKS, ("/hooks/",)),
    (FileCategory.PAGES, ("/pages/",)),
    (FileCategory.UTILS, ("/utils/", "/lib/")),
)

ELIGIBILITY_TOKENS: tuple[str, ...] = (
    "React",
    "useState",
    "useEffect",
    "useRef",
    "useMemo",
    "'use client'",
    '"use client"',
)


@dataclass(frozen=True)
class Classification:
    """Classifier verdict for one file."""

    category: FileCategory
    eligible: bool


def _normalize(path: str) -> str:
    normalized = path.replace("\\", "/")
    if not normalized.startswith("/"):
        normalized = "/" + normalized
    return normalized


def category_for_path(path: str) -> FileCategory:
    """Return the category implied by directory segments of ``path``.

    Parameters
    ----------
    path : str
        Relative or absolute path, with either separator style.

    Returns
    -------
    FileCategory
        First matching category, or ``FileCategory.DEFAULT``.
    """
    normalized = _normalize(path)
    for category, markers in _CATEGORY_MARKERS:
        if any(marker in normalized for marker in markers):
            return category
    return FileCategory.DEFAULT


def needs_rewrite(content: str) -> bool:
    """Return whether content carries any React signal worth rewriting."""
    return any(token in content for token in ELIGIBILITY_TOKENS)


def classify(path: str, content: str) -> Classification:
    """Classify a source file by path and content.

    The eligibility scan is deliberately loose: a file mentioning ``React``
    only inside a comment is still rewritten, but a file with none of the
    tokens is always copied through unchanged.
    """
    return Classification(
        category=category_for_path(path),
        eligible=needs_rewrite(content),
    )
