"""Typed option objects shared across migration use-cases."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class MigrationOptions:
    """Options controlling one project migration run."""

    source_dir: str = "src"
    include_pages: bool = False
    deduplicate: bool = True
    copy_assets: bool = False
    conflict_dir: Path | None = None
    rule_modules: tuple[str, ...] = ()
