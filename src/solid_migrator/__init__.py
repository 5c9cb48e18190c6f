"""Top-level API for rule-based React to SolidJS source migration."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from solid_migrator.application.results import MigrationResult

__version__ = "0.1.0"


def transform_source(text: str) -> str:
    """Rewrite React component source into SolidJS source.

    Parameters
    ----------
    text : str
        Contents of a ``.tsx``/``.jsx``/``.js`` file.

    Returns
    -------
    str
        Rewritten source. Text without any React idiom comes back with at
        most its blank-line runs collapsed.
    """
    from .rewrites.pipeline import transform_source as _impl

    return _impl(text)


def migrate_project(
    source_root: Path,
    output_root: Path,
    *,
    source_dir: str = "src",
    include_pages: bool = False,
    keep_duplicates: bool = False,
    copy_assets: bool = False,
    conflict_dir: Path | None = None,
    rule_modules: Iterable[str] | None = None,
) -> MigrationResult:
    """Discover a React project and write its SolidJS counterpart.

    Parameters
    ----------
    source_root : Path
        Existing React project root.
    output_root : Path
        Root of the new project; files land under ``output_root/source_dir``.
    source_dir : str, default="src"
        Source directory inside the new project.
    include_pages : bool, default=False
        Also convert files found under ``pages/``.
    keep_duplicates : bool, default=False
        Process a path once per glob pattern that matched it.
    copy_assets : bool, default=False
        Copy the first public assets directory found to ``output_root/public``.
    conflict_dir : Path | None, default=None
        Directory receiving copies of sources that failed to convert.
    rule_modules : Iterable[str] | None, default=None
        Plugin modules contributing extra rewrite passes.

    Returns
    -------
    MigrationResult
        Discovery structure plus the per-file conversion ledger.
    """
    from .api import migrate_directory as _impl

    return _impl(
        source_root=source_root,
        output_root=output_root,
        source_dir=source_dir,
        include_pages=include_pages,
        keep_duplicates=keep_duplicates,
        copy_assets=copy_assets,
        conflict_dir=conflict_dir,
        rule_modules=rule_modules,
    )


__all__ = [
    "transform_source",
    "migrate_project",
]
