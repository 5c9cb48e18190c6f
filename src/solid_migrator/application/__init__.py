"""Application-layer use-cases and option objects."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from solid_migrator.application.options import MigrationOptions
from solid_migrator.application.ports import FileSystem, SourceTransformer
from solid_migrator.application.results import (
    ConversionLedger,
    ConversionOutcome,
    Converted,
    Failed,
    LedgerSummary,
    MigrationResult,
    Skipped,
    SourceFile,
)


def build_migration_options(
    *,
    source_dir: str = "src",
    include_pages: bool = False,
    deduplicate: bool = True,
    copy_assets: bool = False,
    conflict_dir: Path | None = None,
    rule_modules: Iterable[str] | None = None,
) -> MigrationOptions:
    """Build typed migration options via lazy use-case import."""
    from solid_migrator.application.use_cases import build_migration_options as _impl

    return _impl(
        source_dir=source_dir,
        include_pages=include_pages,
        deduplicate=deduplicate,
        copy_assets=copy_assets,
        conflict_dir=conflict_dir,
        rule_modules=rule_modules,
    )


def migrate_project(
    *,
    source_root: Path,
    output_root: Path,
    options: MigrationOptions,
    filesystem: FileSystem | None = None,
    transformer: SourceTransformer | None = None,
) -> MigrationResult:
    """Migrate a React project via lazy use-case import."""
    from solid_migrator.application.use_cases import migrate_project as _impl

    return _impl(
        source_root=source_root,
        output_root=output_root,
        options=options,
        filesystem=filesystem,
        transformer=transformer,
    )


__all__ = [
    "MigrationOptions",
    "FileSystem",
    "SourceTransformer",
    "ConversionLedger",
    "ConversionOutcome",
    "Converted",
    "Skipped",
    "Failed",
    "LedgerSummary",
    "MigrationResult",
    "SourceFile",
    "build_migration_options",
    "migrate_project",
]
