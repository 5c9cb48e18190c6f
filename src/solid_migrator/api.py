"""Public file-based migration API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable
from typing import Optional

from solid_migrator.application.results import MigrationResult
from solid_migrator.application.use_cases import build_migration_options
from solid_migrator.application.use_cases import build_project_pipeline
from solid_migrator.application.use_cases import migrate_project
from solid_migrator.discovery import DiscoveryConfig
from solid_migrator.discovery import ProjectStructure
from solid_migrator.discovery import discover
from solid_migrator.errors import SourceNotFoundError
from solid_migrator.infrastructure.filesystem import LocalFileSystem


def transform_file(
    source_path: Path,
    output_path: Optional[Path] = None,
    rule_modules: Optional[Iterable[str]] = None,
) -> str:
    """Rewrite a single React file and optionally write the result."""
    if not source_path.is_file():
        raise SourceNotFoundError(f"Source file not found at {source_path}")
    filesystem = LocalFileSystem()
    pipeline = build_project_pipeline(rule_modules or ())
    converted = pipeline.transform(filesystem.read_text(source_path))
    if output_path is not None:
        filesystem.write_text(output_path, converted)
    return converted


def discover_project(root: Path, keep_duplicates: bool = False) -> ProjectStructure:
    """Scan a React project without converting anything."""
    return discover(root, DiscoveryConfig(deduplicate=not keep_duplicates))


def migrate_directory(
    source_root: Path,
    output_root: Path,
    source_dir: str = "src",
    include_pages: bool = False,
    keep_duplicates: bool = False,
    copy_assets: bool = False,
    conflict_dir: Optional[Path] = None,
    rule_modules: Optional[Iterable[str]] = None,
) -> MigrationResult:
    """Migrate every discovered React file under ``source_root``."""
    options = build_migration_options(
        source_dir=source_dir,
        include_pages=include_pages,
        deduplicate=not keep_duplicates,
        copy_assets=copy_assets,
        conflict_dir=conflict_dir,
        rule_modules=rule_modules,
    )
    return migrate_project(
        source_root=source_root,
        output_root=output_root,
        options=options,
    )
