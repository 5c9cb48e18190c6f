"""Application use-cases orchestrating project migration."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path, PurePosixPath

from pydantic import ValidationError

from solid_migrator.application.options import MigrationOptions
from solid_migrator.application.ports import FileSystem, SourceTransformer
from solid_migrator.application.results import (
    ConversionLedger,
    Converted,
    Failed,
    MigrationResult,
    Skipped,
    SourceFile,
)
from solid_migrator.classifier import classify
from solid_migrator.discovery import DiscoveryConfig, discover
from solid_migrator.errors import (
    MigrationError,
    OutputCollisionError,
    SourceNotFoundError,
)
from solid_migrator.infrastructure.filesystem import LocalFileSystem
from solid_migrator.plugins.registry import create_default_registry
from solid_migrator.rewrites.pipeline import TransformationPipeline, build_pipeline
from solid_migrator.schemas import MigrationConfig
from solid_migrator.types import RelativePath

logger = logging.getLogger(__name__)

# Leading project segments dropped when re-rooting under the output source dir.
SOURCE_ROOT_SEGMENTS = ("src", "app")
ASSETS_TARGET = "public"


def output_path_for(relative: RelativePath, output_root: Path, source_dir: str) -> Path:
    """Map a discovered relative path to its location in the new project.

    ``src/components/Button.tsx`` and ``app/components/Button.tsx`` both land
    at ``<output_root>/<source_dir>/components/Button.tsx``, as does a root
    level ``components/Button.tsx``. ``convert_files`` rejects such clashes.
    """
    parts = PurePosixPath(relative).parts
    if len(parts) > 1 and parts[0] in SOURCE_ROOT_SEGMENTS:
        parts = parts[1:]
    return output_root.joinpath(source_dir, *parts)


def load_source_file(
    path: RelativePath, source_root: Path, filesystem: FileSystem
) -> SourceFile:
    """Read and classify one discovered file."""
    content = filesystem.read_text(source_root / path)
    verdict = classify(path, content)
    return SourceFile(
        path=path,
        content=content,
        category=verdict.category,
        eligible=verdict.eligible,
    )


def _park_conflict(
    relative: RelativePath,
    source_root: Path,
    conflict_dir: Path,
    filesystem: FileSystem,
) -> None:
    try:
        filesystem.copy_file(source_root / relative, conflict_dir / relative)
    except OSError as exc:
        logger.warning("could not copy %s to conflict dir: %s", relative, exc)


def convert_files(
    files: Iterable[RelativePath],
    *,
    source_root: Path,
    output_root: Path,
    transformer: SourceTransformer,
    filesystem: FileSystem | None = None,
    source_dir: str = "src",
    conflict_dir: Path | None = None,
) -> ConversionLedger:
    """Use-case: convert or copy each file, isolating per-file failures.

    Parameters
    ----------
    files : Iterable[str]
        Relative paths in processing order.
    source_root : Path
        Root the relative paths are resolved against.
    output_root : Path
        Root of the new project.
    transformer : SourceTransformer
        Rewrites eligible file text.
    filesystem : FileSystem | None, default=None
        File operations; defaults to the local disk.
    source_dir : str, default="src"
        Directory under ``output_root`` that receives the files.
    conflict_dir : Path | None, default=None
        If set, sources that fail are copied here for manual review.

    Returns
    -------
    ConversionLedger
        Closed ledger with exactly one outcome per input file. A file whose
        output path was already claimed by an earlier file is recorded as
        ``Failed`` and the earlier output is left in place.
    """
    filesystem = filesystem or LocalFileSystem()
    ledger = ConversionLedger()
    claimed: dict[Path, RelativePath] = {}

    for relative in files:
        target = output_path_for(relative, output_root, source_dir)
        try:
            if target in claimed:
                raise OutputCollisionError(
                    f"output path {target} already written for {claimed[target]}"
                )
            source = load_source_file(relative, source_root, filesystem)
            if not source.eligible:
                filesystem.copy_file(source_root / relative, target)
                claimed[target] = relative
                ledger.record(Skipped(path=relative, output_path=target))
                logger.debug("copied unchanged: %s", relative)
                continue
            filesystem.write_text(target, transformer.transform(source.content))
            claimed[target] = relative
            ledger.record(Converted(path=relative, output_path=target))
            logger.debug("converted: %s", relative)
        except Exception as exc:
            logger.warning("failed to convert %s: %s", relative, exc)
            ledger.record(Failed(path=relative, reason=str(exc)))
            if conflict_dir is not None:
                _park_conflict(relative, source_root, conflict_dir, filesystem)

    ledger.close()
    summary = ledger.summary()
    logger.info(
        "conversion finished: %d converted, %d skipped, %d failed",
        summary.converted,
        summary.skipped,
        summary.failed,
    )
    return ledger


def build_migration_options(
    *,
    source_dir: str = "src",
    include_pages: bool = False,
    deduplicate: bool = True,
    copy_assets: bool = False,
    conflict_dir: Path | None = None,
    rule_modules: Iterable[str] | None = None,
) -> MigrationOptions:
    """Build typed option object from command/API params."""
    return MigrationOptions(
        source_dir=source_dir,
        include_pages=include_pages,
        deduplicate=deduplicate,
        copy_assets=copy_assets,
        conflict_dir=conflict_dir,
        rule_modules=tuple(rule_modules or ()),
    )


def build_project_pipeline(rule_modules: Iterable[str] = ()) -> TransformationPipeline:
    """Build the default pipeline extended with passes from plugin modules."""
    registry = create_default_registry(extra_modules=rule_modules)
    return build_pipeline(extra_passes=registry.passes())


def migrate_project(
    *,
    source_root: Path,
    output_root: Path,
    options: MigrationOptions,
    filesystem: FileSystem | None = None,
    discovery_config: DiscoveryConfig | None = None,
    transformer: SourceTransformer | None = None,
) -> MigrationResult:
    """Use-case: discover a React project and migrate it file by file.

    Raises
    ------
    MigrationError
        If the options are invalid.
    SourceNotFoundError
        If ``source_root`` does not exist; nothing is written in that case.
    """
    try:
        config = MigrationConfig(
            source_root=source_root,
            output_root=output_root,
            source_dir=options.source_dir,
            include_pages=options.include_pages,
            deduplicate=options.deduplicate,
            copy_assets=options.copy_assets,
            conflict_dir=options.conflict_dir,
            rule_modules=options.rule_modules,
        )
    except ValidationError as exc:
        raise MigrationError(f"Invalid migration parameters: {exc}") from exc

    filesystem = filesystem or LocalFileSystem()
    if not filesystem.exists(config.source_root):
        raise SourceNotFoundError(
            f"Source directory not found at {config.source_root}"
        )

    transformer = transformer or build_project_pipeline(config.rule_modules)
    discovery_config = discovery_config or DiscoveryConfig(deduplicate=config.deduplicate)
    structure = discover(config.source_root, discovery_config)

    assets_copied_to: Path | None = None
    if config.copy_assets and structure.assets_dir is not None:
        assets_copied_to = config.output_root / ASSETS_TARGET
        filesystem.copy_tree(config.source_root / structure.assets_dir, assets_copied_to)
        logger.info("copied assets %s -> %s", structure.assets_dir, assets_copied_to)

    ledger = convert_files(
        structure.scheduled(include_pages=config.include_pages),
        source_root=config.source_root,
        output_root=config.output_root,
        transformer=transformer,
        filesystem=filesystem,
        source_dir=config.source_dir,
        conflict_dir=config.conflict_dir,
    )
    return MigrationResult(
        source_root=config.source_root,
        output_root=config.output_root,
        structure=structure,
        ledger=ledger,
        assets_copied_to=assets_copied_to,
    )
