#!/usr/bin/env python3
"""
solid_migrator.cli.cli

Typer-based CLI for migrating React sources to SolidJS without any API.

Examples
--------
Migrate a project:

    migrate-to-solid migrate ./my-react-app ./my-solid-app --copy-assets

Preview a single file:

    migrate-to-solid transform src/components/Counter.tsx
"""

from __future__ import annotations

import logging
import traceback
from pathlib import Path

import typer

from solid_migrator.application.results import (
    ConversionLedger,
    Converted,
    Failed,
    Skipped,
)
from solid_migrator.discovery import ProjectStructure
from solid_migrator.errors import MigrationError

app = typer.Typer(
    name="migrate-to-solid",
    help="Migrate React components to SolidJS with local rewrite rules.",
    no_args_is_help=True,
)

RULE_MODULE_HELP = "Python module or file path providing extra rewrite passes (repeatable)."


def _print_migration_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly migration error.

    Parameters
    ----------
    exc : Exception
        Exception raised while migrating.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _echo_structure(structure: ProjectStructure) -> None:
    counts = structure.counts()
    typer.echo(f"✔ Found {counts['components']} components")
    typer.echo(f"✔ Found {counts['hooks']} hooks")
    typer.echo(f"✔ Found {counts['utils']} utilities")
    typer.echo(f"✔ Found {counts['pages']} pages")
    if structure.assets_dir:
        typer.echo(f"✔ Found public assets at: {structure.assets_dir}")
    if structure.manifest is not None:
        name = structure.manifest.name or "<unnamed>"
        react = structure.manifest.legacy_framework_version or "<not declared>"
        typer.echo(f"✔ Manifest: {name} (react {react})")


def _echo_ledger(ledger: ConversionLedger) -> None:
    for outcome in ledger:
        if isinstance(outcome, Converted):
            typer.echo(f"Converted: {outcome.path}")
        elif isinstance(outcome, Skipped):
            typer.echo(f"Copied (no conversion needed): {outcome.path}")
        elif isinstance(outcome, Failed):
            typer.echo(f"Failed: {outcome.path} - {outcome.reason}", err=True)

    summary = ledger.summary()
    typer.echo("")
    typer.echo(f"Successfully converted: {summary.converted} files")
    typer.echo(f"Skipped (no conversion needed): {summary.skipped} files")
    typer.echo(f"Failed conversions: {summary.failed} files")
    if summary.failures:
        typer.echo("\nFailed files (review manually):")
        for failure in summary.failures:
            typer.echo(f"  • {failure.path}: {failure.reason}")


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False, "--debug", help="Show full tracebacks and debug logging."
    ),
) -> None:
    """Initialize shared CLI state.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug error output.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("migrate")
def migrate_cmd(
    ctx: typer.Context,
    source_root: Path = typer.Argument(
        ..., help="Existing React project directory."
    ),
    output_root: Path = typer.Argument(..., help="Directory for the SolidJS project."),
    source_dir: str = typer.Option(
        "src", "--source-dir", help="Source directory inside the new project."
    ),
    include_pages: bool = typer.Option(
        False, "--include-pages", help="Also convert files under pages/."
    ),
    keep_duplicates: bool = typer.Option(
        False,
        "--keep-duplicates",
        help="Process a file once per glob pattern that matched it.",
    ),
    copy_assets: bool = typer.Option(
        False, "--copy-assets", help="Copy the public assets directory as well."
    ),
    conflict_dir: Path | None = typer.Option(
        None,
        "--conflict-dir",
        help="Copy sources that fail to convert into this directory.",
    ),
    rule_module: list[str] | None = typer.Option(
        None, "--rule-module", help=RULE_MODULE_HELP
    ),
) -> None:
    """Convert every discovered component, hook and utility file.

    Parameters
    ----------
    ctx : typer.Context
        Typer context containing global options.
    source_root : Path
        React project root.
    output_root : Path
        New project root.

    Notes
    -----
    - Per-file failures are listed in the summary and do not stop the run.
    - A missing source directory aborts with exit code 2.
    """
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from solid_migrator.api import migrate_directory

        typer.echo(f"Analyzing {source_root} ...")
        result = migrate_directory(
            source_root=source_root,
            output_root=output_root,
            source_dir=source_dir,
            include_pages=include_pages,
            keep_duplicates=keep_duplicates,
            copy_assets=copy_assets,
            conflict_dir=conflict_dir,
            rule_modules=rule_module,
        )
        _echo_structure(result.structure)
        if result.assets_copied_to is not None:
            typer.echo(f"✔ Public assets copied to {result.assets_copied_to}")
        _echo_ledger(result.ledger)
        typer.echo(f"\nProject written to: {result.output_root}")
    except MigrationError as exc:
        raise typer.Exit(code=_print_migration_error(exc, debug))
    except Exception as exc:
        raise typer.Exit(code=_print_migration_error(exc, debug))


@app.command("transform")
def transform_cmd(
    ctx: typer.Context,
    source_path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="React source file to rewrite.",
    ),
    output_path: Path | None = typer.Option(
        None, "--output", "-o", help="Write the result here instead of stdout."
    ),
    rule_module: list[str] | None = typer.Option(
        None, "--rule-module", help=RULE_MODULE_HELP
    ),
) -> None:
    """Rewrite a single file and print or save the result."""
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from solid_migrator.api import transform_file

        converted = transform_file(
            source_path=source_path,
            output_path=output_path,
            rule_modules=rule_module,
        )
        if output_path is None:
            typer.echo(converted, nl=False)
        else:
            typer.echo(f"✓ Saved: {output_path}")
    except MigrationError as exc:
        raise typer.Exit(code=_print_migration_error(exc, debug))
    except Exception as exc:
        raise typer.Exit(code=_print_migration_error(exc, debug))


@app.command("discover")
def discover_cmd(
    ctx: typer.Context,
    source_root: Path = typer.Argument(..., help="React project directory to scan."),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="List every discovered file."
    ),
) -> None:
    """Show which files a migration would pick up."""
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from solid_migrator.api import discover_project

        structure = discover_project(source_root)
    except MigrationError as exc:
        raise typer.Exit(code=_print_migration_error(exc, debug))

    _echo_structure(structure)
    if verbose:
        for bucket in ("components", "hooks", "utils", "pages"):
            for path in getattr(structure, bucket):
                typer.echo(f"{bucket}: {path}")


@app.command("rules")
def rules_cmd(
    ctx: typer.Context,
    rule_module: list[str] | None = typer.Option(
        None, "--rule-module", help=RULE_MODULE_HELP
    ),
) -> None:
    """List rewrite passes in execution order."""
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from solid_migrator.application.use_cases import build_project_pipeline

        pipeline = build_project_pipeline(rule_module or ())
    except MigrationError as exc:
        raise typer.Exit(code=_print_migration_error(exc, debug))

    for index, rewrite in enumerate(pipeline.passes, start=1):
        line = f"{index:2d}. {rewrite.name}"
        if rewrite.description:
            line += f" - {rewrite.description}"
        typer.echo(line)


if __name__ == "__main__":
    app()
