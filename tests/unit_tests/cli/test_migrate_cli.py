"""Unit tests for CLI command behavior."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from solid_migrator.cli import cli as cli_module
from solid_migrator.errors import RewriteError

runner = CliRunner()


def test_help_shows_commands() -> None:
    """Top-level help lists every subcommand."""
    result = runner.invoke(cli_module.app, ["--help"])
    assert result.exit_code == 0
    for command in ("migrate", "transform", "discover", "rules"):
        assert command in result.output


def test_migrate_reports_summary(react_project: Path, tmp_path: Path) -> None:
    """A run prints discovery counts, per-file lines and the summary."""
    output_root = tmp_path / "solid-app"
    result = runner.invoke(
        cli_module.app,
        ["migrate", str(react_project), str(output_root), "--copy-assets"],
    )

    assert result.exit_code == 0, result.output
    assert "✔ Found 1 components" in result.output
    assert "✔ Found 1 pages" in result.output
    assert "✔ Manifest: demo-app (react ^18.2.0)" in result.output
    assert "Converted: src/components/Counter.tsx" in result.output
    assert "Copied (no conversion needed): src/utils/format.js" in result.output
    assert "Successfully converted: 2 files" in result.output
    assert "Skipped (no conversion needed): 1 files" in result.output
    assert "Failed conversions: 0 files" in result.output
    assert (output_root / "public" / "favicon.svg").is_file()
    assert not (output_root / "src" / "pages").exists()


def test_migrate_missing_source_exits_2(tmp_path: Path) -> None:
    """A missing project directory maps to exit code 2."""
    result = runner.invoke(
        cli_module.app,
        ["migrate", str(tmp_path / "missing"), str(tmp_path / "out")],
    )
    assert result.exit_code == 2
    assert "SourceNotFoundError" in result.output


def test_migrate_forwards_options(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Flags are passed through to the API layer."""
    called: dict[str, object] = {}

    def fake_migrate(**kwargs: object) -> object:
        called.update(kwargs)
        raise RewriteError("state-hook", "boom")

    monkeypatch.setattr("solid_migrator.api.migrate_directory", fake_migrate)
    result = runner.invoke(
        cli_module.app,
        [
            "migrate",
            str(tmp_path),
            str(tmp_path / "out"),
            "--source-dir",
            "source",
            "--include-pages",
            "--keep-duplicates",
            "--conflict-dir",
            str(tmp_path / "conflicts"),
            "--rule-module",
            "my_rules",
        ],
    )

    assert result.exit_code == 1
    assert "rewrite pass 'state-hook' failed: boom" in result.output
    assert called["source_dir"] == "source"
    assert called["include_pages"] is True
    assert called["keep_duplicates"] is True
    assert called["copy_assets"] is False
    assert called["conflict_dir"] == tmp_path / "conflicts"
    assert called["rule_modules"] == ["my_rules"]


def test_debug_prints_traceback(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """--debug adds the traceback to error output."""

    def fake_migrate(**kwargs: object) -> object:
        del kwargs
        raise RuntimeError("unexpected")

    monkeypatch.setattr("solid_migrator.api.migrate_directory", fake_migrate)
    result = runner.invoke(
        cli_module.app,
        ["--debug", "migrate", str(tmp_path), str(tmp_path / "out")],
    )
    assert result.exit_code == 1
    assert "RuntimeError: unexpected" in result.output
    assert "Traceback" in result.output


def test_transform_prints_to_stdout(tmp_path: Path) -> None:
    """Without --output the rewritten text is echoed."""
    source = tmp_path / "Box.jsx"
    source.write_text('import React from "react";\n<div className="box" />\n')

    result = runner.invoke(cli_module.app, ["transform", str(source)])

    assert result.exit_code == 0, result.output
    assert result.output == '<div class="box" />\n'


def test_transform_writes_output_file(tmp_path: Path) -> None:
    """--output saves the result and reports the path."""
    source = tmp_path / "Count.jsx"
    source.write_text("const [n, setN] = useState(0);\n")
    target = tmp_path / "out" / "Count.jsx"

    result = runner.invoke(cli_module.app, ["transform", str(source), "-o", str(target)])

    assert result.exit_code == 0, result.output
    assert "✓ Saved" in result.output
    assert target.read_text() == (
        "import { createSignal } from 'solid-js';\n"
        "const [n, setN] = createSignal(0);\n"
    )


def test_transform_missing_file_is_usage_error(tmp_path: Path) -> None:
    """Typer validates that the input file exists."""
    result = runner.invoke(cli_module.app, ["transform", str(tmp_path / "none.jsx")])
    assert result.exit_code == 2


def test_discover_verbose_lists_files(react_project: Path) -> None:
    """--verbose prints each bucketed path."""
    result = runner.invoke(cli_module.app, ["discover", str(react_project), "-v"])
    assert result.exit_code == 0, result.output
    assert "components: src/components/Counter.tsx" in result.output
    assert "hooks: src/hooks/useToggle.js" in result.output
    assert "Counter.test.tsx" not in result.output


def test_rules_lists_passes_in_order() -> None:
    """The rules command numbers every pass."""
    result = runner.invoke(cli_module.app, ["rules"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert len(lines) == 14
    assert lines[0].startswith(" 1. strip-directives")
    assert lines[-1].startswith("14. normalize-whitespace")


def test_rules_with_unknown_module_fails() -> None:
    """Unloadable plugin modules exit non-zero with the error."""
    result = runner.invoke(
        cli_module.app, ["rules", "--rule-module", "solid_migrator_no_such_rules"]
    )
    assert result.exit_code == 1
    assert "PluginError" in result.output
