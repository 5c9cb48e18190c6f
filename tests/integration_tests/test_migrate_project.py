"""Integration tests running discovery, rewriting and file output together."""

from __future__ import annotations

from pathlib import Path

from solid_migrator import migrate_project
from solid_migrator.api import migrate_directory, transform_file

SOLID_COUNTER = """import { createSignal, createEffect } from 'solid-js';

const Counter = ({ start }) => {
  const [count, setCount] = createSignal(start);
  createEffect(() => () => { console.log(count); });
  return <button class="counter" onClick={() => setCount(count + 1)}>{count}</button>;
};

export default Counter;
"""

SOLID_TOGGLE = """import { createSignal } from 'solid-js';

export function useToggle(initial = false) {
  const [on, setOn] = createSignal(initial);
  return [on, () => setOn(!on)];
}
"""


def test_project_is_migrated_file_by_file(react_project: Path, tmp_path: Path) -> None:
    """Components and hooks are rewritten, utilities copied, pages left out."""
    output_root = tmp_path / "solid-app"

    result = migrate_project(react_project, output_root)

    src = output_root / "src"
    assert (src / "components/Counter.tsx").read_text(encoding="utf-8") == SOLID_COUNTER
    assert (src / "hooks/useToggle.js").read_text(encoding="utf-8") == SOLID_TOGGLE
    assert (src / "utils/format.js").read_bytes() == (
        react_project / "src/utils/format.js"
    ).read_bytes()
    assert not (src / "pages").exists()
    assert not (src / "components/Counter.test.tsx").exists()
    assert not (output_root / "public").exists()

    summary = result.ledger.summary()
    assert (summary.converted, summary.skipped, summary.failed) == (2, 1, 0)
    assert result.ledger.closed
    assert result.structure.manifest is not None


def test_pages_assets_and_custom_source_dir(react_project: Path, tmp_path: Path) -> None:
    """Optional pages, asset copying and source dir all apply."""
    output_root = tmp_path / "solid-app"

    result = migrate_directory(
        react_project,
        output_root,
        source_dir="source",
        include_pages=True,
        copy_assets=True,
    )

    assert result.assets_copied_to == output_root / "public"
    assert (output_root / "public/favicon.svg").read_text(encoding="utf-8") == "<svg />\n"
    page = (output_root / "source/pages/index.jsx").read_text(encoding="utf-8")
    assert page == "export default () => <main />;\n"
    assert [outcome.path for outcome in result.ledger][-1] == "src/pages/index.jsx"


def test_migration_is_idempotent_on_its_output(react_project: Path, tmp_path: Path) -> None:
    """Migrating an already-migrated tree copies text through unchanged."""
    first = tmp_path / "first"
    second = tmp_path / "second"

    migrate_project(react_project, first)
    migrate_project(first, second)

    for relative in ("src/components/Counter.tsx", "src/hooks/useToggle.js"):
        assert (second / relative).read_text(encoding="utf-8") == (
            first / relative
        ).read_text(encoding="utf-8")


def test_colliding_output_paths_keep_the_first_file(write_tree, tmp_path: Path) -> None:
    """A root-level twin of a src/ file is reported instead of overwriting it."""
    root = write_tree(
        {
            "src/components/Card.tsx": "export const origin = 'src';\n",
            "components/Card.tsx": "export const origin = 'root';\n",
        }
    )
    output_root = tmp_path / "out"

    result = migrate_project(root, output_root)

    card = output_root / "src/components/Card.tsx"
    assert card.read_text(encoding="utf-8") == "export const origin = 'src';\n"
    summary = result.ledger.summary()
    assert (summary.converted, summary.skipped, summary.failed) == (0, 1, 1)
    assert summary.failures[0].path == "components/Card.tsx"
    assert "already written" in summary.failures[0].reason


def test_plugin_module_extends_the_run(write_tree, tmp_path: Path) -> None:
    """Rule modules given by path contribute passes to the pipeline."""
    root = write_tree(
        {"src/components/Nav.jsx": "import React from 'react';\n<NavLink to='/' />\n"}
    )
    plugin = tmp_path / "router_rules.py"
    plugin.write_text(
        "import re\n"
        "from solid_migrator.rewrites.rules import RewriteRule, rule_pass\n"
        "\n"
        "class Router:\n"
        "    name = 'router'\n"
        "    def passes(self):\n"
        "        return [rule_pass('router-links', RewriteRule(\n"
        "            'nav', re.compile(r'\\bNavLink\\b'), 'A'))]\n"
        "\n"
        "def register_plugins(registry):\n"
        "    registry.register(Router())\n",
        encoding="utf-8",
    )

    migrate_directory(root, tmp_path / "out", rule_modules=[str(plugin)])

    converted = (tmp_path / "out/src/components/Nav.jsx").read_text(encoding="utf-8")
    assert converted == "<A to='/' />\n"


def test_transform_file_round_trip(tmp_path: Path) -> None:
    """Single-file API writes exactly what it returns."""
    source = tmp_path / "Input.jsx"
    source.write_text(
        "const Input = () => <input value={text} onChange={setText} />;\n",
        encoding="utf-8",
    )
    target = tmp_path / "nested/Input.jsx"

    converted = transform_file(source, target)

    assert converted == "const Input = () => <input value={text()} onInput={setText} />;\n"
    assert target.read_text(encoding="utf-8") == converted
