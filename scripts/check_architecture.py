#!/usr/bin/env python3
"""Architecture boundary and orchestrator size checks."""

from __future__ import annotations

import ast
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/solid_migrator"
USE_CASES = PACKAGE / "application/use_cases.py"
MAX_STATEMENTS = 40

# Rewrites are pure text transforms: no CLI, no disk access.
PURE_LAYERS = {
    "rewrites": ["import typer", "from typer", "import shutil", "infrastructure"],
    "application": ["import typer", "from typer", "import shutil"],
}
PURE_MODULES = {
    "classifier.py": ["import typer", "from typer", "pathlib", "open("],
    "imports.py": ["import typer", "from typer", "pathlib", "open("],
}


def _banned_tokens(path: Path, banned: list[str]) -> list[str]:
    text = path.read_text(encoding="utf-8")
    return [f"{path.relative_to(ROOT)}: found '{token}'" for token in banned if token in text]


def _oversized_functions(path: Path) -> list[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"))
    return [
        f"{path.relative_to(ROOT)}: {node.name} has {len(node.body)} statements"
        for node in tree.body
        if isinstance(node, ast.FunctionDef) and len(node.body) > MAX_STATEMENTS
    ]


def main() -> None:
    """Run repository architecture checks."""
    violations: list[str] = []
    for layer, banned in PURE_LAYERS.items():
        for path in sorted((PACKAGE / layer).glob("*.py")):
            violations.extend(_banned_tokens(path, banned))
    for name, banned in PURE_MODULES.items():
        violations.extend(_banned_tokens(PACKAGE / name, banned))
    violations.extend(_oversized_functions(USE_CASES))

    if violations:
        raise SystemExit(
            "Architecture violations:\n" + "\n".join(f"- {item}" for item in violations)
        )
    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
