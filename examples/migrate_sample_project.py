#!/usr/bin/env python3
"""Build a tiny React project, migrate it via the CLI, and check the output."""

from __future__ import annotations

import subprocess
import tempfile
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
PLUGIN_PATH = PROJECT_ROOT / "examples" / "router_rules_plugin.py"

SAMPLE_FILES = {
    "src/components/Nav.tsx": (
        "import React from 'react';\n"
        "import { Link } from 'react-router-dom';\n"
        "\n"
        "export default function Nav() {\n"
        '  return <nav className="nav"><Link to="/">Home</Link></nav>;\n'
        "}\n"
    ),
    "src/hooks/useClock.js": (
        "import { useState, useEffect } from 'react';\n"
        "\n"
        "export function useClock() {\n"
        "  const [now, setNow] = useState(Date.now());\n"
        "  useEffect(() => { setNow(Date.now()); }, []);\n"
        "  return now;\n"
        "}\n"
    ),
    "src/utils/format.js": "export const pad = (n) => String(n).padStart(2, '0');\n",
    "public/robots.txt": "User-agent: *\n",
}

EXPECTED_SNIPPETS = {
    "src/components/Nav.tsx": [
        "from '@solidjs/router'",
        '<nav class="nav"><A href="/">Home</A></nav>',
    ],
    "src/hooks/useClock.js": [
        "import { createSignal, createEffect, onMount } from 'solid-js';",
        "createSignal(Date.now())",
        "onMount(() => () =>",
    ],
}


def main() -> None:
    """Run the migration CLI end to end with explicit pass/fail checks."""
    with tempfile.TemporaryDirectory() as workdir:
        source_root = Path(workdir) / "react-app"
        output_root = Path(workdir) / "solid-app"
        for relative, text in SAMPLE_FILES.items():
            path = source_root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")

        command = [
            "migrate-to-solid",
            "migrate",
            str(source_root),
            str(output_root),
            "--copy-assets",
            "--rule-module",
            str(PLUGIN_PATH),
        ]
        result = subprocess.run(command, check=False, capture_output=True, text=True)
        print(result.stdout)
        if result.returncode != 0:
            raise SystemExit(f"FAIL: CLI migration failed.\n{result.stderr}")

        for relative, snippets in EXPECTED_SNIPPETS.items():
            converted = (output_root / relative).read_text(encoding="utf-8")
            missing = [snippet for snippet in snippets if snippet not in converted]
            if missing:
                raise SystemExit(f"FAIL: {relative} is missing {missing}:\n{converted}")

        if not (output_root / "public" / "robots.txt").exists():
            raise SystemExit("FAIL: public assets were not copied.")

    print("PASS: sample project migrated.")


if __name__ == "__main__":
    main()
