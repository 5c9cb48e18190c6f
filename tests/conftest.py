"""Shared pytest configuration, marker assignment and project fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from pathlib import Path

import pytest

COUNTER_COMPONENT = """'use client';
import React, { useState, useEffect } from 'react';

const Counter: React.FC<{ start: number }> = ({ start }) => {
  const [count, setCount] = useState(start);
  useEffect(() => { console.log(count); }, [count]);
  return <button className="counter" onClick={() => setCount(count + 1)}>{count}</button>;
};

export default Counter;
"""

PLAIN_UTILITY = """export function formatPrice(value) {
  return `$${value.toFixed(2)}`;
}
"""

USE_TOGGLE_HOOK = """import { useState } from 'react';

export function useToggle(initial = false) {
  const [on, setOn] = useState(initial);
  return [on, () => setOn(!on)];
}
"""

type TreeWriter = Callable[[Mapping[str, str]], Path]


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def write_tree(tmp_path: Path) -> TreeWriter:
    """Return a helper writing ``{relative_path: text}`` under a fresh root."""

    def _write(files: Mapping[str, str]) -> Path:
        root = tmp_path / "react-app"
        root.mkdir(exist_ok=True)
        for relative, text in files.items():
            target = root / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(text, encoding="utf-8")
        return root

    return _write


@pytest.fixture
def react_project(write_tree: TreeWriter) -> Path:
    """Small React project with one file per outcome kind."""
    return write_tree(
        {
            "src/components/Counter.tsx": COUNTER_COMPONENT,
            "src/components/Counter.test.tsx": "test('x', () => {});\n",
            "src/hooks/useToggle.js": USE_TOGGLE_HOOK,
            "src/utils/format.js": PLAIN_UTILITY,
            "src/pages/index.jsx": "import React from 'react';\nexport default () => <main />;\n",
            "public/favicon.svg": "<svg />\n",
            "package.json": json.dumps(
                {"name": "demo-app", "dependencies": {"react": "^18.2.0"}}
            ),
        }
    )
