"""Derive the Solid import line a rewritten file needs."""

from __future__ import annotations

import re
from dataclasses import dataclass

DEFAULT_TARGET_MODULE = "solid-js"
DEFAULT_LEGACY_MODULE = "react"

CREATE_SIGNAL = "createSignal"
CREATE_EFFECT = "createEffect"
CREATE_MEMO = "createMemo"
ON_MOUNT = "onMount"

# Also drives the effect-mount rewrite.
# The callback is captured up to its first closing brace.
MOUNT_EFFECT_PATTERN = re.compile(r"\buseEffect\(([^}]+\}),\s*\[\s*\]\)")

# Pattern order fixes the symbol order of the generated import line.
_SYMBOL_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"useState"), CREATE_SIGNAL),
    (re.compile(r"useEffect"), CREATE_EFFECT),
    (re.compile(r"useMemo"), CREATE_MEMO),
    (MOUNT_EFFECT_PATTERN, ON_MOUNT),
    # Refs are modelled as signals.
    (re.compile(r"useRef"), CREATE_SIGNAL),
)


@dataclass(frozen=True)
class ImportRequirement:
    """Target-framework symbols required by one file.

    Parameters
    ----------
    symbols : tuple[str, ...]
        Distinct symbol names in first-seen order.
    strip_legacy_imports : bool
        Whether the file still imports from the legacy module.
    target_module : str
        Module the import statement names.
    """

    symbols: tuple[str, ...] = ()
    strip_legacy_imports: bool = False
    target_module: str = DEFAULT_TARGET_MODULE

    @property
    def statement(self) -> str:
        """Render the import statement, or an empty string if none is needed."""
        if not self.symbols:
            return ""
        return f"import {{ {', '.join(self.symbols)} }} from '{self.target_module}';\n"


def legacy_import_pattern(legacy_module: str = DEFAULT_LEGACY_MODULE) -> re.Pattern[str]:
    """Return a pattern matching a whole import line from ``legacy_module``.

    Default, namespace and named imports are recognised, including a default
    followed by a named list. A braced list may span several lines. The match
    takes the trailing line ending so removing it leaves no gap.
    """
    module = re.escape(legacy_module)
    return re.compile(
        r"^[ \t]*import\s+(?:type\s+)?"
        r"(?:[A-Za-z_$][\w$]*(?:\s*,\s*\{[^}]*\})?|\*\s+as\s+[\w$]+|\{[^}]*\})"
        rf"""\s*from\s+['"]{module}['"][ \t]*;?[ \t]*(?:\r?\n|$)""",
        re.MULTILINE,
    )


def resolve_imports(
    content: str,
    *,
    target_module: str = DEFAULT_TARGET_MODULE,
    legacy_module: str = DEFAULT_LEGACY_MODULE,
) -> ImportRequirement:
    """Compute the import requirement for ``content``.

    Parameters
    ----------
    content : str
        Source text, before or after legacy-import stripping.
    target_module : str, default="solid-js"
        Module to import the Solid primitives from.
    legacy_module : str, default="react"
        Module whose imports mark the file as legacy.

    Returns
    -------
    ImportRequirement
        De-duplicated symbol set plus the legacy-strip flag.
    """
    symbols: list[str] = []
    for pattern, symbol in _SYMBOL_PATTERNS:
        if symbol not in symbols and pattern.search(content):
            symbols.append(symbol)
    return ImportRequirement(
        symbols=tuple(symbols),
        strip_legacy_imports=bool(legacy_import_pattern(legacy_module).search(content)),
        target_module=target_module,
    )
