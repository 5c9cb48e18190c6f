"""Component typing and default-export rewrites."""

from __future__ import annotations

import re

from solid_migrator.rewrites.rules import RewritePass, RewriteRule, rule_pass

# `<[^>]*>` covers one level of generics, e.g. `React.FC<Props>`.
COMPONENT_TYPE_ANNOTATION = RewriteRule(
    name="component-type",
    pattern=re.compile(r":\s*(?:React\.)?FC\b(?:<[^>]*>)?"),
    replacement="",
)

_DEFAULT_EXPORT_IDENTIFIER = re.compile(
    r"^export[ \t]+default[ \t]+([A-Za-z_$][\w$]*)[ \t]*;?[ \t]*$", re.MULTILINE
)


def relocate_default_export(text: str) -> str:
    """Move ``export default Name`` onto ``function Name(``.

    Files that already use ``export default function`` are returned
    unchanged, as are files whose default export is not a function
    declaration (arrow components, classes, re-exports).
    """
    if "export default function" in text:
        return text
    match = _DEFAULT_EXPORT_IDENTIFIER.search(text)
    if match is None:
        return text
    name = match.group(1)
    declaration = re.compile(
        rf"^([ \t]*)(async\s+)?function\s+{re.escape(name)}\s*\(", re.MULTILINE
    )
    found = declaration.search(text)
    if found is None:
        return text
    text = text[: match.start()] + text[match.end():]
    return declaration.sub(
        lambda m: f"{m.group(1)}export default {m.group(2) or ''}function {name}(",
        text,
        count=1,
    )


TYPE_PASS = rule_pass(
    "component-types",
    COMPONENT_TYPE_ANNOTATION,
    description="strip React.FC / FC annotations",
)


def _export_shape(text: str) -> str:
    return relocate_default_export(TYPE_PASS(text))


EXPORT_PASS = RewritePass(
    name="export-shape",
    transform=_export_shape,
    description="strip FC annotations, export default onto the function declaration",
)
