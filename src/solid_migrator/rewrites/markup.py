"""JSX attribute and event-binding rewrites."""

from __future__ import annotations

import re

from solid_migrator.rewrites.rules import RewriteRule, rule_pass

CLASS_NAME = RewriteRule(
    name="className",
    pattern=re.compile(r"\bclassName="),
    replacement="class=",
)

HTML_FOR = RewriteRule(
    name="htmlFor",
    pattern=re.compile(r"\bhtmlFor="),
    replacement="for=",
)

# Only bare identifier keys at the start of an entry are quoted, so a
# second run leaves already-quoted keys alone.
_STYLE_KEY = re.compile(r"(^|,)(\s*)([A-Za-z_$][\w$]*)(\s*):")


def _quote_style_keys(match: re.Match[str]) -> str:
    body = _STYLE_KEY.sub(r'\1\2"\3"\4:', match.group(1))
    return "style={{" + body + "}}"


STYLE_OBJECT = RewriteRule(
    name="style-object",
    pattern=re.compile(r"style=\{\{([^}]+)\}\}"),
    replacement=_quote_style_keys,
)

CONTROLLED_INPUT = RewriteRule(
    name="controlled-input",
    pattern=re.compile(r"value=\{([^}]+)\}\s+onChange=\{([^}]+)\}"),
    replacement=r"value={\1()} onInput={\2}",
)

ATTRIBUTE_PASS = rule_pass(
    "jsx-attributes",
    CLASS_NAME,
    HTML_FOR,
    STYLE_OBJECT,
    description="className/htmlFor renames, quoted style keys",
)

EVENT_PASS = rule_pass(
    "controlled-input",
    CONTROLLED_INPUT,
    description="value={x} onChange={f} -> value={x()} onInput={f}",
)
