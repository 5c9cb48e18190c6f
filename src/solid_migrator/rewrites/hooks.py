"""Rewrites for React hooks: state, refs, effects and memos."""

from __future__ import annotations

import re

from solid_migrator.imports import MOUNT_EFFECT_PATTERN
from solid_migrator.rewrites.rules import RewritePass, RewriteRule, rule_pass

STATE_HOOK = RewriteRule(
    name="useState",
    pattern=re.compile(
        r"\b(const|let)\s+\[\s*([^,\]]+?)\s*,\s*([^\]]+?)\s*\]\s*=\s*"
        r"useState(<[^>]*>)?\(([^)]*)\)"
    ),
    replacement=r"\1 [\2, \3] = createSignal\4(\5)",
)


def _ref_to_signal(match: re.Match[str]) -> str:
    keyword, name, generic, argument = match.group(1, 2, 3, 4)
    setter = "set" + name[:1].upper() + name[1:]
    return f"{keyword} [{name}, {setter}] = createSignal{generic or ''}({argument})"


REF_HOOK = RewriteRule(
    name="useRef",
    pattern=re.compile(
        r"(?<![\w$])(const|let)\s+([A-Za-z_$][\w$]*)\s*=\s*"
        r"useRef(<[^>]*>)?\(([^)]*)\)"
    ),
    replacement=_ref_to_signal,
)

# Callback bodies are captured up to the first closing brace, so effects
# with nested blocks fall through to the bare rename.
EFFECT_MOUNT = RewriteRule(
    name="useEffect-mount",
    pattern=MOUNT_EFFECT_PATTERN,
    replacement=r"onMount(() => \1)",
)

EFFECT_DEPS = RewriteRule(
    name="useEffect-deps",
    pattern=re.compile(r"\buseEffect\(([^}]+\}),\s*\[[^\]]*\]\)"),
    replacement=r"createEffect(() => \1)",
)

EFFECT_BARE = RewriteRule(
    name="useEffect-bare",
    pattern=re.compile(r"\buseEffect\("),
    replacement="createEffect(",
)

MEMO_DEPS = RewriteRule(
    name="useMemo-deps",
    pattern=re.compile(r"\buseMemo\(([^}]+\}),\s*\[[^\]]*\]\)"),
    replacement=r"createMemo(() => \1)",
)

MEMO_BARE = RewriteRule(
    name="useMemo-bare",
    pattern=re.compile(r"\buseMemo\("),
    replacement="createMemo(",
)

# No scope awareness: any `x.current` becomes `x()`. Names may start with `$`.
REF_CURRENT = RewriteRule(
    name="ref-current",
    pattern=re.compile(r"(?<![\w$])([A-Za-z_$][\w$]*)\.current\b"),
    replacement=r"\1()",
)


STATE_PASS = rule_pass(
    "state-hook", STATE_HOOK, description="useState destructuring -> createSignal"
)
REF_PASS = rule_pass(
    "ref-hook", REF_HOOK, description="useRef binding -> [name, setName] signal"
)
EFFECT_MOUNT_PASS = rule_pass(
    "effect-mount", EFFECT_MOUNT, description="useEffect(fn, []) -> onMount"
)
EFFECT_DEPS_PASS = rule_pass(
    "effect-deps", EFFECT_DEPS, description="useEffect(fn, [deps]) -> createEffect"
)
EFFECT_BARE_PASS = rule_pass(
    "effect-bare", EFFECT_BARE, description="remaining useEffect( -> createEffect("
)
MEMO_PASS = rule_pass(
    "memo-hook", MEMO_DEPS, MEMO_BARE, description="useMemo -> createMemo"
)
REF_CURRENT_PASS = rule_pass(
    "ref-current", REF_CURRENT, description="ref.current -> ref()"
)

HOOK_PASSES: tuple[RewritePass, ...] = (
    STATE_PASS,
    REF_PASS,
    EFFECT_MOUNT_PASS,
    EFFECT_DEPS_PASS,
    EFFECT_BARE_PASS,
    MEMO_PASS,
    REF_CURRENT_PASS,
)
