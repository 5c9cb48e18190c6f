"""Unit tests for Solid import resolution."""

from __future__ import annotations

from solid_migrator.imports import ImportRequirement, resolve_imports


def test_state_hook_requires_create_signal() -> None:
    """useState maps to createSignal."""
    requirement = resolve_imports("const [a, setA] = useState(0);")
    assert requirement.symbols == ("createSignal",)
    assert requirement.statement == "import { createSignal } from 'solid-js';\n"


def test_mount_effect_adds_on_mount_alongside_create_effect() -> None:
    """An empty dependency list adds onMount without dropping createEffect."""
    requirement = resolve_imports("useEffect(() => { go(); }, []);")
    assert requirement.symbols == ("createEffect", "onMount")


def test_symbols_are_unique_and_ordered() -> None:
    """State and ref both need createSignal, listed once in pattern order."""
    content = (
        "const el = useRef(null);\n"
        "const total = useMemo(() => { return 1; }, []);\n"
        "const [a, setA] = useState(0);\n"
    )
    assert resolve_imports(content).symbols == ("createSignal", "createMemo")


def test_ref_only_still_imports_signal() -> None:
    """Refs are modelled as signals."""
    assert resolve_imports("const box = useRef();").symbols == ("createSignal",)


def test_no_hooks_means_no_statement() -> None:
    """Plain code needs no import line."""
    requirement = resolve_imports("export const x = 1;\n")
    assert requirement == ImportRequirement()
    assert requirement.statement == ""


def test_legacy_import_flag() -> None:
    """Detect imports from the legacy module only."""
    assert resolve_imports("import React from 'react';\n").strip_legacy_imports
    assert resolve_imports('import { useState } from "react"\n').strip_legacy_imports
    assert not resolve_imports("import x from 'react-dom';\n").strip_legacy_imports
    assert not resolve_imports("import { createSignal } from 'solid-js';\n").strip_legacy_imports


def test_custom_target_module() -> None:
    """The target module is configurable."""
    requirement = resolve_imports("useMemo(f)", target_module="solid-js/web")
    assert requirement.statement == "import { createMemo } from 'solid-js/web';\n"


def test_multiline_named_import_is_flagged() -> None:
    """A braced import list spread over several lines still counts."""
    content = "import {\n  useState,\n  useEffect,\n} from 'react';\n"
    assert resolve_imports(content).strip_legacy_imports


def test_default_with_named_list_is_flagged() -> None:
    """``import Default, { ... }`` may also wrap its braces."""
    content = "import React, {\n  useMemo,\n} from \"react\";\n"
    assert resolve_imports(content).strip_legacy_imports


def test_mount_effect_with_commas_in_body_adds_on_mount() -> None:
    """Commas inside the callback do not hide the empty dependency list."""
    requirement = resolve_imports("useEffect(() => { track('view', id); }, []);")
    assert requirement.symbols == ("createEffect", "onMount")


def test_mount_effect_without_block_body_skips_on_mount() -> None:
    """A bare callback reference is renamed to createEffect, not onMount."""
    assert resolve_imports("useEffect(fetchData, []);").symbols == ("createEffect",)
