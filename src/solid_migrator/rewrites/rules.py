"""Declarative rewrite rules and the passes built from them."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from solid_migrator.types import TextTransform

type Replacement = str | Callable[[re.Match[str]], str]


@dataclass(frozen=True)
class RewriteRule:
    """A named pattern/replacement pair.

    A rule's replacement must not reintroduce text its own pattern matches,
    so applying a rule to its own output is a no-op.
    """

    name: str
    pattern: re.Pattern[str]
    replacement: Replacement

    def apply(self, text: str) -> str:
        """Substitute every match of the pattern in ``text``."""
        return self.pattern.sub(self.replacement, text)


@dataclass(frozen=True)
class RewritePass:
    """One named step of the transformation pipeline."""

    name: str
    transform: TextTransform
    description: str = ""

    def __call__(self, text: str) -> str:
        return self.transform(text)


def rule_pass(name: str, *rules: RewriteRule, description: str = "") -> RewritePass:
    """Build a pass that applies ``rules`` in order.

    Parameters
    ----------
    name : str
        Pass name shown in logs and errors.
    *rules : RewriteRule
        Rules applied left to right.
    description : str, optional
        Human-readable summary for ``migrate-to-solid rules``.

    Returns
    -------
    RewritePass
        Pass wrapping the rule sequence.
    """

    def _apply(text: str) -> str:
        for rule in rules:
            text = rule.apply(text)
        return text

    return RewritePass(name=name, transform=_apply, description=description)
