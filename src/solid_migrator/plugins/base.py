"""Plugin protocol for project-specific rewrite passes."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from solid_migrator.rewrites.rules import RewritePass


@runtime_checkable
class RulePlugin(Protocol):
    """Protocol implemented by rule plugins."""

    name: str

    def passes(self) -> Sequence[RewritePass]:
        """Return the passes this plugin contributes.

        Returns
        -------
        Sequence[RewritePass]
            Passes run, in order, after the built-in rewrites and before
            whitespace normalisation.
        """
