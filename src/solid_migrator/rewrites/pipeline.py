"""Composition of rewrite passes into the React-to-Solid pipeline."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

from solid_migrator.errors import RewriteError
from solid_migrator.imports import (
    DEFAULT_LEGACY_MODULE,
    DEFAULT_TARGET_MODULE,
    legacy_import_pattern,
    resolve_imports,
)
from solid_migrator.rewrites.exports import EXPORT_PASS
from solid_migrator.rewrites.hooks import HOOK_PASSES
from solid_migrator.rewrites.markup import ATTRIBUTE_PASS, EVENT_PASS
from solid_migrator.rewrites.rules import RewritePass, RewriteRule, rule_pass

logger = logging.getLogger(__name__)

NORMALIZE_PASS_NAME = "normalize-whitespace"


@dataclass(frozen=True)
class PipelineConfig:
    """Module names the import passes read and write."""

    target_module: str = DEFAULT_TARGET_MODULE
    legacy_module: str = DEFAULT_LEGACY_MODULE


CLIENT_DIRECTIVE = RewriteRule(
    name="use-client",
    pattern=re.compile(
        r"""^[ \t]*(['"])use client\1[ \t]*;?[ \t]*(?:\r?\n|$)""", re.MULTILINE
    ),
    replacement="",
)

# Keeps the file's own line ending, LF or CRLF.
BLANK_LINES = RewriteRule(
    name="blank-lines",
    pattern=re.compile(r"(\r?\n)(?:\r?\n){2,}"),
    replacement=r"\1\1",
)

DIRECTIVE_PASS = rule_pass(
    "strip-directives", CLIENT_DIRECTIVE, description="drop 'use client' lines"
)
WHITESPACE_PASS = rule_pass(
    NORMALIZE_PASS_NAME, BLANK_LINES, description="collapse runs of blank lines"
)


def _legacy_import_rule(legacy_module: str) -> RewriteRule:
    return RewriteRule(
        name="legacy-imports",
        pattern=legacy_import_pattern(legacy_module),
        replacement="",
    )


def _import_passes(config: PipelineConfig) -> tuple[RewritePass, RewritePass]:
    legacy_rule = _legacy_import_rule(config.legacy_module)

    def _strip_legacy(text: str) -> str:
        requirement = resolve_imports(
            text,
            target_module=config.target_module,
            legacy_module=config.legacy_module,
        )
        if not requirement.strip_legacy_imports:
            return text
        return legacy_rule.apply(text)

    def _prepend(text: str) -> str:
        requirement = resolve_imports(
            text,
            target_module=config.target_module,
            legacy_module=config.legacy_module,
        )
        return requirement.statement + text

    return (
        RewritePass(
            "strip-legacy-imports",
            _strip_legacy,
            description=f"remove imports from '{config.legacy_module}'",
        ),
        RewritePass(
            "prepend-imports",
            _prepend,
            description=f"add the needed '{config.target_module}' import line",
        ),
    )


@dataclass(frozen=True)
class TransformationPipeline:
    """Ordered, immutable sequence of rewrite passes composed left to right."""

    passes: tuple[RewritePass, ...]

    def names(self) -> list[str]:
        """Return pass names in execution order."""
        return [rewrite.name for rewrite in self.passes]

    def transform(self, text: str) -> str:
        """Run every pass over ``text``.

        Raises
        ------
        RewriteError
            If any pass raises; the error names the failing pass.
        """
        for rewrite in self.passes:
            try:
                result = rewrite(text)
            except Exception as exc:
                raise RewriteError(rewrite.name, str(exc)) from exc
            if result != text:
                logger.debug("pass %s rewrote %d chars", rewrite.name, len(text))
            text = result
        return text

    def __call__(self, text: str) -> str:
        return self.transform(text)

    def with_passes(self, extra: Iterable[RewritePass]) -> TransformationPipeline:
        """Return a pipeline with ``extra`` inserted before whitespace normalisation."""
        extra = tuple(extra)
        if not extra:
            return self
        names = self.names()
        if NORMALIZE_PASS_NAME in names:
            index = names.index(NORMALIZE_PASS_NAME)
        else:
            index = len(self.passes)
        return TransformationPipeline(self.passes[:index] + extra + self.passes[index:])


def build_pipeline(
    config: PipelineConfig | None = None,
    extra_passes: Iterable[RewritePass] = (),
) -> TransformationPipeline:
    """Build the standard fourteen-pass pipeline.

    Parameters
    ----------
    config : PipelineConfig | None, default=None
        Module names; defaults to React -> ``solid-js``.
    extra_passes : Iterable[RewritePass], optional
        Plugin passes run just before whitespace normalisation.

    Returns
    -------
    TransformationPipeline
        Ready-to-use pipeline.
    """
    config = config or PipelineConfig()
    strip_legacy, prepend = _import_passes(config)
    pipeline = TransformationPipeline(
        (
            DIRECTIVE_PASS,
            strip_legacy,
            prepend,
            *HOOK_PASSES,
            ATTRIBUTE_PASS,
            EVENT_PASS,
            EXPORT_PASS,
            WHITESPACE_PASS,
        )
    )
    return pipeline.with_passes(extra_passes)


DEFAULT_PIPELINE = build_pipeline()


def transform_source(text: str) -> str:
    """Rewrite React source text into Solid source text."""
    return DEFAULT_PIPELINE.transform(text)
