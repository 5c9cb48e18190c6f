"""Rewrite rules, passes and the pipeline that composes them."""

from .pipeline import (
    DEFAULT_PIPELINE,
    PipelineConfig,
    TransformationPipeline,
    build_pipeline,
    transform_source,
)
from .rules import RewritePass, RewriteRule, rule_pass

__all__ = [
    "DEFAULT_PIPELINE",
    "PipelineConfig",
    "RewritePass",
    "RewriteRule",
    "TransformationPipeline",
    "build_pipeline",
    "rule_pass",
    "transform_source",
]
