"""Plugin interfaces and registry for extra rewrite passes."""

from .base import RulePlugin
from .registry import RuleRegistry, create_default_registry

__all__ = ["RulePlugin", "RuleRegistry", "create_default_registry"]
