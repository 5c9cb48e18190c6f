"""Registry of rule plugins and loading of plugin modules."""

from __future__ import annotations

import importlib
import importlib.util
from collections.abc import Iterable
from pathlib import Path
from types import ModuleType

from solid_migrator.errors import PluginError
from solid_migrator.plugins.base import RulePlugin
from solid_migrator.rewrites.rules import RewritePass

# Entry points a plugin module may expose, checked in this order.
ENTRY_POINTS = ("register_plugins", "PLUGINS", "PLUGIN")


class RuleRegistry:
    """Named rule plugins, iterated in the order they were added."""

    def __init__(self) -> None:
        self._plugins: dict[str, RulePlugin] = {}

    def register(self, plugin: RulePlugin) -> None:
        """Add a plugin under its ``name``.

        Raises
        ------
        PluginError
            If the name is blank or taken, or ``passes`` is not callable.
        """
        name = getattr(plugin, "name", "").strip()
        if not name:
            raise PluginError("Plugin must define a non-empty 'name'.")
        if not callable(getattr(plugin, "passes", None)):
            raise PluginError(f"Plugin '{name}' must define passes().")
        if name in self._plugins:
            raise PluginError(f"Plugin '{name}' is already registered.")
        self._plugins[name] = plugin

    def names(self) -> list[str]:
        return list(self._plugins)

    def get(self, name: str) -> RulePlugin:
        """Look up a plugin by name.

        Raises
        ------
        PluginError
            If nothing is registered under ``name``.
        """
        plugin = self._plugins.get(name)
        if plugin is None:
            known = ", ".join(self._plugins) or "<none>"
            raise PluginError(f"Unknown plugin '{name}'. Available plugins: {known}")
        return plugin

    def passes(self) -> list[RewritePass]:
        """Flatten plugin passes in registration order.

        Raises
        ------
        PluginError
            If a plugin yields anything but ``RewritePass`` objects.
        """
        collected: list[RewritePass] = []
        for name, plugin in self._plugins.items():
            contributed = list(plugin.passes())
            rogue = next(
                (item for item in contributed if not isinstance(item, RewritePass)), None
            )
            if rogue is not None:
                raise PluginError(
                    f"Plugin '{name}' returned {type(rogue).__name__}, expected RewritePass."
                )
            collected.extend(contributed)
        return collected

    def load_module(self, reference: str) -> None:
        """Import ``reference`` and register the plugins it exposes.

        .. warning::
            Loading runs the module's top-level code. Only load trusted rules.
        """
        _register_from_module(_import_module_or_path(reference), self)


def _exec_file(path: Path) -> ModuleType:
    spec = importlib.util.spec_from_file_location(path.stem, path)
    if spec is None or spec.loader is None:
        raise PluginError(f"Unable to load plugin module from {path}.")
    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        raise PluginError(f"Unable to execute plugin module {path}: {exc}") from exc
    return module


def _import_module_or_path(reference: str) -> ModuleType:
    """Resolve a plugin reference to a module.

    Parameters
    ----------
    reference : str
        Path to a ``.py`` file, or a dotted module name.

    Returns
    -------
    ModuleType
        The executed module.

    Raises
    ------
    PluginError
        If the file cannot be executed or the module cannot be imported.
    """
    path = Path(reference)
    if path.exists():
        return _exec_file(path)
    try:
        return importlib.import_module(reference)
    except Exception as exc:
        raise PluginError(f"Unable to import plugin module '{reference}': {exc}") from exc


def _register_from_module(module: ModuleType, registry: RuleRegistry) -> None:
    """Register whatever the first available entry point of ``module`` provides."""
    entry = next((attr for attr in ENTRY_POINTS if hasattr(module, attr)), None)
    if entry == "register_plugins":
        module.register_plugins(registry)
    elif entry == "PLUGINS":
        for plugin in module.PLUGINS:
            registry.register(plugin)
    elif entry == "PLUGIN":
        registry.register(module.PLUGIN)
    else:
        raise PluginError(
            f"Plugin module {module.__name__} must expose one of: {', '.join(ENTRY_POINTS)}."
        )


def create_default_registry(extra_modules: Iterable[str] | None = None) -> RuleRegistry:
    """Return a registry with ``extra_modules`` loaded in order.

    No plugins ship with the package; without modules the registry is empty.
    """
    registry = RuleRegistry()
    for reference in extra_modules or ():
        registry.load_module(reference)
    return registry
