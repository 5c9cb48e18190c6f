"""Locate React source files, assets and the manifest in a project tree."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from fnmatch import fnmatch
from pathlib import Path

from pydantic import ValidationError

from solid_migrator.classifier import category_for_path
from solid_migrator.errors import DiscoveryError, SourceNotFoundError
from solid_migrator.schemas import PackageManifest
from solid_migrator.types import FileCategory, RelativePath

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiscoveryConfig:
    """Glob layout scanned under the project root.

    Patterns are generated as ``<dir>/<kind>/**/*.<ext>`` for every
    directory, in ``kinds`` order, then ``roots`` order. An empty root
    means the project root itself.
    """

    roots: tuple[str, ...] = ("src", "app", "")
    kinds: tuple[str, ...] = ("components", "hooks", "utils", "lib", "pages")
    extensions: tuple[str, ...] = ("tsx", "jsx", "js")
    ignored_names: tuple[str, ...] = ("*.stories.*", "*.test.*", "*.spec.*")
    ignored_dirs: tuple[str, ...] = ("node_modules",)
    asset_candidates: tuple[str, ...] = ("public", "app/public", "src/public")
    manifest_name: str = "package.json"
    deduplicate: bool = True

    def patterns(self) -> list[str]:
        """Return the glob patterns in scan order."""
        ext_group = ",".join(self.extensions)
        patterns: list[str] = []
        for kind in self.kinds:
            for root in self.roots:
                prefix = f"{root}/{kind}" if root else kind
                patterns.append(f"{prefix}/**/*.{{{ext_group}}}")
        return patterns

    def is_ignored(self, relative: RelativePath) -> bool:
        """Return whether a matched path is a story, test or vendored file."""
        parts = relative.split("/")
        if any(part in self.ignored_dirs for part in parts[:-1]):
            return True
        return any(fnmatch(parts[-1], pattern) for pattern in self.ignored_names)


@dataclass
class ProjectStructure:
    """Discovered source files bucketed by category."""

    components: list[RelativePath] = field(default_factory=list)
    hooks: list[RelativePath] = field(default_factory=list)
    utils: list[RelativePath] = field(default_factory=list)
    pages: list[RelativePath] = field(default_factory=list)
    assets_dir: str | None = None
    manifest: PackageManifest | None = None

    def bucket(self, category: FileCategory) -> list[RelativePath]:
        """Return the list a category is filed under."""
        return getattr(self, category.bucket.value)

    def counts(self) -> dict[str, int]:
        """Return the number of files per bucket."""
        return {
            "components": len(self.components),
            "hooks": len(self.hooks),
            "utils": len(self.utils),
            "pages": len(self.pages),
        }

    def scheduled(self, include_pages: bool = False) -> list[RelativePath]:
        """Return files in conversion order: components, hooks, utils[, pages]."""
        files = [*self.components, *self.hooks, *self.utils]
        if include_pages:
            files.extend(self.pages)
        return files


def _expand_braces(pattern: str) -> list[str]:
    head, sep, rest = pattern.partition("{")
    if not sep:
        return [pattern]
    options, _, tail = rest.partition("}")
    return [head + option + tail for option in options.split(",")]


def _glob(root: Path, pattern: str) -> list[RelativePath]:
    matches: set[RelativePath] = set()
    for expanded in _expand_braces(pattern):
        for path in root.glob(expanded):
            if path.is_file():
                matches.add(path.relative_to(root).as_posix())
    return sorted(matches)


def find_assets_dir(root: Path, candidates: tuple[str, ...]) -> str | None:
    """Return the first candidate asset directory that exists."""
    for candidate in candidates:
        if (root / candidate).is_dir():
            return candidate
    return None


def load_manifest(path: Path) -> PackageManifest | None:
    """Parse ``package.json`` if present.

    Unreadable or invalid manifests are logged and treated as absent.
    """
    if not path.is_file():
        return None
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
        return PackageManifest.model_validate(payload)
    except (OSError, ValueError, ValidationError) as exc:
        logger.warning("ignoring unreadable manifest %s: %s", path, exc)
        return None


def discover(root: Path, config: DiscoveryConfig | None = None) -> ProjectStructure:
    """Scan ``root`` for convertible files.

    Parameters
    ----------
    root : Path
        Project root directory.
    config : DiscoveryConfig | None, default=None
        Scan layout; defaults to the conventional React layout.

    Returns
    -------
    ProjectStructure
        Bucketed relative paths, assets directory and manifest.

    Raises
    ------
    SourceNotFoundError
        If ``root`` is not an existing directory.
    DiscoveryError
        If the tree cannot be scanned.
    """
    config = config or DiscoveryConfig()
    if not root.is_dir():
        raise SourceNotFoundError(f"Source directory not found at {root}")

    structure = ProjectStructure()
    seen: set[RelativePath] = set()
    for pattern in config.patterns():
        try:
            matches = _glob(root, pattern)
        except OSError as exc:
            raise DiscoveryError(f"Unable to scan {root} with {pattern}: {exc}") from exc
        for relative in matches:
            if config.is_ignored(relative):
                continue
            if config.deduplicate and relative in seen:
                continue
            seen.add(relative)
            structure.bucket(category_for_path(relative)).append(relative)

    structure.assets_dir = find_assets_dir(root, config.asset_candidates)
    structure.manifest = load_manifest(root / config.manifest_name)
    logger.info("discovered %s under %s", structure.counts(), root)
    return structure
