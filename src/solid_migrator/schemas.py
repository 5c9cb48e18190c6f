"""Pydantic schemas for runtime validation of migration inputs."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

LEGACY_PACKAGE = "react"


class MigrationConfig(BaseModel):
    """Validated input for a whole-project migration run."""

    model_config = ConfigDict(extra="forbid")

    source_root: Path
    output_root: Path
    source_dir: str = "src"
    include_pages: bool = False
    deduplicate: bool = True
    copy_assets: bool = False
    conflict_dir: Path | None = None
    rule_modules: tuple[str, ...] = ()

    @field_validator("source_dir")
    @classmethod
    def _validate_source_dir(cls, value: str) -> str:
        cleaned = value.strip().strip("/\\")
        if not cleaned:
            raise ValueError("source_dir cannot be empty.")
        if ".." in Path(cleaned).parts:
            raise ValueError("source_dir must stay inside the output root.")
        return cleaned

    @field_validator("rule_modules")
    @classmethod
    def _validate_rule_modules(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if any(not item.strip() for item in value):
            raise ValueError("rule module entries cannot be empty.")
        return value


class PackageManifest(BaseModel):
    """Subset of ``package.json`` the migrator reports on."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str | None = None
    version: str | None = None
    dependencies: dict[str, str] = Field(default_factory=dict)
    dev_dependencies: dict[str, str] = Field(
        default_factory=dict, alias="devDependencies"
    )

    @property
    def legacy_framework_version(self) -> str | None:
        """Declared React version, if the manifest lists one."""
        return self.dependencies.get(LEGACY_PACKAGE) or self.dev_dependencies.get(
            LEGACY_PACKAGE
        )
