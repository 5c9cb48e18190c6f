"""Application-layer result objects."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from solid_migrator.types import FileCategory, RelativePath

if TYPE_CHECKING:
    from solid_migrator.discovery import ProjectStructure


@dataclass(frozen=True)
class SourceFile:
    """A discovered file as read from disk."""

    path: RelativePath
    content: str
    category: FileCategory
    eligible: bool


@dataclass(frozen=True)
class Converted:
    """File rewritten by the pipeline."""

    path: RelativePath
    output_path: Path


@dataclass(frozen=True)
class Skipped:
    """File copied unchanged because it carries no React markers."""

    path: RelativePath
    output_path: Path


@dataclass(frozen=True)
class Failed:
    """File whose read, rewrite or write raised."""

    path: RelativePath
    reason: str


type ConversionOutcome = Converted | Skipped | Failed


@dataclass(frozen=True)
class LedgerSummary:
    """Counts per outcome plus failure details."""

    converted: int
    skipped: int
    failed: int
    failures: tuple[Failed, ...] = ()

    @property
    def total(self) -> int:
        return self.converted + self.skipped + self.failed


class ConversionLedger:
    """Append-only record of per-file outcomes for one run.

    The ledger is closed when the run ends; recording afterwards raises.
    """

    def __init__(self) -> None:
        self._outcomes: list[ConversionOutcome] = []
        self._closed = False

    def record(self, outcome: ConversionOutcome) -> None:
        """Append an outcome.

        Raises
        ------
        RuntimeError
            If the ledger has been closed.
        """
        if self._closed:
            raise RuntimeError("Ledger is closed; the run has finished.")
        self._outcomes.append(outcome)

    def close(self) -> None:
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def outcomes(self) -> tuple[ConversionOutcome, ...]:
        return tuple(self._outcomes)

    @property
    def converted(self) -> list[Converted]:
        return [item for item in self._outcomes if isinstance(item, Converted)]

    @property
    def skipped(self) -> list[Skipped]:
        return [item for item in self._outcomes if isinstance(item, Skipped)]

    @property
    def failed(self) -> list[Failed]:
        return [item for item in self._outcomes if isinstance(item, Failed)]

    def summary(self) -> LedgerSummary:
        """Summarise the ledger for display."""
        failures = tuple(self.failed)
        return LedgerSummary(
            converted=len(self.converted),
            skipped=len(self.skipped),
            failed=len(failures),
            failures=failures,
        )

    def __iter__(self) -> Iterator[ConversionOutcome]:
        return iter(tuple(self._outcomes))

    def __len__(self) -> int:
        return len(self._outcomes)


@dataclass(frozen=True)
class MigrationResult:
    """Structured outcome of a whole-project migration."""

    source_root: Path
    output_root: Path
    structure: ProjectStructure
    ledger: ConversionLedger
    assets_copied_to: Path | None = None
