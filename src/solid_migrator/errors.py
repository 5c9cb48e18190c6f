"""Exception hierarchy for React-to-Solid migration."""

from __future__ import annotations


class MigrationError(Exception):
    """Base error for migration failures surfaced to callers.

    Attributes
    ----------
    exit_code : int
        Process exit code the CLI uses when this error aborts a run.
    """

    exit_code: int = 1


class SourceNotFoundError(MigrationError):
    """Raised when the source project root does not exist."""

    exit_code = 2


class DiscoveryError(MigrationError):
    """Raised when the source tree cannot be scanned."""


class RewriteError(MigrationError):
    """Raised when a rewrite pass fails on a given input.

    Parameters
    ----------
    pass_name : str
        Name of the pass that raised.
    message : str
        Underlying failure description.
    """

    def __init__(self, pass_name: str, message: str) -> None:
        super().__init__(f"rewrite pass '{pass_name}' failed: {message}")
        self.pass_name = pass_name


class PluginError(MigrationError):
    """Raised when a rule plugin cannot be loaded or registered."""


class OutputCollisionError(MigrationError):
    """Raised when two source files map to the same output path."""


__all__ = [
    "MigrationError",
    "SourceNotFoundError",
    "DiscoveryError",
    "RewriteError",
    "PluginError",
    "OutputCollisionError",
]
