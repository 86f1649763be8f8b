"""Errors raised while configuring or running a tree walk."""

from __future__ import annotations

from pathlib import Path


class WalkerError(RuntimeError):
    """Base error for failures that abort a tree walk."""


class ConfigError(WalkerError):
    """Raised when walker settings cannot be loaded or are invalid."""


class ManifestError(WalkerError):
    """Raised when a package.json exists but cannot be parsed."""

    def __init__(self, manifest_path: Path, reason: str) -> None:
        super().__init__(f"Invalid package manifest {manifest_path}: {reason}")
        self.manifest_path = manifest_path
        self.reason = reason


class MissingDependencyError(WalkerError):
    """Raised when a required dependency is not installed anywhere up the tree."""

    def __init__(self, module_name: str, required_by: Path) -> None:
        super().__init__(
            f'Failed to locate module "{module_name}" from "{required_by}"\n\n'
            "This normally means that either the package has already been removed "
            "(check your ignore settings) or the module installation failed."
        )
        self.module_name = module_name
        self.required_by = required_by
