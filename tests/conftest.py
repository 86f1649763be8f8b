from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest


def _write_package(
    directory: Path,
    name: str | None = None,
    dependencies: dict[str, str] | None = None,
    dev_dependencies: dict[str, str] | None = None,
    optional_dependencies: dict[str, str] | None = None,
) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    data: dict[str, object] = {}
    if name is not None:
        data["name"] = name
    if dependencies is not None:
        data["dependencies"] = dependencies
    if dev_dependencies is not None:
        data["devDependencies"] = dev_dependencies
    if optional_dependencies is not None:
        data["optionalDependencies"] = optional_dependencies
    (directory / "package.json").write_text(json.dumps(data), encoding="utf-8")
    return directory


@pytest.fixture
def make_package() -> Callable[..., Path]:
    """Write a package.json into a directory, creating it if needed."""
    return _write_package


@pytest.fixture
def app_root(tmp_path: Path) -> Path:
    """Symlink-free directory for the root package of a test tree."""
    root = tmp_path.resolve() / "app"
    root.mkdir()
    return root
