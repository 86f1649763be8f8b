"""Load and normalise package.json manifests."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import aiofiles
from jsonschema import Draft202012Validator

from .errors import ManifestError
from .settings import DEFAULT_MANIFEST_NAME

logger = logging.getLogger(__name__)

MANIFEST_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
}

_VALIDATOR = Draft202012Validator(MANIFEST_SCHEMA)


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    # Published packages sometimes ship "devDependencies": [] or null.
    value = data.get(key)
    return dict(value) if isinstance(value, dict) else {}


@dataclass(frozen=True)
class Manifest:
    """The parts of a package.json the walker cares about."""

    name: str | None = None
    dependencies: dict[str, Any] = field(default_factory=dict)
    dev_dependencies: dict[str, Any] = field(default_factory=dict)
    optional_dependencies: dict[str, Any] = field(default_factory=dict)
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Manifest:
        name = data.get("name")
        return cls(
            name=name if isinstance(name, str) else None,
            dependencies=_section(data, "dependencies"),
            dev_dependencies=_section(data, "devDependencies"),
            optional_dependencies=_section(data, "optionalDependencies"),
            raw=data,
        )


def _format_errors(errors: list[Any]) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"{pointer or '<root>'}: {error.message}")
    return "; ".join(messages)


async def load_package_json(
    module_path: Path, manifest_name: str = DEFAULT_MANIFEST_NAME
) -> Manifest | None:
    """Return the manifest of the module at ``module_path``.

    Returns None when the module has no manifest at all, including when
    ``module_path`` is a file rather than a directory. Dependency sections that
    are missing or not objects come back as empty mappings, and a non-string
    ``name`` comes back as None.

    Raises:
        ManifestError: If the manifest exists but cannot be decoded as a JSON object.
    """
    manifest_path = module_path / manifest_name
    try:
        async with aiofiles.open(manifest_path, "rb") as f:
            payload = await f.read()
    except (FileNotFoundError, NotADirectoryError):
        logger.debug("no %s in %s", manifest_name, module_path)
        return None

    try:
        data = json.loads(payload.decode("utf-8-sig"))
    except UnicodeDecodeError as exc:
        raise ManifestError(manifest_path, f"not valid UTF-8 ({exc.reason})") from exc
    except json.JSONDecodeError as exc:
        raise ManifestError(manifest_path, f"invalid JSON ({exc.msg})") from exc

    errors = sorted(_VALIDATOR.iter_errors(data), key=lambda e: list(e.path))
    if errors:
        raise ManifestError(manifest_path, _format_errors(errors))

    return Manifest.from_dict(data)
