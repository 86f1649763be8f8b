"""Walker settings loader.

Settings are optional: without a file every field keeps its npm default. A JSON
file may override individual fields, for example::

    {"modulesDir": "node_modules", "prebuildInstallers": ["prebuild-install"]}
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from .errors import ConfigError


CONFIG_PATH_ENV_VAR = "NPM_WALKER_CONFIG"

DEFAULT_MODULES_DIR = "node_modules"
DEFAULT_MANIFEST_NAME = "package.json"
DEFAULT_NATIVE_BUILD_FILE = "binding.gyp"
DEFAULT_PREBUILD_INSTALLERS = ("prebuild-install",)

_JSON_KEYS = {
    "modulesDir": "modules_dir",
    "manifestName": "manifest_name",
    "nativeBuildFile": "native_build_file",
    "prebuildInstallers": "prebuild_installers",
}


@dataclass(slots=True, frozen=True)
class WalkerSettings:
    """File layout conventions used while walking a module tree."""

    modules_dir: str = DEFAULT_MODULES_DIR
    manifest_name: str = DEFAULT_MANIFEST_NAME
    native_build_file: str = DEFAULT_NATIVE_BUILD_FILE
    prebuild_installers: tuple[str, ...] = DEFAULT_PREBUILD_INSTALLERS

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WalkerSettings:
        """Create settings from a JSON object, validating every field present."""
        unknown = sorted(set(data) - set(_JSON_KEYS))
        if unknown:
            raise ConfigError(f"Unknown setting(s): {', '.join(unknown)}")

        values: dict[str, Any] = {}
        for key in ("modulesDir", "manifestName", "nativeBuildFile"):
            if key not in data:
                continue
            value = data[key]
            if not isinstance(value, str) or not value:
                raise ConfigError(f"Setting '{key}' must be a non-empty string")
            values[_JSON_KEYS[key]] = value

        if "prebuildInstallers" in data:
            installers = data["prebuildInstallers"]
            if not isinstance(installers, list) or not all(
                isinstance(item, str) and item for item in installers
            ):
                raise ConfigError("Setting 'prebuildInstallers' must be an array of strings")
            values["prebuild_installers"] = tuple(installers)

        return cls(**values)

    def to_dict(self) -> dict[str, object]:
        json_names = {attr: key for key, attr in _JSON_KEYS.items()}
        data: dict[str, object] = {}
        for field in fields(self):
            value = getattr(self, field.name)
            data[json_names[field.name]] = list(value) if isinstance(value, tuple) else value
        return data


def _resolve_config_path(path: Path | str | None = None) -> Path | None:
    """Resolve the settings file path.

    Priority:
    1. Explicit path argument
    2. NPM_WALKER_CONFIG environment variable
    3. None (built-in defaults)
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)

    return None


def load_settings(path: Path | str | None = None) -> WalkerSettings:
    """Load walker settings from a JSON file, or return the defaults.

    Raises:
        ConfigError: If a named file is missing, unreadable or invalid.
    """
    config_path = _resolve_config_path(path)
    if config_path is None:
        return WalkerSettings()

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read configuration file: {exc}") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in configuration file: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a JSON object")

    return WalkerSettings.from_dict(data)
