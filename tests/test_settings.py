from __future__ import annotations

import json

import pytest

from npm_walker.errors import ConfigError
from npm_walker.settings import CONFIG_PATH_ENV_VAR, WalkerSettings, load_settings


def test_defaults_without_file(monkeypatch):
    monkeypatch.delenv(CONFIG_PATH_ENV_VAR, raising=False)

    settings = load_settings()

    assert settings == WalkerSettings()
    assert settings.modules_dir == "node_modules"
    assert settings.manifest_name == "package.json"
    assert settings.native_build_file == "binding.gyp"
    assert settings.prebuild_installers == ("prebuild-install",)


def test_explicit_file_overrides_fields(tmp_path):
    path = tmp_path / "walker.json"
    path.write_text(
        json.dumps({"prebuildInstallers": ["prebuild-install", "node-pre-gyp"]}), encoding="utf-8"
    )

    settings = load_settings(path)

    assert settings.prebuild_installers == ("prebuild-install", "node-pre-gyp")
    assert settings.modules_dir == "node_modules"


def test_env_var_is_used(tmp_path, monkeypatch):
    path = tmp_path / "walker.json"
    path.write_text(json.dumps({"modulesDir": "vendor"}), encoding="utf-8")
    monkeypatch.setenv(CONFIG_PATH_ENV_VAR, str(path))

    assert load_settings().modules_dir == "vendor"


def test_missing_file_raises(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_settings(tmp_path / "nope.json")


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "walker.json"
    path.write_text("{", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid JSON"):
        load_settings(path)


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"modulesDir": ""},
        {"manifestName": 3},
        {"prebuildInstallers": "prebuild-install"},
        {"prebuildInstallers": [""]},
        {"unexpected": True},
    ],
)
def test_invalid_settings_raise(tmp_path, payload):
    path = tmp_path / "walker.json"
    path.write_text(json.dumps(payload), encoding="utf-8")

    with pytest.raises(ConfigError):
        load_settings(path)


def test_to_dict_uses_json_names():
    assert WalkerSettings().to_dict() == {
        "modulesDir": "node_modules",
        "manifestName": "package.json",
        "nativeBuildFile": "binding.gyp",
        "prebuildInstallers": ["prebuild-install"],
    }
