from __future__ import annotations

import pytest

from npm_walker.manifest import Manifest
from npm_walker.models import NativeModuleType
from npm_walker.native import detect_native_module_type


@pytest.mark.asyncio
async def test_plain_module_needs_no_native_build(tmp_path):
    manifest = Manifest(name="plain", dependencies={"lodash": "^4.0.0"})

    assert await detect_native_module_type(tmp_path, manifest) is NativeModuleType.NONE


@pytest.mark.asyncio
async def test_binding_gyp_means_node_gyp(tmp_path):
    (tmp_path / "binding.gyp").write_text("{}", encoding="utf-8")

    result = await detect_native_module_type(tmp_path, Manifest(name="native"))

    assert result is NativeModuleType.NODE_GYP


@pytest.mark.asyncio
async def test_prebuild_install_wins_over_binding_gyp(tmp_path):
    (tmp_path / "binding.gyp").write_text("{}", encoding="utf-8")
    manifest = Manifest(name="prebuilt", dependencies={"prebuild-install": "^7.0.0"})

    assert await detect_native_module_type(tmp_path, manifest) is NativeModuleType.PREBUILD


@pytest.mark.asyncio
async def test_prebuild_installer_only_counts_in_production_deps(tmp_path):
    manifest = Manifest(name="dev-only", dev_dependencies={"prebuild-install": "^7.0.0"})

    assert await detect_native_module_type(tmp_path, manifest) is NativeModuleType.NONE


@pytest.mark.asyncio
async def test_custom_installer_names(tmp_path):
    manifest = Manifest(name="alt", dependencies={"node-pre-gyp": "^1.0.0"})

    result = await detect_native_module_type(
        tmp_path, manifest, prebuild_installers=("node-pre-gyp",)
    )

    assert result is NativeModuleType.PREBUILD
