"""Classify how a module would build its native code."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import aiofiles.os

from .manifest import Manifest
from .models import NativeModuleType
from .settings import DEFAULT_NATIVE_BUILD_FILE, DEFAULT_PREBUILD_INSTALLERS


async def detect_native_module_type(
    module_path: Path,
    manifest: Manifest,
    native_build_file: str = DEFAULT_NATIVE_BUILD_FILE,
    prebuild_installers: Iterable[str] = DEFAULT_PREBUILD_INSTALLERS,
) -> NativeModuleType:
    """Return the native build mechanism for the module at ``module_path``.

    A production dependency on a prebuilt-binary installer wins over a
    ``binding.gyp`` file; modules with neither need no native build.
    """
    if any(installer in manifest.dependencies for installer in prebuild_installers):
        return NativeModuleType.PREBUILD
    if await aiofiles.os.path.exists(module_path / native_build_file):
        return NativeModuleType.NODE_GYP
    return NativeModuleType.NONE
