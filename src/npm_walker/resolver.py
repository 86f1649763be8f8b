"""Locate installed dependencies the way Node's module resolution does.

A dependency is looked up in the ``node_modules`` directory next to the
requiring module, then in the ``node_modules`` of every ancestor package,
until the filesystem root is reached.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterator
from pathlib import Path

import aiofiles.os

from .settings import DEFAULT_MODULES_DIR

logger = logging.getLogger(__name__)


def relative_module(
    root_path: Path, module_name: str, modules_dir: str = DEFAULT_MODULES_DIR
) -> Path:
    return root_path / modules_dir / module_name


def candidate_paths(
    real_path: Path, module_name: str, modules_dir: str = DEFAULT_MODULES_DIR
) -> Iterator[Path]:
    """Yield every location ``module_name`` may be installed at, nearest first.

    ``real_path`` must already be symlink-free. Scoped packages
    (``node_modules/@scope/name``) climb one extra level so that the scope
    directory is never searched as if it were a package.
    """
    test_path = real_path
    last_candidate: Path | None = None
    while True:
        candidate = relative_module(test_path, module_name, modules_dir)
        if candidate == last_candidate:
            return
        yield candidate
        last_candidate = candidate
        if test_path.parent.name != modules_dir:
            test_path = test_path.parent
        test_path = test_path.parent.parent


async def real_path_of(module_path: Path, real_paths: dict[Path, Path]) -> Path:
    """Return the symlink-resolved form of ``module_path``, memoised in ``real_paths``."""
    real = real_paths.get(module_path)
    if real is None:
        real = await asyncio.to_thread(module_path.resolve)
        real_paths[module_path] = real
    return real


async def resolve_module(
    module_path: Path,
    module_name: str,
    real_paths: dict[Path, Path],
    modules_dir: str = DEFAULT_MODULES_DIR,
) -> Path | None:
    """Return the directory ``module_name`` resolves to from ``module_path``, or None."""
    start = await real_path_of(module_path, real_paths)
    for candidate in candidate_paths(start, module_name, modules_dir):
        if await aiofiles.os.path.exists(candidate):
            return candidate
    logger.debug("could not find %s from %s", module_name, module_path)
    return None
