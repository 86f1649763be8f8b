"""Concurrent, cycle-safe walk of an installed node_modules tree."""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path

from .errors import MissingDependencyError
from .manifest import load_package_json
from .models import OPTIONAL_DEP_TYPES, DepType, ModuleRecord, child_dep_type, dep_type_greater
from .native import detect_native_module_type
from .resolver import real_path_of, resolve_module
from .settings import WalkerSettings

logger = logging.getLogger(__name__)


class Walker:
    """Discover every module reachable from a root package.

    A walker performs at most one walk. Every call to :meth:`walk_tree`, made
    concurrently or afterwards, shares the outcome of that walk, including a
    failure.
    """

    def __init__(
        self, module_path: str | os.PathLike[str], settings: WalkerSettings | None = None
    ) -> None:
        if not module_path or not isinstance(module_path, (str, os.PathLike)):
            raise TypeError("module_path must be provided as a string")
        logger.debug("creating walker with root_module=%s", module_path)
        self.root_module = module_path
        self.settings = settings or WalkerSettings()
        self._walk_history: set[Path] = set()
        self._real_paths: dict[Path, Path] = {}
        self._modules: dict[Path, ModuleRecord] = {}
        self._cache: asyncio.Future[list[ModuleRecord]] | None = None

    def get_root_module(self) -> str | os.PathLike[str]:
        """Return the root module path exactly as it was given."""
        return self.root_module

    async def walk_tree(self) -> list[ModuleRecord]:
        """Return every module in the tree, walking it on the first call only."""
        logger.debug("starting tree walk")
        if self._cache is None:
            self._cache = asyncio.ensure_future(self._walk())
        else:
            logger.debug("tree walk in progress / completed already, waiting for existing walk")
        modules = await asyncio.shield(self._cache)
        return list(modules)

    async def _walk(self) -> list[ModuleRecord]:
        self._walk_history = set()
        self._modules = {}
        root = await real_path_of(Path(os.path.abspath(self.root_module)), self._real_paths)
        await self._walk_dependencies_for_module(root, DepType.ROOT)
        return list(self._modules.values())

    async def _walk_dependencies_for_module_in_module(
        self, module_name: str, module_path: Path, dep_type: DepType
    ) -> None:
        discovered = await resolve_module(
            module_path, module_name, self._real_paths, self.settings.modules_dir
        )
        if discovered is None:
            if dep_type in OPTIONAL_DEP_TYPES:
                logger.debug(
                    "skipping missing optional module %s from %s", module_name, module_path
                )
                return
            raise MissingDependencyError(module_name, module_path)

        # Symlinked installs share one record per real directory.
        discovered = await real_path_of(discovered, self._real_paths)
        await self._walk_dependencies_for_module(discovered, dep_type)

    async def _walk_dependencies_for_module(self, module_path: Path, dep_type: DepType) -> None:
        logger.debug("walk reached: %s type is: %s", module_path, dep_type.name)

        if module_path in self._walk_history:
            logger.debug("already walked this route")
            # Dead installs stay in the history but have no record.
            existing = self._modules.get(module_path)
            if existing is None:
                return
            if dep_type_greater(dep_type, existing.dep_type):
                logger.debug(
                    "existing module has a type of %s, new module type would be %s, updating",
                    existing.dep_type.name,
                    dep_type.name,
                )
                existing.dep_type = dep_type
            return

        # History and placeholder must both be in place before the first await,
        # otherwise a sibling walking the same path records it twice.
        self._walk_history.add(module_path)
        record = ModuleRecord(path=module_path, dep_type=dep_type)
        self._modules[module_path] = record

        manifest = await load_package_json(module_path, self.settings.manifest_name)
        if manifest is None:
            logger.debug("walk hit a dead end, %s is incomplete", module_path)
            del self._modules[module_path]
            return

        record.name = manifest.name
        record.native_module_type = await detect_native_module_type(
            module_path,
            manifest,
            self.settings.native_build_file,
            self.settings.prebuild_installers,
        )

        resolving = []
        for module_name in manifest.dependencies:
            # npm copies optional dependencies into "dependencies" on install
            if module_name in manifest.optional_dependencies:
                logger.debug(
                    "found %s in prod deps of %s but it is also marked optional",
                    module_name,
                    module_path,
                )
                continue
            resolving.append(
                self._walk_dependencies_for_module_in_module(
                    module_name, module_path, child_dep_type(dep_type, DepType.PROD)
                )
            )

        for module_name in manifest.optional_dependencies:
            resolving.append(
                self._walk_dependencies_for_module_in_module(
                    module_name, module_path, child_dep_type(dep_type, DepType.OPTIONAL)
                )
            )

        if dep_type is DepType.ROOT:
            logger.debug("at the root module, walking down the dev route")
            for module_name in manifest.dev_dependencies:
                resolving.append(
                    self._walk_dependencies_for_module_in_module(
                        module_name, module_path, child_dep_type(dep_type, DepType.DEV)
                    )
                )

        await asyncio.gather(*resolving)
