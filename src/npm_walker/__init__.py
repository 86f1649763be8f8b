"""npm-walker core package.

Walks the ``node_modules`` tree reachable from a root package and reports every
installed module together with how it was reached and whether it needs a
native build.
"""

from __future__ import annotations

from .errors import ConfigError, ManifestError, MissingDependencyError, WalkerError
from .models import DepType, ModuleRecord, NativeModuleType, child_dep_type, dep_type_greater
from .walker import Walker

__all__ = [
    "ConfigError",
    "DepType",
    "ManifestError",
    "MissingDependencyError",
    "ModuleRecord",
    "NativeModuleType",
    "Walker",
    "WalkerError",
    "child_dep_type",
    "dep_type_greater",
]
