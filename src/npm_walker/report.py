"""Report aggregation and JSON-friendly output."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from typing import Any

from .models import DepType, ModuleRecord, NativeModuleType


def aggregate(root: str, modules: Iterable[ModuleRecord]) -> dict[str, Any]:
    """Aggregate a walk result into a single report.

    Modules are listed in walk order; totals count every dependency type and
    native module type, including those with no modules.
    """
    modules = list(modules)
    dep_types = Counter(module.dep_type for module in modules)
    native_types = Counter(module.native_module_type for module in modules)

    return {
        "version": "1",
        "root": str(root),
        "modules": [module.to_dict() for module in modules],
        "totals": {
            "modules": len(modules),
            "depTypes": {dep_type.to_json(): dep_types[dep_type] for dep_type in DepType},
            "nativeModuleTypes": {
                native_type.to_json(): native_types[native_type] for native_type in NativeModuleType
            },
        },
    }
