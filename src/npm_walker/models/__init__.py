"""Data models describing walked modules."""

from __future__ import annotations

from .dep_type import DepType, OPTIONAL_DEP_TYPES, child_dep_type, dep_type_greater
from .module_record import ModuleRecord
from .native_module_type import NativeModuleType

__all__ = [
    "DepType",
    "ModuleRecord",
    "NativeModuleType",
    "OPTIONAL_DEP_TYPES",
    "child_dep_type",
    "dep_type_greater",
]
