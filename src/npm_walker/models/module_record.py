"""Walked module record."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .dep_type import DepType
from .native_module_type import NativeModuleType


@dataclass
class ModuleRecord:
    """A single installed module discovered by the walker.

    ``path`` is the identity of the record. ``dep_type`` only ever moves up
    while a walk is running; ``name`` and ``native_module_type`` are filled in
    once the module's package.json has been read.
    """

    path: Path
    dep_type: DepType
    name: str | None = None
    native_module_type: NativeModuleType = NativeModuleType.NONE

    def to_dict(self) -> dict[str, object]:
        return {
            "path": str(self.path),
            "name": self.name,
            "depType": self.dep_type.to_json(),
            "nativeModuleType": self.native_module_type.to_json(),
        }
