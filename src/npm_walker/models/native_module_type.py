"""Native build mechanism model."""

from __future__ import annotations

from enum import IntEnum


class NativeModuleType(IntEnum):
    """How a module would build its native code, if it has any."""

    NONE = 0
    PREBUILD = 1
    NODE_GYP = 2

    def to_json(self) -> str:
        return self.name.lower().replace("_", "-")
