"""Dependency relationship strengths and their merge rules."""

from __future__ import annotations

from enum import IntEnum


class DepType(IntEnum):
    """How a module was reached, ordered weakest to strongest."""

    OPTIONAL = 0
    DEV_OPTIONAL = 1
    DEV = 2
    PROD = 3
    ROOT = 4

    def to_json(self) -> str:
        return self.name.lower().replace("_", "-")


OPTIONAL_DEP_TYPES = frozenset({DepType.OPTIONAL, DepType.DEV_OPTIONAL})


def dep_type_greater(new_type: DepType, existing: DepType) -> bool:
    """Return True when ``new_type`` should replace ``existing`` on a record."""
    return new_type > existing


def child_dep_type(parent_type: DepType, child_type: DepType) -> DepType:
    """Return the effective type of an edge of kind ``child_type`` under ``parent_type``.

    The root passes every edge through unchanged. Below the root an edge can
    never be stronger than its parent, and an optional edge under a dev or dev-optional
    parent becomes ``DEV_OPTIONAL``.
    """
    if child_type is DepType.ROOT:
        raise ValueError("a child dependency can't be marked as the ROOT")

    if parent_type is DepType.ROOT:
        return child_type

    if child_type is DepType.OPTIONAL and parent_type in (DepType.DEV, DepType.DEV_OPTIONAL):
        return DepType.DEV_OPTIONAL

    return min(parent_type, child_type)
