"""Combining two env maps with a conflict policy."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field


class MergeStrategy(enum.Enum):
    PREFER_BASE = enum.auto()
    PREFER_OVERRIDE = enum.auto()


@dataclass(frozen=True)
class MergeConflict:
    key: str
    base_value: str
    override_value: str


@dataclass
class MergeResult:
    merged: dict[str, str]
    conflicts: list[MergeConflict] = field(default_factory=list)


def merge(
    base: Mapping[str, str],
    override: Mapping[str, str],
    strategy: MergeStrategy = MergeStrategy.PREFER_BASE,
) -> MergeResult:
    """Merge ``override`` into a copy of ``base``.

    Keys unique to either side are always kept; keys with differing values
    are recorded as conflicts and resolved by ``strategy``.
    """
    merged = dict(base)
    conflicts: list[MergeConflict] = []

    for key, value in override.items():
        if key not in merged:
            merged[key] = value
            continue
        current = merged[key]
        if current != value:
            conflicts.append(MergeConflict(key, current, value))
            if strategy is MergeStrategy.PREFER_OVERRIDE:
                merged[key] = value

    return MergeResult(merged=merged, conflicts=conflicts)