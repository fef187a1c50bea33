"""Copying keys from one env mapping into another."""

from __future__ import annotations

import enum
import json
from collections.abc import Mapping
from dataclasses import dataclass, field


class SyncStrategy(enum.Enum):
    SKIP = enum.auto()
    OVERRIDE = enum.auto()


@dataclass
class SyncResult:
    applied: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    conflicts: list[str] = field(default_factory=list)


def sync(
    dst: Mapping[str, str],
    src: Mapping[str, str],
    strategy: SyncStrategy = SyncStrategy.SKIP,
) -> tuple[dict[str, str], SyncResult]:
    """Copy ``src`` keys into a copy of ``dst``.

    Keys with equal values are skipped; differing ones are conflicts,
    resolved by ``strategy``.
    """
    result = dict(dst)
    report = SyncResult()

    for key, value in src.items():
        if key not in dst:
            result[key] = value
            report.applied.append(key)
            continue
        existing = dst[key]
        if existing == value:
            report.skipped.append(key)
            continue
        report.conflicts.append(f"{key}: {json.dumps(existing)} -> {json.dumps(value)}")
        if strategy is SyncStrategy.OVERRIDE:
            result[key] = value
            report.applied.append(key)
        else:
            report.skipped.append(key)

    return result, report