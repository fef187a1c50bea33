"""Stripping surrounding whitespace from env values."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class TrimResult:
    key: str
    old_value: str
    new_value: str
    changed: bool = True


def trim(entries: Mapping[str, str]) -> tuple[dict[str, str], list[TrimResult]]:
    """Return a copy with every value stripped, and the changes made."""
    result: dict[str, str] = {}
    changes: list[TrimResult] = []
    for key, value in entries.items():
        stripped = value.strip()
        result[key] = stripped
        if stripped != value:
            changes.append(TrimResult(key, value, stripped))
    return result, changes


def trim_keys(
    entries: Mapping[str, str], keys: Iterable[str]
) -> tuple[dict[str, str], list[TrimResult]]:
    """Return a copy with only the given keys stripped; absent keys are ignored."""
    result = dict(entries)
    changes: list[TrimResult] = []
    for key in keys:
        if key not in result:
            continue
        value = result[key]
        stripped = value.strip()
        result[key] = stripped
        if stripped != value:
            changes.append(TrimResult(key, value, stripped))
    return result, changes