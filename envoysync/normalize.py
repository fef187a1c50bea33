"""Cleaning up keys and values of env entries."""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from dataclasses import dataclass, field

from envoysync.parsing import Entry
from envoysync.sorting import SortStrategy, sort_entries


@dataclass
class NormalizeResult:
    entries: list[Entry] = field(default_factory=list)
    modified: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)


def normalize(
    entries: Sequence[Entry],
    uppercase_keys: bool = False,
    trim_values: bool = False,
    remove_empty: bool = False,
    sort_alpha: bool = False,
) -> NormalizeResult:
    """Apply the chosen clean-ups; later duplicates of a key are dropped.

    ``modified`` and ``removed`` hold the original keys of affected entries.
    """
    result = NormalizeResult()
    seen: set[str] = set()

    for original in entries:
        key = original.key.upper() if uppercase_keys else original.key
        value = original.value.strip() if trim_values else original.value

        if (remove_empty and value == "") or key in seen:
            result.removed.append(original.key)
            continue
        seen.add(key)

        if key != original.key or value != original.value:
            result.modified.append(original.key)
        result.entries.append(dataclasses.replace(original, key=key, value=value))

    if sort_alpha:
        result.entries = sort_entries(result.entries, SortStrategy.ALPHA).entries

    return result


def normalize_summary(result: NormalizeResult) -> str:
    """Return a short multi-line summary of a normalization pass."""
    return (
        "Normalize summary:\n"
        f"  kept:     {len(result.entries)}\n"
        f"  modified: {len(result.modified)}\n"
        f"  removed:  {len(result.removed)}\n"
    )