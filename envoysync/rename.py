"""Renaming keys in an env mapping."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class RenameResult:
    old_key: str
    new_key: str
    renamed: bool = False
    reason: str = ""


def rename_entry(
    entries: Mapping[str, str], old_key: str, new_key: str, overwrite: bool = False
) -> tuple[dict[str, str], RenameResult]:
    """Rename ``old_key`` to ``new_key`` in a copy of ``entries``.

    The copy is returned unchanged, with the reason in the result, when the
    keys are identical, ``old_key`` is absent, or ``new_key`` exists and
    ``overwrite`` is false.
    """
    updated = dict(entries)

    if old_key == new_key:
        return updated, RenameResult(
            old_key, new_key, reason="old and new key are identical"
        )
    if old_key not in entries:
        return updated, RenameResult(old_key, new_key, reason=f"key {old_key!r} not found")
    if new_key in entries and not overwrite:
        return updated, RenameResult(
            old_key,
            new_key,
            reason=f"key {new_key!r} already exists; use overwrite to replace",
        )

    updated[new_key] = updated.pop(old_key)
    return updated, RenameResult(old_key, new_key, renamed=True, reason="ok")


def bulk_rename(
    entries: Mapping[str, str],
    renames: Iterable[tuple[str, str]],
    overwrite: bool = False,
) -> tuple[dict[str, str], list[RenameResult]]:
    """Apply ``(old_key, new_key)`` renames one after another."""
    current = dict(entries)
    results: list[RenameResult] = []
    for old_key, new_key in renames:
        current, result = rename_entry(current, old_key, new_key, overwrite)
        results.append(result)
    return current, results