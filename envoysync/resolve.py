"""Resolving entry values from the file, the live environment and defaults."""

from __future__ import annotations

import enum
import os
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from envoysync.mask import is_secret, mask_entry
from envoysync.parsing import Entry


class ResolveSource(str, enum.Enum):
    FILE = "file"
    ENV = "env"
    DEFAULT = "default"
    MISSING = "missing"


@dataclass(frozen=True)
class ResolvedEntry:
    key: str
    value: str
    source: ResolveSource


class ResolveError(LookupError):
    """Raised when a key has no value and missing values are not allowed."""

    def __init__(self, key: str) -> None:
        super().__init__(f"resolve: no value found for key {key!r}")
        self.key = key


def _resolve_one(
    entry: Entry, defaults: Mapping[str, str] | None, prefer_env: bool
) -> ResolvedEntry:
    in_env = entry.key in os.environ
    if prefer_env and in_env:
        return ResolvedEntry(entry.key, os.environ[entry.key], ResolveSource.ENV)
    if entry.value != "":
        return ResolvedEntry(entry.key, entry.value, ResolveSource.FILE)
    if in_env:
        return ResolvedEntry(entry.key, os.environ[entry.key], ResolveSource.ENV)
    if defaults is not None and entry.key in defaults:
        return ResolvedEntry(entry.key, defaults[entry.key], ResolveSource.DEFAULT)
    return ResolvedEntry(entry.key, "", ResolveSource.MISSING)


def resolve(
    entries: Sequence[Entry],
    defaults: Mapping[str, str] | None = None,
    fail_on_missing: bool = False,
    prefer_env: bool = False,
) -> list[ResolvedEntry]:
    """Resolve each entry's value.

    Priority is file > env > default, or env > file > default with
    ``prefer_env``. Raises ResolveError for a key with no value when
    ``fail_on_missing`` is true.
    """
    results: list[ResolvedEntry] = []
    for entry in entries:
        resolved = _resolve_one(entry, defaults, prefer_env)
        if fail_on_missing and resolved.source is ResolveSource.MISSING:
            raise ResolveError(entry.key)
        results.append(resolved)
    return results


def resolved_to_entries(resolved: Iterable[ResolvedEntry]) -> list[Entry]:
    """Return plain entries, leaving out those without a value source."""
    return [
        Entry(key=r.key, value=r.value)
        for r in resolved
        if r.source is not ResolveSource.MISSING
    ]


def resolved_summary(resolved: Iterable[ResolvedEntry]) -> str:
    """Return one aligned line per entry, with secret values masked."""
    lines = []
    for r in resolved:
        value = r.value
        if is_secret(r.key):
            value = mask_entry(Entry(key=r.key, value=value)).value
        source = f"[{ResolveSource(r.source).value}]"
        lines.append(f"{r.key:<30} {source:<12} {value}\n")
    return "".join(lines)