"""Selecting entries by their key prefix."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from envoysync.parsing import Entry


@dataclass
class ScopeResult:
    scope: str
    entries: list[Entry] = field(default_factory=list)


@dataclass
class ScopeSummary:
    scopes: list[str] = field(default_factory=list)
    counts: dict[str, int] = field(default_factory=dict)


def scope(entries: Sequence[Entry], name: str) -> ScopeResult:
    """Return entries whose key is ``NAME`` or starts with ``NAME_``, ignoring case."""
    name = name.strip().upper()
    prefix = name + "_"
    matched = [
        e for e in entries if e.key.upper().startswith(prefix) or e.key.upper() == name
    ]
    return ScopeResult(scope=name, entries=matched)


def list_scopes(entries: Sequence[Entry]) -> list[str]:
    """Return the sorted distinct key parts before the first underscore."""
    found = set()
    for e in entries:
        head, sep, _ = e.key.partition("_")
        if sep and head:
            found.add(head)
    return sorted(found)


def scope_summary_of(entries: Sequence[Entry]) -> ScopeSummary:
    """Count the entries that belong to each detected scope."""
    scopes = list_scopes(entries)
    counts = {s: len(scope(entries, s).entries) for s in scopes}
    return ScopeSummary(scopes=scopes, counts=counts)


def format_scope_summary(summary: ScopeSummary) -> str:
    """Return one line per scope with its key count."""
    if not summary.scopes:
        return "no scopes detected"
    text = "".join(
        f"  {s:<20} {summary.counts.get(s, 0)} key(s)\n" for s in summary.scopes
    )
    return text.rstrip("\n")