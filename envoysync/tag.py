"""Annotating entries with a tag label."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from envoysync.parsing import Entry


@dataclass(frozen=True)
class TagEntry:
    key: str
    value: str
    tag: str


@dataclass
class TagResult:
    tagged: list[TagEntry] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


def tag(
    entries: Sequence[Entry], keys: Iterable[str] | None, label: str
) -> TagResult:
    """Tag entries whose key is in ``keys`` (every entry when none are given).

    Raises ValueError for an empty label.
    """
    if not label:
        raise ValueError("tag must not be empty")
    wanted = set(keys or ())
    result = TagResult()
    for entry in entries:
        if not wanted or entry.key in wanted:
            result.tagged.append(TagEntry(entry.key, entry.value, label))
        else:
            result.skipped.append(entry.key)
    return result


def group_by_tag(tagged: Iterable[TagEntry]) -> dict[str, list[TagEntry]]:
    """Group tagged entries by their tag, keeping their order."""
    groups: dict[str, list[TagEntry]] = {}
    for item in tagged:
        groups.setdefault(item.tag, []).append(item)
    return groups


def tag_summary(tagged: Iterable[TagEntry]) -> str:
    """Return a ``[tag]`` header per tag, sorted, followed by its entries."""
    groups = group_by_tag(tagged)
    lines = []
    for name in sorted(groups):
        lines.append(f"[{name}]\n")
        lines.extend(f"  {e.key}={e.value}\n" for e in groups[name])
    return "".join(lines)