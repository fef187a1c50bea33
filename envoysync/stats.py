"""Summary statistics over env entries."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field

from envoysync.mask import is_secret
from envoysync.parsing import Entry


@dataclass
class Stats:
    total: int = 0
    secrets: int = 0
    non_secrets: int = 0
    empty: int = 0
    unique: int = 0
    duplicates: int = 0
    prefixes: dict[str, int] = field(default_factory=dict)


def _key_prefix(key: str) -> str:
    index = key.find("_", 1)
    return key[:index] if index > 0 else ""


def gather_stats(entries: Sequence[Entry]) -> Stats:
    """Count totals, secrets, empty values, key repetition and prefixes."""
    stats = Stats()
    seen: Counter[str] = Counter()
    prefixes: Counter[str] = Counter()

    for entry in entries:
        stats.total += 1
        seen[entry.key] += 1
        if is_secret(entry.key):
            stats.secrets += 1
        else:
            stats.non_secrets += 1
        if entry.value == "":
            stats.empty += 1
        prefix = _key_prefix(entry.key)
        if prefix:
            prefixes[prefix] += 1

    stats.unique = sum(1 for count in seen.values() if count == 1)
    stats.duplicates = sum(1 for count in seen.values() if count != 1)
    stats.prefixes = dict(prefixes)
    return stats


def top_prefixes(stats: Stats, n: int) -> list[str]:
    """Return up to ``n`` prefixes by descending count, ties by name."""
    ranked = sorted(stats.prefixes.items(), key=lambda kv: (-kv[1], kv[0]))
    return [key for key, _ in ranked[: max(n, 0)]]