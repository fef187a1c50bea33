"""Grouping entries by prefix, secrecy or emptiness."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from envoysync.mask import is_secret
from envoysync.parsing import Entry

NO_PREFIX = "(no prefix)"

_STRATEGIES = ("prefix", "secret", "empty")
_SENSITIVITY_BUCKETS = ("secrets", "non-secrets")
_EMPTINESS_BUCKETS = ("empty", "non-empty")


@dataclass
class GroupResult:
    key: str
    entries: list[Entry]


def _bucket_key(entry: Entry, strategy: str, delimiter: str) -> str:
    if strategy == "prefix":
        prefix, sep, _ = entry.key.partition(delimiter)
        return prefix if sep else NO_PREFIX
    if strategy == "secret":
        return _SENSITIVITY_BUCKETS[0] if is_secret(entry.key) else _SENSITIVITY_BUCKETS[1]
    return _EMPTINESS_BUCKETS[0] if not entry.value.strip() else _EMPTINESS_BUCKETS[1]


def _initial_buckets(strategy: str) -> tuple[str, ...]:
    if strategy == "secret":
        return _SENSITIVITY_BUCKETS
    if strategy == "empty":
        return _EMPTINESS_BUCKETS
    return ()


def group_by(
    entries: Sequence[Entry], strategy: str, delimiter: str = "_"
) -> list[GroupResult]:
    """Group entries by ``prefix``, ``secret`` or ``empty``, sorted by group name.

    Raises ValueError for any other strategy.
    """
    if strategy not in _STRATEGIES:
        raise ValueError(
            f"unknown grouping strategy {strategy!r}: must be one of prefix, secret, empty"
        )
    delimiter = delimiter or "_"
    buckets: dict[str, list[Entry]] = {name: [] for name in _initial_buckets(strategy)}
    for entry in entries:
        buckets.setdefault(_bucket_key(entry, strategy, delimiter), []).append(entry)
    return [GroupResult(key=k, entries=buckets[k]) for k in sorted(buckets)]