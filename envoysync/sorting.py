"""Ordering entries by one of several strategies."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass

from envoysync.mask import is_secret
from envoysync.parsing import Entry


class SortStrategy(str, enum.Enum):
    ALPHA = "alpha"
    ALPHA_DESC = "alpha-desc"
    SECRET = "secret"
    LENGTH = "length"


@dataclass
class SortResult:
    entries: list[Entry]
    strategy: SortStrategy
    total: int


def sort_entries(
    entries: Sequence[Entry], strategy: SortStrategy | str = SortStrategy.ALPHA
) -> SortResult:
    """Return a sorted copy of the entries; an unknown strategy raises ValueError."""
    if strategy == "":
        strategy = SortStrategy.ALPHA
    try:
        strategy = SortStrategy(strategy)
    except ValueError:
        raise ValueError(f"unknown sort strategy: {strategy!r}") from None

    if strategy is SortStrategy.ALPHA:
        ordered = sorted(entries, key=lambda e: e.key.lower())
    elif strategy is SortStrategy.ALPHA_DESC:
        ordered = sorted(entries, key=lambda e: e.key.lower(), reverse=True)
    elif strategy is SortStrategy.SECRET:
        ordered = sorted(entries, key=lambda e: (not is_secret(e.key), e.key.lower()))
    else:
        ordered = sorted(entries, key=lambda e: (len(e.key), e.key.lower()))

    return SortResult(entries=ordered, strategy=strategy, total=len(ordered))