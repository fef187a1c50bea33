"""Finding entries by key or value."""

from __future__ import annotations

import enum
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from envoysync.mask import is_secret, mask_entry
from envoysync.parsing import Entry


class SearchMode(str, enum.Enum):
    EXACT = "exact"
    PREFIX = "prefix"
    REGEX = "regex"


@dataclass(frozen=True)
class SearchResult:
    entry: Entry
    matched_on: str  # "key", "value" or "both"


def _coerce_mode(mode: SearchMode | str | None) -> SearchMode:
    try:
        return SearchMode(mode)
    except ValueError:
        return SearchMode.EXACT


def _matcher(query: str, mode: SearchMode, case_sensitive: bool) -> Callable[[str], bool]:
    if mode is SearchMode.REGEX:
        try:
            pattern = re.compile(query, 0 if case_sensitive else re.IGNORECASE)
        except re.error as exc:
            raise ValueError(f"invalid search pattern {query!r}: {exc}") from exc
        return lambda target: pattern.search(target) is not None

    needle = query if case_sensitive else query.lower()

    def match(target: str) -> bool:
        hay = target if case_sensitive else target.lower()
        if mode is SearchMode.PREFIX:
            return hay.startswith(needle)
        return hay == needle

    return match


def search(
    entries: Sequence[Entry],
    query: str,
    mode: SearchMode | str = SearchMode.EXACT,
    search_keys: bool = False,
    search_values: bool = False,
    case_sensitive: bool = False,
    mask_secrets: bool = False,
) -> list[SearchResult]:
    """Return entries whose key and/or value match ``query``.

    Keys are searched when neither keys nor values are selected. Empty or
    unknown modes match exactly. An invalid regex raises ValueError.
    """
    chosen = _coerce_mode(mode)
    if not search_keys and not search_values:
        search_keys = True
    match = _matcher(query, chosen, case_sensitive)

    results: list[SearchResult] = []
    for entry in entries:
        key_hit = search_keys and match(entry.key)
        value_hit = search_values and match(entry.value)
        if not key_hit and not value_hit:
            continue
        if key_hit and value_hit:
            matched_on = "both"
        elif value_hit:
            matched_on = "value"
        else:
            matched_on = "key"
        shown = mask_entry(entry) if mask_secrets and is_secret(entry.key) else entry
        results.append(SearchResult(entry=shown, matched_on=matched_on))
    return results