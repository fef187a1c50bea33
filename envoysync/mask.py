"""Detecting and hiding secret values."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping

from envoysync.parsing import Entry

DEFAULT_SECRET_PATTERNS: tuple[str, ...] = (
    "SECRET",
    "PASSWORD",
    "PASSWD",
    "TOKEN",
    "API_KEY",
    "PRIVATE_KEY",
    "AUTH",
    "CREDENTIAL",
)

MASKED_VALUE = "***"


def is_secret(key: str, patterns: Iterable[str] | None = None) -> bool:
    """Return True if the upper-cased key contains any of the patterns."""
    if patterns is None:
        patterns = DEFAULT_SECRET_PATTERNS
    upper = key.upper()
    return any(p in upper for p in patterns)


def mask_entry(entry: Entry, patterns: Iterable[str] | None = None) -> Entry:
    """Return the entry with its value replaced by the mask if the key is secret."""
    if entry.key and is_secret(entry.key, patterns):
        return dataclasses.replace(entry, value=MASKED_VALUE)
    return entry


def masked_map(
    mapping: Mapping[str, str], patterns: Iterable[str] | None = None
) -> dict[str, str]:
    """Return a copy of the mapping with secret values masked."""
    pats = tuple(DEFAULT_SECRET_PATTERNS if patterns is None else patterns)
    return {k: MASKED_VALUE if is_secret(k, pats) else v for k, v in mapping.items()}