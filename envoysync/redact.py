"""Replacing secret values before output."""

from __future__ import annotations

import dataclasses
import enum
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from envoysync.mask import MASKED_VALUE, is_secret
from envoysync.parsing import Entry


class RedactMode(str, enum.Enum):
    BLANK = "blank"
    MASK = "mask"
    PLACEHOLDER = "placeholder"


@dataclass
class RedactResult:
    entries: list[Entry]
    redacted: list[str] = field(default_factory=list)


def _redacted_value(key: str, mode: RedactMode | str) -> str:
    if mode == RedactMode.BLANK:
        return ""
    if mode == RedactMode.PLACEHOLDER:
        return f"{{{{{key.upper()}}}}}"
    return MASKED_VALUE


def redact(
    entries: Sequence[Entry],
    mode: RedactMode | str = RedactMode.MASK,
    keys: Iterable[str] | None = None,
) -> RedactResult:
    """Return a copy of entries with values redacted according to ``mode``.

    When ``keys`` is non-empty only those keys (compared case-insensitively)
    are redacted; otherwise every secret key is. Unknown modes mask.
    """
    forced = {k.upper() for k in keys or ()}

    out: list[Entry] = []
    redacted: list[str] = []
    for entry in entries:
        hit = entry.key.upper() in forced if forced else is_secret(entry.key)
        if hit:
            out.append(dataclasses.replace(entry, value=_redacted_value(entry.key, mode)))
            redacted.append(entry.key)
        else:
            out.append(entry)

    return RedactResult(entries=out, redacted=redacted)