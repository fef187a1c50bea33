"""Rendering entries as lines in a chosen layout."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass

from envoysync.mask import MASKED_VALUE, is_secret
from envoysync.parsing import Entry


class FormatStyle(str, enum.Enum):
    ALIGNED = "aligned"
    COMPACT = "compact"
    SPACED = "spaced"


@dataclass
class FormatResult:
    lines: list[str]
    modified: int


def _coerce_style(style: FormatStyle | str | None) -> FormatStyle:
    try:
        return FormatStyle(style)
    except ValueError:
        return FormatStyle.COMPACT


def format_entries(
    entries: Sequence[Entry],
    style: FormatStyle | str = FormatStyle.COMPACT,
    sort_keys: bool = False,
    mask_secret: bool = False,
) -> FormatResult:
    """Format entries in one style; unknown or empty styles fall back to compact.

    ``modified`` counts lines that differ from the plain ``KEY=VALUE`` form.
    """
    chosen = _coerce_style(style)
    src = sorted(entries, key=lambda e: e.key) if sort_keys else list(entries)
    width = max((len(e.key) for e in src), default=0)

    lines: list[str] = []
    modified = 0
    for e in src:
        value = MASKED_VALUE if mask_secret and is_secret(e.key) else e.value
        if chosen is FormatStyle.ALIGNED:
            line = f"{e.key.ljust(width)} = {value}"
        elif chosen is FormatStyle.SPACED:
            line = f"{e.key} = {value}"
        else:
            line = f"{e.key}={value}"
        if line != f"{e.key}={e.value}":
            modified += 1
        lines.append(line)

    return FormatResult(lines=lines, modified=modified)