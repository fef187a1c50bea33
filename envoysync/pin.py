"""Freezing entry values at a point in time."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from envoysync.mask import MASKED_VALUE, is_secret
from envoysync.parsing import Entry


@dataclass(frozen=True)
class PinnedEntry:
    key: str
    value: str
    pinned_at: datetime
    comment: str


@dataclass
class PinResult:
    pinned: list[PinnedEntry] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


def _rfc3339(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    text = moment.replace(microsecond=0).isoformat()
    if moment.utcoffset() == timedelta(0):
        text = text[: -len("+00:00")] + "Z"
    return text


def pin(
    entries: Sequence[Entry],
    keys: Iterable[str] | None = None,
    now: datetime | None = None,
) -> PinResult:
    """Pin the given keys (all entry keys when none are given), in key order.

    Keys not present in ``entries`` are reported as skipped. Secret values are
    masked in the comment but kept as they are in ``value``.
    """
    if now is None:
        now = datetime.now(timezone.utc)

    index = {e.key: e.value for e in entries}
    wanted = list(keys or ())
    if not wanted:
        wanted = [e.key for e in entries]

    stamp = _rfc3339(now)
    result = PinResult()
    for key in sorted(wanted):
        if key not in index:
            result.skipped.append(key)
            continue
        value = index[key]
        display = MASKED_VALUE if is_secret(key) else value
        result.pinned.append(
            PinnedEntry(
                key=key,
                value=value,
                pinned_at=now,
                comment=f"pinned at {stamp} (value: {display})",
            )
        )
    return result


def pinned_to_entries(pinned: Iterable[PinnedEntry]) -> list[Entry]:
    """Turn pinned entries back into plain entries."""
    return [Entry(key=p.key, value=p.value) for p in pinned]