"""Point-in-time captures of an env mapping, stored as JSON."""

from __future__ import annotations

import json
import os
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
_TIMESTAMP = re.compile(
    r"^(?P<head>\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<frac>\d+))?"
    r"(?P<zone>Z|z|[+-]\d{2}:\d{2})$"
)


@dataclass
class Snapshot:
    timestamp: datetime
    source: str
    entries: dict[str, str] = field(default_factory=dict)


class SnapshotError(Exception):
    """Raised when a snapshot cannot be written or read."""


def take_snapshot(source: str, entries: Mapping[str, str]) -> Snapshot:
    """Capture a copy of ``entries`` stamped with the current UTC time."""
    return Snapshot(
        timestamp=datetime.now(timezone.utc), source=source, entries=dict(entries)
    )


def _format_timestamp(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    text = moment.replace(microsecond=0).isoformat()
    head, offset = text[:19], text[19:]
    frac = f".{moment.microsecond:06d}".rstrip("0") if moment.microsecond else ""
    if moment.utcoffset() == timedelta(0):
        offset = "Z"
    return head + frac + offset


def _parse_timestamp(text: Any) -> datetime:
    if not isinstance(text, str):
        raise SnapshotError("snapshot: decode: timestamp must be a string")
    match = _TIMESTAMP.match(text)
    if match is None:
        raise SnapshotError(f"snapshot: decode: invalid timestamp {text!r}")
    frac = (match.group("frac") or "")[:6].ljust(6, "0")
    zone = match.group("zone")
    if zone in ("Z", "z"):
        zone = "+00:00"
    try:
        return datetime.fromisoformat(f"{match.group('head')}.{frac}{zone}")
    except ValueError as exc:
        raise SnapshotError(f"snapshot: decode: {exc}") from exc


def _to_json(snapshot: Snapshot) -> dict[str, Any]:
    return {
        "timestamp": _format_timestamp(snapshot.timestamp),
        "source": snapshot.source,
        "entries": dict(snapshot.entries),
    }


def _from_json(data: Any) -> Snapshot:
    if not isinstance(data, dict):
        raise SnapshotError("snapshot: decode: top level must be an object")
    raw_time = data.get("timestamp")
    timestamp = _ZERO_TIME if raw_time is None else _parse_timestamp(raw_time)
    source = data.get("source") or ""
    if not isinstance(source, str):
        raise SnapshotError("snapshot: decode: source must be a string")
    entries = data.get("entries") or {}
    if not isinstance(entries, dict) or not all(
        isinstance(v, str) for v in entries.values()
    ):
        raise SnapshotError("snapshot: decode: entries must map strings to strings")
    return Snapshot(timestamp=timestamp, source=source, entries=dict(entries))


def save_snapshot(path: str | os.PathLike[str], snapshot: Snapshot) -> None:
    """Write the snapshot to ``path`` as indented JSON."""
    text = json.dumps(_to_json(snapshot), indent=2) + "\n"
    try:
        Path(path).write_text(text, encoding="utf-8")
    except OSError as exc:
        raise SnapshotError(f"snapshot: create file: {exc}") from exc


def load_snapshot(path: str | os.PathLike[str]) -> Snapshot:
    """Read a snapshot written by ``save_snapshot``."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise SnapshotError(f"snapshot: open file: {exc}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"snapshot: decode: {exc}") from exc
    return _from_json(data)