"""Applying set, delete and rename operations to entries."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from envoysync.parsing import Entry


@dataclass(frozen=True)
class PatchOp:
    key: str
    op: str  # "set", "delete" or "rename"
    value: str = ""
    new_key: str = ""


@dataclass(frozen=True)
class PatchResult:
    op: str
    key: str
    applied: bool
    reason: str = ""


class PatchError(ValueError):
    """Raised for an unknown operation or a rename without a new key."""


def _first_index(entries: list[Entry], key: str) -> int | None:
    return next((i for i, e in enumerate(entries) if e.key == key), None)


def patch(
    entries: Sequence[Entry], ops: Iterable[PatchOp]
) -> tuple[list[Entry], list[PatchResult]]:
    """Apply ``ops`` in order to a copy of ``entries``.

    Returns the patched entries and one result per operation.
    """
    result = list(entries)
    results: list[PatchResult] = []

    for op in ops:
        if op.op == "set":
            index = _first_index(result, op.key)
            if index is None:
                result.append(Entry(key=op.key, value=op.value))
            else:
                result[index] = dataclasses.replace(result[index], value=op.value)
            results.append(PatchResult("set", op.key, True))

        elif op.op == "delete":
            kept = [e for e in result if e.key != op.key]
            deleted = len(kept) != len(result)
            result = kept
            results.append(
                PatchResult("delete", op.key, True)
                if deleted
                else PatchResult("delete", op.key, False, "key not found")
            )

        elif op.op == "rename":
            if not op.new_key:
                raise PatchError(
                    f"rename op for {op.key!r} requires a non-empty new_key"
                )
            index = _first_index(result, op.key)
            if index is None:
                results.append(PatchResult("rename", op.key, False, "key not found"))
            else:
                result[index] = dataclasses.replace(result[index], key=op.new_key)
                results.append(PatchResult("rename", op.key, True))

        else:
            raise PatchError(f"unknown patch op {op.op!r} for key {op.key!r}")

    return result, results