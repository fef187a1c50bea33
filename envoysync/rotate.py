"""Replacing secret values with freshly generated ones."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from envoysync.mask import is_secret
from envoysync.parsing import Entry

RotateFunc = Callable[[str, str], str]


@dataclass(frozen=True)
class RotateResult:
    key: str
    old_value: str
    new_value: str = ""
    rotated: bool = False
    skipped: bool = False
    reason: str = ""


class RotateError(RuntimeError):
    """Raised when the value generator fails for a key."""

    def __init__(self, key: str, cause: Exception) -> None:
        super().__init__(f"rotate: key {key!r}: {cause}")
        self.key = key


def rotate(
    entries: Sequence[Entry],
    fn: RotateFunc,
    force_keys: Iterable[str] | None = None,
) -> tuple[list[Entry], list[RotateResult]]:
    """Replace values of secret keys with ``fn(key, old_value)``.

    Non-secret keys are skipped unless listed in ``force_keys`` (compared
    case-insensitively). An exception from ``fn`` raises RotateError.
    """
    forced = {k.upper() for k in force_keys or ()}
    updated: list[Entry] = []
    results: list[RotateResult] = []

    for entry in entries:
        if not is_secret(entry.key) and entry.key.upper() not in forced:
            updated.append(entry)
            results.append(
                RotateResult(entry.key, entry.value, skipped=True, reason="not a secret")
            )
            continue

        try:
            new_value = fn(entry.key, entry.value)
        except Exception as exc:
            raise RotateError(entry.key, exc) from exc

        updated.append(dataclasses.replace(entry, value=new_value))
        results.append(RotateResult(entry.key, entry.value, new_value, rotated=True))

    return updated, results