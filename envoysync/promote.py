"""Copying keys from one environment into another."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from envoysync.mask import is_secret, mask_entry
from envoysync.parsing import Entry


@dataclass(frozen=True)
class PromoteResult:
    key: str
    action: str  # "added", "updated", "skipped" or "unchanged"
    old_value: str = ""
    new_value: str = ""
    is_secret: bool = False


def promote(
    src: Sequence[Entry] | None,
    dst: Sequence[Entry],
    overwrite: bool = False,
    dry_run: bool = False,
    mask_secrets: bool = False,
) -> tuple[list[Entry], list[PromoteResult]]:
    """Promote ``src`` entries into ``dst``.

    New keys are added; keys present in both are replaced only with
    ``overwrite``. With ``dry_run`` the returned entries equal ``dst``.
    Raises ValueError when ``src`` is None.
    """
    if src is None:
        raise ValueError("promote: src is None")

    existing = {e.key: e.value for e in dst}
    out = dict(existing)
    results: list[PromoteResult] = []

    for entry in src:
        secret = is_secret(entry.key)
        exists = entry.key in existing
        old = existing.get(entry.key, "")
        shown_new, shown_old = entry.value, old
        if mask_secrets and secret:
            shown_new = mask_entry(entry).value
            shown_old = mask_entry(Entry(key=entry.key, value=old)).value

        if not exists:
            results.append(
                PromoteResult(entry.key, "added", new_value=shown_new, is_secret=secret)
            )
            if not dry_run:
                out[entry.key] = entry.value
        elif old == entry.value:
            results.append(
                PromoteResult(entry.key, "unchanged", shown_old, shown_new, secret)
            )
        elif overwrite:
            results.append(
                PromoteResult(entry.key, "updated", shown_old, shown_new, secret)
            )
            if not dry_run:
                out[entry.key] = entry.value
        else:
            results.append(
                PromoteResult(entry.key, "skipped", shown_old, shown_new, secret)
            )

    return [Entry(key=k, value=v) for k, v in out.items()], results