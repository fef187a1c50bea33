"""Expanding $VAR and ${VAR} references between entries."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence

from envoysync.parsing import Entry

_REFERENCE = re.compile(r"\$\{([^}]+)\}|\$([A-Za-z_][A-Za-z0-9_]*)")


class InterpolationError(ValueError):
    """Raised when a referenced variable is undefined and that is not allowed."""

    def __init__(self, key: str, variable: str) -> None:
        super().__init__(f"interpolating {key!r}: undefined variable {variable!r}")
        self.key = key
        self.variable = variable


def _expand(
    owner: str, value: str, env: Mapping[str, str], fail_on_missing: bool
) -> str:
    def substitute(match: re.Match[str]) -> str:
        name = match.group(1) or match.group(2)
        if name in env:
            return env[name]
        if fail_on_missing:
            raise InterpolationError(owner, name)
        return ""

    return _REFERENCE.sub(substitute, value)


def interpolate(
    entries: Sequence[Entry], fail_on_missing: bool = False
) -> list[Entry]:
    """Resolve references in values, in order; earlier entries are visible to later ones.

    Undefined references become empty strings, or raise InterpolationError
    when ``fail_on_missing`` is true.
    """
    resolved: dict[str, str] = {}
    result: list[Entry] = []
    for entry in entries:
        expanded = _expand(entry.key, entry.value, resolved, fail_on_missing)
        resolved[entry.key] = expanded
        result.append(Entry(key=entry.key, value=expanded))
    return result