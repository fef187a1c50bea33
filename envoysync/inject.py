"""Setting env entries as variables of the running process."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field


@dataclass
class InjectResult:
    injected: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


class InjectError(RuntimeError):
    """Raised when a variable cannot be set; ``result`` holds the work done so far."""

    def __init__(self, key: str, cause: Exception, result: InjectResult) -> None:
        super().__init__(f"inject: failed to set {key!r}: {cause}")
        self.key = key
        self.result = result


def inject(
    entries: Mapping[str, str],
    overwrite: bool = False,
    keys: Iterable[str] | None = None,
) -> InjectResult:
    """Set entries in ``os.environ`` in key order.

    Existing variables are left alone unless ``overwrite`` is true. When
    ``keys`` is given and non-empty, only those keys are considered.
    """
    wanted = set(keys or ())
    result = InjectResult()

    for key in sorted(entries):
        if wanted and key not in wanted:
            continue
        if key in os.environ and not overwrite:
            result.skipped.append(key)
            continue
        try:
            os.environ[key] = entries[key]
        except (OSError, ValueError) as exc:
            raise InjectError(key, exc, result) from exc
        result.injected.append(key)

    return result