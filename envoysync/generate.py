"""Producing template .env content from key names."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from envoysync.mask import MASKED_VALUE, is_secret

DEFAULT_PLACEHOLDER = "CHANGEME"


@dataclass
class GenerateResult:
    lines: list[str]
    count: int


def generate(
    keys: Sequence[str],
    include_comments: bool = False,
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> GenerateResult:
    """Build template lines; secret keys get the mask instead of the placeholder.

    Blank keys are skipped, but ``count`` is the number of keys given.
    """
    placeholder = placeholder or DEFAULT_PLACEHOLDER
    lines: list[str] = []
    for raw in keys:
        key = raw.strip()
        if not key:
            continue
        secret = is_secret(key)
        if include_comments:
            lines.append(
                f"# {key} — secret value, handle with care" if secret else f"# {key}"
            )
        lines.append(f"{key}={MASKED_VALUE if secret else placeholder}")
    return GenerateResult(lines=lines, count=len(keys))


def generate_from_entries(
    entries: Mapping[str, str],
    include_comments: bool = False,
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> GenerateResult:
    """Build a template from an env mapping's sorted keys, dropping its values."""
    return generate(sorted(entries), include_comments, placeholder)