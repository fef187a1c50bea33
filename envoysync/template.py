"""Rendering {{KEY}} templates from env values."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class TemplateResult:
    rendered: str
    missing: list[str] = field(default_factory=list)


class TemplateError(Exception):
    """Raised when a template key is missing or the template cannot be read."""


def render_template(
    template: str, entries: Mapping[str, str], fail_on_missing: bool = False
) -> TemplateResult:
    """Substitute ``{{KEY}}`` placeholders with values from ``entries``.

    Unknown placeholders are removed and listed in ``missing``, or raise
    TemplateError when ``fail_on_missing`` is true.
    """
    output = template
    for key, value in entries.items():
        output = output.replace("{{" + key + "}}", value)

    missing: set[str] = set()
    while True:
        start = output.find("{{")
        if start == -1:
            break
        end = output.find("}}", start)
        if end == -1:
            break
        key = output[start + 2 : end]
        missing.add(key)
        if fail_on_missing:
            raise TemplateError(f"template key not found in env: {key}")
        output = output[:start] + output[end + 2 :]

    return TemplateResult(rendered=output, missing=sorted(missing))


def render_template_file(
    path: str | os.PathLike[str],
    entries: Mapping[str, str],
    fail_on_missing: bool = False,
) -> TemplateResult:
    """Read the template at ``path`` and render it."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise TemplateError(f"reading template file: {exc}") from exc
    return render_template(text, entries, fail_on_missing)