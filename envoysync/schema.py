"""JSON schemas describing the keys an env file is expected to hold."""

from __future__ import annotations

import json
import os
import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from envoysync.parsing import Entry


@dataclass(frozen=True)
class SchemaField:
    key: str
    required: bool = False
    pattern: str = ""
    secret: bool = False


@dataclass
class Schema:
    fields: list[SchemaField] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form, leaving out an empty pattern and a false secret."""
        out = []
        for f in self.fields:
            item: dict[str, Any] = {"key": f.key, "required": f.required}
            if f.pattern:
                item["pattern"] = f.pattern
            if f.secret:
                item["secret"] = f.secret
            out.append(item)
        return {"fields": out}


@dataclass(frozen=True)
class SchemaViolation:
    key: str
    message: str

    def __str__(self) -> str:
        return f"{self.key}: {self.message}"


class SchemaError(ValueError):
    """Raised when a schema file cannot be read or parsed."""


def _typed(data: dict[str, Any], name: str, kind: type, default: Any) -> Any:
    value = data.get(name)
    if value is None:
        return default
    if not isinstance(value, kind):
        raise SchemaError(f"parse schema: field {name!r} must be {kind.__name__}")
    return value


def _schema_from_data(data: Any) -> Schema:
    if data is None:
        return Schema()
    if not isinstance(data, dict):
        raise SchemaError("parse schema: top level must be an object")
    raw_fields = _typed(data, "fields", list, [])
    fields = []
    for item in raw_fields:
        if not isinstance(item, dict):
            raise SchemaError("parse schema: each field must be an object")
        fields.append(
            SchemaField(
                key=_typed(item, "key", str, ""),
                required=_typed(item, "required", bool, False),
                pattern=_typed(item, "pattern", str, ""),
                secret=_typed(item, "secret", bool, False),
            )
        )
    return Schema(fields=fields)


def load_schema(path: str | os.PathLike[str]) -> Schema:
    """Read a JSON schema file; raises SchemaError on read or parse failure."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaError(f"read schema: {exc}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaError(f"parse schema: {exc}") from exc
    return _schema_from_data(data)


def check_schema(entries: Sequence[Entry], schema: Schema) -> list[SchemaViolation]:
    """Check entries against the schema and return every violation found."""
    index = {e.key: e.value for e in entries}
    violations: list[SchemaViolation] = []

    for f in schema.fields:
        if f.key not in index:
            if f.required:
                violations.append(SchemaViolation(f.key, "required key is missing"))
            continue
        value = index[f.key]
        if f.required and value == "":
            violations.append(SchemaViolation(f.key, "required key has empty value"))
        if f.pattern:
            try:
                matched = re.search(f.pattern, value) is not None
            except re.error as exc:
                violations.append(
                    SchemaViolation(f.key, f"invalid pattern {f.pattern!r}: {exc}")
                )
                continue
            if not matched:
                violations.append(
                    SchemaViolation(
                        f.key, f"value does not match pattern {f.pattern!r}"
                    )
                )
    return violations