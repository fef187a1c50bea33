"""Checking env mappings for missing keys and empty values."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ValidationIssue:
    key: str
    message: str

    def __str__(self) -> str:
        return f"key {json.dumps(self.key)}: {self.message}"


class ValidationFailed(ValueError):
    """Raised by ``ValidationResult.raise_for_errors`` when issues were found."""

    def __init__(self, result: ValidationResult) -> None:
        super().__init__(str(result))
        self.result = result


@dataclass
class ValidationResult:
    errors: list[ValidationIssue] = field(default_factory=list)

    def add(self, key: str, message: str) -> None:
        """Record one issue."""
        self.errors.append(ValidationIssue(key, message))

    def ok(self) -> bool:
        """Return True when no issue was recorded."""
        return not self.errors

    def raise_for_errors(self) -> None:
        """Raise ValidationFailed if any issue was recorded."""
        if self.errors:
            raise ValidationFailed(self)

    def __str__(self) -> str:
        return "; ".join(str(e) for e in self.errors)


def validate_against_schema(
    env: Mapping[str, str], schema: Mapping[str, str]
) -> ValidationResult:
    """Check that every schema key is in ``env`` with a non-blank value."""
    result = ValidationResult()
    for key in schema:
        if key not in env:
            result.add(key, "missing required key")
        elif not env[key].strip():
            result.add(key, "value is empty")
    return result


def validate_keys(env: Mapping[str, str]) -> ValidationResult:
    """Report every key whose value is blank."""
    result = ValidationResult()
    for key, value in env.items():
        if not value.strip():
            result.add(key, "value is empty")
    return result