"""Style and correctness checks for env entries."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from envoysync.parsing import Entry


@dataclass(frozen=True)
class LintIssue:
    line: int
    key: str
    message: str
    severity: str  # "warn" or "error"

    def __str__(self) -> str:
        return f"[{self.severity}] line {self.line} ({self.key}): {self.message}"


@dataclass
class LintResult:
    issues: list[LintIssue] = field(default_factory=list)

    def has_errors(self) -> bool:
        """Return True if any issue has error severity."""
        return any(issue.severity == "error" for issue in self.issues)


def lint(entries: Sequence[Entry]) -> LintResult:
    """Report duplicate keys, non upper-case keys, empty and padded values."""
    result = LintResult()
    seen: dict[str, int] = {}

    for line, entry in enumerate(entries, start=1):
        key, value = entry.key, entry.value

        def report(message: str, severity: str = "warn") -> None:
            result.issues.append(LintIssue(line, key, message, severity))

        if key in seen:
            report(f"duplicate key, first seen at line {seen[key]}", "error")
        seen[key] = line

        if key != key.upper():
            report("key should be UPPER_SNAKE_CASE")
        if not value.strip():
            report("value is empty")
        if value != value.strip():
            report("value has leading or trailing whitespace")

    return result