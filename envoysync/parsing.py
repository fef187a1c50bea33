"""Reading .env files into ordered entries."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Entry:
    """A single key/value pair, or a comment line when ``key`` is empty."""

    key: str = ""
    value: str = ""
    comment: str = ""


@dataclass
class EnvFile:
    """All entries read from one .env file, in file order."""

    path: str
    entries: list[Entry] = field(default_factory=list)

    def to_map(self) -> dict[str, str]:
        """Return the key/value pairs as a dict, leaving out comment lines."""
        return {e.key: e.value for e in self.entries if e.key}


def parse_lines(lines: Iterable[str], path: str = "") -> EnvFile:
    """Parse .env content given as lines.

    Blank lines are dropped, ``#`` lines become comment entries, and every
    other line must hold ``KEY=VALUE``; otherwise ``ValueError`` is raised.
    """
    env = EnvFile(path=str(path))
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        if line.startswith("#"):
            env.entries.append(Entry(comment=line))
            continue
        key, sep, value = line.partition("=")
        if not sep:
            raise ValueError(f"invalid line: {line!r}")
        env.entries.append(Entry(key=key.strip(), value=value.strip().strip('"')))
    return env


def parse(path: str | Path) -> EnvFile:
    """Read and parse the .env file at ``path``."""
    with open(path, encoding="utf-8") as handle:
        return parse_lines(handle, str(path))