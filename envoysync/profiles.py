"""Named environment profiles stored as .env files in a directory."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from envoysync.parsing import parse


@dataclass
class Profile:
    name: str
    entries: dict[str, str] = field(default_factory=dict)


class ProfileNotFoundError(LookupError):
    """Raised when no file exists for a requested profile."""


def load_profile(directory: str | os.PathLike[str], name: str) -> Profile:
    """Load ``<dir>/<name>.env`` or, failing that, ``<dir>/.env.<name>``."""
    base = Path(directory)
    candidates = [base / f"{name}.env", base / f".env.{name}"]

    for path in candidates:
        if path.exists():
            return Profile(name=name, entries=parse(path).to_map())

    tried = ", ".join(str(p) for p in candidates)
    raise ProfileNotFoundError(f"profile {name!r} not found in {base} (tried {tried})")


def _profile_name(filename: str) -> str:
    if filename.endswith(".env") and filename != ".env":
        return filename[: -len(".env")]
    if filename.startswith(".env."):
        return filename[len(".env.") :]
    return ""


def list_profiles(directory: str | os.PathLike[str]) -> list[str]:
    """Return the profile names found in ``directory``, in file-name order."""
    with os.scandir(directory) as scan:
        names = sorted(entry.name for entry in scan if not entry.is_dir())

    profiles: list[str] = []
    for filename in names:
        profile = _profile_name(filename)
        if profile and profile not in profiles:
            profiles.append(profile)
    return profiles