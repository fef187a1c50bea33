"""Polling a file for content changes."""

from __future__ import annotations

import hashlib
import os
import threading
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class WatchEvent:
    file: str
    changed: bool = False
    error: Exception | None = None


def file_checksum(path: str | os.PathLike[str]) -> str:
    """Return the hex MD5 digest of the file's contents."""
    digest = hashlib.md5(usedforsecurity=False)
    with open(path, "rb") as handle:
        for chunk in iter(lambda: handle.read(65536), b""):
            digest.update(chunk)
    return digest.hexdigest()


class Watcher:
    """Watches one file by comparing checksums at a fixed interval.

    The first checksum is taken on construction, so a missing file raises
    OSError straight away.
    """

    def __init__(self, path: str | os.PathLike[str], interval: float = 1.0) -> None:
        self.path = os.fspath(path)
        self.interval = interval
        self._last = file_checksum(self.path)

    def poll(self) -> WatchEvent | None:
        """Check the file once; return an event on change or error, else None."""
        try:
            current = file_checksum(self.path)
        except OSError as exc:
            return WatchEvent(file=self.path, error=exc)
        if current == self._last:
            return None
        self._last = current
        return WatchEvent(file=self.path, changed=True)

    def events(self, stop: threading.Event) -> Iterator[WatchEvent]:
        """Yield events every interval until ``stop`` is set."""
        while not stop.wait(self.interval):
            event = self.poll()
            if event is not None:
                yield event