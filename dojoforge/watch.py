"""Polling watcher that rebuilds a project when Cairo sources change."""

from __future__ import annotations

import enum
import logging
import os
import time
from collections.abc import Callable, Iterable
from pathlib import Path

_log = logging.getLogger(__name__)

MANIFEST_FILE_NAME = "Scarb.toml"
CAIRO_EXTENSION = ".cairo"


class EventKind(enum.Enum):
    """Kind of a file system event."""

    CREATE = "create"
    MODIFY = "modify"
    REMOVE = "remove"
    ACCESS = "access"
    OTHER = "other"


_RELEVANT_KINDS = frozenset({EventKind.CREATE, EventKind.MODIFY, EventKind.REMOVE})


def is_rebuild_needed(kind: EventKind, paths: Iterable[str | os.PathLike[str]]) -> bool:
    """Return True if an event touches a Cairo file or the Scarb manifest."""
    if kind not in _RELEVANT_KINDS:
        return False
    needed = False
    for raw in paths:
        path = Path(raw)
        if path.name == MANIFEST_FILE_NAME:
            _log.info("Rebuild to include Scarb.toml changes.")
            needed = True
        elif path.suffix == CAIRO_EXTENSION:
            _log.info("Rebuild from Cairo file change: %s", path)
            needed = True
    return needed


_Stamp = tuple[int, int]


class DirectoryPoller:
    """Detects created, modified and removed files under a directory."""

    def __init__(self, directory: str | os.PathLike[str]) -> None:
        self.directory = Path(directory)
        self._snapshot = self._scan()

    def _scan(self) -> dict[Path, _Stamp]:
        if not self.directory.is_dir():
            return {}
        snapshot: dict[Path, _Stamp] = {}
        for path in self.directory.rglob("*"):
            try:
                stat = path.stat()
            except OSError:
                continue
            if path.is_file():
                snapshot[path] = (stat.st_mtime_ns, stat.st_size)
        return snapshot

    def poll(self) -> list[tuple[EventKind, Path]]:
        """Return the events since the previous poll, sorted by path."""
        current = self._scan()
        previous = self._snapshot
        self._snapshot = current
        events: list[tuple[EventKind, Path]] = []
        for path in sorted(current.keys() | previous.keys()):
            if path not in previous:
                events.append((EventKind.CREATE, path))
            elif path not in current:
                events.append((EventKind.REMOVE, path))
            elif current[path] != previous[path]:
                events.append((EventKind.MODIFY, path))
        return events


def watch(
    directory: str | os.PathLike[str],
    build: Callable[[], object],
    interval: float = 1.0,
    iterations: int | None = None,
) -> None:
    """Build once, then rebuild on every relevant change under the directory.

    A failing initial build raises; later failures are logged and ignored.
    Runs forever unless a number of polling iterations is given.
    """
    poller = DirectoryPoller(directory)
    build()
    _log.info("Initial build completed, waiting for changes.")

    done = 0
    while iterations is None or done < iterations:
        time.sleep(interval)
        for kind, path in poller.poll():
            _log.debug("Processing event %s on %s.", kind.value, path)
            if is_rebuild_needed(kind, [path]):
                try:
                    build()
                except Exception:
                    _log.exception("Rebuild failed.")
        done += 1