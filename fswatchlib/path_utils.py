"""Helpers for listing directories and inspecting paths."""

from __future__ import annotations

import logging
import os
from typing import Optional

_log = logging.getLogger(__name__)


def get_directory_entries(path: str | os.PathLike[str]) -> list[str]:
    """Return the paths of the direct entries of *path*, sorted by name.

    Raises OSError if *path* cannot be listed.
    """
    with os.scandir(path) as iterator:
        entries = list(iterator)
    return [entry.path for entry in sorted(entries, key=lambda item: item.name)]


def get_subdirectories(path: str | os.PathLike[str]) -> list[str]:
    """Return the paths of the direct subdirectories of *path*, sorted by name.

    Errors while listing are logged and yield an empty list.
    """
    try:
        with os.scandir(path) as iterator:
            entries = [entry for entry in iterator if entry.is_dir()]
    except OSError as exc:
        _log.debug("Error accessing directory: %s", exc)
        return []
    return [entry.path for entry in sorted(entries, key=lambda item: item.name)]


def stat_path(path: str | os.PathLike[str], follow_symlink: bool = False) -> Optional[os.stat_result]:
    """Return the status of *path*, or None if it cannot be obtained.

    When *follow_symlink* is true the link itself is examined (lstat);
    otherwise the call resolves links (stat).
    """
    try:
        return os.lstat(path) if follow_symlink else os.stat(path)
    except OSError as exc:
        _log.debug("Cannot %s %s: %s", "lstat" if follow_symlink else "stat", path, exc)
        return None