"""Helpers for reading JSON values and preparing directories on disk."""

from __future__ import annotations

import logging
import os
from itertools import accumulate
from typing import Any

log = logging.getLogger(__name__)


def get_json_string(obj: Any, key: str) -> str | None:
    """Return the string stored under *key* in a decoded JSON object.

    Returns None when *obj* itself is None, and an empty string when the key
    is missing or does not hold a string.
    """
    if obj is None:
        return None
    if isinstance(obj, dict):
        value = obj.get(key)
        if isinstance(value, str):
            return value
    return ""


def ensure_dir_exists(path: str | os.PathLike[str]) -> None:
    """Create every directory leading up to the file at *path*.

    Directories that already exist are left alone; other failures are logged
    and the remaining levels are still attempted.
    """
    components = os.fspath(path).split("/")[:-1]
    for directory in accumulate(components, lambda head, tail: f"{head}/{tail}"):
        if not directory:
            continue
        try:
            os.mkdir(directory, 0o755)
        except FileExistsError:
            pass
        except OSError as exc:
            log.warning("Failed to create directory %s: %s", directory, exc)