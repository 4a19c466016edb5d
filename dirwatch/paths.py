"""Pure path-string helpers that work with the platform directory separator."""

from __future__ import annotations

import os
import sys
import unicodedata

__all__ = [
    "os_slash",
    "slash_at_end",
    "add_slash_at_end",
    "remove_slash_at_end",
    "file_name_from_path",
    "path_remove_file_name",
    "precompose_file_name",
]


def os_slash() -> str:
    """Return the directory separator of the running platform."""
    return os.sep


def slash_at_end(path: str) -> bool:
    """Return whether *path* ends with the separator."""
    return bool(path) and path[-1] == os_slash()


def add_slash_at_end(path: str) -> str:
    """Return *path* with a trailing separator; paths of one character are left alone."""
    if len(path) > 1 and path[-1] != os_slash():
        return path + os_slash()
    return path


def remove_slash_at_end(path: str) -> str:
    """Return *path* without one trailing separator; paths of one character are left alone."""
    if len(path) > 1 and path[-1] == os_slash():
        return path[:-1]
    return path


def file_name_from_path(path: str) -> str:
    """Return the last component of *path*, ignoring a trailing separator."""
    path = remove_slash_at_end(path)
    pos = path.rfind(os_slash())
    return path[pos + 1 :] if pos != -1 else path


def path_remove_file_name(path: str) -> str:
    """Return *path* up to and including the separator before its last component."""
    path = remove_slash_at_end(path)
    pos = path.rfind(os_slash())
    return path[: pos + 1] if pos != -1 else path


def precompose_file_name(name: str) -> str:
    """Return *name* in composed Unicode form on macOS, unchanged elsewhere."""
    if sys.platform == "darwin":
        return unicodedata.normalize("NFC", name)
    return name