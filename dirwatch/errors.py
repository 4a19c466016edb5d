"""Error codes for watch operations and a record of the last error message."""

from __future__ import annotations

import enum
import threading

__all__ = ["ErrorCode", "WatchError", "create_error", "last_error"]


class ErrorCode(enum.IntEnum):
    """Reasons a watch could not be added."""

    FILE_NOT_FOUND = -1
    FILE_REPEATED = -2
    FILE_OUT_OF_SCOPE = -3
    FILE_NOT_READABLE = -4
    FILE_REMOTE = -5
    UNSPECIFIED = -6


_TEMPLATES = {
    ErrorCode.FILE_NOT_FOUND: "File not found ( {} )",
    ErrorCode.FILE_REPEATED: "File reapeated in watches ( {} )",
    ErrorCode.FILE_OUT_OF_SCOPE: "Symlink file out of scope ( {} )",
    ErrorCode.FILE_REMOTE: (
        "File is located in a remote file system, use a generic watcher. ( {} )"
    ),
}

_lock = threading.Lock()
_last_error = ""


class WatchError(Exception):
    """Raised when a directory cannot be watched."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


def create_error(code: ErrorCode, log: str) -> WatchError:
    """Record the message for *code* as the last error and return the exception."""
    global _last_error
    code = ErrorCode(code)
    template = _TEMPLATES.get(code)
    message = template.format(log) if template is not None else log
    with _lock:
        _last_error = message
    return WatchError(code, message)


def last_error() -> str:
    """Return the message of the most recently created error."""
    with _lock:
        return _last_error