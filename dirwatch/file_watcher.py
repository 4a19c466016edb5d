"""The public entry point for watching directories."""

from __future__ import annotations

from types import TracebackType

from .backend import GenericBackend
from .errors import ErrorCode, create_error
from .filesystem import is_remote_fs
from .watcher import FileWatchListener

__all__ = ["FileWatcher"]


class FileWatcher:
    """Watches directories and reports their changes to listeners.

    Changes are found by polling; call ``watch`` to poll in the background or
    ``poll`` to scan once in the calling thread.
    """

    def __init__(self, use_generic: bool = False, interval: float = 1.0) -> None:
        self.use_generic = use_generic
        self.follow_symlinks = False
        self.allow_out_of_scope_links = False
        self._backend = GenericBackend(self, interval)

    def add_watch(
        self,
        directory: str,
        listener: FileWatchListener | None,
        recursive: bool = False,
    ) -> int:
        """Watch *directory* and return the watch id; raises WatchError on failure."""
        if self._backend.is_generic or not is_remote_fs(directory):
            return self._backend.add_watch(directory, listener, recursive)
        raise create_error(ErrorCode.FILE_REMOTE, directory)

    def remove_watch(self, target: str | int) -> None:
        """Stop a watch given by its id or by its directory."""
        if isinstance(target, str):
            self._backend.remove_watch(target)
        else:
            self._backend.remove_watch_by_id(target)

    def watch(self) -> None:
        """Start polling the watches in a background thread."""
        self._backend.watch()

    def poll(self) -> None:
        """Scan every watch once in the calling thread."""
        self._backend.poll()

    def directories(self) -> list[str]:
        """Return the watched directories."""
        return self._backend.directories()

    def close(self) -> None:
        """Stop polling and release every watch."""
        self._backend.close()

    def __enter__(self) -> FileWatcher:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()