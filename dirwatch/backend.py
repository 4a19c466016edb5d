"""Watch backends: the shared link policy and the polling backend."""

from __future__ import annotations

import threading
from typing import Any

from .dir_watcher import GenericWatcher
from .errors import ErrorCode, create_error
from .fileinfo import FileInfo
from .filesystem import link_real_path
from .paths import add_slash_at_end
from .strings import starts_with_index
from .watcher import FileWatchListener

__all__ = ["Backend", "GenericBackend"]


class Backend:
    """State shared by every backend of a file watcher."""

    def __init__(self, file_watcher: Any) -> None:
        self.file_watcher = file_watcher
        self.init_ok = False
        self.is_generic = False

    def link_allowed(self, cur_path: str, link: str) -> bool:
        """Return whether a link to *link* found in *cur_path* may be watched.

        Links are allowed when both following links and out-of-scope links are
        enabled, or when the target lies below the directory holding the link.
        """
        watcher = self.file_watcher
        if watcher.follow_symlinks and watcher.allow_out_of_scope_links:
            return True
        return starts_with_index(cur_path, link) != -1


class GenericBackend(Backend):
    """A backend that polls every watched tree by comparing snapshots."""

    def __init__(self, file_watcher: Any, interval: float = 1.0) -> None:
        super().__init__(file_watcher)
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.interval = interval
        self.init_ok = True
        self.is_generic = True
        self._watches: list[GenericWatcher] = []
        self._last_watch_id = 0
        self._lock = threading.RLock()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def add_watch(
        self,
        directory: str,
        listener: FileWatchListener | None,
        recursive: bool = False,
    ) -> int:
        """Start watching *directory* and return the new watch id.

        Raises WatchError when the directory is missing, unreadable, already
        watched or a link that may not be followed.
        """
        path = add_slash_at_end(directory)
        info = FileInfo.of(path)
        if not info.is_directory():
            raise create_error(ErrorCode.FILE_NOT_FOUND, path)
        if not info.is_readable():
            raise create_error(ErrorCode.FILE_NOT_READABLE, path)
        with self._lock:
            if self.path_in_watches(path):
                raise create_error(ErrorCode.FILE_REPEATED, path)

            resolved = link_real_path(path)
            if resolved is not None:
                link, cur_path = resolved
                if self.path_in_watches(link):
                    raise create_error(ErrorCode.FILE_REPEATED, path)
                if not self.link_allowed(cur_path, link):
                    raise create_error(ErrorCode.FILE_OUT_OF_SCOPE, path)
                path = link

            self._last_watch_id += 1
            watch = GenericWatcher(self._last_watch_id, path, listener, self, recursive)
            self._watches.append(watch)
            return watch.id

    def _remove_first(self, predicate) -> None:
        with self._lock:
            for index, watch in enumerate(self._watches):
                if predicate(watch):
                    del self._watches[index]
                    watch.close()
                    return

    def remove_watch(self, directory: str) -> None:
        """Stop the watch whose directory is exactly *directory*, if any."""
        self._remove_first(lambda watch: watch.directory == directory)

    def remove_watch_by_id(self, watch_id: int) -> None:
        """Stop the watch with id *watch_id*, if any."""
        self._remove_first(lambda watch: watch.id == watch_id)

    def watch(self) -> None:
        """Start polling in a background thread; later calls do nothing."""
        if self._thread is not None:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="dirwatch-poller", daemon=True)
        self._thread.start()

    def _run(self) -> None:
        while True:
            self.poll()
            if self._stop.wait(self.interval):
                break

    def poll(self) -> None:
        """Scan every watched tree once and report the changes."""
        with self._lock:
            for watch in list(self._watches):
                watch.watch()

    def directories(self) -> list[str]:
        """Return the watched directories in the order they were added."""
        with self._lock:
            return [watch.directory for watch in self._watches]

    def path_in_watches(self, path: str) -> bool:
        """Return whether *path* is watched, as a root or below a root."""
        with self._lock:
            return any(
                watch.directory == path or watch.path_in_watches(path)
                for watch in self._watches
            )

    def close(self) -> None:
        """Stop polling and release every watch."""
        self.init_ok = False
        self._stop.set()
        thread, self._thread = self._thread, None
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        with self._lock:
            for watch in self._watches:
                watch.close()
            self._watches.clear()