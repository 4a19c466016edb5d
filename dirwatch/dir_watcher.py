"""Polling watchers that compare directory snapshots."""

from __future__ import annotations

from typing import Any

from .fileinfo import FileInfo
from .filesystem import is_remote_fs, link_real_path
from .paths import (
    add_slash_at_end,
    file_name_from_path,
    os_slash,
    path_remove_file_name,
    remove_slash_at_end,
)
from .snapshot import DirectorySnapshot
from .strings import split
from .watcher import Action, FileWatchListener, Watcher

__all__ = ["DirWatcher", "GenericWatcher"]


class DirWatcher:
    """Watches one directory by snapshot and holds watchers for its subdirectories."""

    def __init__(
        self,
        parent: DirWatcher | None,
        watch: GenericWatcher,
        directory: str,
        recursive: bool,
        report_new_files: bool = False,
    ) -> None:
        self.parent = parent
        self.watch_owner = watch
        self.recursive = recursive
        self.directories: dict[str, DirWatcher] = {}
        self.deleted = False
        self.dir_snap = DirectorySnapshot()
        self._reset_directory(directory)

        diff = self.dir_snap.scan()
        if report_new_files and diff.changed():
            for info in diff.files_created:
                self._handle_action(info.filepath, Action.ADD)

    @property
    def path(self) -> str:
        """The directory this watcher looks at."""
        return self.dir_snap.directory_info.filepath

    def _backend(self) -> Any:
        return self.watch_owner.backend

    def _reset_directory(self, directory: str) -> None:
        target = directory
        if self.watch_owner.directory != directory:
            slash = os_slash()
            rooted = bool(directory) and (directory[0] == slash or directory[-1] == slash)
            if not rooted and self.parent is not None:
                target = self.parent.path + add_slash_at_end(directory)
        self.dir_snap.set_directory_info(target)

    def _handle_action(self, filename: str, action: Action, old_filename: str = "") -> None:
        listener = self.watch_owner.listener
        if listener is None:
            return
        listener.handle_file_action(
            self.watch_owner.id,
            self.path,
            file_name_from_path(filename),
            action,
            old_filename,
        )

    def _skip_directory(self, path: str) -> tuple[bool, str]:
        """Decide whether *path* may get a watcher; return the flag and the path to use."""
        backend = self._backend()
        resolved = link_real_path(path)
        if resolved is None:
            known = self.watch_owner.path_in_watches(path) or backend.path_in_watches(path)
            return known, path
        link, cur_path = resolved
        if not backend.file_watcher.follow_symlinks:
            return True, path
        if (
            backend.path_in_watches(link)
            or self.watch_owner.path_in_watches(link)
            or not backend.link_allowed(cur_path, link)
        ):
            return True, path
        return False, link

    def add_children(self, report_new_files: bool = True) -> None:
        """Create watchers for the readable local subdirectories, recursively."""
        if not self.recursive:
            return
        for name, info in list(self.dir_snap.files.items()):
            if not (info.is_directory() and info.is_readable()):
                continue
            if is_remote_fs(info.filepath):
                continue
            resolved = link_real_path(info.filepath)
            directory = name
            backend = self._backend()
            if resolved is not None:
                link, cur_path = resolved
                if not backend.file_watcher.follow_symlinks:
                    continue
                if (
                    backend.path_in_watches(link)
                    or self.watch_owner.path_in_watches(link)
                    or not backend.link_allowed(cur_path, link)
                ):
                    continue
                directory = link
            elif self.watch_owner.path_in_watches(directory) or backend.path_in_watches(
                directory
            ):
                continue

            if report_new_files:
                self._handle_action(directory, Action.ADD)

            child = DirWatcher(self, self.watch_owner, directory, self.recursive, report_new_files)
            self.directories[directory] = child
            child.add_children(report_new_files)

    def watch(self, report_own_change: bool = False) -> None:
        """Scan this directory, report the changes and then scan the subdirectories."""
        diff = self.dir_snap.scan()

        listener = self.watch_owner.listener
        if report_own_change and diff.dir_changed and self.parent is not None and listener:
            listener.handle_file_action(
                self.watch_owner.id,
                path_remove_file_name(self.path),
                file_name_from_path(self.path),
                Action.MODIFIED,
            )

        if diff.changed():
            for info in diff.files_created:
                self._handle_action(info.filepath, Action.ADD)
            for info in diff.files_modified:
                self._handle_action(info.filepath, Action.MODIFIED)
            for info in diff.files_deleted:
                self._handle_action(info.filepath, Action.DELETE)
            for old_name, info in diff.files_moved:
                self._handle_action(info.filepath, Action.MOVED, old_name)

            for info in diff.dirs_created:
                self._create_directory(info.filepath)
            for info in diff.dirs_modified:
                self._handle_action(info.filepath, Action.MODIFIED)
            for info in diff.dirs_deleted:
                self._handle_action(info.filepath, Action.DELETE)
                self._remove_directory(info.filepath)
            for old_name, info in diff.dirs_moved:
                self._handle_action(info.filepath, Action.MOVED, old_name)
                self._move_directory(old_name, info.filepath)

        for child in list(self.directories.values()):
            child.watch()

    def watch_dir(self, directory: str) -> None:
        """Scan the watcher of *directory*, reporting its own change too."""
        if self._backend().file_watcher.allow_out_of_scope_links:
            watcher = self.find_dir_watcher(directory)
        else:
            watcher = self.find_dir_watcher_fast(directory)
        if watcher is not None:
            watcher.watch(True)

    def find_dir_watcher_fast(self, directory: str) -> DirWatcher | None:
        """Find the watcher of *directory* by walking its components below this one."""
        base = self.path
        if len(directory) >= len(base):
            directory = directory[max(len(base) - 1, 0) :]
        if len(directory) == 1:
            return self
        watcher = self
        for part in split(directory, os_slash(), False):
            child = watcher.directories.get(part)
            if child is None:
                return None
            watcher = child
        return watcher

    def find_dir_watcher(self, directory: str) -> DirWatcher | None:
        """Find the watcher whose path is exactly *directory*, searching the whole tree."""
        if self.path == directory:
            return self
        for child in self.directories.values():
            found = child.find_dir_watcher(directory)
            if found is not None:
                return found
        return None

    def _create_directory(self, new_dir: str) -> DirWatcher | None:
        name = file_name_from_path(remove_slash_at_end(new_dir))
        directory = add_slash_at_end(self.path + name)
        info = FileInfo.of(directory)
        if not info.is_directory() or not info.is_readable() or is_remote_fs(directory):
            return None

        skip, directory = self._skip_directory(directory)
        if skip:
            return None

        self._handle_action(name, Action.ADD)
        child = DirWatcher(self, self.watch_owner, directory, self.recursive)
        child.add_children()
        child.watch()
        self.directories[name] = child
        return child

    def _remove_directory(self, directory: str) -> None:
        name = file_name_from_path(remove_slash_at_end(directory))
        child = self.directories.pop(name, None)
        if child is not None:
            child.deleted = True
            child.close()

    def _move_directory(self, old_dir: str, new_dir: str) -> None:
        old_name = file_name_from_path(remove_slash_at_end(old_dir))
        new_name = file_name_from_path(remove_slash_at_end(new_dir))
        child = self.directories.pop(old_name, None)
        if child is not None:
            self.directories[new_name] = child
            child._reset_directory(new_name)

    def path_in_watches(self, path: str) -> bool:
        """Return whether this watcher or one below it looks at *path*."""
        if self.path == path:
            return True
        return any(child.path_in_watches(path) for child in self.directories.values())

    def close(self) -> None:
        """Release the subdirectory watchers; a deleted directory reports its entries as deleted."""
        if self.deleted:
            diff = self.dir_snap.scan()
            if not self.dir_snap.exists():
                for info in diff.files_deleted:
                    self._handle_action(info.filepath, Action.DELETE)
                for info in diff.dirs_deleted:
                    self._handle_action(info.filepath, Action.DELETE)
        for child in self.directories.values():
            if self.deleted:
                child.deleted = True
            child.close()
        self.directories.clear()


class GenericWatcher(Watcher):
    """A watch on one directory tree, polled through snapshots."""

    def __init__(
        self,
        watch_id: int,
        directory: str,
        listener: FileWatchListener | None,
        backend: Any,
        recursive: bool,
    ) -> None:
        super().__init__(watch_id, add_slash_at_end(directory), listener, recursive)
        self.backend = backend
        self.dir_watch = DirWatcher(None, self, directory, recursive, False)
        self.dir_watch.add_children(False)

    def watch(self) -> None:
        """Scan the whole tree once and report the changes."""
        self.dir_watch.watch()

    def watch_dir(self, directory: str) -> None:
        """Scan only the watcher of *directory*."""
        self.dir_watch.watch_dir(directory)

    def path_in_watches(self, path: str) -> bool:
        return self.dir_watch.path_in_watches(path)

    def close(self) -> None:
        self.dir_watch.close()