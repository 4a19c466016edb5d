"""Status information about a single file system entry."""

from __future__ import annotations

import os
import stat
import sys
from dataclasses import dataclass, field

from .paths import os_slash, remove_slash_at_end

__all__ = ["FileInfo", "path_exists", "path_is_link", "inode_supported"]

_WINDOWS = sys.platform == "win32"
_IS_ROOT = hasattr(os, "getuid") and os.getuid() == 0


def inode_supported() -> bool:
    """Return whether inode numbers identify files on this platform."""
    return not _WINDOWS


def _stat_target(path: str) -> str:
    """Return the path to stat: without a trailing separator, except for a drive root."""
    if _WINDOWS and len(path) == 3 and path[1] == ":" and path[2] == os_slash():
        return path
    return remove_slash_at_end(path)


@dataclass
class FileInfo:
    """Status of a path; equality compares the status fields, not the path."""

    filepath: str = field(default="", compare=False)
    modification_time: int = 0
    size: int = 0
    owner_id: int = 0
    group_id: int = 0
    permissions: int = 0
    inode: int = 0

    @classmethod
    def of(cls, path: str, link_info: bool = False) -> FileInfo:
        """Build the information for *path*; with *link_info* a link itself is described."""
        info = cls(path)
        info.refresh(link_info)
        return info

    def refresh(self, link_info: bool = False) -> None:
        """Read the status of the path again; on failure the fields are left as they are."""
        target = _stat_target(self.filepath)
        try:
            st = os.lstat(target) if link_info and not _WINDOWS else os.stat(target)
        except (OSError, ValueError):
            return
        self.modification_time = int(st.st_mtime)
        self.size = st.st_size
        self.owner_id = st.st_uid
        self.group_id = st.st_gid
        self.permissions = st.st_mode
        self.inode = st.st_ino

    def is_directory(self) -> bool:
        return stat.S_ISDIR(self.permissions)

    def is_regular_file(self) -> bool:
        return stat.S_ISREG(self.permissions)

    def is_readable(self) -> bool:
        """Return whether the owner may read the entry; always true for the superuser."""
        return _IS_ROOT or bool(self.permissions & stat.S_IRUSR)

    def is_link(self) -> bool:
        if _WINDOWS:
            return False
        return stat.S_ISLNK(self.permissions)

    def links_to(self) -> str:
        """Return the resolved target of a link, or an empty string."""
        if not self.is_link():
            return ""
        try:
            return os.path.realpath(remove_slash_at_end(self.filepath), strict=True)
        except (OSError, ValueError):
            return ""

    def exists(self) -> bool:
        """Return whether the path can currently be stat'ed."""
        try:
            os.stat(_stat_target(self.filepath))
        except (OSError, ValueError):
            return False
        return True

    def same_inode(self, other: FileInfo) -> bool:
        return inode_supported() and self.inode == other.inode


def path_exists(path: str) -> bool:
    """Return whether *path* exists, following links."""
    return FileInfo(path).exists()


def path_is_link(path: str) -> bool:
    """Return whether *path* is itself a symbolic link."""
    return FileInfo.of(path, link_info=True).is_link()