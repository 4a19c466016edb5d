"""File system queries used by the watchers."""

from __future__ import annotations

import os
import sys

from .fileinfo import FileInfo
from .paths import add_slash_at_end, path_remove_file_name, remove_slash_at_end

__all__ = [
    "is_directory",
    "files_info_from_path",
    "link_real_path",
    "is_remote_fs",
    "change_working_directory",
    "current_working_directory",
]

_REMOTE_FS_TYPES = frozenset(
    {
        "nfs",
        "nfs4",
        "cifs",
        "smbfs",
        "smb3",
        "ncpfs",
        "afs",
        "coda",
        "9p",
        "sshfs",
        "fuse.sshfs",
        "davfs",
        "fuse.davfs2",
        "ceph",
        "glusterfs",
        "fuse.glusterfs",
        "lustre",
        "gfs2",
        "ocfs2",
    }
)


def is_directory(path: str) -> bool:
    """Return whether *path* is a directory."""
    return os.path.isdir(path)


def files_info_from_path(path: str) -> dict[str, FileInfo]:
    """Return the entries of directory *path*, by name in sorted order.

    A directory that cannot be listed yields an empty mapping.
    """
    path = add_slash_at_end(path)
    try:
        names = os.listdir(path)
    except (OSError, ValueError):
        return {}
    return {name: FileInfo.of(path + name) for name in sorted(names)}


def link_real_path(path: str) -> tuple[str, str] | None:
    """If *path* is a symbolic link, return its resolved target and its parent.

    Both returned paths end with the separator. ``None`` is returned for a
    path that is not a link or whose target cannot be resolved.
    """
    path = remove_slash_at_end(path)
    info = FileInfo.of(path, link_info=True)
    if not info.is_link():
        return None
    link = add_slash_at_end(info.links_to())
    if not link:
        return None
    return link, path_remove_file_name(path)


def _unescape_mount(field: str) -> str:
    return (
        field.replace("\\040", " ")
        .replace("\\011", "\t")
        .replace("\\012", "\n")
        .replace("\\134", "\\")
    )


def _is_under(target: str, mount: str) -> bool:
    if mount == "/":
        return True
    return target == mount or target.startswith(mount.rstrip("/") + "/")


def is_remote_fs(path: str) -> bool:
    """Return whether *path* lies on a network file system."""
    if not sys.platform.startswith("linux"):
        return False
    try:
        with open("/proc/mounts", encoding="utf-8", errors="replace") as mounts:
            lines = mounts.readlines()
    except OSError:
        return False
    target = os.path.realpath(remove_slash_at_end(path))
    best_mount = ""
    best_type = ""
    for line in lines:
        fields = line.split()
        if len(fields) < 3:
            continue
        mount = _unescape_mount(fields[1])
        if _is_under(target, mount) and len(mount) >= len(best_mount):
            best_mount, best_type = mount, fields[2]
    return best_type in _REMOTE_FS_TYPES


def change_working_directory(path: str) -> None:
    """Make *path* the working directory; raises OSError on failure."""
    os.chdir(path)


def current_working_directory() -> str:
    """Return the working directory of the process."""
    return os.getcwd()