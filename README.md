# dirwatch

`dirwatch` watches directories and tells a listener what changed in them.
It keeps a snapshot of every watched directory, built from `os.stat` and
`os.listdir`, and compares each new scan with the last one. It needs no
operating-system notification service and has no dependencies outside the
standard library.

It reports four kinds of event (`dirwatch.watcher.Action`):

- `ADD`: a file or directory appeared
- `DELETE`: a file or directory went away
- `MODIFIED`: the status of a file or directory changed (modification time,
  size, owner, group, mode or inode)
- `MOVED`: an entry was renamed inside the same directory. Renames are
  recognised by inode, so this needs a platform with inodes (not Windows).

Only regular files and directories are tracked; other entries are ignored.
Deletions inside a directory are noticed when the directory's own status
changes, which is what removing an entry does on common file systems.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Usage

Subclass `FileWatchListener` and implement `handle_file_action`:

```python
from dirwatch.file_watcher import FileWatcher
from dirwatch.watcher import Action, FileWatchListener


class Printer(FileWatchListener):
    def handle_file_action(self, watch_id, directory, filename, action, old_filename=""):
        if action is Action.MOVED:
            print(f"[{watch_id}] {directory}{old_filename} -> {filename}")
        else:
            print(f"[{watch_id}] {action.name}: {directory}{filename}")


with FileWatcher() as watcher:
    watch_id = watcher.add_watch("/tmp/inbox", Printer(), recursive=True)

    # Either start a background thread that scans once per interval...
    watcher.watch()
    # ...or scan once in the calling thread:
    watcher.poll()
```

`directory` is passed with a trailing separator. Leaving the `with` block
calls `close()`, which stops the background thread and releases every watch.
Calling `watch()` again while the thread runs does nothing.

With `recursive=True`, subdirectories are watched too, and directories
created later get their own watchers as they are found. Subdirectories on a
network file system (detected from `/proc/mounts` on Linux) are not
descended into.

### Removing watches

```python
watcher.remove_watch(watch_id)        # by id
watcher.remove_watch("/tmp/inbox/")   # by directory, as listed by directories()
print(watcher.directories())          # watched directories, in the order added
```

### Errors

`add_watch` raises `dirwatch.errors.WatchError` when a directory cannot be
watched. Its `code` is a `dirwatch.errors.ErrorCode`:

- `FILE_NOT_FOUND`: the path does not exist or is not a directory
- `FILE_NOT_READABLE`: the owner has no read permission on the directory
- `FILE_REPEATED`: the directory, or the target of the link, is already watched
- `FILE_OUT_OF_SCOPE`: the path is a link whose target may not be followed

The message of the most recent error is also available from
`dirwatch.errors.last_error()`.

### Symbolic links

A `FileWatcher` has two attributes that govern linked directories:

- `follow_symlinks` (default `False`): give linked subdirectories of a
  recursive watch their own watchers.
- `allow_out_of_scope_links` (default `False`): together with
  `follow_symlinks`, also allow links whose target lies outside the
  directory that holds the link.

A watched root that is itself a link is watched at its target, provided the
target lies below the link's parent directory or both settings are on.

### Polling interval

`FileWatcher(interval=...)` sets, in seconds, how long the background thread
waits between scans. The default is one second; it must be positive.

### Lower-level pieces

- `dirwatch.snapshot.DirectorySnapshot` and `SnapshotDiff`: take a snapshot
  of one directory and get the changes of each `scan()`.
- `dirwatch.fileinfo.FileInfo`: the status of one path.
- `dirwatch.paths`, `dirwatch.filesystem`, `dirwatch.strings`: path and file
  system helpers.

## What it does not do

Every watch is polled. There is no backend built on inotify, kqueue,
FSEvents or directory-change notifications; the `use_generic` argument of
`FileWatcher` is accepted but changes nothing. Changes are only seen at the
next scan, and several changes to one entry between scans show up as one
event. There is no command-line program; the package is a library.