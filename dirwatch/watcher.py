"""Watch actions, the listener interface and the base watch record."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass

__all__ = ["Action", "FileWatchListener", "Watcher"]


class Action(enum.IntEnum):
    """Kinds of change reported to a listener."""

    ADD = 1
    DELETE = 2
    MODIFIED = 3
    MOVED = 4


class FileWatchListener(abc.ABC):
    """Receives the changes found in watched directories."""

    @abc.abstractmethod
    def handle_file_action(
        self,
        watch_id: int,
        directory: str,
        filename: str,
        action: Action,
        old_filename: str = "",
    ) -> None:
        """Handle one change of *filename* inside *directory*."""


@dataclass(eq=False)
class Watcher:
    """A watched directory and the listener that receives its changes."""

    id: int = 0
    directory: str = ""
    listener: FileWatchListener | None = None
    recursive: bool = False
    old_file_name: str = ""

    def watch(self) -> None:
        """Look for changes; the base watcher has nothing to look at."""