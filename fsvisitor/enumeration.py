"""Directory-listing collaborators used by the visitor.

The visitor only needs two operations: list the immediate child directories
of a root and list its immediate child files. ``LocalEntryLister`` answers
both from the local filesystem with ``os.scandir``.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class EntryLister(Protocol):
    """Enumeration capability for one directory level."""

    def list_directories(self, root: str) -> Iterable[str]:
        """Return paths of directories directly under ``root``."""
        ...

    def list_files(self, root: str) -> Iterable[str]:
        """Return paths of files directly under ``root``."""
        ...


class LocalEntryLister:
    """List immediate children of a local directory.

    Entries are yielded lazily in ``os.scandir`` order unless
    ``sort_entries`` is set, in which case each batch is read fully and sorted
    by lowercase name. Symlinks are classified by what they point to; broken
    links and special files (sockets, fifos) belong to neither list.
    Scan errors such as ``PermissionError`` or ``FileNotFoundError``
    propagate to the caller.
    """

    def __init__(self, show_hidden: bool = True, sort_entries: bool = False) -> None:
        self.show_hidden = show_hidden
        self.sort_entries = sort_entries

    def list_directories(self, root: str) -> Iterator[str]:
        return self._list(root, want_dirs=True)

    def list_files(self, root: str) -> Iterator[str]:
        return self._list(root, want_dirs=False)

    def _list(self, root: str, want_dirs: bool) -> Iterator[str]:
        if self.sort_entries:
            yield from sorted(self._scan(root, want_dirs), key=lambda path: os.path.basename(path).lower())
        else:
            yield from self._scan(root, want_dirs)

    def _scan(self, root: str, want_dirs: bool) -> Iterator[str]:
        with os.scandir(root) as entries:
            for child in entries:
                if not self.show_hidden and child.name.startswith("."):
                    continue
                try:
                    matches = child.is_dir() if want_dirs else child.is_file()
                except OSError:
                    matches = False
                if matches:
                    yield child.path

    def __repr__(self) -> str:
        return f"LocalEntryLister(show_hidden={self.show_hidden}, sort_entries={self.sort_entries})"


__all__ = [
    "EntryLister",
    "LocalEntryLister",
]
