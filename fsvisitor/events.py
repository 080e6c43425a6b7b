"""Per-entry event records and multi-subscriber hook points.

A ``Hook`` is an ordered callback list fired by the visitor at a defined
point of the traversal. Found hooks receive the ``EntryEvent`` of the entry
being processed and may set its ``skip`` or ``abort`` flags.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


class EntryKind(enum.Enum):
    """Which enumeration pipeline produced an entry."""

    DIRECTORY = "directory"
    FILE = "file"


class EntryEvent:
    """Mutable token handed to every found-hook subscriber for one entry.

    ``path`` and ``kind`` are fixed at construction. ``skip`` and ``abort``
    start out false and are sticky: once a subscriber sets one, assigning a
    false value later does not clear it.
    """

    __slots__ = ("_path", "_kind", "_skip", "_abort")

    def __init__(self, path: str, kind: EntryKind = EntryKind.FILE) -> None:
        self._path = path
        self._kind = kind
        self._skip = False
        self._abort = False

    @property
    def path(self) -> str:
        return self._path

    @property
    def kind(self) -> EntryKind:
        return self._kind

    @property
    def is_directory(self) -> bool:
        return self._kind is EntryKind.DIRECTORY

    @property
    def skip(self) -> bool:
        """Drop this entry without yielding it or running further hooks for it."""
        return self._skip

    @skip.setter
    def skip(self, value: bool) -> None:
        self._skip = self._skip or bool(value)

    @property
    def abort(self) -> bool:
        """Stop the whole traversal after the current hook point."""
        return self._abort

    @abort.setter
    def abort(self, value: bool) -> None:
        self._abort = self._abort or bool(value)

    def __repr__(self) -> str:
        return (
            f"EntryEvent(path={self._path!r}, kind={self._kind.value}, "
            f"skip={self._skip}, abort={self._abort})"
        )


class Hook:
    """Ordered list of subscribers invoked together by ``fire``.

    Subscribers run in registration order. Every subscriber runs even when an
    earlier one already flagged the event; exceptions raised by a subscriber
    propagate to whoever fired the hook.
    """

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._subscribers: list[Callable[..., object]] = []

    def subscribe(self, callback: Callable[..., object]) -> Callable[..., object]:
        """Append ``callback`` and return it, so this also works as a decorator."""
        if not callable(callback):
            raise TypeError(f"hook subscriber must be callable, got {callback!r}")
        self._subscribers.append(callback)
        return callback

    def unsubscribe(self, callback: Callable[..., object]) -> None:
        """Remove the most recent registration of ``callback``; missing is a no-op."""
        for index in range(len(self._subscribers) - 1, -1, -1):
            if self._subscribers[index] == callback:
                del self._subscribers[index]
                return

    def clear(self) -> None:
        self._subscribers.clear()

    def fire(self, *args: object) -> None:
        # Snapshot so a subscriber unsubscribing itself does not shift the loop.
        for callback in tuple(self._subscribers):
            callback(*args)

    def __iadd__(self, callback: Callable[..., object]) -> Hook:
        self.subscribe(callback)
        return self

    def __isub__(self, callback: Callable[..., object]) -> Hook:
        self.unsubscribe(callback)
        return self

    def __len__(self) -> int:
        return len(self._subscribers)

    def __bool__(self) -> bool:
        return bool(self._subscribers)

    def __iter__(self) -> Iterator[Callable[..., object]]:
        return iter(tuple(self._subscribers))

    def __repr__(self) -> str:
        return f"Hook({self.name!r}, subscribers={len(self._subscribers)})"


@dataclass
class VisitorHooks:
    """The six hook points of one visitor, injectable as a bundle."""

    on_start: Hook = field(default_factory=lambda: Hook("on_start"))
    on_finish: Hook = field(default_factory=lambda: Hook("on_finish"))
    on_directory_found: Hook = field(default_factory=lambda: Hook("on_directory_found"))
    on_file_found: Hook = field(default_factory=lambda: Hook("on_file_found"))
    on_filtered_directory_found: Hook = field(
        default_factory=lambda: Hook("on_filtered_directory_found")
    )
    on_filtered_file_found: Hook = field(default_factory=lambda: Hook("on_filtered_file_found"))

    def found_hook(self, kind: EntryKind) -> Hook:
        """Return the unfiltered found hook for ``kind``."""
        if kind is EntryKind.DIRECTORY:
            return self.on_directory_found
        return self.on_file_found

    def filtered_found_hook(self, kind: EntryKind) -> Hook:
        """Return the filtered found hook for ``kind``."""
        if kind is EntryKind.DIRECTORY:
            return self.on_filtered_directory_found
        return self.on_filtered_file_found


__all__ = [
    "EntryKind",
    "EntryEvent",
    "Hook",
    "VisitorHooks",
]
