"""Hook-driven, lazily evaluated traversal of one directory level.

``FileSystemVisitor.search`` yields the immediate child directories of a root
followed by its immediate child files. Before each path is yielded, found
hooks may inspect it and flag it to be skipped or the whole pass to be
aborted. When a filter is configured, entries it accepts go through a second,
filtered hook point before being yielded.
"""

from __future__ import annotations

import contextlib
import enum
import logging
import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from .enumeration import EntryLister, LocalEntryLister
from .errors import InvalidArgumentError, NullArgumentError
from .events import EntryEvent, EntryKind, Hook, VisitorHooks
from .predicates import ComposedPredicate, PathPredicate

logger = logging.getLogger(__name__)

_NO_FILTER = object()


class _Outcome(enum.Enum):
    YIELD = "yield"
    DROP = "drop"
    ABORT = "abort"


def _validate_root(root: object) -> Path:
    """Return ``root`` as a ``Path`` or raise ``InvalidArgumentError``."""
    if root is None:
        raise InvalidArgumentError("Directory path is invalid or does not exist: None")
    try:
        raw = os.fspath(root)
    except TypeError as exc:
        raise InvalidArgumentError(f"Directory path must be str or path-like, got {root!r}") from exc
    if isinstance(raw, bytes):
        raw = os.fsdecode(raw)
    if not raw.strip():
        raise InvalidArgumentError("Directory path is invalid or does not exist: empty path")
    path = Path(raw)
    if not path.is_dir():
        raise InvalidArgumentError(f"Directory path is invalid or does not exist: {raw}")
    return path


def _compose_filter(predicates: object) -> ComposedPredicate | None:
    """Normalize the ``predicates`` constructor argument.

    An empty collection means no filter at all, so filtered hooks never fire.
    """
    if predicates is None:
        raise NullArgumentError("predicates must not be None")
    if isinstance(predicates, ComposedPredicate):
        return predicates
    if callable(predicates):
        return ComposedPredicate((predicates,))
    if not isinstance(predicates, Iterable) or isinstance(predicates, (str, bytes)):
        raise InvalidArgumentError(f"predicates must be a callable or an iterable of callables, got {predicates!r}")
    collected = tuple(predicates)
    if not collected:
        return None
    return ComposedPredicate(collected)


def _hook_property(name: str) -> property:
    """Expose one hook of the bundle; assignment must keep a ``Hook`` so ``+=`` works."""

    def getter(self: FileSystemVisitor) -> Hook:
        return getattr(self._hooks, name)

    def setter(self: FileSystemVisitor, hook: Hook) -> None:
        if not isinstance(hook, Hook):
            raise TypeError(f"{name} must be a Hook; subscribe callbacks with += instead")
        setattr(self._hooks, name, hook)

    return property(getter, setter, doc=f"The ``{name}`` hook point.")


class FileSystemVisitor:
    """Yield the directories, then the files, directly under ``root``.

    Args:
        root: Existing directory to traverse. Validated immediately.
        predicates: Optional filter, either one path predicate or an iterable
            of them combined with logical AND. Passing ``None`` explicitly is
            an error; an empty iterable is the same as no filter.
        lister: Enumeration collaborator. Defaults to ``LocalEntryLister()``.
        hooks: Pre-built hook bundle. A fresh one is created when omitted.

    Raises:
        InvalidArgumentError: ``root`` is blank or not an existing directory,
            or a predicate is not callable.
        NullArgumentError: ``predicates`` (or one of its members) is ``None``.
    """

    def __init__(
        self,
        root: str | os.PathLike[str],
        predicates: PathPredicate | Iterable[PathPredicate] | None = _NO_FILTER,  # type: ignore[assignment]
        *,
        lister: EntryLister | None = None,
        hooks: VisitorHooks | None = None,
    ) -> None:
        self._root = _validate_root(root)
        self._filter = None if predicates is _NO_FILTER else _compose_filter(predicates)
        self._lister = lister if lister is not None else LocalEntryLister()
        self._hooks = hooks if hooks is not None else VisitorHooks()

    @classmethod
    def create(
        cls,
        root: str | os.PathLike[str],
        *predicates: PathPredicate,
        lister: EntryLister | None = None,
    ) -> FileSystemVisitor:
        """Build a visitor, filtered when at least one predicate is given."""
        if not predicates:
            return cls(root, lister=lister)
        return cls(root, predicates, lister=lister)

    @property
    def path(self) -> Path:
        return self._root

    @property
    def filter(self) -> ComposedPredicate | None:
        return self._filter

    @property
    def lister(self) -> EntryLister:
        return self._lister

    @property
    def hooks(self) -> VisitorHooks:
        return self._hooks

    on_start = _hook_property("on_start")
    on_finish = _hook_property("on_finish")
    on_directory_found = _hook_property("on_directory_found")
    on_file_found = _hook_property("on_file_found")
    on_filtered_directory_found = _hook_property("on_filtered_directory_found")
    on_filtered_file_found = _hook_property("on_filtered_file_found")

    def search(self) -> Iterator[str]:
        """Lazily yield accepted entry paths, directories first.

        Nothing happens until the first item is requested. Each call starts a
        fresh pass with its own ``on_start``/``on_finish`` pair. ``on_finish``
        fires when the pass is exhausted or aborted by a hook; it does not
        fire if the consumer stops iterating early or the lister raises.
        """
        hooks = self._hooks
        logger.debug("Start search in %s", self._root)
        hooks.on_start.fire(self)

        with contextlib.closing(self._discover()) as events:
            for event in events:
                outcome = self._dispatch(event)
                if outcome is _Outcome.ABORT:
                    logger.debug("Search in %s aborted at %s", self._root, event.path)
                    break
                if outcome is _Outcome.YIELD:
                    yield event.path

        logger.debug("Finish search in %s", self._root)
        hooks.on_finish.fire(self)

    def _discover(self) -> Iterator[EntryEvent]:
        """Wrap raw listings in events; files are listed only after directories run out."""
        root = str(self._root)
        for kind, list_entries in (
            (EntryKind.DIRECTORY, self._lister.list_directories),
            (EntryKind.FILE, self._lister.list_files),
        ):
            for path in list_entries(root):
                yield EntryEvent(path, kind)

    def _dispatch(self, event: EntryEvent) -> _Outcome:
        """Run the found (and, if filtered, filtered-found) hooks for one entry."""
        self._hooks.found_hook(event.kind).fire(event)
        if event.abort:
            return _Outcome.ABORT
        if event.skip:
            logger.debug("Skipped %s", event.path)
            return _Outcome.DROP
        if self._filter is None:
            return _Outcome.YIELD
        if not self._filter.accept(event.path):
            return _Outcome.DROP

        self._hooks.filtered_found_hook(event.kind).fire(event)
        if event.abort:
            return _Outcome.ABORT
        if event.skip:
            logger.debug("Skipped %s", event.path)
            return _Outcome.DROP
        return _Outcome.YIELD

    def __repr__(self) -> str:
        return f"FileSystemVisitor({str(self._root)!r}, filtered={self._filter is not None})"


__all__ = ["FileSystemVisitor"]
