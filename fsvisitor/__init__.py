"""Public package surface for fsvisitor.

Exports the traversal engine, its event and hook types, predicate helpers,
and the error classes. ``main`` lazily imports the CLI entrypoint.
"""

from __future__ import annotations

from .enumeration import EntryLister, LocalEntryLister
from .errors import FileSystemVisitorError, InvalidArgumentError, NullArgumentError
from .events import EntryEvent, EntryKind, Hook, VisitorHooks
from .predicates import ComposedPredicate, PathPredicate
from .visitor import FileSystemVisitor


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "FileSystemVisitor",
    "EntryEvent",
    "EntryKind",
    "Hook",
    "VisitorHooks",
    "ComposedPredicate",
    "PathPredicate",
    "EntryLister",
    "LocalEntryLister",
    "FileSystemVisitorError",
    "InvalidArgumentError",
    "NullArgumentError",
    "main",
]
