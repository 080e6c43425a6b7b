"""Path predicates and their AND composition.

A path predicate is any one-argument callable returning a truthy value for
paths it accepts. ``ComposedPredicate`` folds an ordered list of them with
logical AND.
"""

from __future__ import annotations

import fnmatch
import os
from collections.abc import Callable, Iterable, Iterator

from .errors import InvalidArgumentError, NullArgumentError

PathPredicate = Callable[[str], bool]


def _validated(predicates: Iterable[PathPredicate | None]) -> tuple[PathPredicate, ...]:
    """Return ``predicates`` as a tuple, rejecting ``None`` and non-callables."""
    checked: list[PathPredicate] = []
    for index, predicate in enumerate(predicates):
        if predicate is None:
            raise NullArgumentError(f"predicate #{index} is None")
        if not callable(predicate):
            raise InvalidArgumentError(f"predicate #{index} is not callable: {predicate!r}")
        checked.append(predicate)
    return tuple(checked)


class ComposedPredicate:
    """Accept a path only when every registered predicate accepts it.

    Predicates are evaluated in registration order and evaluation stops at
    the first rejection. At least one predicate is required.
    """

    __slots__ = ("_predicates",)

    def __init__(self, predicates: Iterable[PathPredicate]) -> None:
        checked = _validated(predicates)
        if not checked:
            raise InvalidArgumentError("a composed predicate needs at least one predicate")
        self._predicates = checked

    def accept(self, path: str) -> bool:
        return all(predicate(path) for predicate in self._predicates)

    __call__ = accept

    def and_also(self, predicate: PathPredicate) -> ComposedPredicate:
        """Return a new composition with ``predicate`` appended."""
        return ComposedPredicate((*self._predicates, predicate))

    @property
    def predicates(self) -> tuple[PathPredicate, ...]:
        return self._predicates

    def __len__(self) -> int:
        return len(self._predicates)

    def __iter__(self) -> Iterator[PathPredicate]:
        return iter(self._predicates)

    def __repr__(self) -> str:
        return f"ComposedPredicate({list(self._predicates)!r})"


def _name(path: str) -> str:
    return os.path.basename(os.path.normpath(path))


def name_startswith(prefix: str) -> PathPredicate:
    """Accept paths whose final component starts with ``prefix``."""

    def predicate(path: str) -> bool:
        return _name(path).startswith(prefix)

    return predicate


def name_matches(pattern: str, case_sensitive: bool = False) -> PathPredicate:
    """Accept paths whose final component matches the glob ``pattern``."""
    if case_sensitive:
        return lambda path: fnmatch.fnmatchcase(_name(path), pattern)
    folded = pattern.lower()
    return lambda path: fnmatch.fnmatchcase(_name(path).lower(), folded)


def has_suffix(*suffixes: str) -> PathPredicate:
    """Accept paths ending in one of ``suffixes`` (case-insensitive, e.g. ``".py"``)."""
    folded = tuple(suffix.lower() for suffix in suffixes)

    def predicate(path: str) -> bool:
        return _name(path).lower().endswith(folded)

    return predicate


def not_hidden(path: str) -> bool:
    """Reject dot-prefixed names."""
    return not _name(path).startswith(".")


def any_of(*predicates: PathPredicate) -> PathPredicate:
    """OR-combine ``predicates``; useful as a single member of a composition."""
    checked = _validated(predicates)
    if not checked:
        raise InvalidArgumentError("any_of needs at least one predicate")
    return lambda path: any(predicate(path) for predicate in checked)


__all__ = [
    "PathPredicate",
    "ComposedPredicate",
    "name_startswith",
    "name_matches",
    "has_suffix",
    "not_hidden",
    "any_of",
]
