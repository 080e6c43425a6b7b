"""Error taxonomy for visitor construction.

Enumeration failures are not wrapped: the platform ``OSError`` raised by the
lister reaches the consumer pulling ``search()`` unchanged.
"""

from __future__ import annotations


class FileSystemVisitorError(Exception):
    """Base class for errors raised while configuring a visitor."""


class InvalidArgumentError(FileSystemVisitorError, ValueError):
    """Raised when the root path is blank or is not an existing directory."""


class NullArgumentError(FileSystemVisitorError, TypeError):
    """Raised when ``None`` is passed where a predicate is required."""


__all__ = [
    "FileSystemVisitorError",
    "InvalidArgumentError",
    "NullArgumentError",
]
