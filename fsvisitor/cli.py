"""Command-line front door for fsvisitor.

Runs one traversal for a path given on the command line, or prompts for
paths on stdin until ``exit``. Found entries and start/finish banners are
printed from visitor hooks.
"""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from collections.abc import Callable
from typing import TextIO

from .config import VisitorPreferences, load_preferences
from .enumeration import LocalEntryLister
from .errors import FileSystemVisitorError
from .events import EntryEvent
from .predicates import any_of, name_matches
from .visitor import FileSystemVisitor

PROMPT = "Write full path to base catalog or exit:"
EXIT_COMMAND = "exit"


def _center(text: str, width: int | None = None) -> str:
    """Pad ``text`` on the left so it sits in the middle of the terminal."""
    if width is None:
        width = shutil.get_terminal_size((80, 24)).columns
    return " " * max(0, (width - len(text)) // 2) + text


def build_visitor(path: str, preferences: VisitorPreferences, out: TextIO) -> FileSystemVisitor:
    """Create a visitor for ``path`` whose hooks print to ``out``."""
    lister = LocalEntryLister(
        show_hidden=preferences.show_hidden,
        sort_entries=preferences.sort_entries,
    )
    if preferences.patterns:
        glob_filter = any_of(*(name_matches(pattern) for pattern in preferences.patterns))
        visitor = FileSystemVisitor(path, [glob_filter], lister=lister)
        print_found = visitor.on_filtered_directory_found, visitor.on_filtered_file_found
    else:
        visitor = FileSystemVisitor(path, lister=lister)
        print_found = visitor.on_directory_found, visitor.on_file_found

    def print_entry(event: EntryEvent) -> None:
        print(event.path, file=out)

    visitor.on_start += lambda v: print(_center(f"Start search in {v.path}"), file=out)
    visitor.on_finish += lambda v: print(_center(f"Finish search in {v.path}"), file=out)
    for hook in print_found:
        hook.subscribe(print_entry)
    return visitor


def run_search(path: str, preferences: VisitorPreferences, out: TextIO) -> int:
    """Traverse ``path`` to completion and return the number of yielded entries."""
    visitor = build_visitor(path, preferences, out)
    return sum(1 for _ in visitor.search())


def interactive_loop(
    preferences: VisitorPreferences,
    read_line: Callable[[], str] = input,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> None:
    """Prompt for root paths until ``exit`` or end of input.

    Errors for one path are reported and the prompt is shown again.
    """
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    while True:
        print(PROMPT, file=out)
        try:
            raw = read_line()
        except EOFError:
            return
        path = raw.strip()
        if path.lower() == EXIT_COMMAND:
            return
        try:
            run_search(path, preferences, out)
        except (FileSystemVisitorError, OSError) as exc:
            print(exc, file=err)


def _resolve_preferences(args: argparse.Namespace) -> VisitorPreferences:
    """Apply command-line overrides on top of the persisted preferences."""
    stored = load_preferences()
    return VisitorPreferences(
        show_hidden=stored.show_hidden if args.show_hidden is None else args.show_hidden,
        sort_entries=stored.sort_entries or args.sort,
        patterns=tuple(args.glob) if args.glob else stored.patterns,
    )


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run one traversal or the interactive prompt."""
    parser = argparse.ArgumentParser(
        description="List the directories and files directly under a directory."
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to list. Prompts on stdin when omitted.")
    parser.add_argument(
        "--glob",
        action="append",
        metavar="PATTERN",
        help="Only report entries whose name matches PATTERN. Repeat to allow several patterns.",
    )
    hidden = parser.add_mutually_exclusive_group()
    hidden.add_argument("--show-hidden", dest="show_hidden", action="store_true", default=None, help="Include dot-prefixed entries.")
    hidden.add_argument("--hide-hidden", dest="show_hidden", action="store_false", help="Leave out dot-prefixed entries.")
    parser.add_argument("--sort", action="store_true", help="Sort entries by name instead of filesystem order.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log traversal details to stderr.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    preferences = _resolve_preferences(args)

    if args.path is None:
        interactive_loop(preferences)
        return

    try:
        run_search(args.path, preferences, sys.stdout)
    except (FileSystemVisitorError, OSError) as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
