"""Persistent JSON preferences for the command-line front end.

Stores hidden-entry visibility, entry sorting, and default glob filters.
Malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "fsvisitor"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class VisitorPreferences:
    """Traversal defaults applied by the CLI before flag overrides."""

    show_hidden: bool = True
    sort_entries: bool = False
    patterns: tuple[str, ...] = field(default_factory=tuple)


def load_config() -> dict[str, object]:
    """Load the persisted JSON object, or ``{}`` when missing or malformed."""
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist ``data`` as pretty-printed JSON.

    Write failures are ignored so a read-only config directory never breaks
    a traversal.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def _load_bool(data: dict[str, object], key: str, default: bool) -> bool:
    value = data.get(key)
    return value if isinstance(value, bool) else default


def _load_patterns(data: dict[str, object]) -> tuple[str, ...]:
    """Keep only non-blank string patterns, stripped."""
    value = data.get("patterns")
    if not isinstance(value, list):
        return ()
    return tuple(item.strip() for item in value if isinstance(item, str) and item.strip())


def load_preferences() -> VisitorPreferences:
    data = load_config()
    defaults = VisitorPreferences()
    return VisitorPreferences(
        show_hidden=_load_bool(data, "show_hidden", defaults.show_hidden),
        sort_entries=_load_bool(data, "sort_entries", defaults.sort_entries),
        patterns=_load_patterns(data),
    )


def save_preferences(preferences: VisitorPreferences) -> None:
    """Merge ``preferences`` into the stored config, keeping unrelated keys."""
    config = load_config()
    config["show_hidden"] = bool(preferences.show_hidden)
    config["sort_entries"] = bool(preferences.sort_entries)
    config["patterns"] = [pattern for pattern in preferences.patterns if pattern.strip()]
    save_config(config)


__all__ = [
    "CONFIG_PATH",
    "VisitorPreferences",
    "load_config",
    "save_config",
    "load_preferences",
    "save_preferences",
]
