"""Read-only JSON config helpers.

Supplies defaults for theme, worker count, byte reporting, gitignore and
hidden-entry handling. Nothing is ever written back. Malformed or missing
config falls back safely to built-in defaults.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "linecount"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _load_bool(key: str, default: bool) -> bool:
    """Only explicit booleans are accepted; anything else yields ``default``."""
    value = load_config().get(key)
    return value if isinstance(value, bool) else default


def load_theme_name() -> str | None:
    """Load configured theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_jobs() -> int | None:
    """Load the configured worker count; booleans and non-positive values are ignored."""
    value = load_config().get("jobs")
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return None
    return value


def load_show_bytes() -> bool:
    return _load_bool("show_bytes", True)


def load_skip_gitignored() -> bool:
    return _load_bool("skip_gitignored", False)


def load_show_hidden() -> bool:
    return _load_bool("show_hidden", False)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_CONFIG_PATH",
    "load_config",
    "load_jobs",
    "load_show_bytes",
    "load_show_hidden",
    "load_skip_gitignored",
    "load_theme_name",
]
