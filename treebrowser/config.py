"""Persistent JSON config for browser policy and per-directory filters.

Stores the listing policy flags and per-directory filters.
Reads are defensive: a missing or malformed file falls back to defaults,
except for filter patterns, which fail fast with ``ConfigurationError``.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path

from platformdirs import user_config_dir

from .errors import ConfigurationError
from .listing.filters import DirectoryFilter, directory_key, filter_from_config
from .policy import BOOL_POLICY_KEYS, BrowserPolicy

logger = logging.getLogger(__name__)

APP_NAME = "treebrowser"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are logged and otherwise ignored.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)


def policy_from_config(data: dict[str, object]) -> BrowserPolicy:
    """Build a policy from config data, ignoring keys with the wrong type."""
    values: dict[str, object] = {}
    for key in BOOL_POLICY_KEYS:
        value = data.get(key)
        if isinstance(value, bool):
            values[key] = value
    indent_width = data.get("indent_width")
    if isinstance(indent_width, int) and not isinstance(indent_width, bool) and indent_width > 0:
        values["indent_width"] = indent_width
    return BrowserPolicy(**values)


def load_policy() -> BrowserPolicy:
    """Return the persisted policy, defaulting every unset or invalid flag."""
    return policy_from_config(load_config())


def save_policy(policy: BrowserPolicy) -> None:
    """Persist every policy field, keeping unrelated config keys."""
    config = load_config()
    config.update(asdict(policy))
    save_config(config)


def load_dir_filters() -> dict[str, DirectoryFilter]:
    """Load the ``dir_filters`` mapping keyed by normalized directory path.

    Entries with non-string or empty keys are dropped. A filter whose
    patterns do not parse raises ``ConfigurationError``.
    """
    value = load_config().get("dir_filters")
    if not isinstance(value, dict):
        return {}

    filters: dict[str, DirectoryFilter] = {}
    for raw_dir, raw_filter in value.items():
        if not isinstance(raw_dir, str) or not raw_dir.strip():
            continue
        try:
            filters[directory_key(raw_dir)] = filter_from_config(raw_filter)
        except ConfigurationError as exc:
            raise ConfigurationError(f"dir_filters[{raw_dir!r}]: {exc}") from exc
    return filters


def save_dir_filters(dir_filters: dict[str, DirectoryFilter]) -> None:
    """Persist per-directory filters in their JSON form."""
    config = load_config()
    config["dir_filters"] = {
        directory_key(directory): dir_filter.to_config()
        for directory, dir_filter in dir_filters.items()
    }
    save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "load_config",
    "load_dir_filters",
    "load_policy",
    "policy_from_config",
    "save_config",
    "save_dir_filters",
    "save_policy",
]
