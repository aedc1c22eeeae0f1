"""Persistent JSON config helpers.

Stores the default render flags applied by the CLI.
Malformed or missing config falls back to built-in defaults.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .tree_model import RenderOptions

APP_NAME = "fstree"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

_BOOL_KEYS = ("include_hidden", "directories_only", "full_path_prefix")


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Write failures are ignored so a read-only config dir never breaks output.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def load_render_defaults() -> RenderOptions:
    """Build ``RenderOptions`` from persisted defaults.

    Values of the wrong type are ignored; ``bool`` is not accepted for
    ``max_depth``.
    """
    data = load_config()
    values: dict[str, object] = {}
    for key in _BOOL_KEYS:
        value = data.get(key)
        if isinstance(value, bool):
            values[key] = value
    max_depth = data.get("max_depth")
    if isinstance(max_depth, int) and not isinstance(max_depth, bool):
        values["max_depth"] = max_depth
    return RenderOptions(**values)


def save_render_defaults(options: RenderOptions) -> None:
    """Persist ``options`` as the CLI defaults, keeping unrelated keys."""
    config = load_config()
    for key in _BOOL_KEYS:
        config[key] = bool(getattr(options, key))
    config["max_depth"] = int(options.max_depth)
    save_config(config)


def reset_render_defaults() -> None:
    """Drop persisted render defaults, keeping unrelated keys."""
    config = load_config()
    for key in (*_BOOL_KEYS, "max_depth"):
        config.pop(key, None)
    save_config(config)


__all__ = [
    "CONFIG_PATH",
    "load_config",
    "save_config",
    "load_render_defaults",
    "save_render_defaults",
    "reset_render_defaults",
]
