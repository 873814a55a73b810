"""Configuration file management for shieldsvg.

Reads and writes ~/.shieldsvg/config.json, which holds default badge fields
(style and colors) applied by the CLI when a flag is not given.
"""
from __future__ import annotations

import json
from pathlib import Path

from shieldsvg.layout import BadgeStyle

DEFAULT_CONFIG_PATH: Path = Path.home() / ".shieldsvg" / "config.json"

DEFAULT_KEYS: tuple[str, ...] = ("style", "label_color", "message_color", "logo_color")


def load_config(config_path: Path | None = None) -> dict:
    """Load config from JSON file. Returns {} if file missing or invalid."""
    path = config_path or DEFAULT_CONFIG_PATH
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict, config_path: Path | None = None) -> None:
    """Write config dict to JSON file. Creates parent dirs if needed."""
    path = config_path or DEFAULT_CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def get_defaults(config_path: Path | None = None) -> dict[str, str]:
    """Return the stored badge defaults, ignoring unknown or non-string entries."""
    defaults = load_config(config_path).get("defaults", {})
    if not isinstance(defaults, dict):
        return {}
    return {k: v for k, v in defaults.items() if k in DEFAULT_KEYS and isinstance(v, str)}


def _check_key(key: str) -> str:
    key = key.replace("-", "_")
    if key not in DEFAULT_KEYS:
        raise ValueError(f"Unknown config key {key!r}. Must be one of: {', '.join(DEFAULT_KEYS)}")
    return key


def set_default(key: str, value: str, config_path: Path | None = None) -> None:
    """Persist a default badge field. Style values are validated and normalized."""
    key = _check_key(key)
    if key == "style":
        value = BadgeStyle.parse(value).value
    config = load_config(config_path)
    defaults = config.get("defaults")
    if not isinstance(defaults, dict):
        defaults = {}
    defaults[key] = value
    config["defaults"] = defaults
    save_config(config, config_path)


def unset_default(key: str, config_path: Path | None = None) -> bool:
    """Remove a stored default. Returns False if it was not set."""
    key = _check_key(key)
    config = load_config(config_path)
    defaults = config.get("defaults")
    if not isinstance(defaults, dict) or key not in defaults:
        return False
    del defaults[key]
    save_config(config, config_path)
    return True
