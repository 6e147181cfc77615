"""Configuration management.

TIER 1: May import from core only.

Supports JSONC (JSON with Comments) for config files.
"""

import json
import os
from pathlib import Path
from typing import Any

from core.errors import ConfigError
from core.jsonc import strip_comments

# Cache for loaded config
_config_cache: dict | None = None

# Config file names (priority order)
CONFIG_FILES = ["config.jsonc", "config.json"]

# Used when SNIPPETS_CONFIG_DIR is not set
DEFAULT_CONFIG_DIR = Path("~/.config/snippet-maker")

DEFAULTS: dict[str, Any] = {
    "editor.product": "Code",
    "editor.settings_root": None,
    "snippets.file_template": "{language}.json",
    "snippets.escape_body_tabs": False,
    "snippets.allow_trailing_commas": False,
}


def get_config_dir() -> Path:
    """Get the directory holding the config file.

    Returns:
        SNIPPETS_CONFIG_DIR if set, else ~/.config/snippet-maker.
    """
    if env_dir := os.environ.get("SNIPPETS_CONFIG_DIR"):
        return Path(env_dir)
    return DEFAULT_CONFIG_DIR.expanduser()


def get_config_path() -> Path | None:
    """Find config file path.

    Looks for config.jsonc first, then config.json.

    Returns:
        Path to config file, or None if not found.
    """
    config_dir = get_config_dir()

    for filename in CONFIG_FILES:
        config_path = config_dir / filename
        if config_path.exists():
            return config_path

    return None


def load_config() -> dict:
    """Load config from config.jsonc or config.json.

    Returns:
        Configuration dictionary (empty if no config file exists).

    Raises:
        ConfigError: If the config file is not valid JSON(C).
    """
    global _config_cache

    if _config_cache is not None:
        return _config_cache

    config_path = get_config_path()

    if config_path is None:
        _config_cache = {}
        return _config_cache

    try:
        content = config_path.read_text(encoding="utf-8")
        config = json.loads(strip_comments(content))
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid {config_path.name}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Could not read {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigError(f"Invalid {config_path.name}: top level must be an object")

    _config_cache = config
    return _config_cache


def get(key: str, default: Any = None) -> Any:
    """Get config value by dot notation.

    Falls back to DEFAULTS, then to default.

    Example:
        get("editor.product")  # "Code" unless configured
        get("snippets.escape_body_tabs")  # False unless configured
    """
    value: Any = load_config()
    for part in key.split("."):
        if isinstance(value, dict) and part in value:
            value = value[part]
        else:
            return DEFAULTS.get(key, default) if default is None else default

    return value


def clear_cache() -> None:
    """Clear config cache (for testing)."""
    global _config_cache
    _config_cache = None
