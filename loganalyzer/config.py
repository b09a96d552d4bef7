# SPDX-License-Identifier: MIT
"""Configuration reader for the log analyzer.

Settings live in a single JSON file and are addressed with dot-notation
keys such as "logAnalyzer.debugLevel". Missing or unreadable files fall
back to the supplied defaults.
"""
import json
import os
from pathlib import Path
from typing import Any, Optional

from loganalyzer.paths import PathResolver


def get_settings_path() -> Path:
    """Get path to settings.json.

    Returns:
        Path to settings.json, respecting LOG_ANALYZER_SETTINGS env var.
    """
    custom = os.environ.get("LOG_ANALYZER_SETTINGS")
    if custom:
        return Path(custom)
    return PathResolver.config_dir() / "settings.json"


def get_setting(key: str, default: Any = None) -> Any:
    """Get a setting value by dot-notation key.

    Args:
        key: Dot-notation key like "logAnalyzer.debugLevel"
        default: Default value if key not found

    Returns:
        Setting value or default
    """
    settings_path = get_settings_path()

    if not settings_path.exists():
        return default

    try:
        with open(settings_path) as f:
            data = json.load(f)
    except (json.JSONDecodeError, IOError):
        return default

    # Navigate dot-notation path
    parts = key.split(".")
    current = data
    for part in parts:
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]

    return current


def get_int_setting(key: str, default: int = 0) -> int:
    """Get an integer setting.

    Args:
        key: Dot-notation key
        default: Default value if key not found or invalid

    Returns:
        Integer value or default if conversion fails.
    """
    value = get_setting(key, default)
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def get_str_setting(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get a string setting; non-string values yield the default."""
    value = get_setting(key, default)
    if isinstance(value, str):
        return value
    return default
