"""
Helper utilities for the file digest plugin.

Provides common functions used across the plugin:
- Human-readable file sizes
- Settings loading
- Clipboard writes via wl-copy
"""

import subprocess
from pathlib import Path
from typing import Any, Dict, Optional

import toml
from loguru import logger

DEFAULT_SETTINGS_PATH = Path(__file__).parent.parent / "data" / "settings.toml"

_UNITS = (
    (1024 ** 3, "GB"),
    (1024 ** 2, "MB"),
    (1024, "KB"),
)


def format_size(size: int) -> str:
    """
    Format a byte count with the largest unit it reaches.

    Values are rounded to two decimals; trailing zeros are dropped.

    Args:
        size: Number of bytes (must be >= 0)

    Returns:
        String such as "1023B", "1.5KB", "1GB"

    Example:
        format_size(1536)  # "1.5KB"
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")

    if size < 1024:
        return f"{size}B"

    for factor, unit in _UNITS:
        if size >= factor:
            value = round(size / factor, 2)
            text = f"{value:.2f}".rstrip("0").rstrip(".")
            return f"{text}{unit}"


def copy_to_clipboard(text: str) -> bool:
    """
    Copy text to the Wayland clipboard using wl-copy.

    Returns:
        True if wl-copy was started, False if it is not installed
    """
    try:
        subprocess.Popen(
            ["wl-copy", text],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except FileNotFoundError:
        logger.debug("wl-copy not found, cannot copy to clipboard")
        return False
    return True


def load_settings(settings_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load plugin settings from TOML file.

    Args:
        settings_path: File to read; defaults to data/settings.toml

    Returns:
        Dictionary containing settings with defaults applied

    Example settings structure:
        {
            "plugin": {
                "keyword": "md5f",
                "language": "en"
            },
            "digest": {
                "max_file_size": 1073741824,
                "chunk_size": 1048576
            }
        }
    """
    defaults = {
        "plugin": {
            "keyword": "md5f",
            "language": "en",
        },
        "digest": {
            "max_file_size": 1024 ** 3,
            "chunk_size": 1024 * 1024,
        },
    }

    settings_path = Path(settings_path) if settings_path else DEFAULT_SETTINGS_PATH

    if not settings_path.exists():
        logger.debug(f"Settings file not found at {settings_path}, using defaults")
        return defaults

    try:
        loaded = toml.load(settings_path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning(f"Could not load settings from {settings_path}: {e}")
        return defaults

    return _deep_merge(defaults, loaded)


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary with defaults
        override: Dictionary with overrides

    Returns:
        Merged dictionary (override takes precedence)
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result
