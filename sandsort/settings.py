"""
Settings Module for Sand Sort

Provides persistent storage for engine preferences using JSON.
Settings are stored in config.json in the working directory unless
another path is given.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# Settings file location (working directory)
SETTINGS_FILE = Path("config.json")

# Default settings
DEFAULT_SETTINGS: Dict[str, Any] = {
    "debug_enabled": False,
    "strategy_name": "bfs",
    "max_states": 200_000,
    "timeout_sec": 5.0,
    "check_interval": 256,
    "generation_strategy": "scramble",
    "pour_mode": "run",
}


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load settings from a JSON file.

    Args:
        path: Settings file (defaults to SETTINGS_FILE)

    Returns:
        Settings dictionary. Returns defaults if file missing or invalid.
    """
    path = Path(path) if path is not None else SETTINGS_FILE
    if not path.exists():
        logger.debug(f"Settings file {path} not found, using defaults")
        return DEFAULT_SETTINGS.copy()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            settings = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Failed to load settings from {path}: {e}, using defaults")
        return DEFAULT_SETTINGS.copy()

    if not isinstance(settings, dict):
        logger.warning(f"Settings in {path} are not a JSON object, using defaults")
        return DEFAULT_SETTINGS.copy()

    unknown = sorted(set(settings) - set(DEFAULT_SETTINGS))
    if unknown:
        logger.warning(f"Ignoring unknown settings: {', '.join(unknown)}")

    # Merge with defaults to handle missing keys
    result = DEFAULT_SETTINGS.copy()
    result.update({k: v for k, v in settings.items() if k in DEFAULT_SETTINGS})
    logger.debug(f"Settings loaded: {result}")
    return result


def save_settings(settings: Dict[str, Any], path: Optional[Path] = None) -> None:
    """
    Save settings to a JSON file.

    Args:
        settings: Settings dictionary to save
        path: Settings file (defaults to SETTINGS_FILE)
    """
    path = Path(path) if path is not None else SETTINGS_FILE
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        logger.debug(f"Settings saved: {settings}")
    except OSError as e:
        logger.error(f"Failed to save settings: {e}")


def solver_options(settings: Dict[str, Any]) -> Dict[str, Any]:
    """Keyword arguments for find_hint() taken from a settings dict."""
    return {
        "strategy_name": settings.get("strategy_name"),
        "max_states": int(settings.get("max_states", DEFAULT_SETTINGS["max_states"])),
        "timeout_sec": float(settings.get("timeout_sec", DEFAULT_SETTINGS["timeout_sec"])),
        "check_interval": int(settings.get("check_interval", DEFAULT_SETTINGS["check_interval"])),
    }
