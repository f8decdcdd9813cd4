# src/pyco/utils/utils.py
"""
pyco.utils.utils
================

Configuration helpers for the pyco editor.

Configuration is layered:

1. `DEFAULT_CONFIG`, embedded here, so the editor always starts.
2. ``~/.config/pyco/config.toml``, parsed with `toml` and deep-merged over the
   defaults. A missing file is fine; a broken one is logged and ignored.
3. Environment overrides (``PYCO_LOG_LEVEL``), usually set through
   ``~/.config/pyco/.env``, which the entry point loads with python-dotenv.
"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import toml

logger = logging.getLogger("pyco")

# Embedded defaults. Keys under "keybindings" accept a key string, a
# "|"-separated string or a list.
DEFAULT_CONFIG: Dict[str, Any] = {
    "editor": {
        "horizontal_margin": 10,
        "initial_line_capacity": 128,
        "input_timeout_ms": 100,
    },
    "keybindings": {
        "quit": "ctrl+q",
        "save_file": "ctrl+s",
        "handle_up": ["up"],
        "handle_down": ["down"],
        "handle_left": ["left"],
        "handle_right": ["right"],
        "handle_enter": ["enter", 10, 13],
        "handle_backspace": ["backspace", 8, 127],
    },
    "logging": {
        "file_level": "DEBUG",
        "console_level": "WARNING",
        "log_to_console": False,
        "separate_error_log": False,
        "log_file": "pyco.log",
    },
}


def get_config_dir() -> Path:
    return Path.home() / ".config" / "pyco"


def deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Recursively merges the `override` dictionary into the `base` dictionary.
    """
    result = base.copy()
    for key, value in override.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Loads the embedded defaults and merges the user's config.toml over them.
    """
    final_config = copy.deepcopy(DEFAULT_CONFIG)
    logger.debug("Loaded embedded default configuration.")

    user_config_path = config_path or get_config_dir() / "config.toml"
    if user_config_path.is_file():
        try:
            user_config = toml.load(user_config_path)
            final_config = deep_merge(final_config, user_config)
            logger.info(f"Loaded and merged user config from {user_config_path}")
        except (toml.TomlDecodeError, OSError) as e:
            logger.error(f"Could not parse user config '{user_config_path}': {e}. Using defaults.")

    for section, defaults in DEFAULT_CONFIG.items():
        if not isinstance(final_config.get(section), dict):
            logger.error(
                f"Config section [{section}] must be a table, got "
                f"{final_config.get(section)!r}. Using defaults."
            )
            final_config[section] = copy.deepcopy(defaults)

    level_override = os.environ.get("PYCO_LOG_LEVEL")
    if level_override:
        final_config["logging"]["file_level"] = level_override.upper()

    return final_config
