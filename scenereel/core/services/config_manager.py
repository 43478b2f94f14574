"""
config_manager.py
-----------------
JSON configuration loader for runtime overrides.

Features:
- Resolves bare filenames against a small list of search directories
- Recursively merges loaded values over defaults
- Ignores '_notes' keys for human-readable configs
"""

import os
import json

from scenereel.core.debug.debug_logger import DebugLogger
from scenereel.core.errors import ConfigurationError


# ===========================================================
# Configuration
# ===========================================================

SEARCH_DIRS = [
    ".",
    "config",
]


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a JSON configuration file.

    Args:
        filename: Filename or full path (.json)
        default_dict: Default fallback config
        strict: If True, raise ConfigurationError on a missing or malformed file

    Returns:
        dict: Merged configuration
    """
    if default_dict is None:
        default_dict = {}

    path = _resolve_search_path(filename)

    try:
        data = _load_json(path)
    except (json.JSONDecodeError, FileNotFoundError, IOError) as e:
        if strict:
            raise ConfigurationError(f"Config not loadable: {filename} ({e})") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        return _merge_dicts(default_dict, {})

    if not isinstance(data, dict):
        if strict:
            raise ConfigurationError(f"Config root must be an object: {filename}")
        DebugLogger.warn(f"Ignoring {path}: root is not an object", category="loading")
        return _merge_dicts(default_dict, {})

    return _merge_dicts(default_dict, data)


# ===========================================================
# Path Resolution
# ===========================================================

def _resolve_search_path(filename):
    """Return the first existing match across SEARCH_DIRS, else filename unchanged."""
    if os.path.isabs(filename) or os.path.exists(filename):
        return filename

    for directory in SEARCH_DIRS:
        for candidate in (filename, filename + ".json"):
            path = os.path.join(directory, candidate)
            if os.path.isfile(path):
                return path

    return filename


# ===========================================================
# File Loaders
# ===========================================================

def _load_json(path):
    """Load JSON config file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


# ===========================================================
# Merge Utilities
# ===========================================================

def _merge_dicts(default, override):
    """Recursively merge two dicts. Ignores '_notes' keys."""
    merged = {}
    for key, value in default.items():
        merged[key] = _merge_dicts(value, {}) if isinstance(value, dict) else value

    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
