"""
config_manager.py
-----------------
Loads the packaged settings files (window scale, key bindings).

Features:
- YAML (.yaml/.yml) and JSON (.json) files
- Lookup by bare name ("controls") or filename via an index of the
  packaged config directory; absolute paths bypass the index
- Loaded data is deep-merged over caller defaults, '_notes' keys dropped
"""

import os
import json

import yaml

from pcstone.core.debug.debug_logger import DebugLogger


# ===========================================================
# Configuration
# ===========================================================

DATA_ROOT = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "config")

_FILE_INDEX = None


def _read_json(stream):
    return json.load(stream)


_READERS = {
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".json": _read_json,
}


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a settings file and merge it over `default_dict`.

    Args:
        filename: Bare name, filename or absolute path.
        default_dict: Values used for anything the file leaves out.
        strict: Raise instead of falling back to the defaults.

    Raises:
        FileNotFoundError: strict and the file is missing or unparsable.
        ValueError: strict and the extension has no reader.
    """
    defaults = default_dict or {}
    path = filename if os.path.isabs(filename) else _lookup(filename)

    reader = _READERS.get(os.path.splitext(path)[1].lower())
    if reader is None:
        if strict:
            raise ValueError(f"Unsupported config format: {filename}")
        DebugLogger.warn(f"No reader for {filename} - using defaults", category="loading")
        return _merge_dicts(defaults, {})

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = reader(f)
    except (json.JSONDecodeError, yaml.YAMLError, OSError) as e:
        if strict:
            raise FileNotFoundError(f"Config not found: {filename}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        return _merge_dicts(defaults, {})

    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return _merge_dicts(defaults, data or {})


def rebuild_file_index():
    """Rescan DATA_ROOT. Needed only if files are added at runtime."""
    global _FILE_INDEX
    _FILE_INDEX = {}

    for root, _, files in os.walk(DATA_ROOT):
        for file in files:
            if os.path.splitext(file)[1].lower() in _READERS:
                _FILE_INDEX.setdefault(file, os.path.join(root, file))

    DebugLogger.init(f"Config index: {len(_FILE_INDEX)} files", category="loading")


# ===========================================================
# Internal Helpers
# ===========================================================

def _lookup(filename):
    """Indexed path for `filename`, trying each known extension for bare names."""
    if _FILE_INDEX is None:
        rebuild_file_index()

    name = filename.replace("\\", "/").split("/")[-1]
    candidates = [name] + [name + ext for ext in _READERS]
    for candidate in candidates:
        if candidate in _FILE_INDEX:
            return _FILE_INDEX[candidate]

    # Relative paths outside the index are opened as given
    return filename


def _merge_dicts(default, override):
    """Recursively merge two dicts. Ignores '_notes' keys."""
    merged = default.copy()
    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
