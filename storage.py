# storage.py
from __future__ import annotations
import os, json
from typing import Any, Dict

DATA_DIR = os.path.join("data")
PREFERENCES_PATH = os.path.join(DATA_DIR, "preferences.json")

DEFAULT_PREFERENCES = {
    "theme": "default",
    "fps": 60,
    "cell_size": 96,
}


def _safe_read_json(path: str, default: Dict[str, Any]) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return default.copy()
    if not isinstance(data, dict):
        return default.copy()
    return data


def _safe_write_json(path: str, data: Dict[str, Any]) -> None:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def _valid_preference(key: str, value: Any) -> bool:
    default = DEFAULT_PREFERENCES[key]
    # bool is an int subclass but never a valid size or rate
    if isinstance(value, bool) or not isinstance(value, type(default)):
        return False
    if isinstance(default, int):
        return value > 0
    return True


def load_preferences(path: str = PREFERENCES_PATH) -> Dict[str, Any]:
    """Load UI preferences, writing the defaults on first run.

    Keys missing from the file, or holding a value of the wrong type or a
    non-positive number, are filled from DEFAULT_PREFERENCES.
    """
    if not os.path.exists(path):
        try:
            _safe_write_json(path, DEFAULT_PREFERENCES)
        except OSError as e:
            print(f"[Storage] Could not create {path}: {e}")
    prefs = DEFAULT_PREFERENCES.copy()
    for key, value in _safe_read_json(path, DEFAULT_PREFERENCES).items():
        if key in DEFAULT_PREFERENCES and not _valid_preference(key, value):
            print(f"[Storage] Ignoring bad preference {key}={value!r}")
            continue
        prefs[key] = value
    return prefs


def save_preferences(preferences: Dict[str, Any], path: str = PREFERENCES_PATH) -> None:
    try:
        _safe_write_json(path, preferences)
    except OSError as e:
        print(f"[Storage] Could not save preferences: {e}")
