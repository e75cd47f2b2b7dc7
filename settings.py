"""JSON-based settings persistence for the time picker."""

import json
import os

from calendar_logic import WeekStart
from selection import TimeGranularity

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".time-picker-settings.json")

_GRANULARITY_NAMES = [g.value for g in TimeGranularity]

_DEFAULTS = {
    "week_start": "monday",
    "min_days_in_first_week": None,
    "locale": "en",
    "granularities": list(_GRANULARITY_NAMES),
    "initial_granularity": None,
    "first_year": 2000,
    "last_year": 2099,
}


def load_settings() -> dict:
    """Load settings from disk, returning defaults for missing or invalid keys."""
    settings = dict(_DEFAULTS)
    settings["granularities"] = list(_DEFAULTS["granularities"])
    try:
        with open(_SETTINGS_PATH, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError, OSError):
        return settings
    if not isinstance(stored, dict):
        return settings

    if stored.get("week_start") in ("monday", "sunday"):
        settings["week_start"] = stored["week_start"]
    min_days = stored.get("min_days_in_first_week")
    if isinstance(min_days, int) and not isinstance(min_days, bool) and 1 <= min_days <= 7:
        settings["min_days_in_first_week"] = min_days
    if isinstance(stored.get("locale"), str) and stored["locale"].strip():
        settings["locale"] = stored["locale"].strip()
    if isinstance(stored.get("granularities"), list):
        names = [g for g in _GRANULARITY_NAMES if g in stored["granularities"]]
        if names:
            settings["granularities"] = names
    if stored.get("initial_granularity") in settings["granularities"]:
        settings["initial_granularity"] = stored["initial_granularity"]
    for key in ("first_year", "last_year"):
        value = stored.get(key)
        if isinstance(value, int) and not isinstance(value, bool) and 1 <= value <= 9999:
            settings[key] = value
    if settings["first_year"] > settings["last_year"]:
        settings["first_year"] = _DEFAULTS["first_year"]
        settings["last_year"] = _DEFAULTS["last_year"]
    return settings


def save_settings(settings: dict) -> None:
    """Persist settings to disk."""
    with open(_SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2, ensure_ascii=False)


def week_start_from_settings(settings: dict) -> WeekStart:
    return WeekStart[settings.get("week_start", "monday").upper()]


def granularities_from_settings(settings: dict) -> list[TimeGranularity]:
    return [TimeGranularity(name) for name in settings.get("granularities", _GRANULARITY_NAMES)]
