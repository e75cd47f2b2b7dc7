import json

from calendar_logic import WeekStart
from selection import TimeGranularity
from settings import (
    _DEFAULTS,
    granularities_from_settings,
    load_settings,
    save_settings,
    week_start_from_settings,
)


def _write(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")


def test_missing_file_gives_defaults():
    assert load_settings() == _DEFAULTS


def test_malformed_file_gives_defaults(settings_path):
    settings_path.write_text("{not json", encoding="utf-8")
    assert load_settings() == _DEFAULTS
    _write(settings_path, ["week"])
    assert load_settings() == _DEFAULTS


def test_valid_values_are_loaded(settings_path):
    _write(settings_path, {
        "week_start": "sunday",
        "min_days_in_first_week": 4,
        "locale": "zh-Hans-CN",
        "granularities": ["day", "week"],
        "initial_granularity": "day",
        "first_year": 1990,
        "last_year": 2050,
    })
    settings = load_settings()
    assert settings["week_start"] == "sunday"
    assert settings["min_days_in_first_week"] == 4
    assert settings["locale"] == "zh-Hans-CN"
    assert settings["granularities"] == ["week", "day"]
    assert settings["initial_granularity"] == "day"
    assert (settings["first_year"], settings["last_year"]) == (1990, 2050)


def test_invalid_values_are_ignored(settings_path):
    _write(settings_path, {
        "week_start": "friday",
        "min_days_in_first_week": 9,
        "locale": "   ",
        "granularities": ["fortnight"],
        "initial_granularity": "fortnight",
        "first_year": "2000",
        "last_year": True,
    })
    assert load_settings() == _DEFAULTS


def test_initial_granularity_must_be_allowed(settings_path):
    _write(settings_path, {"granularities": ["year", "month"], "initial_granularity": "day"})
    settings = load_settings()
    assert settings["granularities"] == ["year", "month"]
    assert settings["initial_granularity"] is None


def test_inverted_year_range_falls_back(settings_path):
    _write(settings_path, {"first_year": 2050, "last_year": 2010})
    settings = load_settings()
    assert (settings["first_year"], settings["last_year"]) == (2000, 2099)


def test_save_then_load(settings_path):
    settings = load_settings()
    settings["week_start"] = "sunday"
    settings["locale"] = "zh"
    save_settings(settings)
    assert json.loads(settings_path.read_text(encoding="utf-8"))["week_start"] == "sunday"
    assert load_settings() == settings


def test_conversions():
    settings = load_settings()
    assert week_start_from_settings(settings) is WeekStart.MONDAY
    assert granularities_from_settings(settings) == list(TimeGranularity)
    settings["week_start"] = "sunday"
    assert week_start_from_settings(settings) is WeekStart.SUNDAY


def test_defaults_are_not_shared():
    settings = load_settings()
    settings["granularities"].append("extra")
    assert load_settings()["granularities"] == ["year", "month", "week", "day"]
