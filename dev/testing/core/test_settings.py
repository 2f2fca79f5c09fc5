"""
Tests for Settings Core

Loading settings from file and environment, and applying them at startup.
"""

import json
from datetime import datetime, timezone

import pytest

from utctime import UtcTime
from utctime.core.settings import Settings, apply_settings, load_settings
from utctime.primitives.debug_hook import disable_debug_logging, get_debug_hook, set_debug_hook
from utctime.primitives.errors import ConfigError, ZoneResolutionError
from utctime.primitives.zone_cache import DEFAULT_ZONE_NAMES, get_zone_cache, install_zone_cache


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    monkeypatch.delenv("UTCTIME_CONFIG", raising=False)
    monkeypatch.delenv("UTCTIME_DEBUG", raising=False)
    previous_cache = get_zone_cache()
    previous_hook = get_debug_hook()
    yield
    disable_debug_logging()
    set_debug_hook(previous_hook)
    install_zone_cache(previous_cache)


def write_config(tmp_path, data) -> str:
    config_file = tmp_path / "utctime.json"
    config_file.write_text(json.dumps(data), encoding="utf-8")
    return str(config_file)


class TestLoadSettings:
    def test_defaults_without_file(self):
        settings = load_settings()

        assert settings.debug is False
        assert dict(settings.zones) == DEFAULT_ZONE_NAMES
        assert settings.log_file is None

    def test_file_overrides_selected_zones(self, tmp_path):
        path = write_config(tmp_path, {"zones": {"mountain": "America/Phoenix"}})

        settings = load_settings(path)

        assert settings.zones["mountain"] == "America/Phoenix"
        assert settings.zones["pacific"] == "America/Los_Angeles"

    def test_path_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("UTCTIME_CONFIG", write_config(tmp_path, {"debug": True}))

        assert load_settings().debug is True

    @pytest.mark.parametrize("raw, expected", [("1", True), ("TRUE", True), ("on", True), ("0", False), ("no", False)])
    def test_debug_environment_override(self, tmp_path, monkeypatch, raw, expected):
        path = write_config(tmp_path, {"debug": not expected})
        monkeypatch.setenv("UTCTIME_DEBUG", raw)

        assert load_settings(path).debug is expected

    def test_invalid_file_raises(self, tmp_path):
        path = write_config(tmp_path, {"zones": {"pacific": 7}})

        with pytest.raises(ConfigError):
            load_settings(path)


class TestApplySettings:
    def test_installs_zone_cache_for_configured_zones(self):
        summer = UtcTime(datetime(2024, 7, 1, 12, 0, tzinfo=timezone.utc))

        cache = apply_settings(Settings(zones={**DEFAULT_ZONE_NAMES, "mountain": "America/Phoenix"}))

        assert get_zone_cache() is cache
        # Phoenix does not observe daylight saving
        assert summer.mountain().hour == 5

    def test_unresolvable_zone_degrades_to_fixed_offsets(self):
        summer = UtcTime(datetime(2024, 7, 1, 12, 0, tzinfo=timezone.utc))

        apply_settings(Settings(zones={**DEFAULT_ZONE_NAMES, "pacific": "Invalid/Timezone"}))

        assert summer.pacific() == summer.pst()
        assert summer.pacific().hour == 4
        with pytest.raises(ZoneResolutionError):
            get_zone_cache().validate()

    def test_debug_setting_enables_logging(self, capsys):
        apply_settings(Settings(debug=True, zones={**DEFAULT_ZONE_NAMES, "eastern": "Nowhere/Zone"}))

        get_zone_cache().resolve()

        captured = capsys.readouterr()
        assert "timezone resolution failed" in captured.err
        assert "Nowhere/Zone" in captured.err

    def test_debug_off_disables_logging(self):
        apply_settings(Settings(debug=True))
        apply_settings(Settings(debug=False))

        assert get_debug_hook() is None
