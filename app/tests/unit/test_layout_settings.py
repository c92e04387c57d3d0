"""Tests for layout settings and their JSON persistence."""

import json
import logging

import pytest
from notation.settings import (
    LayoutSettings,
    SettingsError,
    default_settings_path,
    load_layout_settings,
    save_layout_settings,
)


class TestLayoutSettings:
    def test_defaults(self):
        settings = LayoutSettings()
        assert settings.component_width == 80
        assert settings.component_height == 40
        assert settings.series_gap == 20
        assert settings.parallel_gap == 50
        assert settings.rail_padding == 30
        assert (settings.origin_x, settings.origin_y) == (100, 300)
        assert settings.terminal_leads is False

    def test_size_for_listed_kind(self):
        assert LayoutSettings().size_for("battery") == (80, 50)

    def test_size_for_unlisted_kind(self):
        settings = LayoutSettings(component_width=60, component_height=30)
        assert settings.size_for("resistor") == (60, 30)

    def test_instances_do_not_share_sizes(self):
        a = LayoutSettings()
        a.component_sizes["resistor"] = (10, 10)
        assert "resistor" not in LayoutSettings().component_sizes


class TestFromDict:
    def test_round_trip(self):
        original = LayoutSettings(series_gap=35, terminal_leads=True)
        restored = LayoutSettings.from_dict(original.to_dict())
        assert restored == original

    def test_unknown_key_ignored(self, caplog):
        with caplog.at_level(logging.WARNING, logger="notation.settings"):
            settings = LayoutSettings.from_dict({"series_gap": 10, "colour": "red"})
        assert settings.series_gap == 10
        assert "colour" in caplog.text

    def test_negative_rejected(self):
        with pytest.raises(SettingsError, match="series_gap"):
            LayoutSettings.from_dict({"series_gap": -5})

    def test_non_numeric_rejected(self):
        with pytest.raises(SettingsError):
            LayoutSettings.from_dict({"parallel_gap": "wide"})

    def test_bool_is_not_a_number(self):
        with pytest.raises(SettingsError):
            LayoutSettings.from_dict({"rail_padding": True})

    @pytest.mark.parametrize("value", ["false", "no", 0.5, 1, None])
    def test_terminal_leads_must_be_bool(self, value):
        with pytest.raises(SettingsError, match="terminal_leads"):
            LayoutSettings.from_dict({"terminal_leads": value})

    def test_terminal_leads_bool_accepted(self):
        assert LayoutSettings.from_dict({"terminal_leads": True}).terminal_leads is True
        assert LayoutSettings.from_dict({"terminal_leads": False}).terminal_leads is False

    def test_negative_origin_allowed(self):
        assert LayoutSettings.from_dict({"origin_x": -200}).origin_x == -200

    def test_component_sizes_merge(self):
        settings = LayoutSettings.from_dict({"component_sizes": {"resistor": [100, 30]}})
        assert settings.size_for("resistor") == (100, 30)
        assert settings.size_for("battery") == (80, 50)

    def test_bad_component_size(self):
        with pytest.raises(SettingsError):
            LayoutSettings.from_dict({"component_sizes": {"resistor": [100]}})


class TestPersistence:
    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_layout_settings(tmp_path / "missing.json") == LayoutSettings()

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "conf" / "layout.json"
        save_layout_settings(LayoutSettings(parallel_gap=70), path)
        assert path.exists()
        assert load_layout_settings(path).parallel_gap == 70

    def test_invalid_json_gives_defaults(self, tmp_path, caplog):
        path = tmp_path / "layout.json"
        path.write_text("{not json")
        with caplog.at_level(logging.WARNING, logger="notation.settings"):
            settings = load_layout_settings(path)
        assert settings == LayoutSettings()
        assert "Failed to load layout settings" in caplog.text

    def test_non_object_gives_defaults(self, tmp_path):
        path = tmp_path / "layout.json"
        path.write_text(json.dumps([1, 2, 3]))
        assert load_layout_settings(path) == LayoutSettings()

    def test_invalid_values_raise(self, tmp_path):
        path = tmp_path / "layout.json"
        path.write_text(json.dumps({"series_gap": -1}))
        with pytest.raises(SettingsError):
            load_layout_settings(path)

    def test_default_path_used(self):
        # conftest points the default path at an empty temp directory
        assert not default_settings_path().exists()
        assert load_layout_settings() == LayoutSettings()
