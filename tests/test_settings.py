"""
Tests for smart_console.config.settings module.

This test suite covers:
- Default settings initialization
- Settings loading, merging and persistence to JSON
- Rejection of corrupted files and non-string label values
- Environment variable override for settings path
"""

import importlib
import json

from smart_console.config import settings


class TestLoadSettings:
    """Tests for load_settings() function."""

    def test_load_defaults_when_no_file(self, tmp_path, monkeypatch):
        """Test that default settings are loaded when file doesn't exist."""
        monkeypatch.setattr(settings, "SETTINGS_PATH", tmp_path / "missing" / "settings.json")

        settings.settings_store.values = {}
        settings.load_settings()

        assert settings.settings_store.values == settings.DEFAULT_SETTINGS

    def test_load_merges_with_defaults(self, temp_settings_file, monkeypatch):
        """Test that loaded settings merge with defaults."""
        temp_settings_file.write_text(json.dumps({"exit_label": "Back"}))
        monkeypatch.setattr(settings, "SETTINGS_PATH", temp_settings_file)

        settings.load_settings()

        assert settings.get_setting("exit_label") == "Back"
        assert settings.get_setting("prompt_marker") == "> "

    def test_unknown_keys_are_kept(self, temp_settings_file, monkeypatch):
        temp_settings_file.write_text(json.dumps({"theme": {"colour": "green"}}))
        monkeypatch.setattr(settings, "SETTINGS_PATH", temp_settings_file)

        settings.load_settings()

        assert settings.get_setting("theme") == {"colour": "green"}

    def test_non_string_label_ignored(self, temp_settings_file, monkeypatch):
        temp_settings_file.write_text(json.dumps({"prompt_marker": 7, "exit_label": "Up"}))
        monkeypatch.setattr(settings, "SETTINGS_PATH", temp_settings_file)

        settings.load_settings()

        assert settings.get_setting("prompt_marker") == "> "
        assert settings.get_setting("exit_label") == "Up"

    def test_corrupted_file_falls_back_to_defaults(self, temp_settings_file, monkeypatch):
        temp_settings_file.write_text("{not json")
        monkeypatch.setattr(settings, "SETTINGS_PATH", temp_settings_file)

        settings.load_settings()

        assert settings.settings_store.values == settings.DEFAULT_SETTINGS

    def test_non_object_file_falls_back_to_defaults(self, temp_settings_file, monkeypatch):
        temp_settings_file.write_text(json.dumps(["a", "b"]))
        monkeypatch.setattr(settings, "SETTINGS_PATH", temp_settings_file)

        settings.load_settings()

        assert settings.settings_store.values == settings.DEFAULT_SETTINGS


class TestSaveSettings:
    """Tests for save_settings() and set_setting()."""

    def test_set_setting_persists(self, tmp_path, monkeypatch):
        path = tmp_path / "nested" / "settings.json"
        monkeypatch.setattr(settings, "SETTINGS_PATH", path)

        settings.set_setting("selection_prompt", "Choose")

        assert json.loads(path.read_text(encoding="utf-8"))["selection_prompt"] == "Choose"

    def test_round_trip_through_file(self, temp_settings_file, monkeypatch):
        monkeypatch.setattr(settings, "SETTINGS_PATH", temp_settings_file)
        settings.set_setting("exit_label", "Go back")

        settings.settings_store.values = {}
        settings.load_settings()

        assert settings.get_setting("exit_label") == "Go back"


class TestGetters:
    def test_get_setting_default(self):
        assert settings.get_setting("missing", 3) == 3

    def test_get_str(self):
        assert settings.get_str("prompt_marker") == "> "
        assert settings.get_str("missing", "fallback") == "fallback"

    def test_get_str_converts_and_handles_none(self):
        settings.settings_store.values["count"] = 5
        settings.settings_store.values["empty"] = None
        assert settings.get_str("count") == "5"
        assert settings.get_str("empty", "x") == "x"


class TestSettingsPath:
    def test_env_var_override(self, monkeypatch, tmp_path):
        """Test that environment variable can override settings path."""
        custom_path = tmp_path / "custom_settings.json"
        monkeypatch.setenv("SMART_CONSOLE_SETTINGS_PATH", str(custom_path))
        try:
            importlib.reload(settings)
            assert custom_path == settings.SETTINGS_PATH
        finally:
            monkeypatch.undo()
            importlib.reload(settings)
