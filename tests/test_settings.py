"""Tests for settings loading and saving."""

import json
import os
import sys

# Add src to path so we can import the modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from config.settings import Settings, get_default_settings, load_settings, save_settings
from constants import DEFAULT_SERVER_URL, SERVER_URL_ENV


def test_missing_file_is_created_with_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv(SERVER_URL_ENV, raising=False)
    config_file = tmp_path / "config.json"

    settings = load_settings(str(config_file))

    assert settings["server_url"] == DEFAULT_SERVER_URL
    assert settings["confirm_delete"] is True
    assert config_file.exists()
    assert json.loads(config_file.read_text())["escape_paths"] is True


def test_saved_values_override_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv(SERVER_URL_ENV, raising=False)
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"confirm_delete": False, "new_folder_name": "Stuff"}))

    settings = load_settings(str(config_file))

    assert settings["confirm_delete"] is False
    assert settings["new_folder_name"] == "Stuff"
    assert settings["refresh_after_each_upload"] is True


def test_env_overrides_server_url(tmp_path, monkeypatch):
    monkeypatch.setenv(SERVER_URL_ENV, "http://nas:8080")
    settings = load_settings(str(tmp_path / "config.json"))
    assert settings["server_url"] == "http://nas:8080"


def test_corrupt_file_falls_back_to_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv(SERVER_URL_ENV, raising=False)
    config_file = tmp_path / "config.json"
    config_file.write_text("{not json")

    settings = load_settings(str(config_file))

    assert settings == get_default_settings()


def test_save_round_trip_and_unknown_keys(tmp_path):
    config_file = tmp_path / "nested" / "config.json"
    assert save_settings({"fullscreen": True, "legacy": 1}, str(config_file))

    restored = Settings.from_dict(json.loads(config_file.read_text()))
    assert restored.fullscreen is True
    assert not hasattr(restored, "legacy")
