import json

import pytest

from Calculator import config_manager


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    monkeypatch.setattr(config_manager, "config_json", path)
    return path


def test_defaults_when_file_missing(config_file):
    assert config_manager.load_setting_value("all") == config_manager.DEFAULT_SETTINGS
    assert config_manager.load_setting_value("decimal_places") == 4
    assert config_manager.load_setting_value("max_length") == 100


def test_defaults_when_file_corrupt(config_file):
    config_file.write_text("{not json", encoding="utf-8")
    assert config_manager.load_setting_value("all") == config_manager.DEFAULT_SETTINGS


def test_file_values_override_defaults(config_file):
    config_file.write_text(json.dumps({"decimal_places": 2}), encoding="utf-8")
    settings = config_manager.load_setting_value("all")
    assert settings["decimal_places"] == 2
    assert settings["max_length"] == 100


def test_unknown_key(config_file):
    assert config_manager.load_setting_value("no_such_setting") == 0


def test_save_and_reload(config_file):
    settings = config_manager.load_setting_value("all")
    settings["darkmode"] = True
    assert config_manager.save_setting(settings) == settings
    assert config_manager.load_setting_value("darkmode") is True


def test_save_failure(tmp_path, monkeypatch):
    monkeypatch.setattr(config_manager, "config_json", tmp_path / "missing_dir" / "config.json")
    assert config_manager.save_setting({"darkmode": True}) == {}


def test_shipped_files_are_in_sync():
    values = json.loads(config_manager.config_json.read_text(encoding="utf-8"))
    descriptions = json.loads(config_manager.ui_strings.read_text(encoding="utf-8"))
    assert set(values) == set(descriptions) == set(config_manager.DEFAULT_SETTINGS)


def test_description_fallback(tmp_path, monkeypatch):
    monkeypatch.setattr(config_manager, "ui_strings", tmp_path / "ui_strings.json")
    assert config_manager.load_setting_description("all") == {}
