# tests/grader/test_config_management.py
import json

import pytest

from grader.managers.config_manager import ConfigManager
from grader.services.generate_default_user_agent_service import generate_default_user_agent
from grader.utils.path_utils import PathUtils

MOCK_SETTINGS_CONTENT = {
    "debug": {
        "level": "WARNING"
    },
    "session": {
        "time_out": 30,
        "max_redirects": 10
    },
    "user_agent": {
        "chrome_version": "99.0.0.0"
    }
}


@pytest.fixture
def config_manager(tmp_path, monkeypatch):
    """
    Points the ConfigManager singleton at a temporary settings.json and
    restores the real settings afterwards.
    """
    settings_file = tmp_path / "settings.json"
    settings_file.write_text(json.dumps(MOCK_SETTINGS_CONTENT))
    monkeypatch.setattr(PathUtils, 'get_settings_file', lambda: settings_file)

    manager = ConfigManager()
    manager.reset()
    yield manager

    monkeypatch.undo()
    manager.reset()


def test_config_manager_is_singleton():
    assert ConfigManager() is ConfigManager()


def test_config_manager_load(config_manager):
    config = config_manager.get_all()
    assert config["debug"]["level"] == "WARNING"
    assert config["session"]["time_out"] == 30


def test_config_manager_get_nested(config_manager):
    assert config_manager.get_nested("session.max_redirects") == 10
    assert config_manager.get_nested("non.existent.key", "default") == "default"
    assert config_manager.get_nested("debug.level.deeper", "fallback") == "fallback"


def test_config_manager_set_nested_casts_to_existing_type(config_manager):
    config_manager.set_nested("session.time_out", "5")
    assert config_manager.get_nested("session.time_out") == 5
    assert isinstance(config_manager.get_nested("session.time_out"), int)

    config_manager.set_nested("new_feature.enabled", True)
    assert config_manager.get_nested("new_feature.enabled") is True


def test_config_manager_reset(config_manager):
    config_manager.set_nested("debug.level", "DEBUG")
    config_manager.reset()
    assert config_manager.get_nested("debug.level") == "WARNING"


def test_missing_settings_gives_empty_config(tmp_path, monkeypatch):
    monkeypatch.setattr(PathUtils, 'get_settings_file', lambda: tmp_path / "absent.json")
    manager = ConfigManager()
    manager.reset()
    try:
        assert manager.get_all() == {}
        assert manager.get_nested("session.time_out", 30) == 30
    finally:
        monkeypatch.undo()
        manager.reset()


def test_shipped_settings_file_exists():
    assert PathUtils.get_settings_file().is_file()


def test_user_agent_uses_configured_chrome_version(config_manager):
    ua = generate_default_user_agent()
    assert ua.startswith("Mozilla/5.0 (")
    assert "Chrome/99.0.0.0" in ua
