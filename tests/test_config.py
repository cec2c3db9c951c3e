import pytest
from PySide6.QtCore import QSettings

from dropkit.core import config as config_mod
from dropkit.core.config import Config, load_config, save_config


@pytest.fixture()
def settings_file(tmp_path, monkeypatch):
    path = tmp_path / "settings.ini"
    monkeypatch.setattr(config_mod, "_s", lambda: QSettings(str(path), QSettings.IniFormat))
    return path


def test_defaults_when_nothing_saved(settings_file):
    cfg = load_config()
    assert cfg == Config()
    assert cfg.log_level == "INFO"


def test_save_then_load(settings_file):
    cfg = Config()
    cfg.last_db_path = "/tmp/studio.db"
    cfg.route.project_id = "p1"
    cfg.route.collection_id = "c1"
    cfg.ui.geometry["main"] = "01d9d0cb"
    cfg.log_level = "DEBUG"
    save_config(cfg)

    loaded = load_config()
    assert loaded.last_db_path == "/tmp/studio.db"
    assert (loaded.route.project_id, loaded.route.collection_id) == ("p1", "c1")
    assert loaded.ui.geometry == {"main": "01d9d0cb"}
    assert loaded.log_level == "DEBUG"


def test_corrupt_geometry_falls_back(settings_file):
    s = QSettings(str(settings_file), QSettings.IniFormat)
    s.setValue("ui/geometry", "{not json")
    s.sync()

    assert load_config().ui.geometry == {}
