from __future__ import annotations

import json
from pydantic import BaseModel, Field
from PySide6.QtCore import QSettings

# QSettings scope
ORG = "DropKit"
APP = "DropKit Studio"


class UIState(BaseModel):
    geometry: dict = Field(default_factory=dict)


class Route(BaseModel):
    """ Last opened artwork page. Empty ids render the page without data. """
    project_id: str = ""
    collection_id: str = ""


class Config(BaseModel):
    ui: UIState = Field(default_factory=UIState)
    last_db_path: str = ""
    route: Route = Field(default_factory=Route)
    log_level: str = "INFO"


def _s() -> QSettings:
    return QSettings(ORG, APP)


def _read_json(s: QSettings, key: str, default: dict) -> dict:
    raw = s.value(key, "")
    if isinstance(raw, (dict, list)):
        return raw  # some backends can store native types
    if not raw:
        return default
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return default


def _write_json(s: QSettings, key: str, obj: dict | list) -> None:
    s.setValue(key, json.dumps(obj, ensure_ascii=False))


def load_config() -> Config:
    s = _s()

    # --- UI ---
    s.beginGroup("ui")
    geometry = _read_json(s, "geometry", {})
    s.endGroup()

    # --- Database ---
    s.beginGroup("db")
    last_db_path = str(s.value("last_path", "", str))
    s.endGroup()

    # --- Route ---
    s.beginGroup("route")
    project_id = str(s.value("project_id", "", str))
    collection_id = str(s.value("collection_id", "", str))
    s.endGroup()

    # --- Logging ---
    s.beginGroup("logging")
    log_level = str(s.value("level", "INFO", str))
    s.endGroup()

    return Config(
        ui=UIState(geometry=geometry),
        last_db_path=last_db_path,
        route=Route(project_id=project_id, collection_id=collection_id),
        log_level=log_level,
    )


def save_config(cfg: Config) -> None:
    s = _s()

    # --- UI ---
    s.beginGroup("ui")
    _write_json(s, "geometry", dict(cfg.ui.geometry))
    s.endGroup()

    # --- Database ---
    s.beginGroup("db")
    s.setValue("last_path", cfg.last_db_path)
    s.endGroup()

    # --- Route ---
    s.beginGroup("route")
    s.setValue("project_id", cfg.route.project_id)
    s.setValue("collection_id", cfg.route.collection_id)
    s.endGroup()

    # --- Logging ---
    s.beginGroup("logging")
    s.setValue("level", cfg.log_level)
    s.endGroup()
