from __future__ import annotations

import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

from .core.config import load_config, save_config, ORG, APP
from .core.logging import setup_logging, get_logger
from .db.manager import DatabaseManager
from .ui.main_window import MainWindow

DEFAULT_DB = Path.home() / "DropKit" / "studio.db"


def main() -> None:
    app = QApplication(sys.argv)
    # Set QSettings identity BEFORE any settings access
    QCoreApplication.setOrganizationName(ORG)
    QCoreApplication.setApplicationName(APP)

    # Load user prefs (QSettings-backed)
    cfg = load_config()
    setup_logging(getattr(logging, cfg.log_level.upper(), logging.INFO))
    log = get_logger(__name__)

    # Open database (last used or default) and remember it
    db = DatabaseManager()
    db_path = Path(cfg.last_db_path if cfg.last_db_path else DEFAULT_DB)
    db.open(db_path)
    cfg.last_db_path = str(db_path)

    win = MainWindow(cfg=cfg, dbm=db)
    win.show()

    # Persist settings on quit
    def persist():
        cfg.last_db_path = str(db.path)
        save_config(cfg)
        log.info("Settings saved")

    app.aboutToQuit.connect(persist)
    sys.exit(app.exec())
