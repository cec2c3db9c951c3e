from __future__ import annotations

import shutil
import sqlite3
from datetime import datetime
from pathlib import Path
from contextlib import contextmanager
from typing import Iterator, Optional

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session

from dropkit.core.logging import get_logger

log = get_logger(__name__)

MIGRATIONS_DIR = Path(__file__).resolve().parent / "migrations"

SQLITE_PRAGMAS = (
    "PRAGMA foreign_keys = ON;",  # trait/value SET NULL and collection cascades rely on it
    "PRAGMA journal_mode = WAL;",
    "PRAGMA synchronous = NORMAL;",
)


def _sqlite_url(path: Path) -> str:
    return f"sqlite:///{path.resolve().as_posix()}"


def _alembic_cfg(db_url: str) -> Config:
    """alembic config for the packaged migrations. A checkout's alembic.ini is used when present."""
    ini = next((p / "alembic.ini" for p in Path(__file__).resolve().parents if (p / "alembic.ini").exists()), None)
    cfg = Config(str(ini)) if ini is not None else Config()
    cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    cfg.set_main_option("sqlalchemy.url", db_url)
    return cfg


def _current_revision(db_path: Path) -> Optional[str]:
    engine = create_engine(_sqlite_url(db_path), future=True)
    try:
        with engine.connect() as conn:
            return MigrationContext.configure(conn).get_current_revision()
    finally:
        engine.dispose()


def _has_tables(db_path: Path) -> bool:
    with sqlite3.connect(db_path) as con:
        row = con.execute(
            "SELECT count(*) FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%'"
        ).fetchone()
    return row[0] > 0


def migrate(db_path: Path) -> str:
    """
    Bring the database at db_path to the newest schema and return what was done:
    "created" for a new or empty file, "stamped" for tables without alembic history,
    "upgraded" after a timestamped backup copy, or "current".
    """
    cfg = _alembic_cfg(_sqlite_url(db_path))

    if not db_path.exists() or not _has_tables(db_path):
        command.upgrade(cfg, "head")
        return "created"

    revision = _current_revision(db_path)
    if revision is None:
        command.stamp(cfg, "head")
        return "stamped"
    if revision in ScriptDirectory.from_config(cfg).get_heads():
        return "current"

    backup = db_path.with_suffix(db_path.suffix + datetime.now().strftime(".bak.%Y%m%d-%H%M%S"))
    shutil.copy2(db_path, backup)
    log.info("Backed up %s to %s before upgrading from %s", db_path, backup, revision)
    command.upgrade(cfg, "head")
    return "upgraded"


class DatabaseManager:
    """
    Owns the engine and session factory of the open studio database.
    open() migrates the file first, so sessions always see the current schema.
    """

    def __init__(self) -> None:
        self._engine: Optional[Engine] = None
        self._Session: Optional[sessionmaker[Session]] = None
        self._path: Optional[Path] = None

    @property
    def path(self) -> Optional[Path]:
        return self._path

    def open(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        outcome = migrate(path)
        if outcome != "current":
            log.info("Database %s schema %s", path, outcome)

        engine = create_engine(_sqlite_url(path), future=True)

        @event.listens_for(engine, "connect")
        def _on_connect(dbapi_conn, _):
            cur = dbapi_conn.cursor()
            for pragma in SQLITE_PRAGMAS:
                cur.execute(pragma)
            cur.close()

        self.dispose()
        self._engine = engine
        self._Session = sessionmaker(bind=engine, expire_on_commit=False, future=True)
        self._path = path
        log.info("Opened database %s", path)

    def dispose(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
        self._engine = None
        self._Session = None
        self._path = None

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Transactional session: commits on success, rolls back and re-raises on error."""
        if self._Session is None:
            raise RuntimeError("Database not opened. Call DatabaseManager.open() first.")
        s = self._Session()
        try:
            yield s
            s.commit()
        except Exception:
            s.rollback()
            raise
        finally:
            s.close()
