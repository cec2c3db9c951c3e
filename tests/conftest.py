import os
from contextlib import contextmanager

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from sqlalchemy import event, Engine, create_engine
from sqlalchemy.orm import sessionmaker

from dropkit.db.manager import DatabaseManager
from dropkit.db.models import Base, Project, Collection, Trait, TraitValue, ImageLayer
from dropkit.db.services import CatalogService, ArtworkService


# --- SQLite tuning for tests --------------------------------------------------
@event.listens_for(Engine, "connect")
def _sqlite_enable_fk(dbapi_connection, _):
    # Ensure ON DELETE CASCADE / SET NULL in SQLite
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON;")
    cursor.close()


# --- Database Fixtures -----------------------------------------------------------------
@pytest.fixture()
def session():
    """Fresh session per test."""
    engine = create_engine("sqlite:///:memory:", future=True)
    Base.metadata.create_all(engine)
    session = sessionmaker(bind=engine, future=True, expire_on_commit=False)
    with session() as s:
        yield s
        s.rollback()  # clean even if the test forgot


@pytest.fixture()
def dbm(session, monkeypatch):
    """ DatabaseManager whose sessions are the test session. """
    @contextmanager
    def fake_session(self):
        yield session
        session.flush()

    monkeypatch.setattr(DatabaseManager, "session", fake_session)
    return DatabaseManager()


@pytest.fixture()
def catalog(dbm):
    return CatalogService(dbm)


@pytest.fixture()
def artwork(dbm):
    return ArtworkService(dbm)


# --- Helper fixtures for creating rows ----------------------------------------
@pytest.fixture()
def make_project(session):
    def _mk(name: str = "Project", id: str | None = None) -> Project:
        p = Project(name=name, id=id) if id else Project(name=name)
        session.add(p)
        session.flush()
        return p

    return _mk


@pytest.fixture()
def make_collection(session):
    def _mk(project: Project, name: str = "Collection", id: str | None = None) -> Collection:
        c = Collection(project_id=project.id, name=name)
        if id:
            c.id = id
        session.add(c)
        session.flush()
        return c

    return _mk


@pytest.fixture()
def make_trait(session):
    def _mk(collection: Collection, name: str, id: str | None = None) -> Trait:
        t = Trait(project_id=collection.project_id, collection_id=collection.id, name=name)
        if id:
            t.id = id
        session.add(t)
        session.flush()
        return t

    return _mk


@pytest.fixture()
def make_trait_value(session):
    def _mk(trait: Trait, name: str, id: str | None = None) -> TraitValue:
        v = TraitValue(trait_id=trait.id, name=name)
        if id:
            v.id = id
        session.add(v)
        session.flush()
        return v

    return _mk


@pytest.fixture()
def make_image_layer(session):
    def _mk(
            collection: Collection,
            name: str = "layer.png",
            *,
            id: str | None = None,
            url: str | None = None,
            size: int = 1024,
            trait_id: str | None = None,
            trait_value_id: str | None = None,
    ) -> ImageLayer:
        layer = ImageLayer(
            project_id=collection.project_id,
            collection_id=collection.id,
            name=name,
            url=url or f"https://cdn.example/{name}",
            bytes=size,
            trait_id=trait_id,
            trait_value_id=trait_value_id,
        )
        if id:
            layer.id = id
        session.add(layer)
        session.flush()
        return layer

    return _mk


@pytest.fixture()
def scenario(make_project, make_collection, make_trait, make_trait_value, make_image_layer):
    """
    Collection with one unassigned layer "a", traits t1 "Background" and t2 "Eyes",
    values v1 "Blue" (t1) and v2 "Green" (t2).
    """
    project = make_project("Genesis", id="p1")
    collection = make_collection(project, "Apes", id="c1")
    t1 = make_trait(collection, "Background", id="t1")
    t2 = make_trait(collection, "Eyes", id="t2")
    make_trait_value(t1, "Blue", id="v1")
    make_trait_value(t2, "Green", id="v2")
    make_image_layer(collection, "a.png", id="a")
    return project, collection


# --- Test doubles ----------------------------------------
class RecordingStore:
    """ Store double recording every call; answers with the configured result. """
    def __init__(self, result: bool = True):
        self.result = result
        self.updates: list[tuple] = []
        self.removals: list[tuple] = []

    def update(self, fields, image_layer_id, project_id, collection_id):
        self.updates.append((dict(fields), image_layer_id, project_id, collection_id))
        return self.result

    def remove(self, image_layer_id, project_id, collection_id):
        self.removals.append((image_layer_id, project_id, collection_id))
        return self.result


@pytest.fixture()
def recording_store():
    return RecordingStore()
