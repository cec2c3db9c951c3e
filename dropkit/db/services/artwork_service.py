from __future__ import annotations
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from dropkit.core.logging import get_logger
from dropkit.db.manager import DatabaseManager
from dropkit.db.models import ImageLayer
from dropkit.db.repositories import ImageLayerRepo

log = get_logger(__name__)


class ArtworkService:
    """
    Image layers of a collection and their (trait, trait value) tags.

    Writes never raise to the caller: a failed update or removal is logged and reported as False.
    Callers currently treat False the same as True.
    """
    def __init__(self, db: DatabaseManager):
        self.db = db
        self.repo = ImageLayerRepo()

    # ---------- reads ----------
    def list_all(self, project_id: str, collection_id: str) -> list[ImageLayer]:
        with self.db.session() as s:
            return self.repo.list_all(s, project_id, collection_id)

    def get(self, image_layer_id: str, project_id: str, collection_id: str) -> Optional[ImageLayer]:
        with self.db.session() as s:
            return self.repo.get(s, image_layer_id, project_id, collection_id)

    # ---------- writes ----------
    def update(self, fields: dict, image_layer_id: str, project_id: str, collection_id: str) -> bool:
        """ Field-level update; keys not present in fields are left unchanged in the store. """
        try:
            with self.db.session() as s:
                touched = self.repo.update(s, fields, image_layer_id, project_id, collection_id)
        except SQLAlchemyError:
            log.exception("Updating image layer %s (%s/%s) with %r failed",
                          image_layer_id, project_id, collection_id, fields)
            return False
        if touched == 0:
            log.warning("Update matched no image layer %s in %s/%s", image_layer_id, project_id, collection_id)
            return False
        log.debug("Updated image layer %s with %r", image_layer_id, fields)
        return True

    def remove(self, image_layer_id: str, project_id: str, collection_id: str) -> bool:
        try:
            with self.db.session() as s:
                removed = self.repo.remove(s, image_layer_id, project_id, collection_id)
        except SQLAlchemyError:
            log.exception("Removing image layer %s (%s/%s) failed", image_layer_id, project_id, collection_id)
            return False
        if removed == 0:
            log.warning("Remove matched no image layer %s in %s/%s", image_layer_id, project_id, collection_id)
            return False
        log.info("Removed image layer %s from %s/%s", image_layer_id, project_id, collection_id)
        return True
