from __future__ import annotations
from typing import Any, Mapping

from sqlalchemy import select, update, delete
from sqlalchemy.orm import Session

from dropkit.db.models import ImageLayer


class ImageLayerRepo:
    """ Association store for image layers. Every write is keyed by (project, collection, image layer). """

    UPDATABLE_FIELDS = frozenset({"trait_id", "trait_value_id"})

    def get(self, s: Session, image_layer_id: str, project_id: str, collection_id: str) -> ImageLayer | None:
        return s.execute(
            select(ImageLayer).where(*self._address(image_layer_id, project_id, collection_id))
        ).scalar_one_or_none()

    def list_all(self, s: Session, project_id: str, collection_id: str) -> list[ImageLayer]:
        return s.execute(
            select(ImageLayer)
            .where(ImageLayer.project_id == project_id, ImageLayer.collection_id == collection_id)
            .order_by(ImageLayer.name, ImageLayer.id)
        ).scalars().all()

    def update(self, s: Session, fields: Mapping[str, Any], image_layer_id: str, project_id: str,
               collection_id: str) -> int:
        """ Partial update: only the given fields are written. Returns the number of rows touched. """
        unknown = set(fields) - self.UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Not updatable on image layers: {sorted(unknown)}")
        if not fields:
            return 0
        result = s.execute(
            update(ImageLayer)
            .where(*self._address(image_layer_id, project_id, collection_id))
            .values(**dict(fields))
        )
        return result.rowcount

    def remove(self, s: Session, image_layer_id: str, project_id: str, collection_id: str) -> int:
        result = s.execute(
            delete(ImageLayer)
            .where(*self._address(image_layer_id, project_id, collection_id))
        )
        return result.rowcount

    @staticmethod
    def _address(image_layer_id: str, project_id: str, collection_id: str) -> tuple:
        return (
            ImageLayer.id == image_layer_id,
            ImageLayer.project_id == project_id,
            ImageLayer.collection_id == collection_id,
        )
